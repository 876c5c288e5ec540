"""Recursive descent parser producing a Changelog.

Consumes the token list from the Lexer and applies the changelog grammar
in a fixed order:

    [lint directive] [flag] [# title] [description]
    (## release [description] (### kind - item*)*)*
    [--- footer]

Link reference definitions are pulled out of the token list first and may
appear anywhere.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TokenNavigationMixin`: Token cursor (peek, advance, try_consume)
- `MetaParsingMixin`: Everything outside the releases
- `ReleaseParsingMixin`: Release headings and change sections
- `LinkParsingMixin`: Reference links

"""

from __future__ import annotations

from bitacora.config import DEFAULT_OPTIONS, ParseOptions
from bitacora.errors import UnexpectedTokensError
from bitacora.lexer import Lexer
from bitacora.model import Changelog
from bitacora.parsing import (
    LinkParsingMixin,
    MetaParsingMixin,
    ReleaseParsingMixin,
    TokenNavigationMixin,
)
from bitacora.tokens import Token, TokenType
from bitacora.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    MetaParsingMixin,
    ReleaseParsingMixin,
    LinkParsingMixin,
):
    """Recursive descent parser for Keep a Changelog documents.

    Usage:
            >>> changelog = Parser("# Changelog\\n## 0.1.0 - 2024-04-28\\n- Initial release").parse()
            >>> changelog.releases[0].changes.added
            ['Initial release']

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation.

    """

    __slots__ = (
        "_source",
        "_options",
        "_tokens",
        "_pos",
    )

    def __init__(self, source: str, options: ParseOptions | None = None) -> None:
        """Initialize parser with source text.

        Args:
            source: Changelog Markdown text
            options: Repository URL, tag prefix and head reference

        """
        self._source = source
        self._options = options or DEFAULT_OPTIONS
        self._tokens: list[Token] = []
        self._pos = 0

    def parse(self) -> Changelog:
        """Parse source into a Changelog.

        Raises:
            ParseError: On the first input that does not fit the grammar.
        """
        compact, tokens = Lexer(self._source).tokenize()
        link_tokens = [token for token in tokens if token.type == TokenType.LINK]
        self._tokens = [token for token in tokens if token.type != TokenType.LINK]
        self._pos = 0

        lint_rules = self._parse_lint_rules()
        flag = self._parse_flag()
        title = self._parse_title()
        description = self._parse_text()
        releases = self._parse_releases()
        links, inferred_url = self._parse_links(link_tokens)
        footer = self._parse_footer()

        if not self._at_end():
            raise UnexpectedTokensError(self._remaining(), self._pos)

        repository_url = self._options.repository_url
        if repository_url is None and inferred_url is not None:
            logger.debug("inferred repository URL %s from links", inferred_url)
            repository_url = inferred_url

        changelog = Changelog(
            title=title,
            description=description,
            flag=flag,
            lint_rules=lint_rules,
            head_ref=self._options.head_ref,
            footer=footer,
            repository_url=repository_url,
            tag_prefix=self._options.tag_prefix,
            releases=releases,
            links=links,
        )
        if compact:
            changelog.set_compact()

        logger.debug(
            "parsed changelog with %d releases and %d links (compact=%s)",
            len(changelog.releases),
            len(changelog.links),
            compact,
        )
        return changelog
