"""
Bitacora: Keep a Changelog parser and formatter

Reads a CHANGELOG.md written in the Keep a Changelog dialect into a
mutable document model and writes it back, regenerating the release and
compare links from the release list. Zero runtime dependencies.

Quick Start:
    >>> from bitacora import parse, render
    >>> changelog = parse(
    ...     "# Changelog\\n\\n## [0.1.0] - 2024-04-28\\n\\n### Added\\n\\n- Initial release\\n",
    ...     repository_url="https://github.com/acme/widgets",
    ...     tag_prefix="v",
    ... )
    >>> changelog.releases[0].changes.added
    ['Initial release']
    >>> print(render(changelog).splitlines()[-1])
    [0.1.0]: https://github.com/acme/widgets/releases/tag/v0.1.0

Editing:
    >>> from bitacora import Release
    >>> _ = changelog.add_release(Release.create("0.2.0", "2024-05-01").add_change("Fixed", "Crash"))
    >>> [str(release.version) for release in changelog.releases]
    ['0.2.0', '0.1.0']

Installation:
    pip install bitacora
"""

from bitacora.config import DEFAULT_OPTIONS, ParseOptions
from bitacora.errors import (
    BitacoraError,
    DuplicateUnreleasedError,
    InvalidDateError,
    InvalidVersionError,
    LintDirectiveError,
    MissingReleaseFieldError,
    MissingRepositoryUrlError,
    ParseError,
    ReleaseHeadingError,
    RenderError,
    UnexpectedTokensError,
    UnknownChangeKindError,
)
from bitacora.lexer import Lexer, tokenize
from bitacora.links import compare_link
from bitacora.model import ChangeKind, Changelog, Changes, Link, Release, sort_releases
from bitacora.parser import Parser
from bitacora.renderers import MarkdownRenderer
from bitacora.renderers.markdown import DEFAULT_DESCRIPTION, DEFAULT_TITLE
from bitacora.tokens import Token, TokenType
from bitacora.values import Version

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    options: ParseOptions | None = None,
    repository_url: str | None = None,
    tag_prefix: str | None = None,
    head_ref: str | None = None,
) -> Changelog:
    """Parse Keep a Changelog Markdown into a Changelog.

    Keyword values override the matching fields of options.

    Args:
        source: Changelog Markdown text
        options: Base parse options (DEFAULT_OPTIONS when None)
        repository_url: Repository base URL used for release links
        tag_prefix: Prefix joined to versions to form tag names
        head_ref: Reference compared against for Unreleased changes

    Returns:
        The parsed Changelog

    Raises:
        ParseError: If the text does not follow the changelog grammar.

    Example:
        >>> parse("# Changelog\\n## [Unreleased]\\n### Added\\n- Feature\\n").unreleased.changes.added
        ['Feature']
    """
    base = options or DEFAULT_OPTIONS
    overrides = {
        "repository_url": repository_url,
        "tag_prefix": tag_prefix,
        "head_ref": head_ref,
    }
    if any(value is not None for value in overrides.values()):
        base = ParseOptions(
            **{
                name: value if value is not None else getattr(base, name)
                for name, value in overrides.items()
            }
        )
    return Parser(source, base).parse()


def render(changelog: Changelog) -> str:
    """Render a Changelog back to Keep a Changelog Markdown.

    Args:
        changelog: Document to render

    Returns:
        Markdown text ending with a single newline

    Raises:
        RenderError: If a release link cannot be built.
    """
    return MarkdownRenderer().render(changelog)


__all__ = [  # noqa: RUF022 - grouped by category
    "__version__",
    # Entry points
    "parse",
    "render",
    "Parser",
    "MarkdownRenderer",
    "Lexer",
    "tokenize",
    "compare_link",
    # Configuration
    "ParseOptions",
    "DEFAULT_OPTIONS",
    "DEFAULT_TITLE",
    "DEFAULT_DESCRIPTION",
    # Model
    "Changelog",
    "Release",
    "Changes",
    "ChangeKind",
    "Link",
    "Version",
    "sort_releases",
    # Tokens
    "Token",
    "TokenType",
    # Errors
    "BitacoraError",
    "ParseError",
    "ReleaseHeadingError",
    "InvalidVersionError",
    "InvalidDateError",
    "UnknownChangeKindError",
    "LintDirectiveError",
    "DuplicateUnreleasedError",
    "UnexpectedTokensError",
    "RenderError",
    "MissingRepositoryUrlError",
    "MissingReleaseFieldError",
]
