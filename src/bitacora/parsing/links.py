"""Reference link rules.

Link tokens are pulled out of the main stream before the grammar runs, so
definitions may appear anywhere in the document.
"""

from __future__ import annotations

from collections.abc import Sequence

from bitacora.errors import ParseError
from bitacora.links import infer_repository_url, infer_repository_url_from_release
from bitacora.model import Link
from bitacora.tokens import Token


class LinkParsingMixin:
    """Mixin parsing link reference definitions."""

    def _parse_links(self, tokens: Sequence[Token]) -> tuple[list[Link], str | None]:
        """Parse link tokens and infer the repository URL from them.

        The first compare link wins; when there is none, the first release
        tag link is used instead.

        Returns:
            (links, inferred repository URL or None)

        Raises:
            ParseError: If a link token has no URL part.
        """
        links: list[Link] = []
        for token in tokens:
            try:
                links.append(Link.parse(token.text))
            except ValueError as exc:
                raise ParseError(str(exc), lineno=token.lineno, token_type=token.type) from exc

        inferred = next(
            (url for link in links if (url := infer_repository_url(link.url))),
            None,
        )
        if inferred is None:
            inferred = next(
                (url for link in links if (url := infer_repository_url_from_release(link.url))),
                None,
            )
        return links, inferred
