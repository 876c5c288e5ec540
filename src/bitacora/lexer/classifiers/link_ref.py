"""Link reference definition classifier mixin.

Handles ``[anchor]: https://...`` on one line, and the two-line form where
the URL sits alone on the following line.
"""

from __future__ import annotations

import re

from bitacora.tokens import Token, TokenType

_LINK_RE = re.compile(r"^\[.*\]:\s*http.*$")
_LINK_LABEL_RE = re.compile(r"^\[.*\]:$")


class LinkRefClassifierMixin:
    """Mixin providing link reference definition classification."""

    def _peek_line(self) -> str | None:
        """Return the next unread source line. Implemented by Lexer."""
        raise NotImplementedError

    def _consume_line(self) -> None:
        """Skip the next unread source line. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_link_ref(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a link reference definition.

        A label line ending in ``]:`` followed by a line that starts with a
        URL (after trimming) forms one definition; the URL line is consumed.

        Args:
            line: Raw source line
            lineno: Source line number (1-indexed)

        Returns:
            LINK token if valid, None otherwise.
        """
        if not line.startswith("["):
            return None

        if _LINK_RE.match(line):
            return Token(TokenType.LINK, (line.strip(),), lineno)

        if _LINK_LABEL_RE.match(line.rstrip()):
            next_line = self._peek_line()
            if next_line is not None and next_line.strip().startswith("http"):
                self._consume_line()
                return Token(TokenType.LINK, (line.strip(), next_line.strip()), lineno)

        return None
