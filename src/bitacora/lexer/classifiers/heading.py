"""ATX heading classifier mixin."""

from __future__ import annotations

from bitacora.tokens import Token, TokenType

# Longest prefix first so "### " is never mistaken for "# "
HEADING_PREFIXES: tuple[tuple[str, TokenType], ...] = (
    ("### ", TokenType.H3),
    ("## ", TokenType.H2),
    ("# ", TokenType.H1),
)


class HeadingClassifierMixin:
    """Mixin providing level 1-3 heading classification."""

    def _try_classify_heading(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a level 1, 2 or 3 heading.

        The marker must start the line and be followed by a space. Deeper
        headings are not part of the changelog grammar and fall through to
        paragraphs.

        Args:
            line: Raw source line
            lineno: Source line number (1-indexed)

        Returns:
            Token with the stripped heading text, None otherwise.
        """
        if not line.startswith("#"):
            return None

        for prefix, token_type in HEADING_PREFIXES:
            if line.startswith(prefix):
                return Token(token_type, (line[len(prefix) :].strip(),), lineno)

        return None
