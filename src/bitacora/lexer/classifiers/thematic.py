"""Horizontal rule classifier mixin."""

from __future__ import annotations

from bitacora.tokens import Token, TokenType

PREFIX_HR = "---"


class ThematicClassifierMixin:
    """Mixin providing horizontal rule classification."""

    def _try_classify_rule(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as the horizontal rule that opens the footer.

        Any line starting with three dashes counts; the rule has no
        meaningful content of its own.

        Args:
            line: Raw source line
            lineno: Source line number (1-indexed)

        Returns:
            Token if line is a rule, None otherwise.
        """
        if not line.startswith(PREFIX_HR):
            return None
        return Token(TokenType.HORIZONTAL_RULE, (line.rstrip(),), lineno)
