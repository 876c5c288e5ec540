"""List item classifier mixin."""

from __future__ import annotations

from bitacora.tokens import Token, TokenType

LIST_MARKERS = ("-", "*")


class ListClassifierMixin:
    """Mixin providing list item classification."""

    def _try_classify_list_item(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a list item.

        Only unindented ``-`` and ``*`` markers open an item. Indented lines
        are continuations and are handled when paragraphs are merged.

        Args:
            line: Raw source line
            lineno: Source line number (1-indexed)

        Returns:
            Token with the item text (marker removed), None otherwise.
        """
        if not line.startswith(LIST_MARKERS):
            return None
        return Token(TokenType.LIST_ITEM, (line[1:].strip(),), lineno)
