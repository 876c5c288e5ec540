"""LineBuilder for line-oriented Markdown output.

Collects output lines and blank separators, then joins once at the end.
Renderers ask for blank lines freely; build() collapses any run of blank
lines to a single one and ends the text with exactly one newline.

Thread Safety:
LineBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class LineBuilder:
    """Efficient line accumulator.

    Usage:
            >>> lines = LineBuilder()
            >>> _ = lines.append("# Changelog").blank().blank().append("Text")
            >>> lines.build()
            '# Changelog\\n\\nText\\n'

    """

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        """Initialize empty LineBuilder."""
        self._lines: list[str] = []

    def append(self, text: str) -> LineBuilder:
        """Append text, which may span several lines.

        Args:
            text: Text to append; embedded newlines start new lines

        Returns:
            self for method chaining
        """
        self._lines.extend(text.split("\n"))
        return self

    def blank(self) -> LineBuilder:
        """Append a blank separator line.

        Returns:
            self for method chaining
        """
        self._lines.append("")
        return self

    def blank_unless(self, condition: bool) -> LineBuilder:
        """Append a blank line only when condition is false.

        Returns:
            self for method chaining
        """
        if not condition:
            self._lines.append("")
        return self

    def extend(self, texts: Iterable[str]) -> LineBuilder:
        """Append several texts, one after another.

        Returns:
            self for method chaining
        """
        for text in texts:
            self.append(text)
        return self

    def build(self) -> str:
        """Join all lines into the final text.

        Whitespace-only lines count as blank. Runs of blank lines collapse
        to one; leading and trailing blank lines are dropped.

        Returns:
            The text, ending with exactly one newline
        """
        result: list[str] = []
        for line in self._lines:
            if not line.strip():
                if result and result[-1]:
                    result.append("")
                continue
            result.append(line)
        while result and not result[-1]:
            result.pop()
        return "\n".join(result) + "\n"

    def __len__(self) -> int:
        """Return number of lines appended so far."""
        return len(self._lines)

    def __bool__(self) -> bool:
        """Return True if any lines have been appended."""
        return bool(self._lines)
