"""Token and TokenType definitions for the Bitacora lexer.

The lexer classifies each source line into a Token that the parser
consumes. Tokens may span several source lines once paragraph and list
continuations have been merged.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Token types produced by the lexer.

    Values are the human-readable labels used in error messages.
    """

    H1 = "Heading 1"  # # Title
    H2 = "Heading 2"  # ## [1.0.0] - 2024-01-01
    H3 = "Heading 3"  # ### Added
    LIST_ITEM = "List Item"  # - entry
    PARAGRAPH = "Paragraph"
    LINK = "Link"  # [anchor]: https://...
    FLAG = "Flag"  # <!-- anything -->
    HORIZONTAL_RULE = "Horizontal Rule"  # ---
    LINT_DIRECTIVE = "Lint"  # <!-- markdownlint-disable MD022 -->

    @property
    def label(self) -> str:
        """Human-readable name of the token type."""
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        lines: Content lines, markers already stripped
        lineno: Source line where the token starts (1-indexed)

    """

    type: TokenType
    lines: tuple[str, ...]
    lineno: int

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, line {self.lineno})"

    @property
    def text(self) -> str:
        """Content lines joined with newlines."""
        return "\n".join(self.lines)

    @property
    def is_blank(self) -> bool:
        """True when every content line is empty or whitespace."""
        return all(not line.strip() for line in self.lines)

    def with_line(self, line: str) -> Token:
        """Return a copy of this token with one more content line."""
        return Token(self.type, (*self.lines, line), self.lineno)
