"""HTML comment classifier mixin.

Whole-line comments carry either a markdownlint directive or a free-form
flag that is kept and written back above the title.
"""

from __future__ import annotations

import re

from bitacora.tokens import Token, TokenType

_COMMENT_RE = re.compile(r"^<!--(.*)-->$")

LINT_DIRECTIVE_PREFIX = "markdownlint-disable"


class CommentClassifierMixin:
    """Mixin providing HTML comment classification."""

    def _try_classify_comment(self, line: str, lineno: int) -> Token | None:
        """Try to classify line as a single-line HTML comment.

        Args:
            line: Raw source line
            lineno: Source line number (1-indexed)

        Returns:
            LINT_DIRECTIVE or FLAG token with the trimmed comment body,
            None if the line is not a whole-line comment.
        """
        if not line.startswith("<!--"):
            return None

        match = _COMMENT_RE.match(line.rstrip())
        if match is None:
            return None

        content = match.group(1).strip()
        if content.startswith(LINT_DIRECTIVE_PREFIX):
            return Token(TokenType.LINT_DIRECTIVE, (content,), lineno)
        return Token(TokenType.FLAG, (content,), lineno)
