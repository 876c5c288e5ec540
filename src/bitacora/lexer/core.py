"""Line-oriented changelog lexer.

Works in three passes over the source:
1. Classify every line into a token (pure classifiers, fixed priority)
2. Merge paragraph runs and indented list-item continuations
3. Drop blank tokens and trim blank edge lines from the rest

Tokenizing never fails; anything unrecognized becomes a paragraph and is
left for the parser to reject.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from bitacora.lexer.classifiers import (
    CommentClassifierMixin,
    HeadingClassifierMixin,
    LinkRefClassifierMixin,
    ListClassifierMixin,
    ThematicClassifierMixin,
)
from bitacora.tokens import Token, TokenType
from bitacora.utils.logger import get_logger, trace_items

logger = get_logger(__name__)

CONTINUATION_INDENT = "  "


class Lexer(
    # Classifiers (pure logic over a single line)
    ThematicClassifierMixin,
    HeadingClassifierMixin,
    ListClassifierMixin,
    LinkRefClassifierMixin,
    CommentClassifierMixin,
):
    """Changelog lexer.

    Usage:
            >>> compact, tokens = Lexer("# Changelog\\n\\n## [Unreleased]").tokenize()
            >>> compact
            False
            >>> tokens
            [Token(H1, 'Changelog', line 1), Token(H2, '[Unreleased]', line 3)]

    Compact Mode:
        The document is compact when the line right after the first level-1
        heading is not blank. Only that one line is inspected, and the
        result applies to the whole document.

    """

    __slots__ = (
        "_lines",
        "_idx",  # Index of the next unread line
    )

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text.

        Args:
            source: Changelog Markdown text
        """
        self._lines: list[str] = [line.removesuffix("\r") for line in source.rstrip().split("\n")]
        self._idx = 0

    def tokenize(self) -> tuple[bool, list[Token]]:
        """Tokenize source.

        Returns:
            (compact, tokens) where compact is the document-wide flag.
        """
        raw = list(self._scan_lines())
        compact = self._detect_compact(raw)
        tokens = [
            self._trim_blank_edges(token)
            for token in self._merge_continuations(raw)
            if not token.is_blank
        ]
        logger.debug(
            "tokenized %d lines into %d tokens (compact=%s)",
            len(self._lines),
            len(tokens),
            compact,
        )
        trace_items(logger, "tokens", tokens)
        return compact, tokens

    # =========================================================================
    # Line navigation
    # =========================================================================

    def _peek_line(self) -> str | None:
        if self._idx < len(self._lines):
            return self._lines[self._idx]
        return None

    def _consume_line(self) -> None:
        self._idx += 1

    # =========================================================================
    # Passes
    # =========================================================================

    def _scan_lines(self) -> Iterator[Token]:
        while self._idx < len(self._lines):
            lineno = self._idx + 1
            line = self._lines[self._idx]
            self._consume_line()
            yield self._classify_line(line, lineno)

    def _classify_line(self, line: str, lineno: int) -> Token:
        token = self._try_classify_rule(line, lineno)
        if token:
            return token

        token = self._try_classify_heading(line, lineno)
        if token:
            return token

        token = self._try_classify_list_item(line, lineno)
        if token:
            return token

        token = self._try_classify_link_ref(line, lineno)
        if token:
            return token

        token = self._try_classify_comment(line, lineno)
        if token:
            return token

        return Token(TokenType.PARAGRAPH, (line.rstrip(),), lineno)

    def _detect_compact(self, raw: Sequence[Token]) -> bool:
        for idx, token in enumerate(raw):
            if token.type == TokenType.H1:
                return idx + 1 < len(raw) and not raw[idx + 1].is_blank
        return False

    def _merge_continuations(self, raw: Sequence[Token]) -> list[Token]:
        """Fold paragraph runs together and attach indented lines to list items."""
        result: list[Token] = []
        for token in raw:
            if token.type == TokenType.PARAGRAPH and result:
                prev = result[-1]
                line = token.lines[0]
                if prev.type == TokenType.PARAGRAPH:
                    result[-1] = prev.with_line(line)
                    continue
                if prev.type == TokenType.LIST_ITEM and line.startswith(CONTINUATION_INDENT):
                    result[-1] = prev.with_line(line[len(CONTINUATION_INDENT) :])
                    continue
            result.append(token)
        return result

    def _trim_blank_edges(self, token: Token) -> Token:
        lines = list(token.lines)
        while lines and not lines[-1].strip():
            lines.pop()
        while lines and not lines[0].strip():
            lines.pop(0)
        if len(lines) == len(token.lines):
            return token
        return Token(token.type, tuple(lines), token.lineno)
