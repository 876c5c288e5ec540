"""Document-level grammar rules: lint directive, flag, title, text, footer."""

from __future__ import annotations

import re

from bitacora.errors import LintDirectiveError
from bitacora.lexer.core import CONTINUATION_INDENT
from bitacora.tokens import Token, TokenType

_LINT_RULES_RE = re.compile(r"markdownlint-disable(?P<rules>(?:\s+MD\d{3})+)")

TEXT_TYPES = (TokenType.PARAGRAPH, TokenType.LIST_ITEM)


class MetaParsingMixin:
    """Mixin parsing the parts of a changelog outside its releases."""

    def _try_consume(self, *types: TokenType) -> Token | None:
        """Consume token if it matches. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _peek(self) -> Token | None:
        """Return current token. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _parse_lint_rules(self) -> set[str] | None:
        """Parse an optional ``<!-- markdownlint-disable MD001 ... -->`` line.

        Raises:
            LintDirectiveError: If the directive lists no rule codes.
        """
        token = self._try_consume(TokenType.LINT_DIRECTIVE)
        if token is None:
            return None

        match = _LINT_RULES_RE.search(token.text)
        if match is None:
            raise LintDirectiveError(
                f"no rule codes in lint directive `<!-- {token.text} -->`",
                lineno=token.lineno,
                token_type=token.type,
            )
        return set(match.group("rules").split())

    def _parse_flag(self) -> str | None:
        token = self._try_consume(TokenType.FLAG)
        return token.text if token else None

    def _parse_title(self) -> str | None:
        token = self._try_consume(TokenType.H1)
        return token.text if token else None

    def _parse_text(self, start: tuple[TokenType, ...] = TEXT_TYPES) -> str | None:
        """Parse a run of paragraphs and list items into plain text.

        The run must open with a token whose type is in start. List items
        get their ``- `` marker back and their continuation lines are
        indented by two spaces. A paragraph after a list item stays
        separated by a blank line so it is not read back as a continuation.

        Returns:
            The text, or None if the current token cannot open a run.
        """
        token = self._peek()
        if token is None or token.type not in start:
            return None

        lines: list[str] = []
        previous: TokenType | None = None
        while (token := self._try_consume(*TEXT_TYPES)) is not None:
            if token.type == TokenType.LIST_ITEM:
                first, *rest = token.lines
                lines.append(f"- {first.lstrip()}")
                lines.extend(f"{CONTINUATION_INDENT}{line}" for line in rest)
            else:
                if previous == TokenType.LIST_ITEM:
                    lines.append("")
                lines.append(token.text)
            previous = token.type
        return "\n".join(lines)

    def _parse_footer(self) -> str | None:
        """Parse a horizontal rule and the text after it.

        Returns:
            Footer text ("" for a bare rule), or None without a rule.
        """
        if self._try_consume(TokenType.HORIZONTAL_RULE) is None:
            return None
        return self._parse_text() or ""
