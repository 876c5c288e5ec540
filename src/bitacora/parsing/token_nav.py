"""Token navigation utilities for the Bitacora parser.

Provides a forward-only cursor over the token list. Grammar rules only
peek at the current token and consume it when its type matches, so the
parser never backtracks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bitacora.tokens import Token, TokenType

if TYPE_CHECKING:
    from collections.abc import Sequence


class TokenNavigationMixin:
    """Mixin providing token stream navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token]
        - _pos: int

    """

    _tokens: Sequence[Token]
    _pos: int

    def _at_end(self) -> bool:
        """Check if every token has been consumed."""
        return self._pos >= len(self._tokens)

    def _peek(self) -> Token | None:
        """Return the current token without consuming it."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _try_consume(self, *types: TokenType) -> Token | None:
        """Consume the current token only if its type is one of types."""
        token = self._peek()
        if token is None or token.type not in types:
            return None
        self._pos += 1
        return token

    def _consume_run(self, *types: TokenType) -> list[Token]:
        """Consume consecutive tokens whose type is one of types."""
        run: list[Token] = []
        while (token := self._try_consume(*types)) is not None:
            run.append(token)
        return run

    def _remaining(self) -> Sequence[Token]:
        return self._tokens[self._pos :]
