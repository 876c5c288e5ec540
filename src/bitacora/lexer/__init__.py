"""Line-oriented lexer for Keep a Changelog documents.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, tokenize
├── core.py              # Lexer class (mixin composition + passes)
└── classifiers/         # Line classification mixins
    ├── thematic.py      # Horizontal rule (footer separator)
    ├── heading.py       # Level 1-3 headings
    ├── list.py          # List items
    ├── link_ref.py      # Link reference definitions
    └── comment.py       # Lint directives and flags

Usage:
    >>> from bitacora.lexer import tokenize
    >>> compact, tokens = tokenize("# Changelog\\n- entry")
    >>> compact
    True

"""

from __future__ import annotations

from bitacora.lexer.core import Lexer
from bitacora.tokens import Token


def tokenize(source: str) -> tuple[bool, list[Token]]:
    """Tokenize changelog text into (compact, tokens)."""
    return Lexer(source).tokenize()


__all__ = ["Lexer", "tokenize"]
