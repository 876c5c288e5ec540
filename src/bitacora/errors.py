"""Exception classes for Bitacora.

Every failure is terminal for the current call: parsing either returns a
complete Changelog or raises, and rendering either returns the complete
text or raises before anything is handed back.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bitacora.tokens import Token, TokenType


class BitacoraError(Exception):
    """Base exception for all Bitacora errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(BitacoraError):
    """Error while reading changelog text or one of its values.

    Raised when the parser meets input it cannot fit into the grammar, and
    by the value factories (versions, dates, change kinds) when the text
    they are given is malformed.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        token_type: TokenType | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Source line where the error occurred (1-indexed)
            token_type: Kind of the offending token (optional)
        """
        self.message = message
        self.lineno = lineno
        self.token_type = token_type

        location = ""
        if lineno is not None:
            location = f"line {lineno}"
            if token_type is not None:
                location += f" ({token_type.label})"
            location += ": "

        super().__init__(f"{location}{message}")


class ReleaseHeadingError(ParseError):
    """A level-2 heading matches neither the dated nor the unreleased form."""


class InvalidVersionError(ParseError, ValueError):
    """Text is not a semantic version."""


class InvalidDateError(ParseError, ValueError):
    """Text is not a YYYY-MM-DD calendar date."""


class UnknownChangeKindError(ParseError, ValueError):
    """A level-3 heading does not name one of the six change kinds."""


class LintDirectiveError(ParseError):
    """A markdownlint comment carries no rule codes."""


class DuplicateUnreleasedError(ParseError):
    """A second dateless release was found or inserted."""


class UnexpectedTokensError(ParseError):
    """Tokens remain after the grammar has been fully applied.

    Attributes:
        tokens: The unconsumed tokens
        position: Cursor position where parsing stopped
    """

    def __init__(self, tokens: Sequence[Token], position: int) -> None:
        self.tokens = tuple(tokens)
        self.position = position
        first = self.tokens[0] if self.tokens else None
        super().__init__(
            f"unexpected tokens {list(self.tokens)!r} at index {position} "
            f"of {position + len(self.tokens)}",
            lineno=first.lineno if first else None,
            token_type=first.type if first else None,
        )


class RenderError(BitacoraError):
    """Error during Markdown rendering.

    Raised when the changelog lacks data that the output requires.
    """

    pass


class MissingRepositoryUrlError(RenderError):
    """A compare link is needed but no repository URL is known."""

    def __init__(self) -> None:
        super().__init__(
            "missing repository URL: pass repository_url when parsing "
            "or set Changelog.repository_url"
        )


class MissingReleaseFieldError(RenderError):
    """A release lacks the version or date its rendering requires."""

    def __init__(self, field: str, release: object) -> None:
        self.field = field
        super().__init__(f"missing {field} for release {release!r}")
