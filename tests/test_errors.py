"""Tests for the exception hierarchy and error formatting."""

import pytest

from bitacora.errors import (
    BitacoraError,
    DuplicateUnreleasedError,
    InvalidDateError,
    InvalidVersionError,
    LintDirectiveError,
    MissingReleaseFieldError,
    MissingRepositoryUrlError,
    ParseError,
    ReleaseHeadingError,
    RenderError,
    UnexpectedTokensError,
    UnknownChangeKindError,
)
from bitacora.model import Release
from bitacora.tokens import Token, TokenType

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("bad heading")
        assert str(err) == "bad heading"
        assert err.lineno is None
        assert err.token_type is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad heading", lineno=42)
        assert str(err) == "line 42: bad heading"

    def test_with_line_and_token_type(self) -> None:
        err = ParseError("bad heading", lineno=3, token_type=TokenType.H2)
        assert str(err) == "line 3 (Heading 2): bad heading"
        assert err.message == "bad heading"

    def test_token_type_without_line_is_ignored(self) -> None:
        err = ParseError("bad heading", token_type=TokenType.H2)
        assert str(err) == "bad heading"


class TestUnexpectedTokens:
    def test_attributes(self) -> None:
        tokens = [Token(TokenType.H3, ("Added",), 7), Token(TokenType.LIST_ITEM, ("x",), 8)]
        err = UnexpectedTokensError(tokens, 4)

        assert err.tokens == tuple(tokens)
        assert err.position == 4
        assert err.lineno == 7
        assert err.token_type == TokenType.H3
        assert "at index 4 of 6" in str(err)
        assert "Token(H3, 'Added', line 7)" in str(err)

    def test_without_tokens(self) -> None:
        err = UnexpectedTokensError([], 0)
        assert err.lineno is None
        assert str(err) == "unexpected tokens [] at index 0 of 0"


class TestRenderErrors:
    def test_missing_repository_url(self) -> None:
        assert "repository_url" in str(MissingRepositoryUrlError())

    def test_missing_release_field(self) -> None:
        release = Release(date=None)
        err = MissingReleaseFieldError("date", release)
        assert err.field == "date"
        assert str(err).startswith("missing date for release Release(")


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_class",
        [
            ReleaseHeadingError,
            InvalidVersionError,
            InvalidDateError,
            UnknownChangeKindError,
            LintDirectiveError,
            DuplicateUnreleasedError,
        ],
    )
    def test_parse_errors(self, error_class: type[ParseError]) -> None:
        err = error_class("boom", lineno=1)
        assert isinstance(err, ParseError)
        assert isinstance(err, BitacoraError)

    @pytest.mark.parametrize(
        "error_class", [InvalidVersionError, InvalidDateError, UnknownChangeKindError]
    )
    def test_value_errors(self, error_class: type[ParseError]) -> None:
        with pytest.raises(ValueError):
            raise error_class("boom")

    def test_render_errors(self) -> None:
        assert issubclass(MissingRepositoryUrlError, RenderError)
        assert issubclass(MissingReleaseFieldError, RenderError)
        assert issubclass(RenderError, BitacoraError)
        assert not issubclass(RenderError, ParseError)
