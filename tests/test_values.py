"""Tests for semantic versions, dates and lint rule sets."""

import datetime

import pytest

from bitacora.errors import InvalidDateError, InvalidVersionError
from bitacora.values import Version, normalize_lint_rules, parse_date, parse_version


class TestVersion:
    def test_parse_full(self) -> None:
        version = Version.parse("1.2.3-rc.1+build.5")
        assert version == Version(1, 2, 3, ("rc", "1"), ("build", "5"))
        assert str(version) == "1.2.3-rc.1+build.5"

    def test_parse_strips_whitespace(self) -> None:
        assert Version.parse(" 0.1.0 ") == Version(0, 1, 0)

    @pytest.mark.parametrize("text", ["1.2", "01.2.3", "v1.2.3", "1.2.3-", "1.2.3+", ""])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidVersionError):
            Version.parse(text)

    def test_str_plain(self) -> None:
        assert str(Version(10, 0, 7)) == "10.0.7"

    def test_parse_version_passthrough(self) -> None:
        version = Version(1, 0, 0)
        assert parse_version(version) is version
        assert parse_version(None) is None
        assert parse_version("1.0.0") == version


class TestParseDate:
    def test_iso_date(self) -> None:
        assert parse_date("2024-04-28") == datetime.date(2024, 4, 28)

    def test_single_digit_month_and_day(self) -> None:
        assert parse_date("2024-4-8") == datetime.date(2024, 4, 8)

    def test_datetime_is_truncated(self) -> None:
        assert parse_date(datetime.datetime(2024, 1, 2, 15, 30)) == datetime.date(2024, 1, 2)

    def test_none(self) -> None:
        assert parse_date(None) is None

    @pytest.mark.parametrize("text", ["2024-02-30", "2024/01/01", "yesterday", "2024-13-01"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidDateError):
            parse_date(text)


class TestLintRules:
    def test_none(self) -> None:
        assert normalize_lint_rules(None) is None

    def test_empty_becomes_none(self) -> None:
        assert normalize_lint_rules([]) is None
        assert normalize_lint_rules(["", "  "]) is None

    def test_strips_codes(self) -> None:
        assert normalize_lint_rules([" MD013 ", "MD013", "MD024"]) == {"MD013", "MD024"}
