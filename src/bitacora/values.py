"""Validated value types used by the changelog model.

Provides the semantic version type, the calendar date factory and lint
rule normalization. Each factory validates its input at construction and
raises a ParseError subclass on malformed text.

Example:
    >>> Version.parse("1.2.3-rc.1")
    Version(major=1, minor=2, patch=3, prerelease=('rc', '1'), build=())
    >>> str(parse_date("2024-4-8"))
    '2024-04-08'
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterable
from dataclasses import dataclass

from bitacora.errors import InvalidDateError, InvalidVersionError

# Semantic Versioning 2.0.0, section "Is there a suggested regular expression"
_SEMVER_RE = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True, slots=True)
class Version:
    """A semantic version (https://semver.org).

    Versions compare by equality only; release ordering never looks at them.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-separated prerelease identifiers
        build: Dot-separated build metadata identifiers

    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a semantic version string.

        Surrounding whitespace is ignored.

        Raises:
            InvalidVersionError: If text is not a valid semantic version.
        """
        match = _SEMVER_RE.match(text.strip())
        if match is None:
            raise InvalidVersionError(f"invalid semantic version: {text!r}")
        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def parse_version(value: str | Version | None) -> Version | None:
    """Coerce a version string (or Version, or None) to a Version."""
    if value is None or isinstance(value, Version):
        return value
    return Version.parse(value)


def parse_date(value: str | datetime.date | None) -> datetime.date | None:
    """Coerce a YYYY-MM-DD string (or date, or None) to a date.

    Month and day may omit their leading zero.

    Raises:
        InvalidDateError: If the text is not a valid calendar date.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(f"invalid date {value!r}: {exc}") from exc


def normalize_lint_rules(rules: Iterable[str] | None) -> set[str] | None:
    """Normalize lint rule codes: strip blanks, empty collections become None."""
    if rules is None:
        return None
    normalized = {rule.strip() for rule in rules if rule and rule.strip()}
    return normalized or None
