"""Release grammar rules.

A release is a level-2 heading, an optional description, and level-3
change sections each followed by list items:

    ## [1.2.0] - 2024-05-01
    Optional description.
    ### Added
    - entry

Headings are matched case-insensitively, dated form first:

    ## [VERSION] - YYYY-MM-DD [YANKED]
    ## [Unreleased] [YANKED]
    ## [VERSION] - Unreleased [YANKED]

"""

from __future__ import annotations

import datetime
import re

from bitacora.errors import (
    DuplicateUnreleasedError,
    InvalidDateError,
    InvalidVersionError,
    ReleaseHeadingError,
    UnknownChangeKindError,
)
from bitacora.model import ChangeKind, Release
from bitacora.tokens import Token, TokenType
from bitacora.values import Version, parse_date

_DATED_RE = re.compile(
    r"\[?([^\]]+)\]?\s*-\s*(\d{4}-\d{1,2}-\d{1,2})(\s+\[yanked\])?$",
    re.IGNORECASE,
)
_UNRELEASED_RE = re.compile(
    r"\[?([^\]]+)\]?\s*-\s*unreleased(\s+\[yanked\])?$",
    re.IGNORECASE,
)

UNRELEASED = "unreleased"
YANKED = "[yanked]"

EXPECTED_HEADINGS = "`## [VERSION] - YYYY-MM-DD` or `## [Unreleased]`"
EXPECTED_KINDS = ", ".join(f"`### {kind.value}`" for kind in ChangeKind)


class ReleaseParsingMixin:
    """Mixin parsing release sections.

    A release description may only open with a paragraph. List items right
    under the heading, before any ``### Kind`` section, are Added entries
    rather than description text, so ``## [Unreleased]`` followed by
    ``- entry`` reads as an addition.

    """

    def _try_consume(self, *types: TokenType) -> Token | None:
        """Consume token if it matches. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _consume_run(self, *types: TokenType) -> list[Token]:
        """Consume a run of tokens. Implemented by TokenNavigationMixin."""
        raise NotImplementedError

    def _parse_text(self, start: tuple[TokenType, ...]) -> str | None:
        """Parse a text run. Implemented by MetaParsingMixin."""
        raise NotImplementedError

    def _parse_releases(self) -> list[Release]:
        """Parse every release section, in source order.

        Raises:
            DuplicateUnreleasedError: On a second dateless release.
        """
        releases: list[Release] = []
        unreleased: Token | None = None

        while True:
            heading = self._try_consume(TokenType.H2)
            if heading is None:
                break

            release = self._parse_release_heading(heading)
            if release.is_unreleased:
                if unreleased is not None:
                    raise DuplicateUnreleasedError(
                        f"second unreleased section `## {heading.text}` "
                        f"(first at line {unreleased.lineno})",
                        lineno=heading.lineno,
                        token_type=heading.type,
                    )
                unreleased = heading

            release.description = self._parse_text(start=(TokenType.PARAGRAPH,))

            # Items directly under the heading, before any ### section
            for item in self._consume_run(TokenType.LIST_ITEM):
                release.changes.add(ChangeKind.ADDED, item.text)

            self._parse_change_sections(release)
            releases.append(release)

        return releases

    def _parse_release_heading(self, heading: Token) -> Release:
        """Build a Release from a level-2 heading.

        Raises:
            ReleaseHeadingError: If the heading matches neither accepted form.
            InvalidVersionError: If the version label is malformed.
            InvalidDateError: If the date is not a real calendar date.
        """
        text = heading.text
        yanked = text.rstrip().lower().endswith(YANKED)

        dated = _DATED_RE.search(text)
        if dated is not None:
            return Release(
                version=self._parse_heading_version(dated.group(1), heading),
                date=self._parse_heading_date(dated.group(2), heading),
                yanked=yanked,
            )

        if UNRELEASED in text.lower():
            labelled = _UNRELEASED_RE.search(text)
            version = None
            if labelled is not None:
                version = self._parse_heading_version(labelled.group(1), heading)
            return Release(version=version, yanked=yanked)

        raise ReleaseHeadingError(
            f"cannot parse release heading `## {text}`; expected {EXPECTED_HEADINGS}",
            lineno=heading.lineno,
            token_type=heading.type,
        )

    def _parse_heading_version(self, label: str, heading: Token) -> Version:
        try:
            return Version.parse(label)
        except InvalidVersionError as exc:
            raise InvalidVersionError(
                f"{exc.message} in `## {heading.text}`",
                lineno=heading.lineno,
                token_type=heading.type,
            ) from exc

    def _parse_heading_date(self, text: str, heading: Token) -> datetime.date:
        try:
            return parse_date(text)
        except InvalidDateError as exc:
            raise InvalidDateError(
                f"{exc.message} in `## {heading.text}`",
                lineno=heading.lineno,
                token_type=heading.type,
            ) from exc

    def _parse_change_sections(self, release: Release) -> None:
        """Parse ``### Kind`` headings and the list items under each.

        Raises:
            UnknownChangeKindError: If a heading names no change kind.
        """
        while True:
            section = self._try_consume(TokenType.H3)
            if section is None:
                return

            try:
                kind = ChangeKind.parse(section.text)
            except UnknownChangeKindError as exc:
                raise UnknownChangeKindError(
                    f"unknown change kind `### {section.text}`; expected one of {EXPECTED_KINDS}",
                    lineno=section.lineno,
                    token_type=section.type,
                ) from exc

            for item in self._consume_run(TokenType.LIST_ITEM):
                release.changes.add(kind, item.text)
