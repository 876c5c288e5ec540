"""Changelog document model.

Plain dataclasses mirroring the Keep a Changelog structure:

Changelog
├── releases: list[Release]
│   └── changes: Changes (one entry list per ChangeKind)
└── links: list[Link]

Unlike parse tokens, model objects are mutable: tooling parses a
changelog, adds releases and changes, then renders it again.

Invariant:
``Changelog.releases`` is sorted by date, newest first. The single dateless
("Unreleased") release is kept at index 0. A second dateless release is
rejected with DuplicateUnreleasedError.

"""

from __future__ import annotations

import datetime
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

from bitacora.config import DEFAULT_HEAD_REF
from bitacora.errors import DuplicateUnreleasedError, UnknownChangeKindError
from bitacora.values import Version, normalize_lint_rules, parse_date, parse_version

# Rules markdownlint reports for compact output (headings and lists
# without surrounding blank lines).
COMPACT_LINT_RULES = ("MD022", "MD032")

_LINK_DEF_RE = re.compile(r"^\[(?P<anchor>.*?)\]:\s*(?P<url>\S.*)$")


class ChangeKind(Enum):
    """The six change categories, in rendering order."""

    ADDED = "Added"
    CHANGED = "Changed"
    DEPRECATED = "Deprecated"
    REMOVED = "Removed"
    FIXED = "Fixed"
    SECURITY = "Security"

    @classmethod
    def parse(cls, text: str) -> ChangeKind:
        """Look up a change kind by name, ignoring case.

        Raises:
            UnknownChangeKindError: If text names no change kind.
        """
        wanted = text.strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        raise UnknownChangeKindError(f"unknown change kind: {text!r}")


@dataclass(slots=True)
class Changes:
    """Change entries of one release, grouped by kind.

    Entries are free text and may span several lines.
    """

    added: list[str] = field(default_factory=list)
    changed: list[str] = field(default_factory=list)
    deprecated: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)
    fixed: list[str] = field(default_factory=list)
    security: list[str] = field(default_factory=list)

    def __getitem__(self, kind: ChangeKind) -> list[str]:
        return getattr(self, kind.name.lower())

    def __iter__(self) -> Iterator[tuple[ChangeKind, list[str]]]:
        """Yield (kind, entries) for each non-empty kind, in rendering order."""
        for kind in ChangeKind:
            entries = self[kind]
            if entries:
                yield kind, entries

    def add(self, kind: ChangeKind | str, change: str) -> None:
        if not isinstance(kind, ChangeKind):
            kind = ChangeKind.parse(kind)
        self[kind].append(change)

    def is_empty(self) -> bool:
        return not any(self[kind] for kind in ChangeKind)


@dataclass(slots=True)
class Link:
    """A Markdown reference link: ``[anchor]: url``."""

    anchor: str
    url: str

    @classmethod
    def parse(cls, raw: str) -> Link:
        """Parse ``[anchor]: url``.

        Lines of a definition split across two lines are joined with a space
        first. The anchor is the label before the first ``]:`` with the
        brackets removed; the url is the remainder.

        Raises:
            ValueError: If the text is not a link definition.
        """
        text = " ".join(line.strip() for line in raw.splitlines() if line.strip())
        match = _LINK_DEF_RE.match(text)
        if match is None:
            raise ValueError(f"not a link definition: {raw!r}")
        anchor = match.group("anchor").replace("[", "").replace("]", "")
        return cls(anchor=anchor, url=match.group("url").strip())

    def __str__(self) -> str:
        return f"[{self.anchor}]: {self.url}"


@dataclass(slots=True)
class Release:
    """One release section of the changelog.

    A release without a date is the "Unreleased" section. Its version, if
    any, is a display label only.
    """

    version: Version | None = None
    date: datetime.date | None = None
    yanked: bool = False
    description: str | None = None
    changes: Changes = field(default_factory=Changes)

    @classmethod
    def create(
        cls,
        version: str | Version | None = None,
        date: str | datetime.date | None = None,
        *,
        yanked: bool = False,
        description: str | None = None,
    ) -> Release:
        """Build a release from plain values, validating version and date.

        Example:
            >>> Release.create("0.1.0", "2024-04-28").date
            datetime.date(2024, 4, 28)

        Raises:
            InvalidVersionError: If version is not a semantic version.
            InvalidDateError: If date is not YYYY-MM-DD.
        """
        return cls(
            version=parse_version(version),
            date=parse_date(date),
            yanked=yanked,
            description=description,
        )

    @property
    def is_unreleased(self) -> bool:
        return self.date is None

    def add_change(self, kind: ChangeKind | str, change: str) -> Release:
        self.changes.add(kind, change)
        return self

    def clear_changes(self) -> Release:
        self.changes = Changes()
        return self


def sort_releases(releases: Iterable[Release]) -> list[Release]:
    """Sort releases newest first, with the dateless release pinned at index 0.

    Version is never a sort key. Releases sharing a date keep their
    relative order.

    Raises:
        DuplicateUnreleasedError: If more than one release has no date.
    """
    dated: list[Release] = []
    unreleased: Release | None = None
    for release in releases:
        if release.date is not None:
            dated.append(release)
        elif unreleased is None:
            unreleased = release
        else:
            raise DuplicateUnreleasedError("changelog already has an unreleased section")

    dated.sort(key=lambda release: release.date, reverse=True)
    if unreleased is not None:
        dated.insert(0, unreleased)
    return dated


@dataclass(slots=True)
class Changelog:
    """A Keep a Changelog document.

    Attributes:
        title: Level-1 heading text; rendered as "Changelog" when None
        description: Text under the title; a standard paragraph when None
        flag: Free-form HTML comment rendered above the title
        lint_rules: markdownlint rule codes disabled for this file
        head_ref: Reference compared against for Unreleased changes
        footer: Text rendered after a horizontal rule
        repository_url: Base URL used to build release and compare links
        tag_prefix: Prefix joined to versions to form tag names
        releases: Releases, newest first
        links: Reference links found in the source or added later
        compact: Omit blank lines after headings and between lists

    """

    title: str | None = None
    description: str | None = None
    flag: str | None = None
    lint_rules: set[str] | None = None
    head_ref: str = DEFAULT_HEAD_REF
    footer: str | None = None
    repository_url: str | None = None
    tag_prefix: str | None = None
    releases: list[Release] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    compact: bool = False

    def __post_init__(self) -> None:
        self.lint_rules = normalize_lint_rules(self.lint_rules)
        self.releases = sort_releases(self.releases)

    @property
    def unreleased(self) -> Release | None:
        """The dateless release, if the changelog has one."""
        return next((release for release in self.releases if release.is_unreleased), None)

    def add_release(self, release: Release) -> Changelog:
        """Insert a release and restore date ordering.

        Raises:
            DuplicateUnreleasedError: If release is dateless and the changelog
                already has an unreleased section.
        """
        if release.is_unreleased and self.unreleased is not None:
            raise DuplicateUnreleasedError("changelog already has an unreleased section")
        self.releases = sort_releases([release, *self.releases])
        return self

    def find_release(self, version: str | Version) -> Release | None:
        """Find the release carrying version.

        Raises:
            InvalidVersionError: If version is a malformed version string.
        """
        wanted = parse_version(version)
        return next((release for release in self.releases if release.version == wanted), None)

    def add_link(self, anchor: str, url: str) -> Changelog:
        """Append a reference link; brackets and a trailing colon are stripped from anchor."""
        anchor = anchor.strip().rstrip(":").replace("[", "").replace("]", "")
        self.links.append(Link(anchor=anchor, url=url.strip()))
        return self

    def disable_lint(self, rule: str) -> Changelog:
        self.lint_rules = normalize_lint_rules([*(self.lint_rules or ()), rule])
        return self

    def enable_lint(self, rule: str) -> Changelog:
        if self.lint_rules is not None:
            self.lint_rules = normalize_lint_rules(self.lint_rules - {rule})
        return self

    def set_compact(self) -> Changelog:
        """Switch to compact output and disable the lint rules it trips."""
        self.compact = True
        for rule in COMPACT_LINT_RULES:
            self.disable_lint(rule)
        return self

    def unset_compact(self) -> Changelog:
        self.compact = False
        for rule in COMPACT_LINT_RULES:
            self.enable_lint(rule)
        return self
