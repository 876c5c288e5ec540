"""Tests for Markdown rendering: exact layouts and render errors."""

import datetime

import pytest

from bitacora import DEFAULT_DESCRIPTION, render
from bitacora.errors import MissingReleaseFieldError, MissingRepositoryUrlError
from bitacora.model import Changelog, Link, Release
from bitacora.renderers import MarkdownRenderer
from bitacora.renderers.markdown import format_entry

REPO = "https://github.com/acme/widgets"

EXPECTED_SPACED = f"""\
# Changelog

{DEFAULT_DESCRIPTION}

## [Unreleased]

### Changed

- Faster rendering

## [1.0.0] - 2024-05-01

### Added

- Widgets

### Fixed

- Crash on start
  when config is empty

## [0.1.0] - 2024-04-28

### Added

- Initial release

[Unreleased]: {REPO}/compare/v1.0.0...HEAD
[1.0.0]: {REPO}/compare/v0.1.0...v1.0.0
[0.1.0]: {REPO}/releases/tag/v0.1.0
"""

EXPECTED_COMPACT = f"""\
<!-- markdownlint-disable MD022 MD032 -->
# Changelog
{DEFAULT_DESCRIPTION}

## [Unreleased]
### Changed
- Faster rendering

## [1.0.0] - 2024-05-01
### Added
- Widgets
### Fixed
- Crash on start
  when config is empty

## [0.1.0] - 2024-04-28
### Added
- Initial release

[Unreleased]: {REPO}/compare/v1.0.0...HEAD
[1.0.0]: {REPO}/compare/v0.1.0...v1.0.0
[0.1.0]: {REPO}/releases/tag/v0.1.0
"""


@pytest.fixture
def changelog() -> Changelog:
    return Changelog(
        repository_url=REPO,
        tag_prefix="v",
        releases=[
            Release.create("1.0.0", "2024-05-01")
            .add_change("Added", "Widgets")
            .add_change("Fixed", "Crash on start\nwhen config is empty"),
            Release.create("0.1.0", "2024-04-28").add_change("Added", "Initial release"),
            Release().add_change("Changed", "Faster rendering"),
        ],
    )


class TestLayouts:
    def test_spaced(self, changelog: Changelog) -> None:
        assert render(changelog) == EXPECTED_SPACED

    def test_compact(self, changelog: Changelog) -> None:
        changelog.set_compact()
        assert render(changelog) == EXPECTED_COMPACT

    def test_renderer_is_reusable(self, changelog: Changelog) -> None:
        renderer = MarkdownRenderer()
        assert renderer.render(changelog) == renderer.render(changelog) == EXPECTED_SPACED

    def test_empty_changelog(self) -> None:
        assert render(Changelog()) == f"# Changelog\n\n{DEFAULT_DESCRIPTION}\n"

    def test_header_comments(self) -> None:
        changelog = Changelog(flag="generated", lint_rules={"MD024", "MD013"})
        assert render(changelog) == (
            "<!-- markdownlint-disable MD013 MD024 -->\n"
            "<!-- generated -->\n"
            "# Changelog\n"
            "\n"
            f"{DEFAULT_DESCRIPTION}\n"
        )

    def test_custom_title_and_description(self) -> None:
        changelog = Changelog(title="Release notes", description="  Notes.\n\n")
        assert render(changelog) == "# Release notes\n\nNotes.\n"

    def test_single_release_compact(self) -> None:
        changelog = Changelog(
            repository_url=REPO,
            tag_prefix="v",
            releases=[Release.create("0.1.0", "2024-04-28").add_change("Added", "Initial release")],
        ).set_compact()

        assert render(changelog).endswith(
            "## [0.1.0] - 2024-04-28\n"
            "### Added\n"
            "- Initial release\n"
            "\n"
            f"[0.1.0]: {REPO}/releases/tag/v0.1.0\n"
        )


class TestReleaseHeadings:
    def render_heading(self, release: Release) -> str:
        text = render(Changelog(repository_url=REPO, releases=[release]))
        return next(line for line in text.splitlines() if line.startswith("## "))

    def test_yanked(self) -> None:
        release = Release.create("1.0.0", "2024-01-01", yanked=True)
        assert self.render_heading(release) == "## [1.0.0] - 2024-01-01 [YANKED]"

    def test_unreleased(self) -> None:
        assert self.render_heading(Release()) == "## [Unreleased]"

    def test_unreleased_yanked(self) -> None:
        assert self.render_heading(Release(yanked=True)) == "## [Unreleased] [YANKED]"

    def test_labelled_unreleased(self) -> None:
        assert self.render_heading(Release.create("1.1.0")) == "## [1.1.0] - Unreleased"

    def test_release_description(self) -> None:
        release = Release.create("1.0.0", "2024-01-01", description="Big one.")
        release.add_change("Added", "Everything")
        text = render(Changelog(repository_url=REPO, releases=[release]))
        assert "## [1.0.0] - 2024-01-01\n\nBig one.\n\n### Added\n\n- Everything\n" in text


class TestLinks:
    def test_other_links_precede_generated_links(self) -> None:
        changelog = Changelog(
            repository_url=REPO,
            releases=[Release.create("1.0.0", "2024-01-01")],
            links=[
                Link("keep", "https://keepachangelog.com"),
                Link("1.0.0", "https://stale.test/1.0.0"),
                Link("Unreleased", "https://stale.test/head"),
            ],
        )
        assert render(changelog).endswith(
            "## [1.0.0] - 2024-01-01\n"
            "\n"
            "[keep]: https://keepachangelog.com\n"
            "\n"
            f"[1.0.0]: {REPO}/releases/tag/1.0.0\n"
        )

    def test_links_without_releases(self) -> None:
        changelog = Changelog(links=[Link("keep", "https://keepachangelog.com")])
        assert render(changelog) == (
            f"# Changelog\n\n{DEFAULT_DESCRIPTION}\n\n[keep]: https://keepachangelog.com\n"
        )

    def test_links_follow_release_order(self, changelog: Changelog) -> None:
        changelog.add_release(Release.create("1.1.0", "2024-06-01"))
        text = render(changelog)
        assert f"[Unreleased]: {REPO}/compare/v1.1.0...HEAD\n" in text
        assert f"[1.1.0]: {REPO}/compare/v1.0.0...v1.1.0\n" in text


class TestFooter:
    def test_footer_after_links(self, changelog: Changelog) -> None:
        changelog.footer = "Maintained by the widgets team."
        assert render(changelog).endswith(
            f"[0.1.0]: {REPO}/releases/tag/v0.1.0\n---\nMaintained by the widgets team.\n"
        )

    def test_empty_footer(self) -> None:
        assert render(Changelog(footer="")).endswith(f"{DEFAULT_DESCRIPTION}\n\n---\n")


class TestRenderErrors:
    def test_missing_repository_url(self) -> None:
        changelog = Changelog(releases=[Release.create("1.0.0", "2024-01-01")])
        with pytest.raises(MissingRepositoryUrlError):
            render(changelog)

    def test_unreleased_only_needs_no_url(self) -> None:
        text = render(Changelog(releases=[Release().add_change("Added", "x")]))
        assert text.endswith("## [Unreleased]\n\n### Added\n\n- x\n")

    def test_dated_release_without_version(self) -> None:
        changelog = Changelog(
            repository_url=REPO,
            releases=[Release(date=datetime.date(2024, 1, 1))],
        )
        with pytest.raises(MissingReleaseFieldError) as exc_info:
            render(changelog)
        assert exc_info.value.field == "version"


class TestFormatEntry:
    def test_single_line(self) -> None:
        assert format_entry("Widgets") == "- Widgets"

    def test_continuation_lines_indented(self) -> None:
        assert format_entry("a\nb\n  c") == "- a\n  b\n    c"

    def test_blank_continuation_is_stripped(self) -> None:
        assert format_entry("a\n\nb") == "- a\n\n  b"
