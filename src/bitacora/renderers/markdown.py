"""Markdown renderer using the LineBuilder pattern.

Regenerates Keep a Changelog Markdown from a Changelog, including the
reference links for every release. Release and compare links are derived
from the current release order on every render; links found in the
source that look like release links are dropped and regenerated.

Layout:
    <!-- markdownlint-disable ... -->   (when lint rules are disabled)
    <!-- flag -->                       (when a flag is set)
    # Title
    description
    ## releases...
    [other links]
    [generated release links]
    ---
    footer                              (when a footer is set)

Compact mode drops the blank lines after headings and between change
sections.

Thread Safety:
MarkdownRenderer holds no state. Multiple threads can share one instance.
"""

from __future__ import annotations

from bitacora.errors import MissingReleaseFieldError
from bitacora.linebuilder import LineBuilder
from bitacora.links import compare_link, is_generated_anchor
from bitacora.model import Changelog, Release
from bitacora.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TITLE = "Changelog"

DEFAULT_DESCRIPTION = (
    "All notable changes to this project will be documented in this file.\n"
    "\n"
    "The format is based on [Keep a Changelog](https://keepachangelog.com/en/1.0.0/)\n"
    "and this project adheres to [Semantic Versioning](https://semver.org/spec/v2.0.0.html)."
)

HORIZONTAL_RULE = "---"


class MarkdownRenderer:
    """Render a Changelog to Keep a Changelog Markdown."""

    __slots__ = ()

    def render(self, changelog: Changelog) -> str:
        """Render the whole changelog.

        Returns:
            Markdown text ending with a single newline.

        Raises:
            MissingRepositoryUrlError: If a release link is needed and no
                repository URL is known.
            MissingReleaseFieldError: If a dated release has no version.
        """
        lines = LineBuilder()
        compact = changelog.compact

        if changelog.lint_rules:
            lines.append(f"<!-- markdownlint-disable {' '.join(sorted(changelog.lint_rules))} -->")
        if changelog.flag is not None:
            lines.append(f"<!-- {changelog.flag} -->")

        lines.append(f"# {changelog.title or DEFAULT_TITLE}")
        lines.blank_unless(compact)

        if changelog.description is not None:
            lines.append(changelog.description.strip())
        else:
            lines.append(DEFAULT_DESCRIPTION)
        lines.blank()

        for release in changelog.releases:
            self._render_release(release, lines, compact=compact)

        self._render_links(changelog, lines)

        if changelog.footer is not None:
            lines.append(HORIZONTAL_RULE).append(changelog.footer)

        logger.debug("rendered %d releases into %d lines", len(changelog.releases), len(lines))
        return lines.build()

    def _render_release(self, release: Release, lines: LineBuilder, *, compact: bool) -> None:
        lines.append(self._release_heading(release))
        lines.blank_unless(compact)

        if release.description:
            lines.append(release.description)
            lines.blank_unless(compact)

        for index, (kind, entries) in enumerate(release.changes):
            if index:
                lines.blank_unless(compact)
            lines.append(f"### {kind.value}")
            lines.blank_unless(compact)
            lines.extend(format_entry(entry) for entry in entries)

        lines.blank()

    def _release_heading(self, release: Release) -> str:
        yanked = " [YANKED]" if release.yanked else ""

        if release.date is None:
            if release.version is None:
                return f"## [Unreleased]{yanked}"
            return f"## [{release.version}] - Unreleased{yanked}"

        if release.version is None:
            raise MissingReleaseFieldError("version", release)
        return f"## [{release.version}] - {release.date.isoformat()}{yanked}"

    def _render_links(self, changelog: Changelog, lines: LineBuilder) -> None:
        other_links = [link for link in changelog.links if not is_generated_anchor(link.anchor)]
        if other_links:
            lines.blank()
            lines.extend(str(link) for link in other_links)
            lines.blank()

        for release in changelog.releases:
            link = compare_link(
                release,
                changelog.releases,
                repository_url=changelog.repository_url,
                tag_prefix=changelog.tag_prefix,
                head_ref=changelog.head_ref,
            )
            if link is not None:
                lines.append(str(link))


def format_entry(entry: str) -> str:
    """Format a change entry as a list item.

    Continuation lines are indented by two spaces and right-stripped.

    Example:
        >>> format_entry("Parser rewrite\\nwith new errors")
        '- Parser rewrite\\n  with new errors'
    """
    first, *rest = entry.split("\n")
    return "\n".join([f"- {first.strip()}", *(f"  {line}".rstrip() for line in rest)])
