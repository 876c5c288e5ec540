"""Release and compare link derivation.

Each release gets one generated reference link pointing at its tag, or at
the diff between its tag and the previous release's tag. Links are
recomputed on every render, so they always follow the current release
order.

Example:
    >>> from bitacora.model import Release
    >>> releases = [Release.create("0.2.0", "2024-05-01"), Release.create("0.1.0", "2024-04-28")]
    >>> compare_link(releases[0], releases, repository_url="https://x.test/r", tag_prefix="v")
    Link(anchor='0.2.0', url='https://x.test/r/compare/v0.1.0...v0.2.0')
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from bitacora.config import DEFAULT_HEAD_REF
from bitacora.errors import MissingReleaseFieldError, MissingRepositoryUrlError
from bitacora.model import Link, Release
from bitacora.values import Version

UNRELEASED_ANCHOR = "Unreleased"

# Anchors of generated links; reference links shaped like these are
# dropped from output because the renderer regenerates them.
_VERSION_ANCHOR_RE = re.compile(r"\d+\.\d+\.\d+((-rc|-x)\.\d+)?")

# GitHub style ".../compare/..." and GitLab style ".../-/compare/..."
_COMPARE_URL_RE = re.compile(r"^(http.*?)/(?:-/)?compare/.*$")
_RELEASE_URL_RE = re.compile(r"^(http.*?)/(?:-/)?releases/(?:tag/)?.+$")


def tag_name(version: Version, tag_prefix: str | None = None) -> str:
    """Tag for a version: the prefix (if any) joined to the bare version."""
    return f"{tag_prefix or ''}{version}"


def release_url(repository_url: str, tag: str) -> str:
    return f"{repository_url}/releases/tag/{tag}"


def compare_url(repository_url: str, base: str, head: str) -> str:
    return f"{repository_url}/compare/{base}...{head}"


def is_generated_anchor(anchor: str) -> bool:
    """True for anchors the renderer generates itself (versions and Unreleased)."""
    return _VERSION_ANCHOR_RE.search(anchor) is not None or UNRELEASED_ANCHOR in anchor


def infer_repository_url(url: str) -> str | None:
    """Extract the repository base URL from a compare URL.

    Example:
        >>> infer_repository_url("https://github.com/o/r/compare/v1.0.0...HEAD")
        'https://github.com/o/r'
    """
    match = _COMPARE_URL_RE.match(url)
    return match.group(1) if match else None


def infer_repository_url_from_release(url: str) -> str | None:
    """Extract the repository base URL from a release tag URL."""
    match = _RELEASE_URL_RE.match(url)
    return match.group(1) if match else None


def compare_link(
    release: Release,
    releases: Sequence[Release],
    *,
    repository_url: str | None,
    tag_prefix: str | None = None,
    head_ref: str = DEFAULT_HEAD_REF,
) -> Link | None:
    """Compute the generated link for release within the sorted releases.

    The previous release is the nearest later one that has a date; dateless
    releases are skipped while searching.

    Returns:
        None when there is no previous release and release is unreleased.

    Raises:
        ValueError: If release is not one of releases.
        MissingRepositoryUrlError: If a link is needed and repository_url is None.
        MissingReleaseFieldError: If a release involved has no version.
    """
    position = next((i for i, item in enumerate(releases) if item is release), None)
    if position is None:
        raise ValueError(f"release {release!r} is not part of the release list")

    previous = next(
        (item for item in releases[position + 1 :] if item.date is not None),
        None,
    )
    unreleased = release.date is None or release.version is None

    if previous is None and unreleased:
        return None
    if repository_url is None:
        raise MissingRepositoryUrlError()

    if previous is None:
        version = _require_version(release)
        return Link(anchor=str(version), url=release_url(repository_url, tag_name(version, tag_prefix)))

    base = tag_name(_require_version(previous), tag_prefix)
    if unreleased:
        return Link(anchor=UNRELEASED_ANCHOR, url=compare_url(repository_url, base, head_ref))

    version = _require_version(release)
    return Link(
        anchor=str(version),
        url=compare_url(repository_url, base, tag_name(version, tag_prefix)),
    )


def _require_version(release: Release) -> Version:
    if release.version is None:
        raise MissingReleaseFieldError("version", release)
    return release.version
