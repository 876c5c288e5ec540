"""Parse configuration for Bitacora.

Options are supplied per parse call and copied onto the resulting
Changelog, where they drive compare-link generation.

Usage:
    from bitacora import parse
    from bitacora.config import ParseOptions

    options = ParseOptions(
        repository_url="https://github.com/acme/widgets",
        tag_prefix="v",
    )
    changelog = parse(source, options=options)

"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HEAD_REF = "HEAD"


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Immutable parse configuration.

    Frozen dataclass; defaults are applied and values normalized at
    construction.

    Attributes:
        repository_url: Base URL of the repository; when None it is inferred
            from the first compare link found in the document
        tag_prefix: Prefix joined to versions to form tag names (e.g. "v")
        head_ref: Reference that Unreleased changes are compared against

    """

    repository_url: str | None = None
    tag_prefix: str | None = None
    head_ref: str = DEFAULT_HEAD_REF

    def __post_init__(self) -> None:
        if self.repository_url is not None:
            object.__setattr__(self, "repository_url", self.repository_url.rstrip("/"))
        if not self.tag_prefix:
            object.__setattr__(self, "tag_prefix", None)
        if not self.head_ref:
            object.__setattr__(self, "head_ref", DEFAULT_HEAD_REF)

    @classmethod
    def from_dict(cls, config_dict: dict) -> ParseOptions:
        """Create ParseOptions from dictionary.

        Only includes keys that are valid ParseOptions fields; unknown keys
        are silently ignored.

        Example:
            >>> ParseOptions.from_dict({"tag_prefix": "v", "unknown": 1}).tag_prefix
            'v'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default options (reused, never recreated)
DEFAULT_OPTIONS: ParseOptions = ParseOptions()


__all__ = [
    "DEFAULT_HEAD_REF",
    "DEFAULT_OPTIONS",
    "ParseOptions",
]
