"""Typed records flowing through the digest pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TagRecord:
    """One platform variant published under a version tag.

    Attributes:
        tag: Full ``MAJOR.MINOR.PATCH`` version string.
        group: ``MAJOR.MINOR`` prefix of :attr:`tag`.
        platform: ``os/architecture[/variant]``.
    """

    tag: str
    group: str
    platform: str


#: Records sharing a group key, in arrival order.
GroupBucket = dict[str, list[TagRecord]]


@dataclass
class ResultEntry:
    """Latest tag of one version group and its platforms."""

    version: str
    group: str
    platforms: list[str] = field(default_factory=list)

    @property
    def tags(self) -> list[str]:
        return [self.version, self.group]

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "tags": self.tags,
            "platforms": list(self.platforms),
        }
