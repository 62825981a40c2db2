"""Run configuration built once from the action inputs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 0
DEFAULT_NUMBER_OF_TAGS = 2

_COUNT_RE = re.compile(r"\d+", re.ASCII)


def parse_count(raw: str | int | None, default: int, *, name: str = "value") -> int:
    """Parse a non-negative integer input.

    Absent or blank values give *default* silently. Anything that is not a
    plain run of decimal digits gives *default* with a warning.
    """
    if raw is None:
        return default
    if isinstance(raw, int):
        if raw < 0:
            logger.warning("Ignoring negative %s %d, using %d", name, raw, default)
            return default
        return raw

    value = raw.strip()
    if not value:
        return default
    if not _COUNT_RE.fullmatch(value):
        logger.warning("Ignoring non-numeric %s '%s', using %d", name, value, default)
        return default
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Inputs of one digest run.

    Attributes:
        image: Image reference, ``name`` or ``organization/name``.
        max_pages: Maximum number of pages to fetch, 0 for all.
        number_of_tags: Number of version groups to report.
    """

    image: str
    max_pages: int = DEFAULT_MAX_PAGES
    number_of_tags: int = DEFAULT_NUMBER_OF_TAGS

    @classmethod
    def from_inputs(
        cls,
        image: str | None,
        max_pages: str | int | None = None,
        number_of_tags: str | int | None = None,
    ) -> Settings:
        return cls(
            image=(image or "").strip(),
            max_pages=parse_count(max_pages, DEFAULT_MAX_PAGES, name="max_pages"),
            number_of_tags=parse_count(
                number_of_tags, DEFAULT_NUMBER_OF_TAGS, name="number_of_tags"
            ),
        )
