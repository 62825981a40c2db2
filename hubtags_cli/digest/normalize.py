"""Parse tag listing pages and normalize them into :class:`TagRecord` values."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import jsonschema

from hubtags_cli.digest.records import TagRecord
from hubtags_cli.schemas import load_schema

logger = logging.getLogger(__name__)

# Strict ASCII MAJOR.MINOR.PATCH, no prefix, no pre-release or build suffix.
_RELEASE_TAG_RE = re.compile(r"\d+\.\d+\.\d+", re.ASCII)

_PATCH_SUFFIX_RE = re.compile(r"\.\d+\Z", re.ASCII)

_PAGE_SCHEMA_FILE = "tag_page.schema.json"


class MalformedResponse(Exception):
    """Raised when a page body is not the expected JSON envelope."""


def parse_page(body: str) -> dict[str, Any]:
    """Decode and validate one page of the tag listing.

    Args:
        body: Raw response body.

    Returns:
        The decoded envelope with ``results`` and ``next`` keys.

    Raises:
        MalformedResponse: If the body is not JSON or does not match the
            page schema.
    """
    try:
        page = json.loads(body)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Registry response is not valid JSON: {exc}") from exc

    try:
        jsonschema.validate(instance=page, schema=load_schema(_PAGE_SCHEMA_FILE))
    except jsonschema.ValidationError as exc:
        raise MalformedResponse(
            f"Registry response failed schema validation: {exc.message}"
        ) from exc

    return page  # type: ignore[no-any-return]


def has_next(page: dict[str, Any]) -> bool:
    """Return True if the registry advertises another page."""
    return page.get("next") is not None


def is_release_tag(name: str) -> bool:
    """Return True if *name* is a strict ``MAJOR.MINOR.PATCH`` version."""
    return _RELEASE_TAG_RE.fullmatch(name) is not None


def group_of(tag: str) -> str:
    """Strip the trailing ``.PATCH`` component from *tag*."""
    return _PATCH_SUFFIX_RE.sub("", tag)


def format_platform(image: dict[str, Any]) -> str:
    """Render an image entry as ``os/architecture[/variant]``."""
    platform = f"{image['os']}/{image['architecture']}"
    variant = image.get("variant")
    if variant:
        platform += f"/{variant}"
    return platform


def extract_records(results: list[dict[str, Any]]) -> list[TagRecord]:
    """Turn one page's ``results`` into tag records.

    Results whose name is not a strict release version are dropped. Every
    kept result yields one record per image entry.
    """
    records: list[TagRecord] = []
    for result in results:
        name = result["name"]
        if not is_release_tag(name):
            logger.debug("Skipping tag %s", name)
            continue

        group = group_of(name)
        for image in result.get("images") or []:
            records.append(
                TagRecord(tag=name, group=group, platform=format_platform(image))
            )
    return records
