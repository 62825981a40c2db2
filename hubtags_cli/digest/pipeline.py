"""Run the full digest for one set of :class:`Settings`."""

from __future__ import annotations

import logging
from typing import Any

import jsonschema

from hubtags_cli.config import Settings
from hubtags_cli.digest.paginate import fetch_records
from hubtags_cli.digest.select import select_latest
from hubtags_cli.registry.client import HubClient
from hubtags_cli.registry.parser import parse_image_reference
from hubtags_cli.schemas import load_schema

logger = logging.getLogger(__name__)

_RESULT_SCHEMA_FILE = "tags.schema.json"


class ResultValidationError(Exception):
    """Raised when a digest result does not match its schema."""


def validate_result(result: list[dict[str, Any]]) -> None:
    """Validate *result* against ``tags.schema.json``.

    Raises:
        ResultValidationError: If the result does not conform.
    """
    try:
        jsonschema.validate(instance=result, schema=load_schema(_RESULT_SCHEMA_FILE))
    except jsonschema.ValidationError as exc:
        raise ResultValidationError(
            f"Digest result failed schema validation: {exc.message}"
        ) from exc


def run(settings: Settings, client: HubClient | None = None) -> list[dict[str, Any]]:
    """Fetch, filter and group the tags of ``settings.image``.

    Args:
        settings: Run configuration.
        client: Client to use; a default :class:`HubClient` if omitted.

    Returns:
        The result entries as plain dicts, newest group first.
    """
    ref = parse_image_reference(settings.image)
    client = client or HubClient()

    records = fetch_records(client, ref.organization, ref.image, settings.max_pages)
    logger.info("Found %d release tag record(s) for %s", len(records), ref.repository)

    entries = select_latest(records, settings.number_of_tags)
    result = [entry.to_dict() for entry in entries]
    validate_result(result)
    return result
