"""Hand results and failures to the GitHub Actions runner."""

from __future__ import annotations

import json
import logging
import os
import uuid
from pathlib import Path
from typing import Any

import click

logger = logging.getLogger(__name__)


def in_actions() -> bool:
    """Return True when running inside a GitHub Actions job."""
    return os.environ.get("GITHUB_ACTIONS") == "true"


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: Any, *, pretty: bool = False) -> None:
    """Bind *value* to the step output *name*.

    The value is JSON-encoded. Inside Actions it is appended to the file
    named by ``GITHUB_OUTPUT``; otherwise it is printed to stdout.
    """
    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        click.echo(json.dumps(value, indent=2 if pretty else None))
        return

    serialized = json.dumps(value)
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in serialized:
        raise ValueError(f"Output delimiter {delimiter} found in output '{name}'")

    with Path(output_file).open("a", encoding="utf-8") as f:
        f.write(f"{name}<<{delimiter}\n{serialized}\n{delimiter}\n")
    logger.debug("Wrote output '%s' to %s", name, output_file)


def set_failed(message: str) -> None:
    """Report a failed run as a workflow ``error`` annotation."""
    if in_actions():
        click.echo(f"::error::{_escape_data(message)}")
