"""JSON Schemas for registry pages and emitted results."""

from __future__ import annotations

import json
from importlib import resources
from typing import Any


def load_schema(schema_file: str) -> dict[str, Any]:
    """Load a JSON Schema file from the ``hubtags_cli.schemas`` package."""
    schema_ref = resources.files(__name__).joinpath(schema_file)
    schema_text = schema_ref.read_text(encoding="utf-8")
    return json.loads(schema_text)  # type: ignore[no-any-return]
