"""
Schema Validation Utilities

Validates entry payloads sent back by the host shell (for example the
list of missed entries used to start a retry round) before they are
turned into StudyEntry objects.

Schemas live next to this module as ``<name>.schema.json`` and are
loaded once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


ENTRY_SCHEMA_NAME = "study_entry"

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_entry_payload(data: Any, *, index: int | None = None) -> None:
    """
    Validate a single entry payload.

    Args:
        data: Dict received from the shell
        index: Position in the enclosing list, used to prefix the path

    Raises:
        ValidationError: If data does not match study_entry.schema.json
    """
    schema = _load_schema(ENTRY_SCHEMA_NAME)
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return

    prefix = f"[{index}]" if index is not None else ""
    first = errors[0]
    path = prefix + "".join(f".{p}" for p in first.absolute_path)
    raise ValidationError(
        f"Entry payload{(' ' + prefix) if prefix else ''} failed validation: {first.message}",
        path=path.lstrip("."),
        errors=[e.message for e in errors],
    )


def validate_entries_payload(data: Any) -> None:
    """
    Validate a list of entry payloads.

    Raises:
        ValidationError: If data is not a list or any element is invalid
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Entries payload must be a list, got {type(data).__name__}",
            path="",
        )
    for index, item in enumerate(data):
        validate_entry_payload(item, index=index)
