"""
Serialization Utilities

Provides to/from JSON utilities for the models that cross the host
shell boundary.

- Outgoing: entries and rounds become plain dicts / JSON text using the
  shell's key names (type, role_in_swallowing, name_options, ...).
- Incoming: entry payloads are schema-validated before deserialization
  so a bad retry list fails with a path instead of a KeyError.
"""

from __future__ import annotations

import json
from typing import Any, List, Union

from ..models.entries import StudyEntry
from ..models.rounds import MultipleChoiceRound, ShuffledRound
from ..schemas.validator import validate_entry_payload, validate_entries_payload


Round = Union[MultipleChoiceRound, ShuffledRound]


# ─────────────────────────────────────────────────────────────────────────────
# Entry Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_entry(entry: StudyEntry) -> dict[str, Any]:
    """Serialize a StudyEntry to a dictionary."""
    return entry.to_dict()


def deserialize_entry(data: dict[str, Any], *, validate: bool = True) -> StudyEntry:
    """
    Deserialize a StudyEntry from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the entry schema first

    Returns:
        StudyEntry instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_entry_payload(data)
    return StudyEntry.from_dict(data)


def serialize_entries(entries: List[StudyEntry]) -> list[dict[str, Any]]:
    return [entry.to_dict() for entry in entries]


def deserialize_entries(data: Any, *, validate: bool = True) -> list[StudyEntry]:
    """
    Deserialize a list of entries, e.g. the missed items of a level.

    Raises:
        ValidationError: If validate=True and the list or any element is invalid
    """
    if validate:
        validate_entries_payload(data)
    return [StudyEntry.from_dict(item) for item in data]


# ─────────────────────────────────────────────────────────────────────────────
# Round Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_round(round_: Round) -> dict[str, Any]:
    """
    Serialize either round shape to a dictionary.

    MultipleChoiceRound → {"questions": [...]}, ShuffledRound → {"entries": [...]}.
    """
    if not isinstance(round_, (MultipleChoiceRound, ShuffledRound)):
        raise TypeError(f"Cannot serialize {type(round_).__name__} as a round")
    return round_.to_dict()


def round_to_json(round_: Round, *, indent: int | None = None) -> str:
    """Serialize a round to JSON text."""
    return json.dumps(serialize_round(round_), indent=indent, ensure_ascii=False)


def entries_to_json(entries: List[StudyEntry], *, indent: int | None = None) -> str:
    """Serialize entries to JSON text."""
    return json.dumps(serialize_entries(entries), indent=indent, ensure_ascii=False)


def entries_from_json(text: str, *, validate: bool = True) -> list[StudyEntry]:
    """Parse JSON text produced by entries_to_json (or sent by the shell)."""
    return deserialize_entries(json.loads(text), validate=validate)
