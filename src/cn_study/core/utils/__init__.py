"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_entry,
    deserialize_entry,
    serialize_entries,
    deserialize_entries,
    serialize_round,
    round_to_json,
    entries_to_json,
    entries_from_json,
)

__all__ = [
    "serialize_entry",
    "deserialize_entry",
    "serialize_entries",
    "deserialize_entries",
    "serialize_round",
    "round_to_json",
    "entries_to_json",
    "entries_from_json",
]
