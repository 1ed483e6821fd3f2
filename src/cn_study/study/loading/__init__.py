"""
Module: study.loading

Purpose:
    Reference sheet loading and parsing. Turns CSV bytes into validated
    StudyEntry objects.

Key Functions:
    - load_entries_from_reader(): Load from a text stream
    - load_entries_from_bytes(): Load from raw bytes
    - load_entries_from_path(): Load from a file
    - normalize_header(): Canonical header keys
    - parse_nerve_type(), normalize_role(): Cell parsing

Used By:
    - study.controller: Boundary operations
"""

from .headers import normalize_header, build_header_map, REQUIRED_COLUMNS
from .loader import (
    load_entries_from_reader,
    load_entries_from_bytes,
    load_entries_from_path,
)
from .parser import parse_nerve_type, normalize_role

__all__ = [
    "normalize_header",
    "build_header_map",
    "REQUIRED_COLUMNS",
    "load_entries_from_reader",
    "load_entries_from_bytes",
    "load_entries_from_path",
    "parse_nerve_type",
    "normalize_role",
]
