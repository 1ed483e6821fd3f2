"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_entry_payload,
    validate_entries_payload,
    ValidationError,
    ENTRY_SCHEMA_NAME,
)

__all__ = [
    "validate_entry_payload",
    "validate_entries_payload",
    "ValidationError",
    "ENTRY_SCHEMA_NAME",
]
