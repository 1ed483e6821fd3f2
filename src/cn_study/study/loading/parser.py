"""
Module: study.loading.parser

Purpose:
    Cell-level parsing for the reference sheet. Each function takes one
    raw cell plus its row number and returns the normalized value or
    raises a LoadError subclass naming the row.

Key Functions:
    - parse_name(), parse_nerve_type(), parse_function(): required cells
    - normalize_role(): optional swallowing role cell (shared with the models)
"""

from __future__ import annotations

from cn_study.core.models import NerveType, normalize_role

from ..errors import InvalidValueError, MissingFieldError


def _required(value: str, row: int, field: str) -> str:
    cleaned = value.strip()
    if not cleaned:
        raise MissingFieldError(row, field)
    return cleaned


def parse_name(value: str, row: int) -> str:
    return _required(value, row, "name")


def parse_function(value: str, row: int) -> str:
    return _required(value, row, "function")


def parse_nerve_type(value: str, row: int) -> NerveType:
    """
    Parse a type cell into a NerveType.

    Args:
        value: Raw cell text
        row: 1-based data row, for error messages

    Returns:
        NerveType member

    Raises:
        MissingFieldError: If the cell is blank
        InvalidValueError: If the cell is not sensory, motor or both
    """
    nerve_type = NerveType.parse(value)
    if nerve_type is not None:
        return nerve_type
    cleaned = value.strip()
    if not cleaned:
        raise MissingFieldError(row, "type")
    raise InvalidValueError(row, "type", cleaned, expected="sensory, motor, or both")

