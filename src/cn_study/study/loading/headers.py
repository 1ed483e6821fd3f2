"""
Module: study.loading.headers

Purpose:
    Normalize raw CSV header cells so the loader can find its columns
    regardless of case, spacing, a leading byte-order mark, or the known
    spelling variants found in the reference sheet.

Key Functions:
    - normalize_header(): Canonical key for a header cell
    - build_header_map(): Canonical key -> column index
"""

from __future__ import annotations

import logging
from typing import Dict, Sequence

logger = logging.getLogger(__name__)

BOM = "\ufeff"

NAME_COLUMN = "name"
TYPE_COLUMN = "type"
FUNCTION_COLUMN = "function"
ROLE_COLUMN = "roleinswallowing"

REQUIRED_COLUMNS = (NAME_COLUMN, TYPE_COLUMN, FUNCTION_COLUMN)
KNOWN_COLUMNS = frozenset(REQUIRED_COLUMNS + (ROLE_COLUMN,))

# Applied after lower-casing and space removal
HEADER_CORRECTIONS = {
    "fuction": FUNCTION_COLUMN,
    "role_in_swallowing": ROLE_COLUMN,
}


def normalize_header(header: str) -> str:
    """
    Return the canonical key for a raw header cell.

    Example:
        >>> normalize_header("\\ufeffName")
        'name'
        >>> normalize_header(" Fuction ")
        'function'
        >>> normalize_header("Role in Swallowing")
        'roleinswallowing'
    """
    cleaned = header.strip().lstrip(BOM).strip()
    key = cleaned.lower().replace(" ", "")
    return HEADER_CORRECTIONS.get(key, key)


def build_header_map(headers: Sequence[str]) -> Dict[str, int]:
    """
    Map canonical header keys to column indexes.

    Blank headers are ignored. When two columns normalize to the same key
    the later column wins.
    """
    header_map: Dict[str, int] = {}
    for index, header in enumerate(headers):
        key = normalize_header(header)
        if key:
            header_map[key] = index

    unknown = sorted(set(header_map) - KNOWN_COLUMNS)
    if unknown:
        logger.warning(f"Ignoring unknown columns: {unknown}")
    logger.debug(f"Header map: {header_map}")
    return header_map
