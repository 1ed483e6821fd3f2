"""
Module: study.loading.loader

Purpose:
    Load the cranial nerve reference sheet (CSV) into StudyEntry objects
    with full validation. The first bad row aborts the load.

Key Functions:
    - load_entries_from_reader(): Load from an open text stream
    - load_entries_from_bytes(): Load from raw bytes (embedded resource)
    - load_entries_from_path(): Load from a CSV file on disk

Dependencies:
    - csv (std)
    - study.loading.headers: Header normalization
    - study.loading.parser: Cell parsing

Used By:
    - study.controller: load_entries()
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from cn_study.core.models import StudyEntry

from ..errors import LoadError, MalformedRowError, MissingColumnError
from .headers import (
    FUNCTION_COLUMN,
    NAME_COLUMN,
    REQUIRED_COLUMNS,
    ROLE_COLUMN,
    TYPE_COLUMN,
    build_header_map,
)
from .parser import normalize_role, parse_function, parse_name, parse_nerve_type


logger = logging.getLogger(__name__)


def _cell(record: Sequence[str], index: Optional[int]) -> str:
    """Cell at index, or "" for short rows and absent optional columns."""
    if index is None or index >= len(record):
        return ""
    return record[index]


def load_entries_from_reader(stream: Iterable[str], *, delimiter: str = ",") -> List[StudyEntry]:
    """
    Load entries from an open text stream.

    Process:
    1. Read and normalize the first non-blank row as the header
    2. Resolve required columns (name, type, function) and the optional
       swallowing role column
    3. Parse each data row in file order; blank lines are skipped

    Args:
        stream: Text stream or iterable of lines
        delimiter: Field delimiter

    Returns:
        List of StudyEntry objects in file order, order = 1-based row number

    Raises:
        MissingColumnError: If a required column is absent (before any row is read)
        MissingFieldError: If a required cell is blank
        InvalidValueError: If a type cell is not sensory/motor/both
        MalformedRowError: If the CSV reader fails on a record

    Example:
        >>> text = "name,type,fuction\\nOlfactory,sensory,Smell\\n"
        >>> [e.name for e in load_entries_from_reader(io.StringIO(text))]
        ['Olfactory']
    """
    reader = csv.reader(stream, delimiter=delimiter)

    headers: List[str] = []
    try:
        for record in reader:
            if record:
                headers = record
                break
    except csv.Error as e:
        raise LoadError(f"Failed to read CSV headers: {e}") from e

    header_map = build_header_map(headers)
    indexes: Dict[str, int] = {}
    for column in REQUIRED_COLUMNS:
        if column not in header_map:
            raise MissingColumnError(column)
        indexes[column] = header_map[column]
    role_index = header_map.get(ROLE_COLUMN)
    if role_index is None:
        logger.debug("No swallowing role column; all roles will be empty")

    entries: List[StudyEntry] = []
    row_index = 0
    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            raise MalformedRowError(row_index + 1, str(e)) from e

        if not record:
            continue
        row_index += 1

        entries.append(StudyEntry(
            name=parse_name(_cell(record, indexes[NAME_COLUMN]), row_index),
            nerve_type=parse_nerve_type(_cell(record, indexes[TYPE_COLUMN]), row_index),
            function=parse_function(_cell(record, indexes[FUNCTION_COLUMN]), row_index),
            role_in_swallowing=normalize_role(_cell(record, role_index)),
            order=row_index,
        ))

    logger.info(f"Loaded {len(entries)} entries")
    return entries


def load_entries_from_bytes(
    data: bytes,
    *,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> List[StudyEntry]:
    """
    Load entries from raw CSV bytes.

    A leading byte-order mark is left in place; the header normalizer
    strips it.

    Raises:
        LoadError: If the bytes cannot be decoded, or any loader error
    """
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        raise LoadError(f"Failed to decode CSV as {encoding}: {e}") from e
    return load_entries_from_reader(io.StringIO(text, newline=""), delimiter=delimiter)


def load_entries_from_path(
    path: Path,
    *,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> List[StudyEntry]:
    """
    Load entries from a CSV file on disk.

    The file is read once, in full, before parsing.

    Raises:
        LoadError: If the file cannot be read, or any loader error
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError(f"Failed to open {path}: {e}") from e

    logger.debug(f"Read {len(data)} bytes from {path}")
    return load_entries_from_bytes(data, encoding=encoding, delimiter=delimiter)
