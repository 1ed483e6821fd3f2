"""
Module: study.errors

Purpose:
    Exception hierarchy for loading the reference sheet and building rounds.

Key Classes:
    - StudyError: Base for everything raised by cn_study.study
    - LoadError (+ MissingColumnError, MissingFieldError,
      InvalidValueError, MalformedRowError): abort the whole load
    - RoundError (+ EmptyInputError, UnavailableError): expected,
      user-facing "not enough data for this level" states

Used By:
    - study.loading.loader
    - study.rounds.builders
    - study.controller
"""

from __future__ import annotations


class StudyError(Exception):
    """Base error for the study pipeline."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Load errors
# ─────────────────────────────────────────────────────────────────────────────

class LoadError(StudyError):
    """Error loading the reference sheet. No partial result is produced."""
    pass


class MissingColumnError(LoadError):
    """A required column is absent from the header row."""

    def __init__(self, column: str):
        super().__init__(f"Missing required column: {column}")
        self.column = column


class MissingFieldError(LoadError):
    """A required cell is empty after trimming."""

    def __init__(self, row: int, field: str):
        super().__init__(f"Row {row}: missing {field} value")
        self.row = row
        self.field = field


class InvalidValueError(LoadError):
    """A cell holds a value outside its allowed set."""

    def __init__(self, row: int, field: str, value: str, expected: str = ""):
        message = f"Row {row}: invalid {field} {value!r}"
        if expected:
            message += f". Expected {expected}"
        super().__init__(message)
        self.row = row
        self.field = field
        self.value = value


class MalformedRowError(LoadError):
    """The CSV reader could not parse a record."""

    def __init__(self, row: int, detail: str):
        super().__init__(f"Row {row}: failed to read record: {detail}")
        self.row = row
        self.detail = detail


# ─────────────────────────────────────────────────────────────────────────────
# Round errors
# ─────────────────────────────────────────────────────────────────────────────

class RoundError(StudyError):
    """A round cannot be built from the given entries."""
    pass


class EmptyInputError(RoundError):
    """A level that needs at least one entry was given none."""

    def __init__(self, level_label: str = ""):
        target = f" for {level_label}" if level_label else ""
        super().__init__(f"No entries available{target}")
        self.level_label = level_label


class UnavailableError(RoundError):
    """No entry has a swallowing role, so the filtered level cannot run."""

    def __init__(self, message: str = "Level 3 Unavailable: no swallowing role entries found"):
        super().__init__(message)
