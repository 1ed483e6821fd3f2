"""
Module: study

Purpose:
    Study pipeline for the cranial nerve quiz. Loads the reference sheet
    into StudyEntry objects and builds the three round shapes.

Key Functions:
    - load_entries(): Load the sheet (file or bundled resource)
    - build_level1_round(): Multiple choice
    - build_level2_round(): Flash cards
    - build_level3_round(): Swallowing roles

Key Classes:
    - StudyConfig: Configuration
    - LevelProgress: Answer tracking and retry lists
    - StudyError and subclasses: Load and round errors

Dependencies:
    - csv, random, importlib.resources (std)
    - cn_study.core.models: StudyEntry and round models

Used By:
    - Host shell (GUI / CLI)
"""

from .config import StudyConfig
from .controller import (
    load_entries,
    build_level1_round,
    build_level2_round,
    build_level3_round,
    build_round,
)
from .errors import (
    StudyError,
    LoadError,
    MissingColumnError,
    MissingFieldError,
    InvalidValueError,
    MalformedRowError,
    RoundError,
    EmptyInputError,
    UnavailableError,
)
from .session import LevelProgress, check_multiple_choice_answer

__all__ = [
    # Config
    "StudyConfig",
    # Controller
    "load_entries",
    "build_level1_round",
    "build_level2_round",
    "build_level3_round",
    "build_round",
    # Session
    "LevelProgress",
    "check_multiple_choice_answer",
    # Errors
    "StudyError",
    "LoadError",
    "MissingColumnError",
    "MissingFieldError",
    "InvalidValueError",
    "MalformedRowError",
    "RoundError",
    "EmptyInputError",
    "UnavailableError",
]
