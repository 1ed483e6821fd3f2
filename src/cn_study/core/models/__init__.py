"""
Core Models Package

Immutable, validated data models shared by the loader, the round builders
and the host shell. All models are frozen dataclasses with to_dict()
helpers so they can cross the shell boundary as plain data.
"""

from .entries import NO_ROLE_MARKER, NerveType, StudyEntry, normalize_role
from .rounds import (
    MAX_NAME_OPTIONS,
    MultipleChoiceQuestion,
    MultipleChoiceRound,
    ShuffledRound,
)
from .summary import LevelSummary, StudyLevel

__all__ = [
    "NerveType",
    "StudyEntry",
    "NO_ROLE_MARKER",
    "normalize_role",
    "MAX_NAME_OPTIONS",
    "MultipleChoiceQuestion",
    "MultipleChoiceRound",
    "ShuffledRound",
    "LevelSummary",
    "StudyLevel",
]
