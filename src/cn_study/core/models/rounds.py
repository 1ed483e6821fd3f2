"""
Module: rounds

Purpose:
    Provides the round value objects produced by the round builders:
    MultipleChoiceQuestion/MultipleChoiceRound for level 1 and
    ShuffledRound for the flash card and swallowing role levels.

Key Functions:
    - MultipleChoiceQuestion.correct_index: Position of the answer
    - MultipleChoiceRound.entries: Entries in presentation order
    - *.to_dict() / *.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - .entries.StudyEntry

Used By:
    - study.rounds.builders
    - study.controller
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .entries import StudyEntry


MAX_NAME_OPTIONS = 4


@dataclass(frozen=True)
class MultipleChoiceQuestion:
    """
    A single multiple choice question (immutable).

    Attributes:
        entry: The entry being asked about
        name_options: Candidate names in display order

    Invariants:
        - 1 <= len(name_options) <= MAX_NAME_OPTIONS
        - entry.name appears exactly once
        - no option appears twice
    """

    entry: StudyEntry
    name_options: Tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate options on construction."""
        if not 1 <= len(self.name_options) <= MAX_NAME_OPTIONS:
            raise ValueError(
                f"Question for {self.entry.name!r} must have 1-{MAX_NAME_OPTIONS} "
                f"options, got {len(self.name_options)}"
            )
        if len(set(self.name_options)) != len(self.name_options):
            raise ValueError(f"Duplicate options for {self.entry.name!r}: {self.name_options}")
        if self.entry.name not in self.name_options:
            raise ValueError(f"Options for {self.entry.name!r} do not include the answer")

    @property
    def correct_index(self) -> int:
        """Index of the correct name within name_options."""
        return self.name_options.index(self.entry.name)

    @property
    def distractors(self) -> Tuple[str, ...]:
        """Incorrect options, in display order."""
        return tuple(name for name in self.name_options if name != self.entry.name)

    def to_dict(self) -> dict:
        return {
            "entry": self.entry.to_dict(),
            "name_options": list(self.name_options),
        }

    @classmethod
    def from_dict(cls, data: dict) -> MultipleChoiceQuestion:
        return cls(
            entry=StudyEntry.from_dict(data["entry"]),
            name_options=tuple(data["name_options"]),
        )


@dataclass(frozen=True)
class MultipleChoiceRound:
    """
    Level 1 round: one question per entry, in presentation order.

    Attributes:
        questions: Questions in the order they should be asked
    """

    questions: Tuple[MultipleChoiceQuestion, ...]

    def __len__(self) -> int:
        return len(self.questions)

    @property
    def entries(self) -> Tuple[StudyEntry, ...]:
        """The entries asked about, in presentation order."""
        return tuple(q.entry for q in self.questions)

    def to_dict(self) -> dict:
        return {"questions": [q.to_dict() for q in self.questions]}

    @classmethod
    def from_dict(cls, data: dict) -> MultipleChoiceRound:
        return cls(
            questions=tuple(
                MultipleChoiceQuestion.from_dict(q) for q in data.get("questions", [])
            )
        )


@dataclass(frozen=True)
class ShuffledRound:
    """
    Flash card style round: entries in a random order.

    Used for both the unfiltered (level 2) and the swallowing role
    filtered (level 3) presentations.

    Attributes:
        entries: Entries in presentation order
    """

    entries: Tuple[StudyEntry, ...]

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        return {"entries": [e.to_dict() for e in self.entries]}

    @classmethod
    def from_dict(cls, data: dict) -> ShuffledRound:
        return cls(entries=tuple(StudyEntry.from_dict(e) for e in data.get("entries", [])))
