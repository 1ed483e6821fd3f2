"""
Module: summary

Purpose:
    Provides the StudyLevel enum and the LevelSummary score tally shown
    at the end of each level.

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - study.session.LevelProgress
    - study.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StudyLevel(str, Enum):
    """The three quiz levels offered by the shell."""
    LEVEL_1 = "level_1"
    LEVEL_2 = "level_2"
    LEVEL_3 = "level_3"

    def __str__(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        return int(self.value.rsplit("_", 1)[1])

    @property
    def label(self) -> str:
        return f"Level {self.number}"

    @property
    def subtitle(self) -> str:
        return _SUBTITLES[self]


_SUBTITLES = {
    StudyLevel.LEVEL_1: "Multiple Choice",
    StudyLevel.LEVEL_2: "Flash Cards",
    StudyLevel.LEVEL_3: "Swallowing Roles",
}


@dataclass(frozen=True)
class LevelSummary:
    """
    Score tally for a finished (or in-progress) level.

    Attributes:
        correct: Number of correct answers
        wrong: Number of wrong answers
        total: Number of items in the round

    Invariants:
        - all counts >= 0
        - correct + wrong <= total

    Example:
        >>> s = LevelSummary(correct=3, wrong=1, total=4)
        >>> s.accuracy
        0.75
    """

    correct: int
    wrong: int
    total: int

    def __post_init__(self) -> None:
        """Validate counts on construction."""
        if min(self.correct, self.wrong, self.total) < 0:
            raise ValueError(f"Summary counts cannot be negative: {self}")
        if self.correct + self.wrong > self.total:
            raise ValueError(
                f"Answered ({self.correct + self.wrong}) exceeds total ({self.total})"
            )

    @property
    def answered(self) -> int:
        return self.correct + self.wrong

    @property
    def accuracy(self) -> float:
        """Fraction of answered items that were correct (0.0 when none answered)."""
        if self.answered == 0:
            return 0.0
        return self.correct / self.answered

    def to_dict(self) -> dict:
        return {"correct": self.correct, "wrong": self.wrong, "total": self.total}
