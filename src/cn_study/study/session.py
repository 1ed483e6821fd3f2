"""
Module: study.session

Purpose:
    Per-level answer tracking for a running round. The shell records each
    answer here, shows the LevelSummary at the end, and can start a retry
    round from the entries that were missed.

Key Classes:
    - LevelProgress: Mutable tally of one level's answers

Key Functions:
    - check_multiple_choice_answer(): Level 1 answer check
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from cn_study.core.models import (
    LevelSummary,
    MultipleChoiceQuestion,
    NerveType,
    StudyEntry,
    StudyLevel,
)

logger = logging.getLogger(__name__)


def check_multiple_choice_answer(
    question: MultipleChoiceQuestion,
    selected_name: Optional[str],
    selected_type: Optional[NerveType],
) -> bool:
    """
    A level 1 answer is correct only if both the name and the type match.

    Example:
        >>> check_multiple_choice_answer(q, q.entry.name, q.entry.nerve_type)
        True
    """
    return (
        selected_name == question.entry.name
        and selected_type == question.entry.nerve_type
    )


@dataclass
class LevelProgress:
    """
    Answer tally for one level.

    Attributes:
        level: Level being played
        total: Number of items in the current round
        correct: Correct answers so far
        wrong: Wrong answers so far
    """

    level: StudyLevel
    total: int = 0
    correct: int = 0
    wrong: int = 0
    _failed: List[StudyEntry] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"total must be non-negative: {self.total}")

    @property
    def answered(self) -> int:
        return self.correct + self.wrong

    @property
    def is_complete(self) -> bool:
        return self.answered >= self.total

    @property
    def failed_entries(self) -> Tuple[StudyEntry, ...]:
        """Entries answered wrongly, in answer order."""
        return tuple(self._failed)

    def record(self, entry: StudyEntry, is_correct: bool) -> None:
        """
        Record one answer.

        Raises:
            ValueError: If every item of the round has already been answered
        """
        if self.is_complete:
            raise ValueError(
                f"{self.level.label} already has {self.answered}/{self.total} answers"
            )
        if is_correct:
            self.correct += 1
        else:
            self.wrong += 1
            self._failed.append(entry)

    def summary(self) -> LevelSummary:
        return LevelSummary(correct=self.correct, wrong=self.wrong, total=self.total)

    def retry_entries(self) -> Tuple[StudyEntry, ...]:
        """Entries to feed a retry round (empty when nothing was missed)."""
        return self.failed_entries

    def reset(self, total: int) -> None:
        """Start a new round of ``total`` items."""
        if total < 0:
            raise ValueError(f"total must be non-negative: {total}")
        self.total = total
        self.correct = 0
        self.wrong = 0
        self._failed.clear()
        logger.debug(f"{self.level.label} reset for {total} items")
