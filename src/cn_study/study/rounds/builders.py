"""
Module: study.rounds.builders

Purpose:
    Build the three quiz round shapes from a list of entries.

Key Functions:
    - build_multiple_choice_round(): Level 1, name options per entry
    - build_shuffled_round(): Level 2, all entries in random order
    - build_filtered_round(): Level 3, entries with a swallowing role

Algorithm (multiple choice):
    1. Shuffle a copy of the entries for presentation order
    2. For each entry, shuffle the pool of all other input names
       (repeats by name are kept in the pool) and take up to 3 names
       not already offered
    3. Shuffle the options so the answer position varies

Dependencies:
    - random (std)
    - core.models: Round value objects

Used By:
    - study.controller
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from cn_study.core.models import (
    MAX_NAME_OPTIONS,
    MultipleChoiceQuestion,
    MultipleChoiceRound,
    ShuffledRound,
    StudyEntry,
)

from ..errors import UnavailableError

logger = logging.getLogger(__name__)


def _shuffled(items: Sequence, rng: random.Random) -> list:
    copy = list(items)
    rng.shuffle(copy)
    return copy


def _name_options(
    entry: StudyEntry,
    all_names: Sequence[str],
    rng: random.Random,
) -> tuple[str, ...]:
    options: List[str] = [entry.name]
    pool = _shuffled([name for name in all_names if name != entry.name], rng)
    for name in pool:
        if len(options) >= MAX_NAME_OPTIONS:
            break
        if name not in options:
            options.append(name)
    rng.shuffle(options)
    return tuple(options)


def build_multiple_choice_round(
    entries: Sequence[StudyEntry],
    rng: Optional[random.Random] = None,
) -> MultipleChoiceRound:
    """
    Build a level 1 round.

    Distractors are drawn from every name in ``entries``, so a retry
    round over a few missed entries only offers those names.

    Args:
        entries: Entries to ask about (caller ensures non-empty)
        rng: Random generator; a fresh unseeded one if None

    Returns:
        MultipleChoiceRound with one question per entry

    Invariants:
        - len(result.questions) == len(entries)
        - every question's options contain its entry's name

    Example:
        >>> round_ = build_multiple_choice_round(entries, random.Random(1))
        >>> len(round_) == len(entries)
        True
    """
    rng = rng or random.Random()
    all_names = [entry.name for entry in entries]

    questions = tuple(
        MultipleChoiceQuestion(entry=entry, name_options=_name_options(entry, all_names, rng))
        for entry in _shuffled(entries, rng)
    )
    logger.debug(f"Built multiple choice round with {len(questions)} questions")
    return MultipleChoiceRound(questions=questions)


def build_shuffled_round(
    entries: Sequence[StudyEntry],
    rng: Optional[random.Random] = None,
) -> ShuffledRound:
    """Build a level 2 round: the same entries in a fresh random order."""
    rng = rng or random.Random()
    round_ = ShuffledRound(entries=tuple(_shuffled(entries, rng)))
    logger.debug(f"Built shuffled round with {len(round_)} entries")
    return round_


def build_filtered_round(
    entries: Sequence[StudyEntry],
    rng: Optional[random.Random] = None,
) -> ShuffledRound:
    """
    Build a level 3 round from entries that have a swallowing role.

    Args:
        entries: Any entries, possibly empty
        rng: Random generator; a fresh unseeded one if None

    Returns:
        ShuffledRound holding only eligible entries

    Raises:
        UnavailableError: If no entry has a swallowing role
    """
    rng = rng or random.Random()
    eligible = [entry for entry in entries if entry.has_swallowing_role]
    if not eligible:
        raise UnavailableError()

    logger.debug(f"Swallowing role filter kept {len(eligible)}/{len(entries)} entries")
    return ShuffledRound(entries=tuple(_shuffled(eligible, rng)))
