"""
Module: study.controller

Purpose:
    Boundary operations called by the host shell. Each takes and returns
    plain data: entries in, a round out.

Key Functions:
    - load_entries(): Load the reference sheet (file or bundled resource)
    - build_level1_round(): Multiple choice round
    - build_level2_round(): Flash card round
    - build_level3_round(): Swallowing role round
    - build_round(): Dispatch on StudyLevel

Dependencies:
    - importlib.resources (std): Bundled CSV
    - study.loading: CSV loading
    - study.rounds: Round builders

Used By:
    - Host shell (GUI / CLI)
"""

from __future__ import annotations

import logging
from importlib import resources
from typing import List, Optional, Sequence, Union

from cn_study.core.models import MultipleChoiceRound, ShuffledRound, StudyEntry, StudyLevel

from .config import StudyConfig
from .errors import EmptyInputError, LoadError
from .loading import load_entries_from_bytes, load_entries_from_path
from .rounds import build_filtered_round, build_multiple_choice_round, build_shuffled_round

logger = logging.getLogger(__name__)

BUNDLED_DATA_PACKAGE = "cn_study.data"
BUNDLED_CSV_NAME = "cn_study_guide.csv"


def _read_bundled_csv() -> bytes:
    try:
        return resources.files(BUNDLED_DATA_PACKAGE).joinpath(BUNDLED_CSV_NAME).read_bytes()
    except OSError as e:
        raise LoadError(f"Failed to read bundled {BUNDLED_CSV_NAME}: {e}") from e


def load_entries(config: Optional[StudyConfig] = None) -> List[StudyEntry]:
    """
    Load the reference sheet.

    Reads ``config.data_path`` when set, otherwise the CSV bundled with
    the package.

    Args:
        config: Study configuration (defaults used if None)

    Returns:
        Entries in sheet order

    Raises:
        LoadError: If the sheet cannot be read or any row is invalid
    """
    config = config or StudyConfig()
    source = BUNDLED_CSV_NAME if config.uses_bundled_data else str(config.data_path)

    try:
        if config.uses_bundled_data:
            entries = load_entries_from_bytes(
                _read_bundled_csv(), encoding=config.encoding, delimiter=config.delimiter
            )
        else:
            entries = load_entries_from_path(
                config.data_path, encoding=config.encoding, delimiter=config.delimiter
            )
    except LoadError as e:
        logger.error(f"Failed to load {source}: {e}")
        raise

    logger.info(f"Loaded {len(entries)} entries from {source}")
    return entries


def build_level1_round(
    entries: Sequence[StudyEntry],
    config: Optional[StudyConfig] = None,
) -> MultipleChoiceRound:
    """
    Build the multiple choice round.

    Raises:
        EmptyInputError: If entries is empty
    """
    if not entries:
        raise EmptyInputError(StudyLevel.LEVEL_1.label)
    config = config or StudyConfig()
    round_ = build_multiple_choice_round(entries, config.make_rng())
    logger.info(f"{StudyLevel.LEVEL_1.label}: {len(round_)} questions")
    return round_


def build_level2_round(
    entries: Sequence[StudyEntry],
    config: Optional[StudyConfig] = None,
) -> ShuffledRound:
    """
    Build the flash card round.

    Raises:
        EmptyInputError: If entries is empty
    """
    if not entries:
        raise EmptyInputError(StudyLevel.LEVEL_2.label)
    config = config or StudyConfig()
    round_ = build_shuffled_round(entries, config.make_rng())
    logger.info(f"{StudyLevel.LEVEL_2.label}: {len(round_)} cards")
    return round_


def build_level3_round(
    entries: Sequence[StudyEntry],
    config: Optional[StudyConfig] = None,
) -> ShuffledRound:
    """
    Build the swallowing role round.

    Raises:
        UnavailableError: If no entry has a swallowing role (including empty input)
    """
    config = config or StudyConfig()
    round_ = build_filtered_round(entries, config.make_rng())
    logger.info(f"{StudyLevel.LEVEL_3.label}: {len(round_)} cards")
    return round_


def build_round(
    level: StudyLevel,
    entries: Sequence[StudyEntry],
    config: Optional[StudyConfig] = None,
) -> Union[MultipleChoiceRound, ShuffledRound]:
    """Build the round for ``level``."""
    builders = {
        StudyLevel.LEVEL_1: build_level1_round,
        StudyLevel.LEVEL_2: build_level2_round,
        StudyLevel.LEVEL_3: build_level3_round,
    }
    return builders[StudyLevel(level)](entries, config)
