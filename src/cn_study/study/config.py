"""
Module: study.config

Purpose:
    Configuration dataclass for loading the reference sheet and building
    rounds. Immutable configuration with validation on construction.

Key Classes:
    - StudyConfig: Main configuration passed to the controller

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - random (std)

Used By:
    - study.controller: Boundary operations
"""

from __future__ import annotations

import codecs
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class StudyConfig:
    """
    Configuration for a study session (immutable).

    Attributes:
        data_path: CSV file on disk; None uses the sheet bundled with the package
        seed: Random seed for round building; None for a fresh random order
        encoding: Text encoding of the CSV bytes
        delimiter: Single-character field delimiter

    Example:
        >>> config = StudyConfig(seed=7)
        >>> config.make_rng().random() == StudyConfig(seed=7).make_rng().random()
        True
    """

    data_path: Optional[Path] = None
    seed: Optional[int] = None
    encoding: str = "utf-8"
    delimiter: str = ","

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.data_path is not None and not isinstance(self.data_path, Path):
            # Accept plain strings from callers
            object.__setattr__(self, "data_path", Path(self.data_path))
        if len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character: {self.delimiter!r}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from e

    @property
    def uses_bundled_data(self) -> bool:
        return self.data_path is None

    def make_rng(self) -> random.Random:
        """Create the generator used by the round builders."""
        return random.Random(self.seed)
