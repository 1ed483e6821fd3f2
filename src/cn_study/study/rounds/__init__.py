"""
Module: study.rounds

Purpose:
    Round building for the three quiz levels.
"""

from .builders import (
    build_multiple_choice_round,
    build_shuffled_round,
    build_filtered_round,
)

__all__ = [
    "build_multiple_choice_round",
    "build_shuffled_round",
    "build_filtered_round",
]
