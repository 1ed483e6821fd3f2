"""
Module: entries

Purpose:
    Provides the StudyEntry dataclass - one normalized row of the cranial
    nerve reference sheet - and the NerveType enum used for its type column.

Key Functions:
    - NerveType.parse(value): Strict parse of a type cell
    - normalize_role(value): Blank and "none" roles become ""
    - StudyEntry.has_swallowing_role: Eligibility for the swallowing level
    - StudyEntry.to_dict() / StudyEntry.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - study.loading.loader
    - study.rounds.builders
    - core.models.rounds
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

NO_ROLE_MARKER = "none"


class NerveType(str, Enum):
    """Functional classification of a cranial nerve."""
    SENSORY = "sensory"
    MOTOR = "motor"
    BOTH = "both"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display label, e.g. "Sensory"."""
        return self.value.title()

    @classmethod
    def parse(cls, value: str) -> Optional[NerveType]:
        """
        Parse a raw type cell.

        Matching is case-insensitive after trimming. Returns None for
        anything outside sensory/motor/both, including the empty string.

        Example:
            >>> NerveType.parse(" Motor ")
            <NerveType.MOTOR: 'motor'>
            >>> NerveType.parse("mixed") is None
            True
        """
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None


def normalize_role(value: str) -> str:
    """
    Normalize a swallowing role value.

    Blank values and the literal "none" (any case) mean the nerve has no
    swallowing role and become "". Other values are trimmed.
    """
    cleaned = value.strip()
    if cleaned.lower() == NO_ROLE_MARKER:
        return ""
    return cleaned


@dataclass(frozen=True)
class StudyEntry:
    """
    One normalized reference record (immutable).

    Attributes:
        name: Nerve name, e.g. "Vagus (X)"
        nerve_type: Sensory, motor or both
        function: Primary fact shown on the card
        role_in_swallowing: Secondary fact; "" when the sheet has none
        order: 1-based data row position in the source file

    Invariants:
        - name and function are non-empty
        - order >= 1
        - an entry has a swallowing role only when normalize_role() of
          role_in_swallowing is non-empty

    Example:
        >>> entry = StudyEntry("Vagus", NerveType.BOTH, "Parasympathetic", "Pharyngeal phase", 10)
        >>> entry.has_swallowing_role
        True
    """

    name: str
    nerve_type: NerveType
    function: str
    role_in_swallowing: str = ""
    order: int = 1

    def __post_init__(self) -> None:
        """Validate entry on construction."""
        if not isinstance(self.name, str):
            raise ValueError(f"StudyEntry name must be a string: {self.name!r}")
        if not self.name.strip():
            raise ValueError("StudyEntry name cannot be empty")
        if not isinstance(self.function, str):
            raise ValueError(f"StudyEntry {self.name!r} function must be a string")
        if not self.function.strip():
            raise ValueError(f"StudyEntry {self.name!r} has an empty function")
        if not isinstance(self.nerve_type, NerveType):
            raise ValueError(f"Invalid nerve type: {self.nerve_type!r}")
        if self.order < 1:
            raise ValueError(f"StudyEntry order must be positive: {self.order}")

    @property
    def has_swallowing_role(self) -> bool:
        """True when the entry is eligible for the swallowing roles level."""
        return bool(normalize_role(self.role_in_swallowing))

    def to_dict(self) -> dict:
        """
        Serialize to the dictionary shape the host shell consumes.

        Returns:
            Dict with keys name, type, function, role_in_swallowing, order
        """
        return {
            "name": self.name,
            "type": self.nerve_type.value,
            "function": self.function,
            "role_in_swallowing": self.role_in_swallowing,
            "order": self.order,
        }

    @classmethod
    def from_dict(cls, data: dict) -> StudyEntry:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation (see to_dict)

        Returns:
            StudyEntry instance

        Raises:
            ValueError: If the type is unknown or a field is invalid
        """
        nerve_type = NerveType.parse(str(data["type"]))
        if nerve_type is None:
            raise ValueError(f"Invalid nerve type: {data['type']!r}")
        return cls(
            name=data["name"],
            nerve_type=nerve_type,
            function=data["function"],
            role_in_swallowing=normalize_role(str(data.get("role_in_swallowing", ""))),
            order=int(data.get("order", 1)),
        )
