import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import cn_study
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from cn_study.core.models import NerveType, StudyEntry


def make_entry(
    name: str,
    nerve_type: NerveType = NerveType.SENSORY,
    function: str = "Function",
    role: str = "",
    order: int = 1,
) -> StudyEntry:
    """Build a StudyEntry with sensible defaults."""
    return StudyEntry(
        name=name,
        nerve_type=nerve_type,
        function=function,
        role_in_swallowing=role,
        order=order,
    )


# Common test fixtures
@pytest.fixture
def sample_entries():
    """Five entries, none with a swallowing role."""
    return [
        make_entry("I", NerveType.SENSORY, "Smell", "", 1),
        make_entry("II", NerveType.SENSORY, "Vision", "", 2),
        make_entry("III", NerveType.MOTOR, "Eye movement", "", 3),
        make_entry("IV", NerveType.MOTOR, "Eye movement", "", 4),
        make_entry("V", NerveType.BOTH, "Face", "", 5),
    ]


@pytest.fixture
def mixed_entries():
    """Two entries, only the second has a swallowing role."""
    return [
        make_entry("I", NerveType.SENSORY, "Smell", "", 1),
        make_entry("IX", NerveType.BOTH, "Taste", "Pharyngeal phase", 2),
    ]


@pytest.fixture
def example_csv() -> str:
    """Reference sheet with the misspelled function header and a 'none' role."""
    return (
        "name,type,fuction,role in swallowing\n"
        "Olfactory,sensory,Smell,none\n"
        "Vagus,both,Parasympathetic,Pharyngeal phase\n"
    )


@pytest.fixture
def entry_factory():
    """Return the make_entry helper for tests that need custom entries."""
    return make_entry
