"""
Unit tests for cell parsing.
"""

import pytest

from cn_study.core.models import NerveType
from cn_study.study.errors import InvalidValueError, MissingFieldError
from cn_study.study.loading import normalize_role, parse_nerve_type
from cn_study.study.loading.parser import parse_function, parse_name


class TestParseNerveType:
    """Tests for parse_nerve_type()."""

    def test_parse_when_valid_values_then_returns_members(self):
        assert parse_nerve_type("Sensory", 1) is NerveType.SENSORY
        assert parse_nerve_type("motor", 2) is NerveType.MOTOR
        assert parse_nerve_type("Both", 3) is NerveType.BOTH

    def test_parse_when_invalid_value_then_raises_invalid_value(self):
        with pytest.raises(InvalidValueError) as exc_info:
            parse_nerve_type(" mixed ", 4)
        err = exc_info.value
        assert (err.row, err.field, err.value) == (4, "type", "mixed")
        assert "Row 4" in str(err)
        assert "sensory, motor, or both" in str(err)

    def test_parse_when_blank_then_raises_missing_field(self):
        with pytest.raises(MissingFieldError) as exc_info:
            parse_nerve_type("  ", 5)
        assert (exc_info.value.row, exc_info.value.field) == (5, "type")


class TestRequiredCells:
    """Tests for parse_name() and parse_function()."""

    def test_parse_name_when_padded_then_trimmed(self):
        assert parse_name("  Vagus ", 1) == "Vagus"

    def test_parse_name_when_blank_then_raises(self):
        with pytest.raises(MissingFieldError, match="Row 2: missing name value"):
            parse_name("", 2)

    def test_parse_function_when_blank_then_raises(self):
        with pytest.raises(MissingFieldError, match="Row 3: missing function value"):
            parse_function("   ", 3)


class TestNormalizeRole:
    """Tests for normalize_role()."""

    @pytest.mark.parametrize("raw", ["", "   ", "none", "None", " NONE "])
    def test_normalize_when_empty_or_none_then_empty(self, raw):
        assert normalize_role(raw) == ""

    def test_normalize_when_value_then_trimmed(self):
        assert normalize_role("  Pharyngeal phase ") == "Pharyngeal phase"

    def test_normalize_when_none_is_part_of_text_then_kept(self):
        assert normalize_role("None known") == "None known"

    @pytest.mark.parametrize("raw", ["  Oral phase ", "none", ""])
    def test_normalize_when_applied_twice_then_unchanged(self, raw):
        once = normalize_role(raw)
        assert normalize_role(once) == once
