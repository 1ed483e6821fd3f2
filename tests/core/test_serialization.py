"""
Unit Tests for serialization and payload validation.
"""

import json

import pytest

from cn_study.core.models import (
    MultipleChoiceQuestion,
    MultipleChoiceRound,
    NerveType,
    ShuffledRound,
    StudyEntry,
)
from cn_study.core.schemas import ValidationError, validate_entry_payload
from cn_study.core.utils import (
    deserialize_entries,
    deserialize_entry,
    entries_from_json,
    entries_to_json,
    round_to_json,
    serialize_round,
)


@pytest.fixture
def entry():
    return StudyEntry("Glossopharyngeal", NerveType.BOTH, "Taste", "Swallow reflex", 9)


class TestEntryPayloads:
    """Tests for incoming entry payloads."""

    def test_deserialize_entry_when_valid_then_returns_entry(self, entry):
        assert deserialize_entry(entry.to_dict()) == entry

    def test_deserialize_entry_when_type_invalid_then_raises_validation_error(self, entry):
        payload = dict(entry.to_dict(), type="mixed")
        with pytest.raises(ValidationError) as exc_info:
            deserialize_entry(payload)
        assert exc_info.value.path == "type"

    def test_deserialize_entry_when_field_missing_then_raises_validation_error(self, entry):
        payload = entry.to_dict()
        del payload["function"]
        with pytest.raises(ValidationError, match="function"):
            deserialize_entry(payload)

    def test_validate_entry_payload_when_order_zero_then_raises(self, entry):
        with pytest.raises(ValidationError):
            validate_entry_payload(dict(entry.to_dict(), order=0))

    def test_validate_entry_payload_when_blank_name_then_raises(self, entry):
        with pytest.raises(ValidationError):
            validate_entry_payload(dict(entry.to_dict(), name="   "))

    def test_deserialize_entries_when_one_bad_then_path_has_index(self, entry):
        good = entry.to_dict()
        bad = dict(good, order="nine")
        with pytest.raises(ValidationError) as exc_info:
            deserialize_entries([good, bad])
        assert exc_info.value.path == "[1].order"

    def test_deserialize_entries_when_not_list_then_raises(self, entry):
        with pytest.raises(ValidationError, match="must be a list"):
            deserialize_entries(entry.to_dict())

    def test_deserialize_entries_when_roles_unnormalized_then_normalized(self, entry):
        payloads = [
            dict(entry.to_dict(), role_in_swallowing="none"),
            dict(entry.to_dict(), role_in_swallowing=" Swallow reflex  ", order=10),
        ]
        first, second = deserialize_entries(payloads)
        assert first.role_in_swallowing == ""
        assert first.has_swallowing_role is False
        assert second.role_in_swallowing == "Swallow reflex"
        assert second.order == 10

    def test_deserialize_entry_when_unvalidated_name_not_string_then_value_error(self, entry):
        with pytest.raises(ValueError, match="name must be a string"):
            deserialize_entry(dict(entry.to_dict(), name=42), validate=False)

    def test_entries_json_when_round_tripped_then_equal(self, entry):
        text = entries_to_json([entry])
        assert entries_from_json(text) == [entry]


class TestRoundSerialization:
    """Tests for outgoing round payloads."""

    def test_serialize_round_when_multiple_choice_then_questions_key(self, entry):
        round_ = MultipleChoiceRound(
            questions=(MultipleChoiceQuestion(entry, ("Vagus", "Glossopharyngeal")),)
        )
        data = serialize_round(round_)
        assert data["questions"][0]["entry"]["type"] == "both"
        assert data["questions"][0]["name_options"] == ["Vagus", "Glossopharyngeal"]

    def test_round_to_json_when_shuffled_then_parses_back(self, entry):
        round_ = ShuffledRound(entries=(entry,))
        parsed = json.loads(round_to_json(round_))
        assert parsed == {"entries": [entry.to_dict()]}

    def test_serialize_round_when_not_a_round_then_raises_type_error(self, entry):
        with pytest.raises(TypeError):
            serialize_round(entry)  # type: ignore[arg-type]
