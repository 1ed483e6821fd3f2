"""
Unit tests for StudyConfig and the error hierarchy.
"""

from pathlib import Path

import pytest

from cn_study.study import (
    EmptyInputError,
    InvalidValueError,
    LoadError,
    MissingColumnError,
    MissingFieldError,
    RoundError,
    StudyConfig,
    StudyError,
    UnavailableError,
)


class TestStudyConfig:
    """Tests for StudyConfig dataclass."""

    def test_init_when_defaults_then_uses_bundled_data(self):
        config = StudyConfig()
        assert config.uses_bundled_data is True
        assert config.seed is None
        assert config.delimiter == ","

    def test_init_when_string_path_then_converted(self):
        config = StudyConfig(data_path="sheet.csv")  # type: ignore[arg-type]
        assert config.data_path == Path("sheet.csv")
        assert config.uses_bundled_data is False

    def test_init_when_long_delimiter_then_raises_error(self):
        with pytest.raises(ValueError, match="delimiter must be a single character"):
            StudyConfig(delimiter=";;")

    def test_init_when_unknown_encoding_then_raises_error(self):
        with pytest.raises(ValueError, match="Unknown encoding"):
            StudyConfig(encoding="not-a-codec")

    def test_make_rng_when_seeded_then_reproducible(self):
        config = StudyConfig(seed=7)
        assert config.make_rng().random() == config.make_rng().random()

    def test_init_when_frozen_then_immutable(self):
        config = StudyConfig()
        with pytest.raises(AttributeError):
            config.seed = 3  # type: ignore


class TestErrors:
    """Tests for the error hierarchy and messages."""

    def test_load_errors_when_raised_then_share_base(self):
        for err in (
            MissingColumnError("name"),
            MissingFieldError(3, "function"),
            InvalidValueError(4, "type", "mixed"),
        ):
            assert isinstance(err, LoadError)
            assert isinstance(err, StudyError)

    def test_round_errors_when_raised_then_not_load_errors(self):
        for err in (EmptyInputError("Level 2"), UnavailableError()):
            assert isinstance(err, RoundError)
            assert not isinstance(err, LoadError)

    def test_messages_when_formatted_then_identify_location(self):
        assert str(MissingColumnError("type")) == "Missing required column: type"
        assert str(MissingFieldError(3, "name")) == "Row 3: missing name value"
        assert str(InvalidValueError(4, "type", "mixed")) == "Row 4: invalid type 'mixed'"
        assert str(EmptyInputError("Level 1")) == "No entries available for Level 1"
