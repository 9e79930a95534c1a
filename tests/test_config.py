"""Tests for settings."""

import pytest
from pydantic import ValidationError

from sevenday.config import Settings


class TestSettings:
    """Tests for Settings."""

    def test_log_level_upper_cased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_empty_log_level_defaults_to_warning(self):
        assert Settings(log_level="").log_level == "WARNING"

    @pytest.mark.parametrize("level", ["FOO", "loud"])
    def test_unknown_log_level_rejected(self, level):
        with pytest.raises(ValidationError):
            Settings(log_level=level)
