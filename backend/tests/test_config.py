"""Tests for formguard.config."""

import pytest
from pydantic import ValidationError

from formguard.config import Settings


class TestLogLevel:
    """Tests for LOG_LEVEL parsing."""

    @pytest.mark.parametrize("raw", ["info", "INFO", "Info"])
    def test_case_insensitive(self, raw):
        assert Settings(LOG_LEVEL=raw).LOG_LEVEL == "info"

    def test_default(self):
        assert Settings().LOG_LEVEL == "info"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(LOG_LEVEL="verbose")

    def test_unknown_level_from_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            Settings()
