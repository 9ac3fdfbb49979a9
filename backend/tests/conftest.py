"""Shared pytest fixtures and test helpers for formguard tests."""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from formguard.config import Settings
from formguard.validators.engine import FormValidationEngine
from formguard.validators.forms import loader


class RecordingSubject:
    """Subject double that counts value reads and records style calls."""

    def __init__(self, value: Optional[str] = None, label: str = "Field"):
        self._value = value
        self._label = label
        self.value_reads = 0
        self.calls: list[tuple[str, Optional[str]]] = []

    @property
    def value(self) -> Optional[str]:
        self.value_reads += 1
        return self._value

    @value.setter
    def value(self, new_value: Optional[str]) -> None:
        self._value = new_value

    @property
    def label(self) -> str:
        return self._label

    def set_valid_style(self) -> None:
        self.calls.append(("valid", None))

    def set_error_style(self, message: Optional[str]) -> None:
        self.calls.append(("error", message))


@pytest.fixture
def make_subject():
    """Factory for RecordingSubject instances."""
    def _make(value: Optional[str] = None, label: str = "Field") -> RecordingSubject:
        return RecordingSubject(value=value, label=label)

    return _make


@pytest.fixture
def settings() -> Settings:
    """Settings with known validator defaults, independent of the environment."""
    return Settings(FORMS_DIR=None, DEFAULT_PASSWORD_MIN_LENGTH=6, DEFAULT_CODE_LENGTH=4)


@pytest.fixture
def engine(settings: Settings) -> FormValidationEngine:
    return FormValidationEngine(settings=settings)


@pytest.fixture
def fresh_forms():
    """Empty the form cache before and after the test."""
    loader.clear_forms()
    try:
        yield
    finally:
        loader.clear_forms()


@pytest.fixture
def client(fresh_forms) -> TestClient:
    """API client with the bundled form catalog."""
    from formguard.main import app

    with TestClient(app) as test_client:
        yield test_client
