"""FieldSubject: a server-side Subject that records the style it was given."""

from typing import Optional

from formguard.validators.models import FieldStyle


class FieldSubject:
    """Holds a submitted value and remembers the last style call."""

    def __init__(self, label: str, value: Optional[str] = None):
        self._label = label
        self.value = value
        self.style = FieldStyle.UNTOUCHED
        self.error_message: Optional[str] = None

    @property
    def label(self) -> str:
        return self._label

    def set_valid_style(self) -> None:
        self.style = FieldStyle.VALID
        self.error_message = None

    def set_error_style(self, message: Optional[str]) -> None:
        self.style = FieldStyle.ERROR
        self.error_message = message

    def __repr__(self) -> str:
        return f"FieldSubject(label={self._label!r}, style={self.style.value})"
