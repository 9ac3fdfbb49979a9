"""Subject protocol: the field a Validator reads from and reports back to."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Subject(Protocol):
    """Anything exposing a current value, a label, and two style hooks.

    The validator reads ``value`` once per run and then calls exactly one of
    ``set_valid_style`` / ``set_error_style``.
    """

    @property
    def value(self) -> Optional[str]:
        ...

    @property
    def label(self) -> str:
        ...

    def set_valid_style(self) -> None:
        ...

    def set_error_style(self, message: Optional[str]) -> None:
        ...
