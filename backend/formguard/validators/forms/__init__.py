"""Form catalog: JSON-based form definitions."""

from formguard.validators.forms.loader import (
    clear_forms,
    get_all_forms,
    get_form,
    load_forms,
    reload_forms,
)

__all__ = ["clear_forms", "get_all_forms", "get_form", "load_forms", "reload_forms"]
