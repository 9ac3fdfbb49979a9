"""Form catalog loader: reads form definitions from JSON files.

Bundled definitions live next to this module. A directory named by the
FORMS_DIR setting is read afterwards, so its files replace bundled forms
with the same name.
"""

import json
from pathlib import Path
from typing import Optional

import structlog
from pydantic import ValidationError

from formguard.config import get_settings
from formguard.validators.models import FormDefinition, FormNotFoundError

logger = structlog.get_logger()

FORMS_DIR = Path(__file__).parent

# Cache loaded forms to avoid re-reading from disk
_form_cache: dict[str, FormDefinition] = {}

_NOT_LOADED = object()
# Extra directory the cache was built with (None when there was none)
_loaded_extra_dir = _NOT_LOADED


def _read_dir(directory: Path) -> dict[str, FormDefinition]:
    """Parse every *.json file in ``directory``, skipping broken ones."""
    forms: dict[str, FormDefinition] = {}

    for json_file in sorted(directory.glob("*.json")):
        try:
            data = json.loads(json_file.read_text(encoding="utf-8"))
            data.setdefault("name", json_file.stem)
            form = FormDefinition.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError, AttributeError) as e:
            logger.warning("form_definition_invalid", path=str(json_file), error=str(e))
            continue
        forms[form.name] = form

    return forms


def load_forms(extra_dir: Optional[str] = None) -> dict[str, FormDefinition]:
    """Load and cache all form definitions.

    An empty catalog is cached like any other, so a missing or broken
    forms directory is read once, not on every lookup.

    Args:
        extra_dir: Directory merged over the bundled forms. If the cache
            was built from a different directory it is rebuilt. When None,
            a loaded cache is returned as is; otherwise the FORMS_DIR
            setting is used.
    """
    global _loaded_extra_dir

    if _loaded_extra_dir is not _NOT_LOADED:
        if extra_dir is None or (extra_dir or None) == _loaded_extra_dir:
            return _form_cache

    if extra_dir is None:
        extra_dir = get_settings().FORMS_DIR
    extra_dir = extra_dir or None

    forms = _read_dir(FORMS_DIR)
    if extra_dir:
        extra_path = Path(extra_dir)
        if extra_path.is_dir():
            forms.update(_read_dir(extra_path))
        else:
            logger.warning("forms_dir_missing", path=extra_dir)

    _form_cache.clear()
    _form_cache.update(forms)
    _loaded_extra_dir = extra_dir

    logger.info("forms_loaded", count=len(_form_cache), forms=sorted(_form_cache))
    return _form_cache


def clear_forms() -> None:
    """Forget the loaded catalog; the next lookup reads from disk."""
    global _loaded_extra_dir

    _form_cache.clear()
    _loaded_extra_dir = _NOT_LOADED


def reload_forms(extra_dir: Optional[str] = None) -> dict[str, FormDefinition]:
    """Drop the cache and load again."""
    clear_forms()
    return load_forms(extra_dir)


def get_form(name: str) -> FormDefinition:
    """Look up a form by name.

    Raises:
        FormNotFoundError: If no form has that name
    """
    forms = load_forms()
    try:
        return forms[name]
    except KeyError:
        raise FormNotFoundError(name) from None


def get_all_forms() -> list[FormDefinition]:
    """All loaded forms, sorted by name."""
    forms = load_forms()
    return [forms[name] for name in sorted(forms)]
