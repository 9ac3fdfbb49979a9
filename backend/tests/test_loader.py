"""Tests for formguard.validators.forms.loader - the JSON form catalog."""

import json

import pytest

from formguard.validators.forms import loader
from formguard.validators.models import FormNotFoundError, ValidatorKind

pytestmark = pytest.mark.usefixtures("fresh_forms")


def _write_form(directory, filename, data):
    path = directory / filename
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return path


class TestBundledForms:
    """Tests for the forms shipped with the package."""

    def test_bundled_names(self):
        forms = loader.load_forms(extra_dir="")

        assert {"login", "signup", "verify_phone"} <= set(forms)

    def test_verify_phone_uses_code_validator(self):
        loader.load_forms(extra_dir="")

        code = loader.get_form("verify_phone").get_field("code")
        assert code.kind == ValidatorKind.CODE
        assert code.min_length == 4

    def test_get_all_forms_sorted(self):
        loader.load_forms(extra_dir="")

        names = [form.name for form in loader.get_all_forms()]
        assert names == sorted(names)

    def test_unknown_form(self):
        loader.load_forms(extra_dir="")

        with pytest.raises(FormNotFoundError) as exc_info:
            loader.get_form("nope")

        assert exc_info.value.name == "nope"
        assert str(exc_info.value) == "Form 'nope' not found"

    def test_results_are_cached(self):
        first = loader.load_forms(extra_dir="")
        second = loader.load_forms(extra_dir="")

        assert first is second


class TestExtraFormsDir:
    """Tests for merging an extra definitions directory."""

    def test_extra_form_added(self, tmp_path):
        _write_form(tmp_path, "contact.json", {
            "name": "contact",
            "title": "Contact us",
            "fields": [{"name": "email", "label": "Email"}],
        })

        forms = loader.load_forms(extra_dir=str(tmp_path))

        assert "contact" in forms
        assert "login" in forms

    def test_extra_form_replaces_bundled(self, tmp_path):
        _write_form(tmp_path, "login.json", {
            "name": "login",
            "title": "Custom login",
            "fields": [{"name": "user", "label": "User"}],
        })

        forms = loader.load_forms(extra_dir=str(tmp_path))

        assert forms["login"].title == "Custom login"

    def test_name_defaults_to_file_stem(self, tmp_path):
        _write_form(tmp_path, "newsletter.json", {"fields": [{"name": "email", "label": "Email"}]})

        forms = loader.load_forms(extra_dir=str(tmp_path))

        assert "newsletter" in forms

    def test_broken_files_skipped(self, tmp_path):
        _write_form(tmp_path, "broken.json", "{not json")
        _write_form(tmp_path, "list.json", "[1, 2]")
        _write_form(tmp_path, "bad_kind.json", {
            "name": "bad_kind",
            "fields": [{"name": "x", "label": "X", "kind": "email"}],
        })
        (tmp_path / "latin1.json").write_bytes(b'{"name": "caf\xe9", "fields": []}')
        (tmp_path / "folder.json").mkdir()
        _write_form(tmp_path, "ok.json", {"name": "ok", "fields": []})

        forms = loader.load_forms(extra_dir=str(tmp_path))

        assert "ok" in forms
        assert "bad_kind" not in forms
        assert "broken" not in forms
        assert "list" not in forms
        assert "latin1" not in forms
        assert "caf\u00e9" not in forms
        assert "folder" not in forms

    def test_missing_dir_keeps_bundled(self, tmp_path):
        forms = loader.load_forms(extra_dir=str(tmp_path / "absent"))

        assert "login" in forms

    def test_reload_picks_up_new_files(self, tmp_path):
        loader.load_forms(extra_dir=str(tmp_path))
        _write_form(tmp_path, "late.json", {"name": "late", "fields": []})

        assert "late" not in loader.load_forms(extra_dir=str(tmp_path))
        assert "late" in loader.reload_forms(extra_dir=str(tmp_path))


class TestCatalogCache:
    """Tests for when the catalog is read from disk."""

    def test_empty_catalog_is_cached(self, tmp_path, monkeypatch):
        monkeypatch.setattr(loader, "FORMS_DIR", tmp_path)

        assert loader.load_forms(extra_dir="") == {}
        _write_form(tmp_path, "late.json", {"name": "late", "fields": []})

        assert loader.load_forms() == {}
        assert loader.get_all_forms() == []

    def test_different_extra_dir_rebuilds(self, tmp_path):
        _write_form(tmp_path, "contact.json", {"name": "contact", "fields": []})

        assert "contact" not in loader.load_forms(extra_dir="")
        assert "contact" in loader.load_forms(extra_dir=str(tmp_path))
        assert "contact" not in loader.load_forms(extra_dir="")

    def test_default_call_keeps_warm_cache(self, tmp_path):
        _write_form(tmp_path, "contact.json", {"name": "contact", "fields": []})
        loader.load_forms(extra_dir=str(tmp_path))

        assert loader.get_form("contact").name == "contact"
        assert "contact" in loader.load_forms()

    def test_clear_forms_forces_reread(self, tmp_path):
        loader.load_forms(extra_dir=str(tmp_path))
        _write_form(tmp_path, "late.json", {"name": "late", "fields": []})

        loader.clear_forms()

        assert "late" in loader.load_forms(extra_dir=str(tmp_path))
