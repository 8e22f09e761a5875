"""
test_locale_manager.py
----------------------
Unit tests for localized strings and their fallbacks.
"""

import pytest

from tickgrid.core.services.locale_manager import LocaleManager


@pytest.fixture
def locale(tmp_path):
    return LocaleManager(str(tmp_path))


def test_missing_file_uses_builtin_labels(locale):
    locale.load("xx")
    assert locale.get("version_label") == "Versión actual:"
    assert locale.get("start_label") == "--- Start ---"
    assert locale.get("end_label") == "--- Fin Ejecución ---"


def test_unknown_key_returns_itself(locale):
    locale.load("xx")
    assert locale.get("unknown_key") == "unknown_key"


def test_file_overrides_and_extends(locale, write_file):
    write_file("strings_en.txt", (
        "# English\n"
        "start_label = --- Begin ---\n"
        "greeting = Hello # trailing\n"
    ))
    locale.load("en")
    assert locale.get("start_label") == "--- Begin ---"
    assert locale.get("greeting") == "Hello"
    assert locale.get("end_label") == "--- Fin Ejecución ---"


def test_empty_file_uses_builtin_labels(locale, write_file):
    write_file("strings_es.txt", "")
    locale.load("es")
    assert locale.get("version_label") == "Versión actual:"


def test_load_clears_previous_language(locale, write_file):
    write_file("strings_en.txt", "greeting=Hello\n")
    write_file("strings_fr.txt", "adieu=Au revoir\n")
    locale.load("en")
    locale.load("fr")
    assert locale.get("greeting") == "greeting"
    assert locale.get("adieu") == "Au revoir"
    assert locale.lang == "fr"


def test_labels_resolve_before_any_load(locale):
    assert "start_label" in locale
    assert locale.get("start_label") == "--- Start ---"
