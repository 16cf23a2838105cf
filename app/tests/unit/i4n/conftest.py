"""Feature-level fixtures for i4n tests.

Provides translation data, translators and translation files on disk.
"""

import json

import pytest
import yaml

from i4n import TranslationFileLoader
from tests.factories.i4n import make_translations, make_translator


@pytest.fixture
def translations():
    """Two language store with nested keys and callable leaves."""
    return make_translations()


@pytest.fixture
def translator(translations):
    """Translator with active language "en" and no language fallback."""
    return make_translator(translations, language="en")


@pytest.fixture
def translator_with_fallback(translations):
    """Translator with active language "es" falling back to "en"."""
    return make_translator(translations, language="es", fallback_language="en")


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - common.en.yml
    - incident.en.yml
    - common.fr.yml
    - es.json
    """
    common_en = {
        "common": {
            "hello": "Hello",
            "nested": {"key": "english key"},
        }
    }
    with open(tmp_path / "common.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(common_en, f)

    incident_en = {
        "incident": {"created": "Incident created"},
        "common": {"nested": {"other": "other key"}},
    }
    with open(tmp_path / "incident.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(incident_en, f)

    common_fr = {"common": {"hello": "Bonjour"}}
    with open(tmp_path / "common.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(common_fr, f, allow_unicode=True)

    with open(tmp_path / "es.json", "w", encoding="utf-8") as f:
        json.dump({"common": {"hello": "Hola"}}, f)

    return tmp_path


@pytest.fixture
def file_loader(temp_translations_dir):
    """TranslationFileLoader for the temporary directory, without cache."""
    return TranslationFileLoader(temp_translations_dir, use_cache=False)
