"""Feature-level fixtures for translation engine tests."""

import pytest

from lexicon.i18n import YAMLTranslationLoader
from tests.factories.i18n import make_translator, write_yaml_file


@pytest.fixture
def translator():
    """Translator preloaded with English and French trees."""
    return make_translator()


@pytest.fixture
def lenient_translator():
    """Translator that does not enforce available locales."""
    return make_translator(enforce_available_locales=False)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - incident.en.yml
    - incident.fr.yml
    - role.en.yml
    """
    write_yaml_file(
        tmp_path / "incident.en.yml",
        {
            "en": {
                "incident": {
                    "created": "Incident %{incident_id} created",
                    "opened": ":incident.created",
                    "count": {"one": "1 incident", "other": "%{count} incidents"},
                }
            }
        },
    )
    write_yaml_file(
        tmp_path / "role.en.yml",
        {
            "en": {
                "role": {"created": "Role %{role_name} created"},
                "incident": {"resolved": "Incident resolved"},
            }
        },
    )
    write_yaml_file(
        tmp_path / "incident.fr.yml",
        {"fr": {"incident": {"created": "Incident %{incident_id} créé"}}},
    )
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader([temp_translations_dir], use_cache=False)
