"""Feature-level fixtures for translator tests."""

import pytest
import yaml

from dotlingo.i18n import YAMLLocaleLoader


@pytest.fixture
def temp_locales_dir(tmp_path):
    """Create temporary directory with sample YAML locale files.

    Returns a directory structure like:
    - en-GB.yml
    - checkout.en-GB.yml
    - nl-NL.yml
    """
    en_gb = {
        "basic": {
            "greet": "hello {{model.name}}!",
            "yes": "yes",
        },
    }
    with open(tmp_path / "en-GB.yml", "w") as f:
        yaml.dump(en_gb, f)

    en_gb_checkout = {
        "basic": {
            "yes": "yes please",
        },
        "checkout": {
            "total": "Total: {{amount}}",
        },
    }
    with open(tmp_path / "checkout.en-GB.yml", "w") as f:
        yaml.dump(en_gb_checkout, f)

    nl_nl = {
        "basic": {
            "greet": "hallo {{model.name}}!",
            "yes": "ja",
        },
    }
    with open(tmp_path / "nl-NL.yml", "w", encoding="utf-8") as f:
        yaml.dump(nl_nl, f)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_locales_dir):
    """Create YAMLLocaleLoader for the temporary locales directory."""
    return YAMLLocaleLoader(temp_locales_dir, use_cache=False)


@pytest.fixture
def sample_locales():
    """Two locales as plain mappings."""
    return {
        "en-GB": {
            "words": {"basic": {"greet": "hello {{model.name}}!"}},
            "converters": {},
        },
        "nl-NL": {
            "words": {"basic": {"greet": "hallo {{model.name}}!"}},
            "converters": {},
        },
    }
