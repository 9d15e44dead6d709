"""Tests for dotlingo.i18n.models module."""

from dotlingo.i18n.models import LocaleDefinition, definition_field


class TestLocaleDefinition:
    """Tests for LocaleDefinition model."""

    def test_defaults(self):
        """LocaleDefinition starts with empty words and converters."""
        definition = LocaleDefinition()
        assert definition.words == {}
        assert definition.converters == {}

    def test_defaults_are_not_shared(self):
        """Each definition gets its own dicts."""
        first = LocaleDefinition()
        second = LocaleDefinition()
        first.words["test"] = "value"
        assert second.words == {}


class TestDefinitionField:
    """Tests for definition_field()."""

    def test_reads_dataclass(self):
        words = {"test": "value"}
        assert definition_field(LocaleDefinition(words=words), "words") is words

    def test_reads_mapping(self):
        words = {"test": "value"}
        assert definition_field({"words": words}, "words") is words

    def test_missing_field(self):
        assert definition_field({}, "converters") is None
        assert definition_field(object(), "words") is None

    def test_none_definition(self):
        assert definition_field(None, "words") is None
