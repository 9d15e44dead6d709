"""Tests for dotlingo.i18n.interpolation module."""

import pytest

from dotlingo.i18n.interpolation import compile_delimiters, interpolate


class TestCompileDelimiters:
    """Tests for compile_delimiters()."""

    def test_start_and_end_patterns_are_anchored(self):
        """start matches only at the beginning, end only at the end."""
        patterns = compile_delimiters(("{{", "}}"))
        assert patterns.start.search("{{value}}")
        assert not patterns.start.search("x{{value}}")
        assert patterns.end.search("{{value}}")
        assert not patterns.end.search("{{value}}x")

    def test_template_finds_every_span(self):
        """template finds each span from a start to the next end delimiter."""
        patterns = compile_delimiters(("{{", "}}"))
        spans = [m.group(0) for m in patterns.template.finditer("{{a}} b {{ c.d }}")]
        assert spans == ["{{a}}", "{{ c.d }}"]

    def test_special_characters_are_escaped(self):
        """Delimiters containing pattern syntax match literally."""
        patterns = compile_delimiters(("$(", ")*"))
        spans = [m.group(0) for m in patterns.template.finditer("a $(x)* b $(y)*")]
        assert spans == ["$(x)*", "$(y)*"]

    def test_patterns_are_immutable(self):
        """DelimiterPatterns cannot be reassigned."""
        patterns = compile_delimiters(("{{", "}}"))
        with pytest.raises(AttributeError):
            patterns.start = None

    @pytest.mark.parametrize(
        "span, expected",
        [
            ("{{value}}", "value"),
            ("{{ test . value }}", "test.value"),
            ("{{\ttest.\nvalue }}", "test.value"),
        ],
    )
    def test_variable_path(self, span, expected):
        """variable_path() strips delimiters and all whitespace."""
        patterns = compile_delimiters(("{{", "}}"))
        assert patterns.variable_path(span) == expected


class TestInterpolate:
    """Tests for interpolate()."""

    @pytest.fixture
    def patterns(self):
        return compile_delimiters(("{{", "}}"))

    def test_single_variable(self, patterns):
        """A placeholder is replaced by its value."""
        result = interpolate("Test {{name}}!", {"name": "Bob"}, patterns)
        assert result == "Test Bob!"

    def test_converts_to_string(self, patterns):
        """Non-string values are converted with str()."""
        result = interpolate("Count: {{count}}", {"count": 42}, patterns)
        assert result == "Count: 42"

    def test_falsy_values_are_kept(self, patterns):
        """Zero is a value, not a missing one."""
        assert interpolate("{{count}} items", {"count": 0}, patterns) == "0 items"

    def test_none_becomes_empty_string(self, patterns):
        """A None value is treated as missing."""
        assert interpolate("[{{value}}]", {"value": None}, patterns) == "[]"

    def test_missing_variable(self, patterns):
        """Missing values are replaced by an empty string."""
        result = interpolate("test {{value}} translation", {}, patterns)
        assert result == "test  translation"

    def test_extra_variables_ignored(self, patterns):
        """Values without a placeholder are ignored."""
        result = interpolate("Incident {{id}}", {"id": "1", "extra": "x"}, patterns)
        assert result == "Incident 1"

    def test_no_placeholders(self, patterns):
        """A template without placeholders is returned unchanged."""
        assert interpolate("Simple message", {}, patterns) == "Simple message"

    def test_whitespace_insensitive(self, patterns):
        """Whitespace inside a placeholder is ignored."""
        result = interpolate("{{ test . value }}", {"test": {"value": "1"}}, patterns)
        assert result == "1"

    def test_substituted_values_are_not_rescanned(self, patterns):
        """A value containing placeholder text is inserted literally."""
        result = interpolate("{{a}} {{b}}", {"a": "{{b}}", "b": "B"}, patterns)
        assert result == "{{b}} B"

    def test_non_string_template_raises(self, patterns):
        """Only strings can be interpolated."""
        with pytest.raises(TypeError):
            interpolate({"child": "value"}, {}, patterns)
