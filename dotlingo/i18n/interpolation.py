"""Placeholder matching and substitution for translation templates.

Delimiters are compiled once into a DelimiterPatterns set:

- ``start``: matches the start delimiter at the beginning of a span
- ``end``: matches the end delimiter at the end of a span
- ``template``: finds every placeholder span in a template

A span runs from a start delimiter to the next end delimiter. Whitespace inside
a span is ignored, so ``{{ model . name }}`` reads the ``model.name`` value.
"""

import re
from dataclasses import dataclass
from typing import Any, Mapping, Pattern, Sequence

from dotlingo.i18n.paths import resolve_path

WHITESPACE_PATTERN = re.compile(r"\s+")


@dataclass(frozen=True)
class DelimiterPatterns:
    """Compiled matchers for one (start, end) delimiter pair.

    Attributes:
        start: Matches the start delimiter at the beginning of a span.
        end: Matches the end delimiter at the end of a span.
        template: Finds all placeholder spans in a template.
    """

    start: Pattern[str]
    end: Pattern[str]
    template: Pattern[str]

    def variable_path(self, span: str) -> str:
        """Extract the dotted variable path from a matched span.

        Args:
            span: Full placeholder text (e.g., "{{ test . value }}").

        Returns:
            Path with delimiters and all whitespace removed (e.g., "test.value").
        """
        inner = self.start.sub("", span, count=1)
        inner = self.end.sub("", inner, count=1)
        return WHITESPACE_PATTERN.sub("", inner)


def compile_delimiters(delimiters: Sequence[str]) -> DelimiterPatterns:
    """Compile a (start, end) delimiter pair into matchers.

    Both delimiters are escaped first, so any characters can be used.
    Empty delimiters are not rejected.

    Args:
        delimiters: Two strings, the start and end placeholder markers.

    Returns:
        DelimiterPatterns for the pair.
    """
    start_delimiter = re.escape(delimiters[0])
    end_delimiter = re.escape(delimiters[1])

    return DelimiterPatterns(
        start=re.compile(rf"\A{start_delimiter}"),
        end=re.compile(rf"{end_delimiter}\Z"),
        template=re.compile(rf"{start_delimiter}\s*([\s\S]+?)\s*{end_delimiter}"),
    )


def interpolate(
    template: str,
    data: Mapping[str, Any],
    patterns: DelimiterPatterns,
) -> str:
    """Substitute every placeholder span in a template.

    Values are looked up in ``data`` by dotted path and converted with str().
    A placeholder with no value is replaced by an empty string.

    Args:
        template: Translation template.
        data: Substitution values, possibly nested.
        patterns: Compiled delimiter matchers.

    Returns:
        The template with all placeholders replaced.

    Raises:
        TypeError: If template is not a string.
    """

    def _substitute(match: re.Match) -> str:
        value = resolve_path(data, patterns.variable_path(match.group(0)))
        return "" if value is None else str(value)

    return patterns.template.sub(_substitute, template)
