"""Locale models for the translator.

Defines the locale definition structure and how its fields are read.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional


@dataclass
class LocaleDefinition:
    """Words and converters for a single locale.

    Attributes:
        words: Nested dict of translation keys to template strings,
            e.g. {"basic": {"greet": "hello {{model.name}}!"}}.
        converters: Named converter callables (e.g. "currency"). Carried with
            the locale and exposed by the translator, never called by it.
    """

    words: Dict[str, Any] = field(default_factory=dict)
    converters: Dict[str, Callable[..., Any]] = field(default_factory=dict)


def definition_field(definition: Any, name: str) -> Optional[Any]:
    """Read a field from a locale definition.

    Locale definitions are supplied by callers and not validated, so both
    LocaleDefinition instances and plain mappings with "words"/"converters"
    keys are accepted.

    Args:
        definition: LocaleDefinition, mapping, or None.
        name: Field name ("words" or "converters").

    Returns:
        The field value, or None if the definition does not carry it.
    """
    if definition is None:
        return None
    if isinstance(definition, Mapping):
        return definition.get(name)
    return getattr(definition, name, None)
