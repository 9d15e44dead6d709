"""dotlingo - dotted-key translation lookup with template interpolation."""

from dotlingo.i18n import (
    LocaleDefinition,
    LocaleNotFoundError,
    NoActiveLocaleError,
    TranslationNotFoundError,
    Translator,
    TranslatorError,
    create_translator,
)

__all__ = [
    "LocaleDefinition",
    "Translator",
    "TranslatorError",
    "LocaleNotFoundError",
    "NoActiveLocaleError",
    "TranslationNotFoundError",
    "create_translator",
]
