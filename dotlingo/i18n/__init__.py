"""i18n system - locale registration, key lookup and template interpolation.

Main components:
- models: LocaleDefinition
- exceptions: TranslatorError and its subclasses
- translator: Translator with dotted key lookup and placeholder substitution
- interpolation: delimiter compilation and placeholder substitution
- loader: LocaleLoader and YAMLLocaleLoader
- factory: create_translator from settings
"""

from dotlingo.i18n.exceptions import (
    LocaleNotFoundError,
    NoActiveLocaleError,
    TranslationNotFoundError,
    TranslatorError,
)
from dotlingo.i18n.factory import create_translator
from dotlingo.i18n.interpolation import DelimiterPatterns, compile_delimiters
from dotlingo.i18n.loader import LocaleLoader, YAMLLocaleLoader
from dotlingo.i18n.models import LocaleDefinition
from dotlingo.i18n.paths import resolve_path
from dotlingo.i18n.translator import Translator

__all__ = [
    "LocaleDefinition",
    "TranslatorError",
    "LocaleNotFoundError",
    "NoActiveLocaleError",
    "TranslationNotFoundError",
    "DelimiterPatterns",
    "compile_delimiters",
    "resolve_path",
    "LocaleLoader",
    "YAMLLocaleLoader",
    "Translator",
    "create_translator",
]
