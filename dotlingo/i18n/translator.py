"""Translator for looking up and interpolating localized strings.

Holds the registered locales, tracks the active one, and turns dotted keys
into finished strings.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional, Sequence

from dotlingo.core.logging import get_module_logger
from dotlingo.i18n.exceptions import (
    LocaleNotFoundError,
    NoActiveLocaleError,
    TranslationNotFoundError,
)
from dotlingo.i18n.interpolation import compile_delimiters, interpolate
from dotlingo.i18n.models import definition_field
from dotlingo.i18n.paths import resolve_path

logger = get_module_logger()


class Translator:
    """Service for translating keys with variable interpolation.

    Locales can be provided when constructing or added later with add().
    translate() resolves keys against the active locale's words.

    Attributes:
        locales: Mapping of locale name to locale definition. Definitions are
            stored as given, never copied.
        locale: Name of the active locale, or None.
        delimiters: The (start, end) placeholder delimiters.
        patterns: Matchers compiled from the delimiters.

    Example:
        translator = Translator(
            default_locale="en-GB",
            delimiters=("{{", "}}"),
            locales={
                "en-GB": LocaleDefinition(words={"test": "Test {{name}}!"}),
            },
        )
        translator.translate("test", {"name": "Bob"})  # "Test Bob!"
    """

    DEFAULT_DELIMITERS = ("{{", "}}")

    def __init__(
        self,
        locales: Optional[Dict[str, Any]] = None,
        default_locale: Optional[str] = None,
        delimiters: Optional[Sequence[str]] = None,
    ):
        """Initialize Translator.

        The default locale is not checked against the registered locales;
        an unknown name only fails once translate() is called.

        Args:
            locales: Initial mapping of locale name to definition.
            default_locale: Name of the locale to make active.
            delimiters: Start and end placeholder delimiters
                (default: ("{{", "}}")).
        """
        self.locales: Dict[str, Any] = locales if locales is not None else {}
        self.locale: Optional[str] = default_locale
        self.delimiters = tuple(delimiters or self.DEFAULT_DELIMITERS)
        self.patterns = compile_delimiters(self.delimiters)
        logger.info(
            "initialized_translator",
            locale_count=len(self.locales),
            default_locale=default_locale,
            delimiters=list(self.delimiters),
        )

    @property
    def current_locale(self) -> Optional[Any]:
        """Definition of the active locale, or None."""
        if self.locale is None:
            return None
        return self.locales.get(self.locale)

    @property
    def words(self) -> Optional[Dict[str, Any]]:
        """Words of the active locale, or None."""
        return definition_field(self.current_locale, "words")

    @property
    def converters(self) -> Optional[Dict[str, Any]]:
        """Converters of the active locale, or None."""
        return definition_field(self.current_locale, "converters")

    def add(self, name: Any, locale_definition: Any = None) -> None:
        """Add one or more locales.

        Args:
            name: Locale name, or a mapping of locale names to definitions.
            locale_definition: Definition for a single named locale.

        Raises:
            TypeError: If name is neither a string nor a mapping.

        Example:
            translator.add("nl-NL", LocaleDefinition(words={}))
            # or
            translator.add({"nl-NL": LocaleDefinition(words={})})
        """
        if isinstance(name, str):
            self.add_locale(name, locale_definition)
        elif isinstance(name, Mapping):
            self.add_locales(name)
        else:
            raise TypeError(
                f"Expected a locale name or a mapping of locales, got {type(name).__name__}"
            )

    def add_locale(self, name: str, locale_definition: Any) -> None:
        """Register a locale, replacing any existing one with the same name.

        The active locale is left as is, even when it is the one replaced.

        Args:
            name: Locale name (e.g., "nl-NL").
            locale_definition: LocaleDefinition or mapping with words and
                converters.
        """
        self.locales[name] = locale_definition
        logger.info("locale_added", locale=name)

    def add_locales(self, locales: Mapping[str, Any]) -> None:
        """Register every locale in a mapping, in iteration order."""
        for name, locale_definition in locales.items():
            self.add(name, locale_definition)

    def set_locale(self, locale: str) -> None:
        """Set the active locale.

        Args:
            locale: Name of a registered locale.

        Raises:
            LocaleNotFoundError: If the locale is not registered.
        """
        if locale not in self.locales:
            logger.error(
                "locale_not_found",
                locale=locale,
                available_locales=self.available_locales(),
            )
            raise LocaleNotFoundError(locale)

        self.locale = locale
        logger.info("locale_set", locale=locale)

    def translate(self, key: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a key with data, the key may be a path like "basic.yes".

        Placeholders are filled from data by dotted path. A placeholder with
        no value in data is replaced by an empty string.

        Args:
            key: Dotted path of the word in the active locale.
            data: Values for the template placeholders.

        Returns:
            The translated string.

        Raises:
            NoActiveLocaleError: If no registered locale is active.
            TranslationNotFoundError: If key does not resolve in the active
                locale.
            TypeError: If key resolves to a nested group instead of a string.

        Example:
            # where the translation for "basic.greet" is "hello {{model.name}}!"
            translator.translate("basic.greet", {"model": {"name": "BOB"}})
            # "hello BOB!"
        """
        current_locale = self.current_locale
        if current_locale is None:
            logger.error("no_active_locale", key=key, locale=self.locale)
            raise NoActiveLocaleError(key)

        translation = resolve_path(definition_field(current_locale, "words"), key)

        if not translation:
            logger.error("translation_not_found", key=key, locale=self.locale)
            raise TranslationNotFoundError(key, self.locale)

        return interpolate(translation, data or {}, self.patterns)

    def has_translation(self, key: str) -> bool:
        """Check if key resolves to a word in the active locale.

        Args:
            key: Dotted path of the word.

        Returns:
            True if a word exists, False otherwise or without an active locale.
        """
        return bool(resolve_path(self.words, key))

    def available_locales(self) -> list[str]:
        """Get the registered locale names in registration order."""
        return list(self.locales.keys())
