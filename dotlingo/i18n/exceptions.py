"""Exceptions raised by the translator.

All translator failures derive from TranslatorError so callers can handle
them together. A placeholder with no matching value in the substitution data
is not an error and has no exception here.
"""

from typing import Optional


class TranslatorError(Exception):
    """Base exception for all translator errors.

    Example:
        try:
            translator.translate("basic.greet")
        except TranslatorError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class LocaleNotFoundError(TranslatorError):
    """Raised when selecting a locale that has not been registered.

    Example:
        >>> translator.set_locale("xx-XX")
        Traceback (most recent call last):
        ...
        LocaleNotFoundError: Can't set locale to 'xx-XX', locale doesn't exist.
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Can't set locale to '{locale}', locale doesn't exist.")


class NoActiveLocaleError(TranslatorError):
    """Raised when translating while no registered locale is active."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Can't translate '{key}', no current locale.")


class TranslationNotFoundError(TranslatorError):
    """Raised when a key does not resolve in the active locale's words."""

    def __init__(self, key: str, locale: Optional[str]):
        self.key = key
        self.locale = locale
        super().__init__(
            f"Can't find translation for '{key}', translation not found "
            f"for the current locale '{locale}'."
        )
