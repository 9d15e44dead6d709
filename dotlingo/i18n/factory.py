"""Factory functions for creating translators from configuration."""

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from dotlingo.core.config import settings
from dotlingo.core.logging import get_module_logger
from dotlingo.i18n.loader import YAMLLocaleLoader
from dotlingo.i18n.translator import Translator

logger = get_module_logger()


def create_translator(
    locales_dir: Optional[Path] = None,
    default_locale: Optional[str] = None,
    delimiters: Optional[Sequence[str]] = None,
    locales: Optional[Dict[str, Any]] = None,
    use_cache: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None fall back to settings.i18n. Locales read from the
    locales directory are added after the ones passed in, replacing any with
    the same name.

    Args:
        locales_dir: Directory of YAML locale files (default: I18N_LOCALES_DIR).
        default_locale: Locale to make active (default: I18N_DEFAULT_LOCALE).
        delimiters: Placeholder delimiters (default: I18N_DELIMITER_START/END).
        locales: Locales to register before loading from disk.
        use_cache: Whether the YAML loader caches parsed files.

    Returns:
        Translator: Configured translator instance.

    Raises:
        ValueError: If the locales directory does not exist.

    Usage:
        # Settings only
        translator = create_translator()

        # Explicit locales directory and locale
        translator = create_translator(
            locales_dir=Path("locales"), default_locale="en-GB"
        )
    """
    i18n_settings = settings.i18n

    if locales_dir is None and i18n_settings.LOCALES_DIR:
        locales_dir = Path(i18n_settings.LOCALES_DIR)

    translator = Translator(
        locales=dict(locales) if locales else None,
        default_locale=default_locale or i18n_settings.DEFAULT_LOCALE,
        delimiters=delimiters or i18n_settings.delimiters,
    )

    if locales_dir is not None:
        loader = YAMLLocaleLoader(locales_dir=locales_dir, use_cache=use_cache)
        translator.add(loader.load_all())
        logger.info(
            "translator_created_from_directory",
            locales_dir=str(locales_dir),
            locale_count=len(translator.available_locales()),
        )
    else:
        logger.info(
            "translator_created",
            locale_count=len(translator.available_locales()),
        )

    return translator
