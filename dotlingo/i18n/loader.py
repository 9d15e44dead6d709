"""Locale loading interface and implementations.

Defines the contract for reading locale definitions and provides a YAML-based
loader.
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict

import yaml

from dotlingo.core.logging import get_module_logger
from dotlingo.i18n.models import LocaleDefinition

logger = get_module_logger()


class LocaleLoader(ABC):
    """Abstract base for locale loaders.

    Implementations define where locale words come from and how they are
    parsed.
    """

    @abstractmethod
    def load(self, locale: str) -> LocaleDefinition:
        """Load the definition for a specific locale.

        Args:
            locale: Locale name to load (e.g., "en-GB").

        Returns:
            LocaleDefinition with the loaded words.

        Raises:
            FileNotFoundError: If no source exists for the locale.
            ValueError: If the source cannot be parsed.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, LocaleDefinition]:
        """Load every available locale.

        Returns:
            Dict mapping locale name to LocaleDefinition.
        """
        pass


class LocaleYAMLLoader(yaml.SafeLoader):
    """SafeLoader that reads only true/false as booleans.

    YAML 1.1 also treats yes/no/on/off as booleans, which turns words such
    as "basic.yes" into True keys.
    """


LocaleYAMLLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
LocaleYAMLLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def _locale_from_filename(path: Path) -> str:
    # "en-GB.yml" -> "en-GB", "checkout.en-GB.yml" -> "en-GB"
    return path.stem.split(".")[-1]


def _deep_merge(target: Dict[str, Any], source: Dict[Any, Any]) -> None:
    # Keys are stored as strings so dotted paths such as "errors.404" resolve
    for key, value in source.items():
        key = str(key)
        if isinstance(value, dict):
            if not isinstance(target.get(key), dict):
                target[key] = {}
            _deep_merge(target[key], value)
        else:
            target[key] = value


class YAMLLocaleLoader(LocaleLoader):
    """Loader for YAML locale files.

    Expects files named <locale>.yml or <domain>.<locale>.yml in the locales
    directory. Each document is a word tree; all files for one locale are
    merged in filename order, later files overriding earlier ones.

    Attributes:
        locales_dir: Path to the directory containing YAML files.
        cache: Loaded definitions by locale name, when caching is enabled.
    """

    def __init__(self, locales_dir: Path, use_cache: bool = True):
        """Initialize YAML locale loader.

        Args:
            locales_dir: Path to directory with YAML locale files.
            use_cache: Whether to keep loaded definitions in memory.

        Raises:
            ValueError: If locales_dir does not exist.
        """
        self.locales_dir = Path(locales_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, LocaleDefinition] = {}

        if not self.locales_dir.exists():
            raise ValueError(f"Locales directory not found: {self.locales_dir}")

        logger.info(
            "initialized_yaml_loader",
            locales_dir=str(self.locales_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: str) -> list[Path]:
        return sorted(
            path
            for path in self.locales_dir.glob("*.yml")
            if _locale_from_filename(path) == locale
        )

    def load(self, locale: str) -> LocaleDefinition:
        """Load a locale from its YAML files.

        Args:
            locale: Locale name to load.

        Returns:
            LocaleDefinition with the merged words and no converters.

        Raises:
            FileNotFoundError: If no YAML files exist for the locale.
            ValueError: If a YAML file cannot be parsed.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale)
            return self.cache[locale]

        yaml_files = self._files_for(locale)
        if not yaml_files:
            raise FileNotFoundError(
                f"No locale files found for {locale} in {self.locales_dir}"
            )

        words: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.load(f, Loader=LocaleYAMLLoader)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            _deep_merge(words, data)

        definition = LocaleDefinition(words=words)
        logger.info(
            "loaded_locale_translations",
            locale=locale,
            file_count=len(yaml_files),
            key_count=len(words),
        )

        if self.use_cache:
            self.cache[locale] = definition

        return definition

    def load_all(self) -> Dict[str, LocaleDefinition]:
        """Load every locale that has at least one YAML file.

        Returns:
            Dict mapping locale name to LocaleDefinition, sorted by name.
        """
        locales_found = sorted(
            {_locale_from_filename(path) for path in self.locales_dir.glob("*.yml")}
        )
        logger.info("discovered_locales", locales=locales_found)
        return {locale: self.load(locale) for locale in locales_found}

    def clear_cache(self) -> None:
        """Clear all cached definitions."""
        self.cache.clear()
        logger.info("cleared_locale_cache")
