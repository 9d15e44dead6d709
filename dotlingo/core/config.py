"""dotlingo configuration settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Translator configuration settings."""

    DEFAULT_LOCALE: Optional[str] = Field(default=None, alias="I18N_DEFAULT_LOCALE")
    DELIMITER_START: str = Field(default="{{", alias="I18N_DELIMITER_START")
    DELIMITER_END: str = Field(default="}}", alias="I18N_DELIMITER_END")
    LOCALES_DIR: Optional[str] = Field(default=None, alias="I18N_LOCALES_DIR")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def delimiters(self) -> tuple[str, str]:
        """Configured (start, end) placeholder delimiters."""
        return (self.DELIMITER_START, self.DELIMITER_END)


class Settings(BaseSettings):
    """dotlingo configuration settings."""

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in a production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
