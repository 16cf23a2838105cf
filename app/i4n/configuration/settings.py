"""i4n configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from i4n.configuration.loader import LoaderSettings
from i4n.configuration.translations import TranslationSettings


class Settings(BaseSettings):
    """i4n configuration settings - main aggregator.

    Aggregates the section settings into a single configuration object:

    - **loader**: asynchronous loading and readiness polling
    - **translations**: translation files and language selection

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment; "production" switches logging
            to JSON output

    Example:
        ```python
        from i4n.configuration import settings

        interval = settings.loader.ready_poll_interval_ms
        language = settings.translations.default_language

        if settings.is_production:
            ...
        ```
    """

    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    loader: LoaderSettings
    translations: TranslationSettings

    @property
    def is_production(self) -> bool:
        """Check if the package is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "loader": LoaderSettings,
            "translations": TranslationSettings,
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


# Create the singleton settings instance
settings = Settings()
