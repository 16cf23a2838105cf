"""Configuration module - public API.

Centralized configuration for i4n using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    LoaderSettings: Readiness polling settings
    TranslationSettings: Translation source and language settings
"""

from i4n.configuration.loader import LoaderSettings
from i4n.configuration.settings import Settings, settings
from i4n.configuration.translations import TranslationSettings

__all__ = ["Settings", "settings", "LoaderSettings", "TranslationSettings"]
