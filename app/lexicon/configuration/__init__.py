"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation engine settings class (for testing)
"""

from lexicon.configuration.i18n import I18nSettings
from lexicon.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
