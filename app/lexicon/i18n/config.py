"""Engine-facing configuration for a Translator instance."""

from dataclasses import dataclass, field
from typing import List, Optional

from lexicon.configuration import I18nSettings
from lexicon.i18n.interpolation import MissingArgumentHandler, raise_missing_argument


@dataclass
class I18nConfig:
    """Configuration owned by a single Translator.

    Attributes:
        default_locale: Locale used when neither an explicit nor a current locale is set.
        locale: Current locale override.
        enforce_available_locales: Reject locales that have no loaded data.
        missing_interpolation_argument_handler: Called as (name, values, template)
            for placeholders without a value.
        max_indirection_depth: Maximum alias/callable hops before giving up.
        key_cache_size: Maximum number of memoized normalized keys.
        load_path: YAML files or directories used by load_translations().
    """

    default_locale: str = "en"
    locale: Optional[str] = None
    enforce_available_locales: bool = True
    missing_interpolation_argument_handler: MissingArgumentHandler = raise_missing_argument
    max_indirection_depth: int = 100
    key_cache_size: int = 1024
    load_path: List[str] = field(default_factory=list)

    @classmethod
    def from_settings(cls, i18n_settings: I18nSettings) -> "I18nConfig":
        """Build a config from environment-backed settings.

        Args:
            i18n_settings: I18nSettings instance (usually settings.i18n).

        Returns:
            I18nConfig with the default missing-argument handler.
        """
        return cls(
            default_locale=i18n_settings.I18N_DEFAULT_LOCALE,
            locale=i18n_settings.I18N_LOCALE,
            enforce_available_locales=i18n_settings.I18N_ENFORCE_AVAILABLE_LOCALES,
            max_indirection_depth=i18n_settings.I18N_MAX_INDIRECTION_DEPTH,
            key_cache_size=i18n_settings.I18N_KEY_CACHE_SIZE,
            load_path=list(i18n_settings.I18N_LOAD_PATH),
        )
