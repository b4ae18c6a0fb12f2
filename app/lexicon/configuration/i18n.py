"""Translation engine settings."""

from typing import List, Optional

from pydantic import Field

from lexicon.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when no current locale is set (default: en)
        I18N_LOCALE: Current locale override (default: unset)
        I18N_ENFORCE_AVAILABLE_LOCALES: Reject locales with no loaded data (default: true)
        I18N_MAX_INDIRECTION_DEPTH: Maximum alias/callable hops per lookup (default: 100)
        I18N_KEY_CACHE_SIZE: Maximum memoized normalized keys (default: 1024)
        I18N_LOAD_PATH: JSON list of YAML files or directories to load (default: [])

    Example:
        ```python
        from lexicon.configuration import settings

        if settings.i18n.I18N_ENFORCE_AVAILABLE_LOCALES:
            ...
        ```
    """

    I18N_DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    I18N_LOCALE: Optional[str] = Field(default=None, alias="I18N_LOCALE")
    I18N_ENFORCE_AVAILABLE_LOCALES: bool = Field(
        default=True, alias="I18N_ENFORCE_AVAILABLE_LOCALES"
    )
    I18N_MAX_INDIRECTION_DEPTH: int = Field(
        default=100, alias="I18N_MAX_INDIRECTION_DEPTH", ge=1
    )
    I18N_KEY_CACHE_SIZE: int = Field(default=1024, alias="I18N_KEY_CACHE_SIZE", ge=0)
    I18N_LOAD_PATH: List[str] = Field(default_factory=list, alias="I18N_LOAD_PATH")
