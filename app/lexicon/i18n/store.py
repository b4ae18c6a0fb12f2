"""Translation store: per-locale translation trees plus the available-locales cache."""

from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from lexicon.logging import get_module_logger

logger = get_module_logger()

# Locale trees holding only this key (e.g. i18n.plural rules) do not count as available
META_KEY = "i18n"


def stringify_keys(data: Any) -> Any:
    """Copy nested mappings with every key converted to str."""
    if isinstance(data, Mapping):
        return {str(key): stringify_keys(value) for key, value in data.items()}
    return data


def deep_merge(target: Dict[str, Any], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge data into target in place.

    Nested mappings merge recursively; any other value overwrites the
    existing one at the same path.
    """
    for key, value in data.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, Mapping):
            deep_merge(existing, value)
        else:
            target[key] = value
    return target


class TranslationStore:
    """Container for the translation trees of every loaded locale.

    Attributes:
        translations: {locale: nested translation tree}.
    """

    def __init__(self, translations: Optional[Mapping[str, Mapping[str, Any]]] = None):
        self.translations: Dict[str, Dict[str, Any]] = {}
        self._available_locales_set: Optional[FrozenSet[str]] = None
        for locale, data in (translations or {}).items():
            self.store_translations(locale, data)

    def store_translations(self, locale: Any, data: Mapping[str, Any]) -> None:
        """Deep-merge a translation tree into a locale.

        Args:
            locale: Locale identifier.
            data: Nested translation mapping; keys are stringified.
        """
        locale = str(locale)
        tree = self.translations.setdefault(locale, {})
        deep_merge(tree, stringify_keys(data or {}))
        self.clear_available_locales_set()
        logger.debug("stored_translations", locale=locale, key_count=len(tree))

    def get_tree(self, locale: Any) -> Optional[Dict[str, Any]]:
        """Get the translation tree for a locale, or None if never stored."""
        return self.translations.get(str(locale))

    def available_locales(self) -> List[str]:
        """List locales that hold at least one translation.

        Returns:
            Locale identifiers in insertion order.
        """
        return [
            locale
            for locale, data in self.translations.items()
            if set(data) - {META_KEY}
        ]

    @property
    def available_locales_set(self) -> FrozenSet[str]:
        """Cached set of available locales, rebuilt after invalidation."""
        if self._available_locales_set is None:
            self._available_locales_set = frozenset(self.available_locales())
        return self._available_locales_set

    def locale_available(self, locale: Any) -> bool:
        return locale is not None and str(locale) in self.available_locales_set

    def clear_available_locales_set(self) -> None:
        self._available_locales_set = None

    def reload(self) -> None:
        """Drop every stored translation."""
        self.translations = {}
        self.clear_available_locales_set()
        logger.info("cleared_translation_store")
