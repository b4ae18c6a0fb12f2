"""Translation service resolving keys into localized values.

The Translator owns its translation store, configuration and key cache,
so several isolated engines can live in one process.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List, Optional

from lexicon.i18n.config import I18nConfig
from lexicon.i18n.exceptions import (
    I18nArgumentError,
    IndirectionDepthExceeded,
    InvalidLocale,
    MissingTranslation,
)
from lexicon.i18n.interpolation import interpolate
from lexicon.i18n.keys import NormalizedKeyCache, Segments, normalize_keys
from lexicon.i18n.loader import TranslationLoader, YAMLTranslationLoader
from lexicon.i18n.lookup import lookup_path
from lexicon.i18n.models import (
    DEFAULT_SEPARATOR,
    NOT_FOUND,
    NodeKind,
    TranslationOptions,
    classify,
    current_locale,
)
from lexicon.i18n.pluralization import pluralize
from lexicon.i18n.store import TranslationStore
from lexicon.logging import get_module_logger

logger = get_module_logger()


def copy_tree(value: Any) -> Any:
    """Copy nested dicts and lists, sharing every other value."""
    if isinstance(value, dict):
        return {key: copy_tree(child) for key, child in value.items()}
    if isinstance(value, list):
        return [copy_tree(child) for child in value]
    return value


class Translator:
    """Service for resolving translation keys.

    Supports scoped keys, aliases, callable entries, pluralization and
    placeholder interpolation.

    Attributes:
        config: I18nConfig for this engine.
        store: TranslationStore holding every loaded locale.
        loader: Optional TranslationLoader used by load_translations().
        key_cache: Normalized key cache, cleared on reload().

    Usage:
        translator = Translator()
        translator.store_translations("en", {"greeting": "Hi, %{name}!"})
        translator.translate("greeting", name="Ana")  # "Hi, Ana!"
    """

    def __init__(
        self,
        config: Optional[I18nConfig] = None,
        store: Optional[TranslationStore] = None,
        loader: Optional[TranslationLoader] = None,
    ):
        """Initialize Translator.

        Args:
            config: Engine configuration (default: I18nConfig()).
            store: Translation store (default: empty store).
            loader: Loader for load_translations(). When omitted, a
                YAMLTranslationLoader over config.load_path is used.
        """
        self.config = config or I18nConfig()
        self.store = store if store is not None else TranslationStore()
        self.loader = loader
        self.key_cache = NormalizedKeyCache(self.config.key_cache_size)
        logger.info(
            "initialized_translator",
            default_locale=self.config.default_locale,
            enforce_available_locales=self.config.enforce_available_locales,
        )

    @property
    def locale(self) -> Any:
        """Current locale, falling back to the default locale."""
        return self.config.locale or self.config.default_locale

    @locale.setter
    def locale(self, value: Any) -> None:
        self.config.locale = value

    @contextmanager
    def with_locale(self, locale: Any) -> Iterator[None]:
        """Temporarily switch the current locale.

        Example:
            with translator.with_locale("fr"):
                translator.translate("greeting")
        """
        previous = self.config.locale
        self.config.locale = locale
        try:
            yield
        finally:
            self.config.locale = previous

    def store_translations(self, locale: Any, data: Any) -> None:
        """Deep-merge translation data for a locale into the store."""
        self.store.store_translations(locale, data)

    def load_translations(self, loader: Optional[TranslationLoader] = None) -> None:
        """Load translations from a loader into the store.

        Args:
            loader: Loader to use; defaults to self.loader, then to a
                YAMLTranslationLoader over config.load_path.

        Raises:
            InvalidLocaleData: If a translation source is malformed.
        """
        loader = loader or self.loader
        if loader is None:
            loader = YAMLTranslationLoader(self.config.load_path)
            self.loader = loader

        for locale, data in loader.load_all():
            self.store_translations(locale, data)
        logger.info(
            "loaded_all_translations",
            locale_count=len(self.available_locales()),
        )

    def reload(self) -> None:
        """Drop all translations and caches, then reload from the loader if any."""
        self.store.reload()
        self.key_cache.clear()
        if self.loader is not None:
            self.loader.clear_cache()
            self.load_translations(self.loader)
        logger.info("reloaded_translations")

    def available_locales(self) -> List[str]:
        return self.store.available_locales()

    def locale_available(self, locale: Any) -> bool:
        return self.store.locale_available(locale)

    def enforce_available_locales(self, locale: Any) -> None:
        """Raise InvalidLocale if enforcement is on and locale has no data."""
        if self.config.enforce_available_locales and not self.locale_available(locale):
            raise InvalidLocale(locale)

    def translate(self, key: Any, locale: Any = None, **options: Any) -> Any:
        """Resolve a key into its localized value.

        Args:
            key: Dotted string, tuple of segments, or a list of keys for
                batch translation.
            locale: Locale to use (default: current, then default locale).
            **options: scope, count, default, separator, object, and any
                interpolation values.

        Returns:
            The resolved value, or a list of values in batch mode.

        Raises:
            InvalidLocale: If no locale is set or it is not available.
            I18nArgumentError: If key is empty.
            MissingTranslation: If nothing resolves and no default applies.
            InvalidPluralizationData: If count selects a missing plural branch.
            ReservedInterpolationKey: If the entry uses a reserved placeholder.
            IndirectionDepthExceeded: If aliases or callables nest too deeply.
        """
        locale = current_locale(locale, self.config.locale, self.config.default_locale)
        if not locale:
            raise InvalidLocale(locale)
        self.enforce_available_locales(locale)

        call_options = TranslationOptions.from_kwargs(options)
        if isinstance(key, list):
            return [self._translate(locale, item, call_options, 0) for item in key]
        return self._translate(locale, key, call_options, 0)

    t = translate

    def has_translation(
        self,
        key: Any,
        locale: Any = None,
        scope: Any = None,
        separator: str = DEFAULT_SEPARATOR,
    ) -> bool:
        """Check if a key resolves to a stored entry, without raising for missing keys.

        Args:
            key: Key to check.
            locale: Locale to check (default: current, then default locale).
            scope: Optional scope.
            separator: Key segment separator.

        Returns:
            True if the path exists and holds a non-None value.
        """
        locale = current_locale(locale, self.config.locale, self.config.default_locale)
        if not locale or key is None or (isinstance(key, (str, tuple)) and not key):
            return False
        options = TranslationOptions(scope=scope, separator=separator)
        try:
            entry = self._lookup(locale, key, options, 0)
        except MissingTranslation:
            return False
        return entry is not NOT_FOUND and entry is not None

    def _segments(self, locale: Any, key: Any, options: TranslationOptions) -> Segments:
        return normalize_keys(
            locale, key, options.scope, options.separator, self.key_cache
        )

    def _translate(
        self,
        locale: Any,
        key: Any,
        options: TranslationOptions,
        depth: int,
        finalize: bool = True,
    ) -> Any:
        # finalize=False returns the resolved entry for an alias hop; only the
        # outermost call pluralizes and interpolates
        if isinstance(key, (str, tuple)) and not key:
            raise I18nArgumentError("Translation key must not be empty")

        entry = NOT_FOUND if key is None else self._lookup(locale, key, options, depth)
        if entry is NOT_FOUND:
            entry = None

        if entry is None and options.default is not None:
            entry = self._default(locale, key, options.default, options, depth)
        else:
            entry = self._resolve(locale, key, entry, options, depth)

        if entry is None:
            raise MissingTranslation(
                locale,
                key,
                options.to_dict(),
                keys=self._segments(locale, key, options),
            )
        if not finalize:
            return entry

        entry = copy_tree(entry)
        if options.count is not None:
            entry = pluralize(entry, options.count)
        if options.interpolate and isinstance(entry, str):
            entry = interpolate(
                entry,
                options.values,
                self.config.missing_interpolation_argument_handler,
            )
        return entry

    def _lookup(
        self,
        locale: Any,
        key: Any,
        options: TranslationOptions,
        depth: int,
    ) -> Any:
        def resolve_alias(segment: str, alias: Any) -> Any:
            return self._resolve(locale, segment, alias, options, depth)

        return lookup_path(
            self.store.translations,
            self._segments(locale, key, options),
            resolve_alias,
        )

    def _resolve(
        self,
        locale: Any,
        key: Any,
        subject: Any,
        options: TranslationOptions,
        depth: int,
    ) -> Any:
        kind = classify(subject)
        if kind in (NodeKind.ALIAS, NodeKind.CALLABLE):
            if depth >= self.config.max_indirection_depth:
                raise IndirectionDepthExceeded(key, depth)

        if kind is NodeKind.ALIAS:
            # Aliases resolve from the root and never inherit the caller's default
            return self._translate(
                locale,
                subject.key,
                options.without_scope().without_default(),
                depth + 1,
                finalize=False,
            )

        if kind is NodeKind.CALLABLE:
            context = options.object if options.object is not None else key
            result = subject(context, options.to_dict(include_object=False))
            return self._resolve(locale, key, result, options, depth + 1)

        return subject

    def _default(
        self,
        locale: Any,
        key: Any,
        default: Any,
        options: TranslationOptions,
        depth: int,
    ) -> Any:
        options = options.without_default()
        candidates = default if isinstance(default, list) else [default]
        for candidate in candidates:
            try:
                result = self._resolve(locale, key, candidate, options, depth)
            except MissingTranslation:
                continue
            if result is not None:
                return result
        return None
