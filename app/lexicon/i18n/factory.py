"""Factory functions for creating translators.

Provides convenience functions for building a Translator from settings
and an optional process-wide default instance.
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from lexicon.configuration import settings
from lexicon.i18n.config import I18nConfig
from lexicon.i18n.loader import YAMLTranslationLoader
from lexicon.i18n.translator import Translator
from lexicon.logging import get_module_logger

logger = get_module_logger()

_translator_instance: Optional[Translator] = None


def create_translator(
    load_path: Optional[Iterable[Union[str, Path]]] = None,
    config: Optional[I18nConfig] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Args:
        load_path: YAML files or directories (default: config.load_path).
        config: Engine configuration (default: built from settings.i18n).
        use_cache: Whether the loader should cache parsed YAML (default: True)
        preload: Whether to load translations immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Raises:
        InvalidLocaleData: If preloading hits a malformed translation file.

    Usage:
        # Use settings (I18N_LOAD_PATH etc.)
        translator = create_translator()

        # Custom translations directory, loaded later
        translator = create_translator(load_path=["/srv/locales"], preload=False)
        translator.load_translations()
    """
    config = config or I18nConfig.from_settings(settings.i18n)
    if load_path is not None:
        config.load_path = [str(path) for path in load_path]

    loader = YAMLTranslationLoader(config.load_path, use_cache=use_cache)
    translator = Translator(config=config, loader=loader)

    if preload:
        translator.load_translations()
        logger.info(
            "translator_created_with_preload",
            load_path=config.load_path,
            locale_count=len(translator.available_locales()),
        )
    else:
        logger.info("translator_created_lazy", load_path=config.load_path)

    return translator


def get_translator() -> Translator:
    """Get the default translator, creating it from settings on first use."""
    global _translator_instance

    if _translator_instance is not None:
        return _translator_instance

    _translator_instance = create_translator()
    return _translator_instance


def set_translator(translator: Translator) -> None:
    """Install a translator as the default instance."""
    global _translator_instance
    _translator_instance = translator


def reset_translator() -> None:
    """Reset the default translator (for testing only)."""
    global _translator_instance
    _translator_instance = None
    logger.debug("reset_translator_singleton")
