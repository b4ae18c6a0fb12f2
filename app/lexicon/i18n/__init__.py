"""Key resolution engine for localized strings.

Resolves (locale, key, scope, count, interpolation values) into a
localized value, following aliases and callable entries stored in nested
translation trees.

Main components:
- models: Alias, NodeKind, TranslationOptions
- keys: key normalization and its bounded cache
- lookup / pluralization / interpolation: resolution steps
- store: TranslationStore holding per-locale trees
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator orchestrating the pipeline
- factory: create_translator() and the default instance
"""

from lexicon.i18n.config import I18nConfig
from lexicon.i18n.exceptions import (
    I18nArgumentError,
    I18nError,
    IndirectionDepthExceeded,
    InvalidLocale,
    InvalidLocaleData,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslation,
    ReservedInterpolationKey,
)
from lexicon.i18n.factory import (
    create_translator,
    get_translator,
    reset_translator,
    set_translator,
)
from lexicon.i18n.loader import TranslationLoader, YAMLTranslationLoader
from lexicon.i18n.models import (
    NOT_FOUND,
    PLURAL_CATEGORIES,
    RESERVED_KEYS,
    Alias,
    NodeKind,
    TranslationOptions,
)
from lexicon.i18n.store import TranslationStore
from lexicon.i18n.translator import Translator

__all__ = [
    "Alias",
    "NodeKind",
    "NOT_FOUND",
    "PLURAL_CATEGORIES",
    "RESERVED_KEYS",
    "TranslationOptions",
    "TranslationStore",
    "I18nConfig",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "create_translator",
    "get_translator",
    "set_translator",
    "reset_translator",
    "I18nError",
    "I18nArgumentError",
    "InvalidLocale",
    "InvalidLocaleData",
    "MissingTranslation",
    "InvalidPluralizationData",
    "ReservedInterpolationKey",
    "MissingInterpolationArgument",
    "IndirectionDepthExceeded",
]
