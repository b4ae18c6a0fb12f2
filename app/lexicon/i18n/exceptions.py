"""Custom exceptions for the translation engine.

Every failure of a translate() call surfaces as one of these exceptions.
Nothing is retried inside the engine; a missing default candidate is only
skipped in favour of the next candidate.
"""

from typing import Any, Mapping, Optional, Sequence


class I18nError(Exception):
    """Base exception for all translation engine errors.

    Example:
        try:
            translator.translate("greeting")
        except I18nError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class I18nArgumentError(I18nError, ValueError):
    """Raised when a call receives an argument it cannot work with.

    Example:
        >>> translator.translate("")
        Traceback (most recent call last):
        ...
        I18nArgumentError: Translation key must not be empty
    """

    pass


class InvalidLocale(I18nArgumentError):
    """Raised when a locale is missing or not available."""

    def __init__(self, locale: Any):
        self.locale = locale
        super().__init__(f"{locale!r} is not a valid locale")


class InvalidLocaleData(I18nArgumentError):
    """Raised by loaders when a translation source cannot be used.

    Attributes:
        filename: Identifier of the offending source.
        message: Description of the underlying cause.
    """

    def __init__(self, filename: Any, message: str):
        self.filename = filename
        self.message = message
        super().__init__(f"can not load translations from {filename}: {message}")


class MissingTranslation(I18nArgumentError):
    """Raised when no entry is found and no usable default was given.

    Attributes:
        locale: Locale the lookup ran against.
        key: Key as passed by the caller.
        keys: Normalized lookup path, locale segment first.
        options: Call options; callables are replaced by their repr.
    """

    def __init__(
        self,
        locale: Any,
        key: Any,
        options: Optional[Mapping[str, Any]] = None,
        keys: Sequence[str] = (),
    ):
        self.locale = locale
        self.key = key
        self.keys = tuple(keys)
        self.options = {
            name: repr(value) if callable(value) else value
            for name, value in (options or {}).items()
        }
        path = ".".join(self.keys) if self.keys else f"{locale}.{key}"
        super().__init__(f"translation missing: {path}")


class InvalidPluralizationData(I18nArgumentError):
    """Raised when a plural group lacks the branch a count selects."""

    def __init__(self, entry: Mapping[str, Any], count: Any, key: str):
        self.entry = entry
        self.count = count
        self.key = key
        super().__init__(
            f"translation data {dict(entry)!r} can not be used with "
            f":count => {count}. key {key!r} is missing."
        )


class ReservedInterpolationKey(I18nArgumentError):
    """Raised when a translation string uses a reserved option as placeholder."""

    def __init__(self, key: str, template: str):
        self.key = key
        self.template = template
        super().__init__(f"reserved key {key!r} used in {template!r}")


class MissingInterpolationArgument(I18nArgumentError):
    """Raised by the default handler when a placeholder has no value."""

    def __init__(self, key: str, values: Mapping[str, Any], template: str):
        self.key = key
        self.values = values
        self.template = template
        super().__init__(
            f"missing interpolation argument {key!r} in {template!r} "
            f"({dict(values)!r} given)"
        )


class IndirectionDepthExceeded(I18nError):
    """Raised when alias or callable indirection nests too deeply.

    Usually the sign of an alias cycle such as ``a: :b`` / ``b: :a``.
    """

    def __init__(self, key: Any, depth: int):
        self.key = key
        self.depth = depth
        super().__init__(
            f"indirection depth {depth} exceeded while resolving {key!r}"
        )
