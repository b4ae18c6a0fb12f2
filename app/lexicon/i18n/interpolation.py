"""Placeholder interpolation for translation strings.

Supported placeholders:
    %{name}         substituted with str(value)
    %<name>.2f      substituted with a printf-style formatted value
    %%              a literal percent sign
"""

import re
from typing import Any, Callable, Mapping, Optional

from lexicon.i18n.exceptions import (
    I18nArgumentError,
    MissingInterpolationArgument,
    ReservedInterpolationKey,
)
from lexicon.i18n.models import RESERVED_KEYS

MissingArgumentHandler = Callable[[str, Mapping[str, Any], str], Any]

INTERPOLATION_PATTERN = re.compile(
    r"%%"
    r"|%\{(?P<name>\w+)\}"
    r"|%<(?P<fmt_name>\w+)>(?P<spec>[-+ #0]*\d*(?:\.\d+)?[diouxXeEfFgGcrsbp])"
)

FLAGS_PATTERN = re.compile(r"([-+ #0]*)(\d*)")


def raise_missing_argument(key: str, values: Mapping[str, Any], template: str) -> Any:
    """Default missing-interpolation-argument handler."""
    raise MissingInterpolationArgument(key, values, template)


def placeholder_names(template: str):
    """Yield placeholder names in order of appearance, skipping %% escapes."""
    for match in INTERPOLATION_PATTERN.finditer(template):
        name = match.group("name") or match.group("fmt_name")
        if name:
            yield name


def find_reserved_key(template: str) -> Optional[str]:
    """Return the first placeholder that names a reserved option, if any."""
    for name in placeholder_names(template):
        if name in RESERVED_KEYS:
            return name
    return None


def format_value(spec: str, value: Any) -> str:
    """Apply a printf-style spec such as "05.2f" or "-10s" to a value."""
    conversion, flags = spec[-1], spec[:-1]
    if conversion == "b":
        # Python's %-operator has no binary conversion
        digits = format(int(value), "b")
        match = FLAGS_PATTERN.match(flags)
        flag_chars, width = match.group(1), int(match.group(2) or 0)
        if "-" in flag_chars:
            return digits.ljust(width)
        if "0" in flag_chars:
            return digits.zfill(width)
        return digits.rjust(width)
    if conversion == "p":
        conversion = "r"
    return f"%{flags}{conversion}" % (value,)


def interpolate(
    template: str,
    values: Mapping[str, Any],
    missing_handler: MissingArgumentHandler = raise_missing_argument,
) -> str:
    """Substitute placeholders in a translation string.

    Args:
        template: Translation string.
        values: Placeholder name -> value. Callable values are called with
            the whole mapping.
        missing_handler: Called as (name, values, template) for placeholders
            with no value; its return value is substituted.

    Returns:
        The interpolated string.

    Raises:
        I18nArgumentError: If template is not a string or values is not a mapping.
        ReservedInterpolationKey: If a placeholder names a reserved option.
    """
    if not isinstance(template, str):
        raise I18nArgumentError("Interpolation template must be a string")
    if not isinstance(values, Mapping):
        raise I18nArgumentError("Interpolation values must be a mapping")

    reserved = find_reserved_key(template)
    if reserved is not None:
        raise ReservedInterpolationKey(reserved, template)

    def substitute(match: "re.Match[str]") -> str:
        if match.group(0) == "%%":
            return "%"
        name = match.group("name") or match.group("fmt_name")
        if name in values:
            value = values[name]
        else:
            value = missing_handler(name, values, template)
        if callable(value):
            value = value(values)
        spec = match.group("spec")
        return format_value(spec, value) if spec else str(value)

    return INTERPOLATION_PATTERN.sub(substitute, template)
