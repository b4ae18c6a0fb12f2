"""Translation models for the key resolution engine.

Defines the node variants stored in translation trees and the structured
options a translate() call carries.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional

RESERVED_KEYS = frozenset(
    [
        "scope",
        "default",
        "separator",
        "resolve",
        "object",
        "fallback",
        "format",
        "cascade",
        "throw",
        "raise",
    ]
)

PLURAL_CATEGORIES = frozenset(["zero", "one", "two", "few", "many", "other"])

DEFAULT_SEPARATOR = "."


class _NotFound:
    """Sentinel type for a lookup path that does not exist."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


class NodeKind(str, Enum):
    """Kinds of node a translation tree can hold."""

    LEAF = "leaf"
    BRANCH = "branch"
    ALIAS = "alias"
    CALLABLE = "callable"
    PLURAL_GROUP = "plural_group"


@dataclass(frozen=True)
class Alias:
    """Stored reference to another translation key.

    Aliases always resolve from the root of the locale's tree, never
    relative to where they are stored.

    Attributes:
        key: Target key (dotted string or tuple of segments).
    """

    key: Any

    def __str__(self) -> str:
        if isinstance(self.key, (tuple, list)):
            return DEFAULT_SEPARATOR.join(str(part) for part in self.key)
        return str(self.key)


def is_plural_group(node: Any) -> bool:
    """Check whether a node is a non-empty mapping keyed only by plural categories."""
    return (
        isinstance(node, Mapping)
        and len(node) > 0
        and all(key in PLURAL_CATEGORIES for key in node)
    )


def classify(node: Any) -> NodeKind:
    """Return the NodeKind tag of a tree node.

    Args:
        node: Any value found in a translation tree.

    Returns:
        The kind the engine dispatches on.
    """
    if isinstance(node, Alias):
        return NodeKind.ALIAS
    if isinstance(node, Mapping):
        return NodeKind.PLURAL_GROUP if is_plural_group(node) else NodeKind.BRANCH
    if callable(node):
        return NodeKind.CALLABLE
    return NodeKind.LEAF


@dataclass(frozen=True)
class TranslationOptions:
    """Structured options of a single translate() call.

    Reserved option names are split out into named fields; every other
    keyword becomes an interpolation value.

    Attributes:
        scope: Key-shaped prefix prepended to the lookup path.
        count: Count used for pluralization (also exposed as %{count}).
        default: Literal, Alias, callable, or list of fallback candidates.
        separator: Key segment separator.
        object: Context object handed to callable entries.
        values: Interpolation values.
        reserved: Other reserved options the caller supplied (ignored by the engine).
        interpolate: True if the call carried any option besides scope and
            default, so string entries go through interpolation.
    """

    scope: Any = None
    count: Any = None
    default: Any = None
    separator: str = DEFAULT_SEPARATOR
    object: Any = None
    values: Mapping[str, Any] = field(default_factory=dict)
    reserved: Mapping[str, Any] = field(default_factory=dict)
    interpolate: bool = False

    @classmethod
    def from_kwargs(cls, options: Mapping[str, Any]) -> "TranslationOptions":
        """Build options from call keyword arguments.

        Args:
            options: Keyword arguments as passed to translate().

        Returns:
            TranslationOptions with reserved names stripped from values.
        """
        values = {
            name: value
            for name, value in options.items()
            if name not in RESERVED_KEYS and not (name == "count" and value is None)
        }
        reserved = {
            name: value
            for name, value in options.items()
            if name in RESERVED_KEYS
            and name not in ("scope", "default", "separator", "object")
        }
        return cls(
            scope=options.get("scope"),
            count=options.get("count"),
            default=options.get("default"),
            separator=options.get("separator") or DEFAULT_SEPARATOR,
            object=options.get("object"),
            values=values,
            reserved=reserved,
            interpolate=any(
                name not in ("scope", "default")
                and not (name == "count" and value is None)
                for name, value in options.items()
            ),
        )

    def without_scope(self) -> "TranslationOptions":
        """Return a copy whose lookups start from the root."""
        return replace(self, scope=None)

    def without_default(self) -> "TranslationOptions":
        """Return a copy with no default."""
        return replace(self, default=None)

    def to_dict(self, include_object: bool = True) -> Dict[str, Any]:
        """Flatten back into a plain keyword mapping.

        Args:
            include_object: Whether to keep the "object" option.

        Returns:
            Dict with named fields that are set, reserved extras and values.
        """
        result: Dict[str, Any] = {}
        if self.scope is not None:
            result["scope"] = self.scope
        if self.default is not None:
            result["default"] = self.default
        if self.separator != DEFAULT_SEPARATOR:
            result["separator"] = self.separator
        if include_object and self.object is not None:
            result["object"] = self.object
        result.update(self.reserved)
        result.update(self.values)
        return result


def current_locale(explicit: Optional[Any], configured: Optional[Any], default: Any) -> Any:
    """Pick the effective locale: explicit, then current, then default."""
    for candidate in (explicit, configured, default):
        if candidate:
            return candidate
    return None
