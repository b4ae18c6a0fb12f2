"""Key normalization.

Turns locale, scope and key expressions into a flat tuple of path
segments. Results are memoized per separator in a size-bounded cache
owned by each Translator.
"""

from collections import OrderedDict
from typing import Any, Dict, Hashable, Optional, Tuple

from lexicon.i18n.models import DEFAULT_SEPARATOR, Alias

Segments = Tuple[str, ...]


class NormalizedKeyCache:
    """LRU cache of normalized keys, partitioned by separator.

    Attributes:
        max_size: Maximum entries kept across all separators. 0 disables caching.
    """

    def __init__(self, max_size: int = 1024):
        self.max_size = max_size
        self._entries: "OrderedDict[Tuple[str, Hashable], Segments]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, separator: str, key: Hashable) -> Optional[Segments]:
        entry_key = (separator, key)
        segments = self._entries.get(entry_key)
        if segments is None:
            self.misses += 1
            return None
        self.hits += 1
        self._entries.move_to_end(entry_key)
        return segments

    def set(self, separator: str, key: Hashable, segments: Segments) -> None:
        if self.max_size <= 0:
            return
        entry_key = (separator, key)
        self._entries[entry_key] = segments
        self._entries.move_to_end(entry_key)
        while len(self._entries) > self.max_size:
            self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def get_stats(self) -> Dict[str, int]:
        """Get cache statistics.

        Returns:
            Dict with size, max_size, hits and misses.
        """
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
        }

    def __len__(self) -> int:
        return len(self._entries)


def _cache_token(key: Any) -> Optional[Hashable]:
    # Every element carries its type, so 1, True and "1" never share an entry;
    # lists and tuples normalize alike and share one
    if isinstance(key, (tuple, list)):
        parts = tuple(_cache_token(part) for part in key)
        if any(part is None for part in parts):
            return None
        return ("sequence", parts)
    if isinstance(key, Alias):
        target = _cache_token(key.key)
        return None if target is None else ("Alias", target)
    try:
        hash(key)
    except TypeError:
        return None
    return (type(key).__name__, key)


def normalize_key(
    key: Any,
    separator: str = DEFAULT_SEPARATOR,
    cache: Optional[NormalizedKeyCache] = None,
) -> Segments:
    """Split a single key expression into segments.

    Args:
        key: String, Alias, tuple/list of keys, None, or any atomic value.
        separator: Segment separator for string keys.
        cache: Optional cache to memoize results in.

    Returns:
        Tuple of non-empty string segments.
    """
    if key is None:
        return ()

    token = _cache_token(key) if cache is not None else None
    if token is not None:
        cached = cache.get(separator, token)
        if cached is not None:
            return cached

    if isinstance(key, (tuple, list)):
        segments: Segments = tuple(
            segment
            for part in key
            for segment in normalize_key(part, separator, cache)
        )
    elif isinstance(key, Alias):
        segments = normalize_key(key.key, separator, cache)
    else:
        segments = tuple(part for part in str(key).split(separator) if part)

    if token is not None:
        cache.set(separator, token, segments)
    return segments


def normalize_keys(
    locale: Any,
    key: Any,
    scope: Any = None,
    separator: str = DEFAULT_SEPARATOR,
    cache: Optional[NormalizedKeyCache] = None,
) -> Segments:
    """Build the full lookup path for a key.

    Example:
        >>> normalize_keys("en", "created", scope="incident.messages")
        ('en', 'incident', 'messages', 'created')
    """
    return (
        normalize_key(locale, separator, cache)
        + normalize_key(scope, separator, cache)
        + normalize_key(key, separator, cache)
    )
