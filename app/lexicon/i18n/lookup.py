"""Tree lookup along a normalized segment path."""

from typing import Any, Callable, Iterable, Mapping

from lexicon.i18n.models import NOT_FOUND, NodeKind, classify

AliasResolver = Callable[[str, Any], Any]


def lookup_path(
    tree: Mapping[str, Any],
    segments: Iterable[str],
    resolve_alias: AliasResolver,
) -> Any:
    """Walk a translation tree along segments.

    Aliases met at any step, intermediate or final, are resolved through
    resolve_alias before the walk continues, so an alias may stand in for
    a whole subtree.

    Args:
        tree: Root mapping (usually locale -> translation tree).
        segments: Path segments, locale segment first.
        resolve_alias: Callable taking (segment, alias) and returning the
            alias target's value.

    Returns:
        The value found, or NOT_FOUND when the path does not exist.
    """
    node: Any = tree
    for segment in segments:
        if classify(node) not in (NodeKind.BRANCH, NodeKind.PLURAL_GROUP):
            return NOT_FOUND
        if segment not in node:
            return NOT_FOUND
        node = node[segment]
        if classify(node) is NodeKind.ALIAS:
            node = resolve_alias(segment, node)
    return node
