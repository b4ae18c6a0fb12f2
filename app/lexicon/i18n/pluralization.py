"""Plural branch selection.

Only the zero/one/other split is modeled; CLDR plural rules are not.
"""

from typing import Any

from lexicon.i18n.exceptions import InvalidPluralizationData
from lexicon.i18n.models import NodeKind, classify


def plural_category(entry: Any, count: Any) -> str:
    """Pick the plural category a count selects within a plural group.

    Args:
        entry: Plural group mapping.
        count: Numeric count.

    Returns:
        "zero" when count is 0 and the group has a zero branch,
        "one" when count is 1, "other" otherwise.
    """
    if count == 0 and "zero" in entry:
        return "zero"
    return "one" if count == 1 else "other"


def pluralize(entry: Any, count: Any) -> Any:
    """Select the branch of a plural group for a count.

    Args:
        entry: Resolved translation entry.
        count: Count supplied by the caller, or None.

    Returns:
        The selected branch, or entry unchanged when it is not a plural
        group or count is None.

    Raises:
        InvalidPluralizationData: If the selected category is missing.
    """
    if count is None or classify(entry) is not NodeKind.PLURAL_GROUP:
        return entry

    key = plural_category(entry, count)
    if key not in entry:
        raise InvalidPluralizationData(entry, count, key)
    return entry[key]
