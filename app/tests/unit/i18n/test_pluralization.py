"""Tests for lexicon.i18n.pluralization module."""

import pytest

from lexicon.i18n.exceptions import InvalidPluralizationData
from lexicon.i18n.pluralization import plural_category, pluralize


class TestPluralize:
    """Tests for pluralize()."""

    GROUP = {"one": "1 item", "other": "%{count} items"}

    def test_one(self):
        """count 1 selects one."""
        assert pluralize(self.GROUP, 1) == "1 item"

    def test_other(self):
        """count 5 selects other."""
        assert pluralize(self.GROUP, 5) == "%{count} items"

    def test_zero_falls_back_to_other(self):
        """count 0 without a zero branch selects other."""
        assert pluralize(self.GROUP, 0) == "%{count} items"

    def test_zero_branch_used_when_present(self):
        """count 0 selects zero when it exists."""
        group = dict(self.GROUP, zero="no items")
        assert pluralize(group, 0) == "no items"

    def test_non_integer_count(self):
        """Non-integer counts follow the one/other split."""
        assert pluralize(self.GROUP, 1.5) == "%{count} items"
        assert plural_category(self.GROUP, 1.0) == "one"

    def test_no_count_is_noop(self):
        """count None returns the group unchanged."""
        assert pluralize(self.GROUP, None) is self.GROUP

    def test_non_plural_entries_are_noop(self):
        """Strings and ordinary branches pass through."""
        branch = {"title": "x", "one": "y"}
        assert pluralize("text", 3) == "text"
        assert pluralize(branch, 3) is branch

    def test_missing_category_raises(self):
        """Selecting an absent category raises InvalidPluralizationData."""
        with pytest.raises(InvalidPluralizationData) as exc_info:
            pluralize({"one": "1 item"}, 2)
        assert exc_info.value.count == 2
        assert exc_info.value.key == "other"
        assert exc_info.value.entry == {"one": "1 item"}
