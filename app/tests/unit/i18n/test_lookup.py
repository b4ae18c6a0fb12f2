"""Tests for lexicon.i18n.lookup module."""

import copy

from lexicon.i18n.lookup import lookup_path
from lexicon.i18n.models import NOT_FOUND, Alias


def _no_alias(segment, alias):
    raise AssertionError(f"unexpected alias at {segment}")


class TestLookupPath:
    """Tests for lookup_path()."""

    TREE = {
        "en": {
            "incident": {"created": "Incident created", "empty": None},
            "items": {"one": "1 item", "other": "many"},
        }
    }

    def test_finds_leaf(self):
        """Existing path returns the leaf."""
        assert (
            lookup_path(self.TREE, ("en", "incident", "created"), _no_alias)
            == "Incident created"
        )

    def test_returns_subtree(self):
        """Path to a branch returns the branch."""
        assert lookup_path(self.TREE, ("en", "incident"), _no_alias) is self.TREE["en"]["incident"]

    def test_missing_segment_is_not_found(self):
        """Absent segment yields NOT_FOUND."""
        assert lookup_path(self.TREE, ("en", "nope"), _no_alias) is NOT_FOUND

    def test_walking_through_leaf_is_not_found(self):
        """Segments past a leaf yield NOT_FOUND rather than an error."""
        assert (
            lookup_path(self.TREE, ("en", "incident", "created", "x"), _no_alias)
            is NOT_FOUND
        )

    def test_stored_none_is_distinct_from_not_found(self):
        """A stored None is returned as None."""
        assert lookup_path(self.TREE, ("en", "incident", "empty"), _no_alias) is None

    def test_plural_group_children_are_reachable(self):
        """Plural groups can be walked like branches."""
        assert lookup_path(self.TREE, ("en", "items", "one"), _no_alias) == "1 item"

    def test_intermediate_alias_is_resolved(self):
        """Aliases met mid-path are resolved before continuing."""
        tree = {"en": {"short": Alias("incident"), "incident": {"created": "ok"}}}
        seen = []

        def resolve(segment, alias):
            seen.append((segment, alias.key))
            return tree["en"]["incident"]

        assert lookup_path(tree, ("en", "short", "created"), resolve) == "ok"
        assert seen == [("short", "incident")]

    def test_does_not_mutate_tree(self):
        """Lookup leaves the tree unchanged."""
        before = copy.deepcopy(self.TREE)
        lookup_path(self.TREE, ("en", "incident", "created"), _no_alias)
        lookup_path(self.TREE, ("en", "missing", "x"), _no_alias)
        assert self.TREE == before
