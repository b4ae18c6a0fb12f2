"""Tests for lexicon.i18n.models module."""

from lexicon.i18n.models import (
    NOT_FOUND,
    Alias,
    NodeKind,
    TranslationOptions,
    classify,
    current_locale,
    is_plural_group,
)


class TestClassify:
    """Tests for classify()."""

    def test_leaf_values(self):
        """Strings, numbers and lists are leaves."""
        assert classify("text") is NodeKind.LEAF
        assert classify(3) is NodeKind.LEAF
        assert classify(["a", "b"]) is NodeKind.LEAF
        assert classify(None) is NodeKind.LEAF

    def test_alias(self):
        """Alias instances are aliases."""
        assert classify(Alias("a.b")) is NodeKind.ALIAS

    def test_callable(self):
        """Functions are callables."""
        assert classify(lambda key, options: key) is NodeKind.CALLABLE

    def test_plural_group(self):
        """Mappings keyed only by plural categories are plural groups."""
        assert classify({"one": "x", "other": "y"}) is NodeKind.PLURAL_GROUP
        assert is_plural_group({"zero": "", "few": "", "many": ""})

    def test_branch(self):
        """Other mappings, including empty ones, are branches."""
        assert classify({"title": "x", "one": "y"}) is NodeKind.BRANCH
        assert classify({}) is NodeKind.BRANCH


class TestAlias:
    """Tests for Alias."""

    def test_str(self):
        """str() renders the dotted target."""
        assert str(Alias("a.b")) == "a.b"
        assert str(Alias(("a", "b"))) == "a.b"

    def test_hashable_and_equal(self):
        """Aliases compare by target."""
        assert Alias("a") == Alias("a")
        assert len({Alias("a"), Alias("a")}) == 1


class TestNotFound:
    """Tests for the NOT_FOUND sentinel."""

    def test_falsy_singleton(self):
        """NOT_FOUND is falsy and unique."""
        assert not NOT_FOUND
        assert type(NOT_FOUND)() is NOT_FOUND
        assert repr(NOT_FOUND) == "NOT_FOUND"


class TestTranslationOptions:
    """Tests for TranslationOptions."""

    def test_empty(self):
        """No kwargs means no interpolation."""
        options = TranslationOptions.from_kwargs({})
        assert options.interpolate is False
        assert options.values == {}
        assert options.separator == "."

    def test_reserved_keys_stripped(self):
        """Reserved names never become interpolation values."""
        options = TranslationOptions.from_kwargs(
            {
                "scope": "incident",
                "default": "fallback",
                "separator": "|",
                "object": "obj",
                "format": "short",
                "raise": True,
                "name": "Ana",
            }
        )
        assert options.values == {"name": "Ana"}
        assert options.scope == "incident"
        assert options.default == "fallback"
        assert options.separator == "|"
        assert options.object == "obj"
        assert options.reserved == {"format": "short", "raise": True}
        assert options.interpolate is True

    def test_count_is_an_interpolation_value(self):
        """count is exposed to interpolation."""
        options = TranslationOptions.from_kwargs({"count": 3})
        assert options.count == 3
        assert options.values == {"count": 3}

    def test_none_count_not_in_values(self):
        """count=None is not exposed to interpolation."""
        options = TranslationOptions.from_kwargs({"count": None})
        assert options.values == {}

    def test_scope_and_default_do_not_interpolate(self):
        """Only scope and default leave entries uninterpolated."""
        assert not TranslationOptions.from_kwargs({"scope": "s", "default": "d"}).interpolate
        assert not TranslationOptions.from_kwargs({"count": None}).interpolate
        assert TranslationOptions.from_kwargs({"count": 2}).interpolate
        assert TranslationOptions.from_kwargs({"scope": "s", "format": "short"}).interpolate

    def test_without_scope_and_default(self):
        """without_scope()/without_default() drop only that field."""
        options = TranslationOptions.from_kwargs(
            {"scope": "s", "default": "d", "name": "n"}
        )
        assert options.without_scope().scope is None
        assert options.without_scope().default == "d"
        assert options.without_default().default is None
        assert options.without_default().values == {"name": "n"}

    def test_to_dict(self):
        """to_dict() flattens named fields, extras and values."""
        options = TranslationOptions.from_kwargs(
            {"scope": "s", "object": "o", "throw": True, "name": "n"}
        )
        assert options.to_dict() == {
            "scope": "s",
            "object": "o",
            "throw": True,
            "name": "n",
        }
        assert "object" not in options.to_dict(include_object=False)


class TestCurrentLocale:
    """Tests for current_locale()."""

    def test_precedence(self):
        """Explicit beats current beats default."""
        assert current_locale("fr", "de", "en") == "fr"
        assert current_locale(None, "de", "en") == "de"
        assert current_locale(None, None, "en") == "en"
        assert current_locale(None, "", None) is None
