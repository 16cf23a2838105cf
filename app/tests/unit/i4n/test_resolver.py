"""Tests for i4n.resolver module."""

import pytest

from i4n.models import Leaf, Node, TranslationPath, build_table
from i4n.resolver import Resolver, traverse
from i4n.store import TranslationStore


def parse(path):
    return TranslationPath.parse(path)


class TestTraverse:
    """Tests for traverse()."""

    @pytest.fixture
    def table(self):
        return build_table({"a": {"b": {"c": "leaf"}}, "flat": "value"})

    def test_traverse_nested(self, table):
        """Segments are followed left to right."""
        assert traverse(table, ("a", "b", "c")) == Leaf("leaf")

    def test_traverse_returns_node(self, table):
        """Stopping on a table returns the Node."""
        assert isinstance(traverse(table, ("a", "b")), Node)

    def test_traverse_missing_segment(self, table):
        """Any missing segment yields None."""
        assert traverse(table, ("a", "x", "c")) is None

    def test_traverse_through_leaf(self, table):
        """Stepping into a leaf yields None, not a partial result."""
        assert traverse(table, ("flat", "deeper")) is None

    def test_traverse_without_table(self):
        """A missing table yields None."""
        assert traverse(None, ("a",)) is None


class TestResolver:
    """Tests for Resolver."""

    @pytest.fixture
    def resolver(self, translations):
        return Resolver(TranslationStore(translations))

    def test_resolve_in_active_language(self, resolver):
        """Primary path resolves in the active language."""
        assert resolver.resolve(parse("earth"), "es") == Leaf("Mundo")

    def test_resolve_missing_returns_none(self, resolver):
        """Missing keys resolve to None."""
        assert resolver.resolve(parse("nested.key"), "es") is None

    def test_resolve_unknown_language_returns_none(self, resolver):
        """Unknown languages resolve to None."""
        assert resolver.resolve(parse("earth"), "xx") is None

    def test_resolve_unpopulated_store(self):
        """Nothing resolves before the store is populated."""
        assert Resolver(TranslationStore()).resolve(parse("earth"), "en") is None

    def test_key_fallback(self, resolver):
        """Fallback path is used when the primary path is missing."""
        entry = resolver.resolve(parse(["missing", "earth"]), "es")
        assert entry == Leaf("Mundo")

    def test_key_fallback_both_missing(self, resolver):
        """Both paths missing resolves to None."""
        assert resolver.resolve(parse(["missing", "also.missing"]), "es") is None

    def test_language_fallback(self, resolver):
        """Fallback language is used when the active language misses."""
        entry = resolver.resolve(parse("nested.key"), "es", "en")
        assert entry == Leaf("english key")

    def test_key_fallback_preferred_over_language_fallback(self, resolver):
        """Active language fallback key wins over fallback language primary key."""
        entry = resolver.resolve(parse(["nested.key", "earth"]), "es", "en")
        assert entry == Leaf("Mundo")

    def test_fallback_language_ignores_fallback_key(self, resolver):
        """By default the fallback key is not retried in the fallback language."""
        entry = resolver.resolve(parse(["missing", "farewell"]), "es", "en")
        assert entry is None

    def test_fallback_language_with_fallback_key_enabled(self, translations):
        """The fallback key can be retried in the fallback language."""
        resolver = Resolver(
            TranslationStore(translations), fallback_key_in_fallback_language=True
        )
        entry = resolver.resolve(parse(["missing", "farewell"]), "es", "en")
        assert entry == Leaf("Goodbye")

    def test_same_fallback_language_is_skipped(self, resolver):
        """A fallback language equal to the active one changes nothing."""
        assert resolver.resolve(parse("nested.key"), "es", "es") is None

    def test_resolve_in_language_without_fallback_key(self, resolver):
        """resolve_in_language() can ignore the fallback path."""
        entry = resolver.resolve_in_language(
            parse(["missing", "earth"]), "en", use_fallback_key=False
        )
        assert entry is None
