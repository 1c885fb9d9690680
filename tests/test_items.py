"""
Tests for the Item variants.
"""

import dataclasses

import pytest
from otherdata.items import Item, ItemKind, StringValue, NumericValue, NamedValue


class TestItems:
    """Test Item construction and tagging."""

    def test_variants_are_items(self):
        for item in (StringValue("a"), NumericValue(1.0), NamedValue("k", "v")):
            assert isinstance(item, Item)

    def test_kinds(self):
        assert StringValue("a").kind is ItemKind.STRING
        assert NumericValue(1.0).kind is ItemKind.NUMERIC
        assert NamedValue("k", "v").kind is ItemKind.NAMED

    def test_immutable(self):
        """Items are frozen."""
        item = StringValue("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.text = "b"

    def test_equality_and_hash(self):
        """Equal items compare and hash equal."""
        assert NamedValue("k", "v") == NamedValue("k", "v")
        assert len({StringValue("a"), StringValue("a")}) == 1

    def test_base_not_instantiable(self):
        with pytest.raises(TypeError):
            Item()
