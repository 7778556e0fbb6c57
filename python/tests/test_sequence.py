"""Tests for SynonymList."""

import pytest

from synonomous.sequence import SynonymList


class TestSynonymList:
    """Tests for SynonymList."""

    def test_positional_access(self):
        """Test list behavior is preserved."""
        items = SynonymList(["a", "b"])
        assert items[0] == "a"
        assert items[-1] == "b"
        assert items[0:1] == ["a"]
        assert len(items) == 2
        assert items == ["a", "b"]

    def test_named_keys(self):
        """Test setting and getting named keys."""
        items = SynonymList(["a", "b"])
        items["first"] = items[0]
        assert items["first"] == "a"
        assert items.has_key("first")
        assert list(items.keys()) == ["first"]
        assert items.synonyms() == {"first": "a"}
        assert len(items) == 2

    def test_named_keys_not_in_values(self):
        """Test `in` still checks positional values."""
        items = SynonymList(["a"])
        items["first"] = "a"
        assert "a" in items
        assert "first" not in items

    def test_digit_key_addresses_position(self):
        """Test digit strings naming existing positions are positional."""
        items = SynonymList(["a", "b"])
        assert items.has_key("1")
        assert items["1"] == "b"
        assert not items.has_key("2")
        assert not items.has_key("01")

    def test_out_of_range_digit_key(self):
        """Test digit strings past the end are reserved for positions."""
        items = SynonymList(["a"])
        with pytest.raises(KeyError):
            items["5"] = "x"
        assert list(items.keys()) == []
        assert items.is_reserved("5")
        assert not items.is_position("5")

    def test_reserved_key_becomes_position(self):
        """Test an index-like key addresses the element once the list grows."""
        items = SynonymList(["a"])
        assert not items.has_key("1")
        items.append("b")
        assert items.is_position("1")
        assert items["1"] == "b"
        assert not items.is_reserved("first")

    def test_has_key_int(self):
        """Test integer keys check bounds."""
        items = SynonymList(["a"])
        assert items.has_key(0)
        assert items.has_key(-1)
        assert not items.has_key(1)

    def test_get(self):
        """Test get with default."""
        items = SynonymList(["a"])
        items["first"] = "a"
        assert items.get("first") == "a"
        assert items.get("missing") is None
        assert items.get("missing", "z") == "z"

    def test_missing_key(self):
        """Test missing named keys raise KeyError."""
        items = SynonymList([])
        with pytest.raises(KeyError):
            items["missing"]

    def test_delete_named(self):
        """Test deleting a named key leaves elements alone."""
        items = SynonymList(["a"])
        items["first"] = "a"
        del items["first"]
        assert not items.has_key("first")
        assert items == ["a"]

    def test_repr(self):
        """Test repr shows elements and keys."""
        items = SynonymList(["a"])
        items["A"] = "a"
        assert repr(items) == "SynonymList(['a'], keys=['A'])"
