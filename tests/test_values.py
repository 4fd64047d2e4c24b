"""Tests for value types and Entry."""

import pytest

from mico import Entry, VList, VString, to_value


# ---------------------------------------------------------------------------
# VString / VList
# ---------------------------------------------------------------------------

def test_vstring_trims():
    assert VString("  value  ").value == "value"

def test_vstring_str():
    assert str(VString("hello")) == "hello"

def test_vlist_accepts_any_iterable():
    assert VList(["a", "b"]) == VList(("a", "b"))
    assert VList(iter(["a"])).items == ("a",)

def test_vlist_default_is_empty():
    assert VList().items == ()
    assert len(VList()) == 0

def test_vlist_keeps_items_verbatim():
    assert VList([" a ", "b "]).items == (" a ", "b ")

def test_vlist_rejects_str():
    with pytest.raises(TypeError):
        VList("abc")
    with pytest.raises(TypeError):
        VList(b"abc")

def test_vlist_rejects_non_str_items():
    with pytest.raises(TypeError):
        VList([1, None])
    with pytest.raises(TypeError):
        Entry("k", VList(["a", 2]))

def test_values_are_immutable():
    with pytest.raises(AttributeError):
        VString("x").value = "y"
    with pytest.raises(AttributeError):
        VList(["x"]).items = ()

def test_string_and_list_never_equal():
    assert VString("") != VList()


# ---------------------------------------------------------------------------
# to_value
# ---------------------------------------------------------------------------

def test_to_value_str():
    assert to_value("x") == VString("x")

def test_to_value_list_and_tuple():
    assert to_value(["a", "b"]) == VList(["a", "b"])
    assert to_value(("a",)) == VList(["a"])

def test_to_value_passes_values_through():
    v = VList(["a"])
    assert to_value(v) is v

def test_to_value_rejects_numbers():
    with pytest.raises(TypeError):
        to_value(42)

def test_to_value_rejects_non_str_items():
    with pytest.raises(TypeError):
        to_value(["a", 1])


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

def test_entry_trims_key():
    assert Entry("  key ", "v").key == "key"

def test_entry_converts_shorthand_values():
    assert Entry("k", "v").value == VString("v")
    assert Entry("k", ["a"]).value == VList(["a"])

def test_entry_variant_flags():
    assert Entry("k", "v").is_string
    assert not Entry("k", "v").is_list
    assert Entry("k", []).is_list

def test_entry_is_frozen():
    e = Entry("k", "v")
    with pytest.raises(AttributeError):
        e.value = VList()
