from __future__ import annotations

from collections import OrderedDict

from confpath.traversal import resolve_composite_key, to_str_map


def test_to_str_map_accepts_string_keyed_mappings():
    data = {"a": 1}

    assert to_str_map(data) is data
    assert to_str_map(OrderedDict(b=2)) == {"b": 2}


def test_to_str_map_rejects_other_values():
    assert to_str_map({"a": 1, 2: "b"}) is None
    assert to_str_map([1, 2]) is None
    assert to_str_map("a") is None
    assert to_str_map(None) is None


def test_resolve_composite_key():
    data = {"a": {"b": {"c": 3}}, "x": 1}

    assert resolve_composite_key(data, ["a", "b", "c"]) == 3
    assert resolve_composite_key(data, ["a", "b"]) == {"c": 3}
    assert resolve_composite_key(data, ["x", "y"]) is None
    assert resolve_composite_key(data, ["missing", "b"]) is None


def test_resolve_composite_key_from_offset():
    data = {"b": 2}

    assert resolve_composite_key(data, ["a", "b"], 1) == 2
