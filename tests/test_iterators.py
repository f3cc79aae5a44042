from __future__ import annotations

import pytest

from confpath import Config, ConfigValue, EmptyIterator, ListIterator, MapIterator


def test_list_iteration_with_cursor():
    cfg = Config({"servers": ["a", "b", "c"]})

    it = cfg.get("servers").iterate()
    assert isinstance(it, ListIterator)

    seen = []
    while not it.finished():
        assert it.key() == ""
        seen.append((it.index(), it.value().as_str()))
        it.next()

    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_list_iterator_next_is_noop_when_finished():
    it = ConfigValue([1]).iterate()

    it.next()
    it.next()
    assert it.finished()
    assert it.index() == 1
    with pytest.raises(IndexError):
        it.value()


def test_empty_list_is_finished_immediately():
    it = ConfigValue([]).iterate()

    assert isinstance(it, ListIterator)
    assert it.finished()


def test_map_iteration_in_insertion_order():
    cfg = Config({"limits": {"cpu": 2, "memory": 512, "disk": 10}})

    it = cfg.get("limits").iterate()
    assert isinstance(it, MapIterator)

    seen = [(i.index(), i.key(), i.value().as_int()) for i in it]

    assert seen == [(0, "cpu", 2), (1, "memory", 512), (2, "disk", 10)]
    assert it.finished()
    with pytest.raises(IndexError):
        it.key()
    with pytest.raises(IndexError):
        it.value()


def test_map_iteration_yields_nested_values():
    it = ConfigValue({"db": {"host": "h"}, "tags": ["x"]}).iterate()

    values = {i.key(): i.value() for i in it}

    assert values["db"].config().get("host").as_str() == "h"
    assert values["tags"].count() == 1


@pytest.mark.parametrize("raw", [None, 1, "text", {1: "non-string key"}])
def test_scalar_values_give_empty_iterator(raw):
    it = ConfigValue(raw).iterate()

    assert isinstance(it, EmptyIterator)
    assert it.finished()
    assert it.index() == 0
    assert it.key() == ""
    assert not it.value().is_set()
    it.next()
    assert it.finished()
    assert list(it) == []
