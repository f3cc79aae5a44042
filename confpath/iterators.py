from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Iterator, List

from .config import ConfigValue


class ConfigIterator(ABC):
    """
    Cursor over the elements of a ConfigValue.

    Besides the explicit next()/finished() protocol, every iterator can be
    used in a for loop, which yields the cursor itself at each position.
    """

    @abstractmethod
    def next(self) -> None:
        """Advance to the next position; no-op once finished."""
        raise NotImplementedError

    @abstractmethod
    def finished(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def index(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def key(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def value(self) -> ConfigValue:
        raise NotImplementedError

    def __iter__(self) -> Iterator[ConfigIterator]:
        while not self.finished():
            yield self
            self.next()


class ListIterator(ConfigIterator):
    """Iterates over list elements. key() is always empty."""

    def __init__(self, items: List[Any]):
        self._items = items
        self._pos = 0

    def next(self) -> None:
        if not self.finished():
            self._pos += 1

    def finished(self) -> bool:
        return self._pos >= len(self._items)

    def index(self) -> int:
        return self._pos

    def key(self) -> str:
        return ""

    def value(self) -> ConfigValue:
        if self.finished():
            raise IndexError("iterator is finished")
        return ConfigValue(self._items[self._pos])


class MapIterator(ListIterator):
    """Iterates over mapping entries in insertion order."""

    def __init__(self, mapping: Mapping[str, Any]):
        super().__init__(list(mapping.keys()))
        self._mapping = mapping

    def key(self) -> str:
        return super().value().as_str()

    def value(self) -> ConfigValue:
        return ConfigValue(self._mapping.get(self.key()))


class EmptyIterator(ConfigIterator):
    """Iterator for values that are neither lists nor mappings."""

    def next(self) -> None:
        pass

    def finished(self) -> bool:
        return True

    def index(self) -> int:
        return 0

    def key(self) -> str:
        return ""

    def value(self) -> ConfigValue:
        return ConfigValue(None)
