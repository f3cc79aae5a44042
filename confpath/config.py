from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Iterator

from .exceptions import ConfigurationError, ValueNotSetError, ValueTypeError
from .traversal import SEP, resolve_composite_key, to_str_map

if TYPE_CHECKING:
    from .iterators import ConfigIterator

log = logging.getLogger(__name__)


class Config:
    """
    Read-only configuration object.

    Lookups go through get() (or cfg["key"]) and always return a
    ConfigValue, whether or not the key was set. Nested keys can be
    addressed with dotted paths:

        cfg = Config({"db": {"user": "admin"}})
        cfg.get("db.user").as_str()  # "admin"

    A literal top-level key containing dots ("db.user") takes precedence
    over descending into the "db" section.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        if data is not None and not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Config expects a mapping, got {type(data).__name__}."
            )
        self._data: Mapping[str, Any] = data if data is not None else {}

    def get(self, key: str) -> ConfigValue:
        """Return the value stored under key, resolving dotted paths."""
        if key in self._data:
            return ConfigValue(self._data[key])
        log.debug("Key %r not set literally, resolving as composite key", key)
        return ConfigValue(resolve_composite_key(self._data, key.split(SEP)))

    def __getitem__(self, key: str) -> ConfigValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key).is_set()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the underlying data."""
        from copy import deepcopy

        return deepcopy(dict(self._data))

    def __repr__(self) -> str:
        keys_preview = ", ".join(str(k) for k in list(self._data.keys())[:5])
        more = "..." if len(self._data) > 5 else ""
        return f"<Config keys=[{keys_preview}{more}]>"


class ConfigValue:
    """
    A value taken from a Config by key or through iteration.

    The as_* accessors never fail: they return the given default when the
    value is missing or has another type. The must_* accessors raise
    ValueNotSetError or ValueTypeError instead.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = None):
        self._value = value

    @property
    def raw(self) -> Any:
        """Underlying value without any coercion."""
        return self._value

    def is_set(self) -> bool:
        return self._value is not None

    def is_list(self) -> bool:
        return isinstance(self._value, list)

    def is_map(self) -> bool:
        return isinstance(self._value, Mapping)

    def as_int(self, default: int = 0) -> int:
        if _is_int(self._value):
            return self._value
        return default

    def as_str(self, default: str = "") -> str:
        if isinstance(self._value, str):
            return self._value
        return default

    def as_float(self, default: float = 0.0) -> float:
        number = _to_float(self._value)
        if number is None:
            return default
        return number

    def as_bool(self, default: bool = False) -> bool:
        if isinstance(self._value, bool):
            return self._value
        return default

    def must_int(self) -> int:
        self._require_set()
        if not _is_int(self._value):
            raise ValueTypeError("Value is not int")
        return self._value

    def must_str(self) -> str:
        self._require_set()
        if not isinstance(self._value, str):
            raise ValueTypeError("Value is not string")
        return self._value

    def must_float(self) -> float:
        self._require_set()
        number = _to_float(self._value)
        if number is None:
            raise ValueTypeError("Value is not float")
        return number

    def must_bool(self) -> bool:
        self._require_set()
        if not isinstance(self._value, bool):
            raise ValueTypeError("Value is not bool")
        return self._value

    def config(self) -> Config:
        """New Config built from this value; empty if it is not a string-keyed mapping."""
        return Config(to_str_map(self._value))

    def count(self) -> int:
        """Number of list elements, 0 for anything that is not a list."""
        if isinstance(self._value, list):
            return len(self._value)
        return 0

    def iterate(self) -> ConfigIterator:
        """
        Return a cursor over a list or mapping value.

        List iteration:

            it = cfg.get("servers").iterate()
            while not it.finished():
                print(it.value().as_str())
                it.next()

        Map iteration (iterators are also iterable):

            for it in cfg.get("limits").iterate():
                print(it.key(), it.value().as_int())

        Anything else yields an EmptyIterator.
        """
        from .iterators import EmptyIterator, ListIterator, MapIterator

        if isinstance(self._value, list):
            return ListIterator(self._value)
        mapping = to_str_map(self._value)
        if mapping is not None:
            return MapIterator(mapping)
        return EmptyIterator()

    def _require_set(self) -> None:
        if self._value is None:
            raise ValueNotSetError("Value is not set")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigValue):
            return self._value == other._value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ConfigValue({self._value!r})"


def _is_int(value: Any) -> bool:
    # bool is a subclass of int but never counts as a number here
    return isinstance(value, int) and not isinstance(value, bool)


def _to_float(value: Any) -> float | None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        return float(value)
    except OverflowError:
        # int beyond the float range
        return None
