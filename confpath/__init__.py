from __future__ import annotations

"""
confpath - Read-only accessor for hierarchical JSON/YAML configuration.

This package provides:
- Config: dotted-path lookup over a nested mapping.
- ConfigValue: typed accessors with default and must variants.
- Iterators over list and mapping values.
- Sources and loaders for JSON and YAML text, streams and files.
"""

from .config import Config, ConfigValue
from .exceptions import (
    ConfigSourceError,
    ConfigurationError,
    ValueNotSetError,
    ValueTypeError,
)
from .iterators import ConfigIterator, EmptyIterator, ListIterator, MapIterator
from .loaders import from_dict, from_file, from_json, from_stream, from_yaml, load
from .sources import JSON, YAML, ConfigSource, DictSource, FileSource, StreamSource, TextSource

__all__ = [
    "Config",
    "ConfigValue",
    "ConfigIterator",
    "ListIterator",
    "MapIterator",
    "EmptyIterator",
    "ConfigurationError",
    "ConfigSourceError",
    "ValueNotSetError",
    "ValueTypeError",
    "ConfigSource",
    "DictSource",
    "TextSource",
    "StreamSource",
    "FileSource",
    "JSON",
    "YAML",
    "load",
    "from_dict",
    "from_json",
    "from_yaml",
    "from_stream",
    "from_file",
]
