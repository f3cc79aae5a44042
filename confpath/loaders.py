from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

from .config import Config
from .exceptions import ConfigSourceError
from .sources import JSON, YAML, ConfigSource, DictSource, FileSource, StreamSource, TextSource

log = logging.getLogger(__name__)


def load(source: ConfigSource) -> Config:
    """
    Load a Config from any ConfigSource.

    Typical usage:

        from confpath import FileSource, load

        cfg = load(FileSource("config.yaml"))
        port = cfg.get("server.port").as_int(8080)
    """
    data = source.load()
    if not isinstance(data, Mapping):
        raise ConfigSourceError(
            f"Configuration source {source!r} returned a non-mapping value."
        )
    log.debug("Loaded %d top-level keys from %r", len(data), source)
    return Config(data)


def from_dict(data: Mapping[str, Any]) -> Config:
    return load(DictSource(data))


def from_json(data: str | bytes) -> Config:
    """Config from JSON-encoded text."""
    return load(TextSource(data, JSON))


def from_yaml(data: str | bytes) -> Config:
    """Config from YAML-encoded text. An empty document gives an empty Config."""
    return load(TextSource(data, YAML))


def from_stream(stream: IO[Any], fmt: str) -> Config:
    """Config from a readable stream; the format ("json" or "yaml") is required."""
    return load(StreamSource(stream, fmt))


def from_file(path: str | Path) -> Config:
    """Config from a .json, .yaml or .yml file."""
    return load(FileSource(path))
