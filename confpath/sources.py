from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any, Dict

import yaml

from .exceptions import ConfigSourceError

log = logging.getLogger(__name__)

JSON = "json"
YAML = "yaml"

_FORMAT_ALIASES = {
    "json": JSON,
    "yaml": YAML,
    "yml": YAML,
}


def normalize_format(fmt: str) -> str:
    """Map a format name or file extension (".yml", "JSON", ...) to JSON or YAML."""
    name = fmt.strip().lstrip(".").lower()
    try:
        return _FORMAT_ALIASES[name]
    except KeyError:
        raise ConfigSourceError(f"Unknown config format: {fmt!r}") from None


class ConfigSource(ABC):
    """Abstract base class for configuration sources."""

    @abstractmethod
    def load(self) -> Mapping[str, Any]:
        """Return the configuration tree as a mapping."""
        raise NotImplementedError


class DictSource(ConfigSource):
    """Configuration source backed by an already parsed mapping."""

    def __init__(self, data: Mapping[str, Any]):
        if not isinstance(data, Mapping):
            raise ConfigSourceError(
                f"DictSource expects a mapping, got {type(data).__name__}."
            )
        self._data = data

    def load(self) -> Mapping[str, Any]:
        return self._data

    def __repr__(self) -> str:
        return f"<DictSource keys={len(self._data)}>"


class TextSource(ConfigSource):
    """
    Configuration source backed by encoded text.

    Accepts str or UTF-8 bytes in one of the supported formats:
      - json
      - yaml (alias: yml)
    """

    def __init__(self, data: str | bytes, fmt: str, *, origin: str = "<text>"):
        self._data = data
        self._format = normalize_format(fmt)
        self._origin = origin

    def load(self) -> Mapping[str, Any]:
        data = self._data
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ConfigSourceError(
                    f"Configuration in {self._origin} is not valid UTF-8: {exc}"
                ) from exc

        if self._format == JSON:
            return _load_json(data, self._origin)
        return _load_yaml(data, self._origin)

    def __repr__(self) -> str:
        return f"<TextSource format={self._format} origin={self._origin}>"


class StreamSource(ConfigSource):
    """Read a whole text or binary stream and decode it in the given format."""

    def __init__(self, stream: IO[Any], fmt: str):
        self._stream = stream
        self._format = normalize_format(fmt)

    def load(self) -> Mapping[str, Any]:
        origin = getattr(self._stream, "name", "<stream>")
        try:
            data = self._stream.read()
        except OSError as exc:
            raise ConfigSourceError(f"Could not read {origin}: {exc}") from exc
        return TextSource(data, self._format, origin=str(origin)).load()

    def __repr__(self) -> str:
        origin = getattr(self._stream, "name", "<stream>")
        return f"<StreamSource format={self._format} origin={origin}>"


class FileSource(ConfigSource):
    """
    Load configuration from a single file.

    The format is chosen from the file extension: .json, .yaml or .yml.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Mapping[str, Any]:
        suffix = self._path.suffix
        if not suffix:
            raise ConfigSourceError(
                f"Cannot detect configuration format of {self._path}: no extension"
            )
        fmt = normalize_format(suffix)

        log.debug("Loading %s configuration from %s", fmt, self._path)
        try:
            with self._path.open("rb") as f:
                data = f.read()
        except OSError as exc:
            raise ConfigSourceError(
                f"Could not read configuration file {self._path}: {exc}"
            ) from exc
        return TextSource(data, fmt, origin=str(self._path)).load()

    def __repr__(self) -> str:
        return f"<FileSource path={self._path}>"


def _load_json(text: str, origin: str) -> Mapping[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigSourceError(f"Invalid JSON in {origin}: {exc}") from exc
    return _ensure_mapping(data, origin, "JSON")


def _load_yaml(text: str, origin: str) -> Mapping[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigSourceError(f"Invalid YAML in {origin}: {exc}") from exc

    if data is None:
        return {}
    return _ensure_mapping(data, origin, "YAML")


def _ensure_mapping(data: Any, origin: str, kind: str) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigSourceError(
            f"Top-level {kind} structure in {origin} must be a mapping."
        )
    return dict(data)
