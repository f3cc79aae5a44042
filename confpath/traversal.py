from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Dict

SEP = "."


def to_str_map(value: Any) -> Dict[str, Any] | None:
    """
    Return value as a string-keyed dict, or None.

    YAML may produce mappings with non-string keys (ints, bools, ...).
    Such mappings are not addressable by dotted paths, so they yield None.
    """
    if not isinstance(value, Mapping):
        return None
    if isinstance(value, dict) and all(isinstance(k, str) for k in value):
        return value
    result: Dict[str, Any] = {}
    for key, item in value.items():
        if not isinstance(key, str):
            return None
        result[key] = item
    return result


def resolve_composite_key(
    data: Mapping[str, Any], chunks: Sequence[str], current: int = 0
) -> Any:
    """
    Descend through nested mappings following key chunks.

    Returns None as soon as a chunk is missing or an intermediate
    value is not a string-keyed mapping.
    """
    value = data.get(chunks[current])
    if current == len(chunks) - 1:
        return value
    nested = to_str_map(value)
    if nested is None:
        return None
    return resolve_composite_key(nested, chunks, current + 1)
