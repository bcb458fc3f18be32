"""Helpers for JSON:API query parameter encoding."""

from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode


def _flatten(prefix: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _flatten(f"{prefix}[]", item, pairs)
    elif value is not None:
        pairs.append((prefix, _scalar(value)))


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_params(params: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten a nested parameter tree into ``key[sub]=value`` pairs.

    ``{"filter": {"age": "21"}, "page": {"limit": 10}}`` becomes
    ``[("filter[age]", "21"), ("page[limit]", "10")]``. Pair order follows
    the insertion order of the tree.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        _flatten(str(key), value, pairs)
    return pairs


def to_query_string(params: Mapping[str, Any] | None) -> str:
    """Return ``params`` encoded as a URL query string."""
    return urlencode(build_query_params(params))
