"""Collection of materialized resources with envelope metadata."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping, Sequence


class Collection(Sequence[Any]):
    """Ordered resources plus the top-level ``meta``, ``links`` and ``jsonapi`` members."""

    def __init__(
        self,
        items: Iterable[Any] = (),
        *,
        meta: Mapping[str, Any] | None = None,
        links: Mapping[str, Any] | None = None,
        jsonapi: Mapping[str, Any] | None = None,
    ) -> None:
        self._items = list(items)
        self.meta = meta
        self.links = links
        self.jsonapi = jsonapi

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    @property
    def first(self) -> Any | None:
        return self._items[0] if self._items else None

    @property
    def last(self) -> Any | None:
        return self._items[-1] if self._items else None

    def __repr__(self) -> str:
        return f"Collection({self._items!r})"
