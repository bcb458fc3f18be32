"""Map JSON:API response envelopes to documents and domain objects."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_client.core.collection import Collection
from jsonapi_client.core.document import Document, IncludedTable
from jsonapi_client.core.errors import ApiErrorResponse, WrongShapeError
from jsonapi_client.core.registry import TypeRegistry, default_registry

logger = logging.getLogger(__name__)


class ResponseMapper:
    """Map a top-level JSON:API envelope to a resource or a Collection.

    Every item of a collection response becomes its own Document and is
    dispatched through the registry independently; all of them share the
    envelope's included table.
    """

    def __init__(
        self,
        body: Mapping[str, Any] | None,
        *,
        registry: TypeRegistry | None = None,
        status: int | None = None,
    ) -> None:
        self.body: Mapping[str, Any] = body or {}
        self.registry = registry if registry is not None else default_registry
        self.status = status
        self._included: IncludedTable | None = None

    @property
    def included(self) -> IncludedTable:
        """Return the included table shared by every document of this envelope."""
        if self._included is None:
            self._included = IncludedTable(self.body.get("included") or ())
        return self._included

    def resource(self) -> Any:
        """Return the single resource of the envelope (``None`` for ``data: null``)."""
        self._raise_for_errors()
        data = self.body.get("data")
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise WrongShapeError("Response contains a collection; use ResponseMapper.collection().")
        return self.registry.factory(Document({"data": data}, included=self.included))

    def collection(self) -> Collection:
        """Return every resource of the envelope wrapped in a Collection."""
        self._raise_for_errors()
        data = self.body.get("data")
        if not isinstance(data, list):
            raise WrongShapeError("Response contains a single resource; use ResponseMapper.resource().")
        included = self.included
        return Collection(
            [self.registry.factory(Document({"data": item}, included=included)) for item in data],
            meta=self.body.get("meta"),
            links=self.body.get("links"),
            jsonapi=self.body.get("jsonapi"),
        )

    def jsonapi_resources(self) -> list[Mapping[str, Any]]:
        """Return the raw primary data followed by the included resources."""
        data = self.body.get("data")
        if data is None:
            primary: list[Mapping[str, Any]] = []
        elif isinstance(data, list):
            primary = list(data)
        else:
            primary = [data]
        return primary + list(self.body.get("included") or [])

    def has_errors(self) -> bool:
        """Return True if the envelope carries a top-level ``errors`` array."""
        return isinstance(self.body.get("errors"), list)

    def _raise_for_errors(self) -> None:
        if self.has_errors():
            errors = self.body["errors"]
            logger.warning("JSON:API error response (status %s): %s", self.status, errors)
            raise ApiErrorResponse(errors, status=self.status)
