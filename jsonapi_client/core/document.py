"""JSON:API resource object wrapper with change tracking."""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from jsonapi_client.core.errors import (
    ApiErrorResponse,
    MalformedDocumentError,
    RelationshipNotFoundError,
    RelationshipNotIncludedError,
)
from jsonapi_client.schemas.resource import JSONAPIErrorObject, JSONAPIResourceIdentifier


class IncludedTable:
    """Read-only view over an envelope's ``included`` resources.

    One table is created per parsed envelope and every Document built from
    that envelope holds a reference to it. Lookups by ``(type, id)`` go
    through an index built on first use.
    """

    def __init__(self, resources: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._resources: tuple[Mapping[str, Any], ...] = tuple(resources or ())
        self._index: dict[tuple[str, str], Mapping[str, Any]] | None = None

    @classmethod
    def coerce(cls, value: IncludedTable | Iterable[Mapping[str, Any]] | None) -> IncludedTable:
        """Return ``value`` if it already is a table, else wrap it."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def find(self, resource_type: str, resource_id: str) -> Mapping[str, Any] | None:
        """Return the included resource object for ``(type, id)``."""
        if self._index is None:
            index: dict[tuple[str, str], Mapping[str, Any]] = {}
            for resource in self._resources:
                key = (str(resource.get("type")), str(resource.get("id")))
                index.setdefault(key, resource)
            self._index = index
        return self._index.get((resource_type, resource_id))

    def __iter__(self):
        return iter(self._resources)

    def __len__(self) -> int:
        return len(self._resources)

    def __bool__(self) -> bool:
        return bool(self._resources)


class Document:
    """An abstraction layer between a Resource and the JSON object it represents."""

    def __init__(
        self,
        jsonapi_document: Mapping[str, Any],
        *,
        included: IncludedTable | Iterable[Mapping[str, Any]] | None = None,
    ) -> None:
        data = jsonapi_document.get("data")
        if not isinstance(data, Mapping) or data.get("type") in (None, ""):
            raise MalformedDocumentError("Resource object must include a 'type' member.")

        self._data = data
        self._type = str(data["type"])
        self.id: str | None = data.get("id")
        if included is None:
            included = jsonapi_document.get("included")
        self._included = IncludedTable.coerce(included)

        attributes = data.get("attributes") or {}
        self._original_attributes = MappingProxyType(dict(attributes))
        self._attributes: dict[str, Any] = copy.deepcopy(dict(attributes))

    @property
    def type(self) -> str:
        """Return the JSON:API type."""
        return self._type

    @property
    def data(self) -> Mapping[str, Any]:
        """Return the raw resource object."""
        return self._data

    @property
    def included(self) -> IncludedTable:
        """Return the shared included table."""
        return self._included

    @property
    def attributes(self) -> dict[str, Any]:
        """Return the current (mutable) attributes."""
        return self._attributes

    @attributes.setter
    def attributes(self, patch: Mapping[str, Any]) -> None:
        self.set_attributes(patch)

    @property
    def original_attributes(self) -> Mapping[str, Any]:
        """Return the attributes as received at construction time."""
        return self._original_attributes

    @property
    def relationships(self) -> Mapping[str, Any]:
        """Return the raw relationship objects."""
        return self._data.get("relationships") or {}

    @property
    def links(self) -> Mapping[str, Any]:
        return self._data.get("links") or {}

    @property
    def meta(self) -> Mapping[str, Any]:
        return self._data.get("meta") or {}

    @property
    def url(self) -> str | None:
        """Return the ``self`` link of the resource, if any."""
        return self.links.get("self")

    @property
    def errors(self) -> list[JSONAPIErrorObject]:
        """Return error objects attached to the resource object."""
        return [JSONAPIErrorObject.model_validate(error) for error in self._data.get("errors") or []]

    def get(self, key: str, default: Any = None) -> Any:
        """Return the current value of an attribute."""
        return self._attributes.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._attributes.get(key)

    def set_attributes(self, patch: Mapping[str, Any]) -> None:
        """Merge ``patch`` into the current attributes (last write wins)."""
        self._attributes.update(patch)

    def changed_attributes(self) -> dict[str, Any]:
        """Return ``{key: new_value}`` for attributes that differ from the original."""
        return {
            key: value
            for key, value in self._attributes.items()
            if self._original_attributes.get(key) != value
        }

    def changes(self) -> dict[str, tuple[Any, Any]]:
        """Return ``{key: (old_value, new_value)}`` for changed attributes."""
        return {
            key: (self._original_attributes.get(key), value)
            for key, value in self._attributes.items()
            if self._original_attributes.get(key) != value
        }

    def to_payload(self) -> dict[str, Any]:
        """Return the resource object to send when persisting this document.

        Persisted documents only send changed attributes (PATCH); new
        documents send every attribute (POST).
        """
        if self.id:
            return {"type": self._type, "id": self.id, "attributes": self.changed_attributes()}
        return {"type": self._type, "attributes": self._attributes}

    def relationship_data(self, name: str) -> Any:
        """Return the raw linkage of a relationship."""
        relationship = self.relationships.get(name)
        if not isinstance(relationship, Mapping) or "data" not in relationship:
            available = ", ".join(self.relationships) or "(none)"
            raise RelationshipNotFoundError(
                f"The relationship '{name}' does not exist on the '{self._type}' document. "
                f"Relationships available are: {available}"
            )
        return relationship["data"]

    def relationship(self, name: str) -> Document | list[Document] | None:
        """Resolve a relationship against the included table.

        Returns one Document for a to-one relationship, a list in linkage
        order for a to-many relationship and ``None`` for an empty to-one.
        """
        linkage = self.relationship_data(name)
        if linkage is None:
            return None
        if isinstance(linkage, list):
            return [self._find_included(name, pointer) for pointer in linkage]
        return self._find_included(name, linkage)

    def _find_included(self, name: str, pointer: Any) -> Document:
        try:
            identifier = JSONAPIResourceIdentifier.model_validate(pointer)
        except ValidationError as exc:
            raise MalformedDocumentError(
                f"Relationship '{name}' contains an invalid resource identifier: {pointer!r}"
            ) from exc
        resource = self._included.find(*identifier.key)
        if resource is None:
            raise RelationshipNotIncludedError(
                f"The relationship '{name}' ({identifier.type} {identifier.id}) was not included "
                f"in the response. Try adding 'include={name}' to your query."
            )
        return Document({"data": resource}, included=self._included)

    def save(self, agent: Any) -> Document:
        """Persist the document and return a new one built from the response.

        A successful response without a resource object (``204 No Content``)
        means the server accepted the document as sent.
        """
        body = {"data": self.to_payload()}
        if self.id:
            response = agent.patch(id=str(self.id), body=body)
        else:
            response = agent.post(body=body)
        payload = response.body or {}
        if isinstance(payload.get("errors"), list):
            raise ApiErrorResponse(payload["errors"], status=response.status)
        if payload.get("data") is None and response.success:
            return self._accepted()
        return Document(payload)

    def _accepted(self) -> Document:
        data = dict(self._data)
        data["id"] = self.id
        data["attributes"] = copy.deepcopy(self._attributes)
        return Document({"data": data}, included=self._included)

    def destroy(self, agent: Any) -> bool:
        """Delete the resource; return whether the server answered 2xx."""
        return agent.delete(id=str(self.id)).success

    def __repr__(self) -> str:
        return f"<Document type={self._type!r} id={self.id!r}>"
