"""Agents and clients binding resources to a connection."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_client.connection import Connection, default_connection
from jsonapi_client.core.errors import ClientNotSetError
from jsonapi_client.core.registry import TypeRegistry, default_registry
from jsonapi_client.query.builder import Query
from jsonapi_client.transport.base import TransportResponse


class Agent:
    """Issue JSON:API requests relative to one resource path."""

    def __init__(self, path: str, *, connection: Connection) -> None:
        self.path = path
        self.connection = connection

    def negotiate_path(self, path: str | None = None, id: Any = None) -> str:
        """Return ``path`` if given, else ``{path}/{id}``, else the base path."""
        if path:
            return path
        if id is not None:
            return f"{self.path}/{id}"
        return self.path

    def get(
        self,
        *,
        params: Mapping[str, Any] | None = None,
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
        id: Any = None,
    ) -> TransportResponse:
        return self.connection.request(
            "GET", self.negotiate_path(path, id), params=params, headers=headers
        )

    def post(
        self,
        *,
        body: Any = None,
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
        method: str = "POST",
        id: Any = None,
    ) -> TransportResponse:
        return self.connection.request(
            method, self.negotiate_path(path, id), headers=headers, body=body
        )

    def patch(
        self,
        *,
        body: Any = None,
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
        id: Any = None,
    ) -> TransportResponse:
        return self.post(body=body, path=path, headers=headers, method="PATCH", id=id)

    def put(
        self,
        *,
        body: Any = None,
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
        id: Any = None,
    ) -> TransportResponse:
        return self.post(body=body, path=path, headers=headers, method="PUT", id=id)

    def delete(
        self,
        *,
        body: Any = None,
        path: str | None = None,
        headers: Mapping[str, str] | None = None,
        id: Any = None,
    ) -> TransportResponse:
        return self.post(body=body, path=path, headers=headers, method="DELETE", id=id)


class Client:
    """Bundle a type, a path, a connection and a registry for one resource."""

    def __init__(
        self,
        *,
        type_: str | None = None,
        path: str | None = None,
        connection: Connection | None = None,
        registry: TypeRegistry | None = None,
        query_class: type[Query] = Query,
    ) -> None:
        self.type_ = type_
        self._path = path
        self._connection = connection
        self.registry = registry if registry is not None else default_registry
        self.query_class = query_class

    @property
    def path(self) -> str | None:
        """Return the resource path, defaulting to the type name."""
        return self._path or (str(self.type_) if self.type_ else None)

    @path.setter
    def path(self, value: str | None) -> None:
        self._path = value

    @property
    def connection(self) -> Connection | None:
        """Return this client's connection or the default one."""
        return self._connection or default_connection()

    @connection.setter
    def connection(self, value: Connection | None) -> None:
        self._connection = value

    def query(self) -> Query:
        return self.query_class(self)

    def agent(self) -> Agent:
        """Return an Agent for this client's path."""
        connection = self.connection
        if connection is None:
            raise ClientNotSetError(
                "No connection configured. Pass connection= or call jsonapi_client.configure(url)."
            )
        if not self.path:
            raise ClientNotSetError("Client has neither a type nor a path.")
        return Agent(self.path, connection=connection)

    def include(self, *args: Any) -> Query:
        return self.query().include(*args)

    def sort(self, *args: Any) -> Query:
        return self.query().sort(*args)

    def filter(self, *args: Mapping[str, Any]) -> Query:
        return self.query().filter(*args)

    def fields(self, *args: Mapping[str, Any]) -> Query:
        return self.query().fields(*args)

    def page(self, **opts: Any) -> Query:
        return self.query().page(**opts)

    def headers(self, **opts: str) -> Query:
        return self.query().headers(**opts)

    def fetch(self) -> Any:
        return self.query().fetch()

    def fetch_from(self, endpoint: str, *, collection: bool = True) -> Any:
        return self.query().fetch_from(endpoint, collection=collection)

    def find(self, resource_id: Any) -> Any:
        return self.query().find(resource_id)
