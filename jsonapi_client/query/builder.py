"""Chainable JSON:API query builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping

from jsonapi_client.core.collection import Collection
from jsonapi_client.core.errors import ClientNotSetError, UnsupportedSortDirectionError
from jsonapi_client.core.response_mapper import ResponseMapper
from jsonapi_client.utils.query_params import to_query_string

if TYPE_CHECKING:
    from jsonapi_client.client import Client

SORT_DIRECTIONS = ("asc", "desc")


class Query:
    """Accumulate include/fields/filter/sort/page directives for one request.

    Every directive appends to the accumulated state (``page`` and
    ``headers`` merge by key) and returns the query so calls can be
    chained::

        Query(client).include("author").sort({"created": "desc"}).page(limit=10).fetch()
    """

    def __init__(self, client: Client | None = None) -> None:
        self.client = client
        self._headers: dict[str, str] = {}
        self.values: dict[str, Any] = {
            "include": [],
            "fields": [],
            "filter": [],
            "sort": [],
            "page": {},
        }

    def include(self, *paths: Any) -> Query:
        """Include related resources (``"author"``, ``"comments.author"``)."""
        self.values["include"].extend(paths)
        return self

    def sort(self, *args: Any) -> Query:
        """Sort by bare field names (ascending) or ``{field: "asc"|"desc"}`` mappings."""
        for arg in args:
            if isinstance(arg, Mapping):
                self._validate_sort(arg)
        self.values["sort"].extend(args)
        return self

    def fields(self, *args: Mapping[str, Any]) -> Query:
        """Restrict attributes per type: ``{"people": ["name", "age"]}``."""
        self.values["fields"].extend(args)
        return self

    def filter(self, *args: Mapping[str, Any]) -> Query:
        """Filter by key: ``{"status": ["draft", "published"]}``."""
        self.values["filter"].extend(args)
        return self

    def page(self, **opts: Any) -> Query:
        """Set page options such as ``limit``/``offset`` or ``size``/``number``."""
        self.values["page"].update(opts)
        return self

    def headers(self, **opts: str) -> Query:
        """Set HTTP headers sent with the request."""
        self._headers.update(opts)
        return self

    @property
    def request_headers(self) -> dict[str, str]:
        return dict(self._headers)

    def to_params(self) -> dict[str, Any]:
        """Return the query as a parameter tree, omitting empty directives."""
        params: dict[str, Any] = {}
        if self.values["filter"]:
            params["filter"] = self._filter_to_query_value()
        if self.values["fields"]:
            params["fields"] = self._fields_to_query_value()
        if self.values["include"]:
            params["include"] = self._include_to_query_value()
        if self.values["sort"]:
            params["sort"] = self._sort_to_query_value()
        if self.values["page"]:
            params["page"] = dict(self.values["page"])
        return params

    def to_query_string(self) -> str:
        """Return the query encoded as a URL query string."""
        return to_query_string(self.to_params())

    def __str__(self) -> str:
        return self.to_query_string()

    def fetch(self) -> Collection:
        """GET the collection endpoint and return a Collection."""
        client = self._require_client()
        response = client.agent().get(params=self.to_params(), headers=self.request_headers)
        return self._mapper(client, response).collection()

    def find(self, resource_id: Any) -> Any:
        """GET a single resource by id."""
        client = self._require_client()
        response = client.agent().get(
            id=resource_id, params=self.to_params(), headers=self.request_headers
        )
        return self._mapper(client, response).resource()

    def fetch_from(self, endpoint: str, *, collection: bool = True) -> Any:
        """GET a custom endpoint below the resource path."""
        client = self._require_client()
        agent = client.agent()
        path = "/".join([agent.negotiate_path(), str(endpoint).lstrip("/")])
        response = agent.get(path=path, params=self.to_params(), headers=self.request_headers)
        mapper = self._mapper(client, response)
        return mapper.collection() if collection else mapper.resource()

    def _require_client(self) -> Client:
        if self.client is None:
            raise ClientNotSetError("Client was not set. Use Query(client).")
        return self.client

    @staticmethod
    def _mapper(client: Client, response: Any) -> ResponseMapper:
        return ResponseMapper(response.body, registry=client.registry, status=response.status)

    @staticmethod
    def _validate_sort(mapping: Mapping[str, Any]) -> None:
        for field, direction in mapping.items():
            if str(direction).lower() not in SORT_DIRECTIONS:
                raise UnsupportedSortDirectionError(
                    f"Unknown direction '{direction}' for '{field}'. Use 'asc' or 'desc'."
                )

    def _sort_to_query_value(self) -> str:
        tokens: list[str] = []
        for item in self.values["sort"]:
            if isinstance(item, Mapping):
                for field, direction in item.items():
                    tokens.append(f"-{field}" if str(direction).lower() == "desc" else str(field))
            else:
                tokens.append(str(item))
        return ",".join(tokens)

    def _include_to_query_value(self) -> str:
        return ",".join(sorted({str(path) for path in self.values["include"]}))

    def _fields_to_query_value(self) -> dict[str, str]:
        grouped = self._group(self.values["fields"], stringify=True)
        return {key: ",".join(values) for key, values in grouped.items()}

    def _filter_to_query_value(self) -> dict[str, str]:
        grouped = self._group(self.values["filter"], stringify=False)
        return {key: ",".join(str(value) for value in values) for key, values in grouped.items()}

    @staticmethod
    def _group(mappings: list[Mapping[str, Any]], *, stringify: bool) -> dict[str, list[Any]]:
        grouped: dict[str, list[Any]] = {}
        for mapping in mappings:
            for key, value in mapping.items():
                bucket = grouped.setdefault(str(key), [])
                for item in value if isinstance(value, (list, tuple)) else [value]:
                    if stringify:
                        item = str(item)
                    if item not in bucket:
                        bucket.append(item)
        return grouped
