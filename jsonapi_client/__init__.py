"""Client for JSON:API v1.1 services."""

from .__about__ import __description__, __version__
from .client import Agent, Client
from .connection import Connection, configure, default_connection
from .core.attribute import AttributeSchema, CastType
from .core.collection import Collection
from .core.document import Document
from .core.errors import (
    ApiErrorResponse,
    ClientNotSetError,
    JSONAPIClientError,
    MalformedDocumentError,
    RelationshipNotFoundError,
    RelationshipNotIncludedError,
    TransportError,
    UnrecognizedKeyFormatterError,
    UnsupportedMediaTypeError,
    UnsupportedSortDirectionError,
    WrongShapeError,
)
from .core.registry import TypeRegistry, default_registry, lookup_type, register_type
from .core.response_mapper import ResponseMapper
from .query.builder import Query
from .resources import Attribute, HasMany, HasOne, Resource
from .transport import HTTPXTransport, Transport, TransportResponse
from .utils.key_formatter import KeyFormatter

__all__ = [
    "__version__",
    "__description__",
    # core:
    "AttributeSchema",
    "CastType",
    "Collection",
    "Document",
    "ResponseMapper",
    "TypeRegistry",
    "default_registry",
    "lookup_type",
    "register_type",
    # query:
    "Query",
    # resources:
    "Attribute",
    "HasMany",
    "HasOne",
    "Resource",
    # connection:
    "Agent",
    "Client",
    "Connection",
    "HTTPXTransport",
    "KeyFormatter",
    "Transport",
    "TransportResponse",
    "configure",
    "default_connection",
    # errors:
    "ApiErrorResponse",
    "ClientNotSetError",
    "JSONAPIClientError",
    "MalformedDocumentError",
    "RelationshipNotFoundError",
    "RelationshipNotIncludedError",
    "TransportError",
    "UnrecognizedKeyFormatterError",
    "UnsupportedMediaTypeError",
    "UnsupportedSortDirectionError",
    "WrongShapeError",
]
