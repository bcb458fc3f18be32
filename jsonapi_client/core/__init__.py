"""Core JSON:API document model, casting and response mapping."""

from .attribute import AttributeSchema, CastType
from .collection import Collection
from .document import Document, IncludedTable
from .registry import TypeRegistry, default_registry, lookup_type, register_type
from .response_mapper import ResponseMapper

__all__ = [
    "AttributeSchema",
    "CastType",
    "Collection",
    "Document",
    "IncludedTable",
    "ResponseMapper",
    "TypeRegistry",
    "default_registry",
    "lookup_type",
    "register_type",
]
