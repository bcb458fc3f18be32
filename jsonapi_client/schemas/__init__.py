"""Pydantic schemas for JSON:API."""

from .resource import JSONAPIErrorObject, JSONAPIResourceIdentifier

__all__ = [
    "JSONAPIErrorObject",
    "JSONAPIResourceIdentifier",
]
