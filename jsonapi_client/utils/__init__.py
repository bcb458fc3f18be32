"""Utility helpers for JSON:API parsing, headers and key casing."""

from .content_negotiation import JSONAPI_MEDIA_TYPE, MediaType, is_json_media_type, parse_jsonapi_media_type
from .key_formatter import KeyFormatter
from .query_params import build_query_params, to_query_string

__all__ = [
    "JSONAPI_MEDIA_TYPE",
    "KeyFormatter",
    "MediaType",
    "build_query_params",
    "is_json_media_type",
    "parse_jsonapi_media_type",
    "to_query_string",
]
