"""Transports carrying JSON:API requests."""

from .base import HTTP_METHODS, Transport, TransportResponse
from .httpx_transport import HTTPXTransport

__all__ = ["HTTP_METHODS", "HTTPXTransport", "Transport", "TransportResponse"]
