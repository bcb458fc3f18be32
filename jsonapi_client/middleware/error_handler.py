"""Transport error handling middleware."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from jsonapi_client.core.errors import TransportError
from jsonapi_client.transport.base import Transport, TransportResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert HTTP client exceptions into :class:`TransportError`."""

    def __init__(self, transport: Transport) -> None:
        """Store the downstream transport for middleware chaining."""
        self.transport = transport

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> TransportResponse:
        """Send the request, re-raising httpx failures as TransportError."""
        try:
            return self.transport.request(method, path, params=params, headers=headers, body=body)
        except httpx.HTTPError as exc:
            logger.warning("JSON:API request failed: %s %s -> %s", method, path, exc)
            raise TransportError(f"{method} {path} failed: {exc}") from exc
