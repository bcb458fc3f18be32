"""Connections: a configured transport plus its middleware chain."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_client.config import ClientSettings, get_settings
from jsonapi_client.middleware import (
    ContentNegotiationMiddleware,
    ErrorHandlerMiddleware,
    KeyFormatMiddleware,
)
from jsonapi_client.transport.base import Transport, TransportResponse
from jsonapi_client.transport.httpx_transport import HTTPXTransport
from jsonapi_client.utils.key_formatter import KeyFormatter

logger = logging.getLogger(__name__)


class Connection:
    """Send requests to one JSON:API server.

    Requests pass through error handling, optional key formatting and
    content negotiation before reaching the transport. ``transport``
    replaces the default :class:`HTTPXTransport`; unset options fall back
    to :class:`ClientSettings`.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        key_format: Any = None,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: Transport | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._url = url if url is not None else settings.base_url
        self._key_format = key_format if key_format is not None else settings.key_format
        self.timeout = timeout if timeout is not None else settings.timeout
        self.user_agent = user_agent or settings.user_agent
        self._base_transport = transport
        self._owned_transport: HTTPXTransport | None = None
        self.transport = self._build()

    @property
    def base_transport(self) -> Transport:
        """Return the transport at the bottom of the middleware chain."""
        if self._base_transport is not None:
            return self._base_transport
        if self._owned_transport is None:
            self._owned_transport = HTTPXTransport(self._url, timeout=self.timeout)
        return self._owned_transport

    def _build(self) -> Transport:
        transport: Transport = ContentNegotiationMiddleware(
            self.base_transport, user_agent=self.user_agent
        )
        if self._key_format is not None:
            transport = KeyFormatMiddleware(transport, KeyFormatter(self._key_format))
        return ErrorHandlerMiddleware(transport)

    @property
    def url(self) -> str | None:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = value
        if self._base_transport is not None:
            logger.warning("Connection url changed but a custom transport is in use; url is not applied.")
        self.close()
        self.transport = self._build()

    @property
    def key_format(self) -> Any:
        return self._key_format

    @key_format.setter
    def key_format(self, value: Any) -> None:
        self._key_format = value
        self.transport = self._build()

    def close(self) -> None:
        """Close the HTTP client this connection created; custom transports are left open."""
        if self._owned_transport is not None:
            self._owned_transport.close()
            self._owned_transport = None

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> TransportResponse:
        """Send one request through the middleware chain."""
        return self.transport.request(method, path, params=params, headers=headers, body=body)


_default_connection: Connection | None = None


def configure(url: str | None = None, **options: Any) -> Connection:
    """Configure and return the process-wide default connection."""
    global _default_connection
    if _default_connection is not None:
        _default_connection.close()
    _default_connection = Connection(url, **options)
    return _default_connection


def default_connection() -> Connection | None:
    """Return the default connection, building it from settings when a base URL is set."""
    if _default_connection is None and get_settings().base_url:
        configure()
    return _default_connection


def reset_default_connection() -> None:
    """Close and drop the default connection."""
    global _default_connection
    if _default_connection is not None:
        _default_connection.close()
    _default_connection = None
