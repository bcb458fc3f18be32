"""Key casing middleware."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_client.transport.base import Transport, TransportResponse
from jsonapi_client.utils.key_formatter import KeyFormatter


class KeyFormatMiddleware:
    """Externalize request body keys and internalize response body keys."""

    def __init__(self, transport: Transport, key_formatter: KeyFormatter) -> None:
        self.transport = transport
        self.key_formatter = key_formatter

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> TransportResponse:
        if body is not None:
            body = self.key_formatter.externalize(body)
        response = self.transport.request(method, path, params=params, headers=headers, body=body)
        response.body = self.key_formatter.internalize(response.body)
        return response
