"""JSON:API content negotiation middleware."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_client.__about__ import __version__
from jsonapi_client.transport.base import Transport, TransportResponse
from jsonapi_client.utils.content_negotiation import JSONAPI_MEDIA_TYPE


class ContentNegotiationMiddleware:
    """Send JSON:API ``Accept``/``Content-Type`` headers unless the caller set them."""

    def __init__(self, transport: Transport, *, user_agent: str | None = None) -> None:
        """Store the downstream transport for middleware chaining."""
        self.transport = transport
        self.user_agent = user_agent or f"jsonapi-client/{__version__}"

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> TransportResponse:
        """Add negotiation headers before passing the request downstream."""
        negotiated = {"User-Agent": self.user_agent, "Accept": JSONAPI_MEDIA_TYPE}
        if body is not None:
            negotiated["Content-Type"] = JSONAPI_MEDIA_TYPE
        present = {key.lower() for key in (headers or {})}
        merged = {key: value for key, value in negotiated.items() if key.lower() not in present}
        merged.update(headers or {})
        return self.transport.request(method, path, params=params, headers=merged, body=body)
