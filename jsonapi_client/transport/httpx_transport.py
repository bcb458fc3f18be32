"""httpx-backed transport."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from jsonapi_client.core.errors import UnsupportedMediaTypeError
from jsonapi_client.transport.base import HTTP_METHODS, TransportResponse
from jsonapi_client.utils.content_negotiation import is_json_media_type
from jsonapi_client.utils.query_params import build_query_params

logger = logging.getLogger(__name__)


class HTTPXTransport:
    """Send JSON requests through an ``httpx.Client``.

    Pass ``client`` to reuse a configured client (or a
    ``fastapi.testclient.TestClient`` in tests); otherwise one is created
    for ``base_url``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        if client is None:
            client = httpx.Client(base_url=base_url or "", timeout=timeout)
        self.client = client

    @property
    def base_url(self) -> str:
        return str(self.client.base_url)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> TransportResponse:
        """Send one request and decode its JSON body."""
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method '{method}'.")
        content = json.dumps(body) if body is not None else None
        logger.debug("%s %s params=%s", method, path, params)
        response = self.client.request(
            method,
            path,
            params=build_query_params(params),
            headers=dict(headers or {}),
            content=content,
        )
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return TransportResponse(
            status=response.status_code,
            body=self._decode(response),
            headers=dict(response.headers),
        )

    def close(self) -> None:
        self.client.close()

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content.strip():
            return {}
        content_type = response.headers.get("content-type", "")
        if not is_json_media_type(content_type):
            raise UnsupportedMediaTypeError(content_type, status=response.status_code)
        return response.json()
