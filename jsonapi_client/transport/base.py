"""Transport interface used by agents to reach a JSON:API server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, runtime_checkable

HTTP_METHODS = ("GET", "POST", "PATCH", "PUT", "DELETE")


@dataclass
class TransportResponse:
    """Status and parsed body of one HTTP exchange."""

    status: int
    body: Any = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        """Return True for 2xx statuses."""
        return 200 <= self.status < 300


@runtime_checkable
class Transport(Protocol):
    """Anything able to send one request and return a parsed response."""

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> TransportResponse:
        ...
