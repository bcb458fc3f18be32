"""Exceptions raised by the JSON:API client."""

from __future__ import annotations

from typing import Any, Sequence

from jsonapi_client.schemas.resource import JSONAPIErrorObject


class JSONAPIClientError(Exception):
    """Base class for every error raised by this package."""


class MalformedDocumentError(JSONAPIClientError):
    """A resource object is missing a required member."""


class RelationshipNotFoundError(JSONAPIClientError):
    """The relationship is not declared on the resource object."""


class RelationshipNotIncludedError(JSONAPIClientError):
    """The relationship is declared but its target was not included."""


class WrongShapeError(JSONAPIClientError):
    """A single resource was requested from a collection or vice versa."""


class UnsupportedSortDirectionError(JSONAPIClientError, ValueError):
    """A sort direction other than ``asc`` or ``desc`` was given."""


class UnrecognizedKeyFormatterError(JSONAPIClientError, ValueError):
    """The key format is not one of the known formats."""


class ClientNotSetError(JSONAPIClientError):
    """A terminal operation was called without a client or connection."""


class TransportError(JSONAPIClientError):
    """The request could not be completed by the HTTP layer."""


class UnsupportedMediaTypeError(TransportError):
    """The server answered with a body that is not JSON."""

    def __init__(self, media_type: str, *, status: int | None = None) -> None:
        self.media_type = media_type
        self.status = status
        super().__init__(
            f"Unsupported response media type '{media_type or '<none>'}'"
            f" (status {status})."
        )


class ApiErrorResponse(JSONAPIClientError):
    """The server returned a top-level ``errors`` array."""

    def __init__(self, errors: Sequence[dict[str, Any]], *, status: int | None = None) -> None:
        self.errors = list(errors)
        self.status = status
        super().__init__(self._summary())

    @property
    def error_objects(self) -> list[JSONAPIErrorObject]:
        """Return the raw errors parsed into error objects."""
        return [JSONAPIErrorObject.model_validate(error) for error in self.errors]

    def _summary(self) -> str:
        parts = []
        for error in self.errors:
            if not isinstance(error, dict):
                parts.append(str(error))
                continue
            label = error.get("title") or error.get("detail") or error.get("code") or "error"
            if error.get("status"):
                label = f"{error['status']} {label}"
            parts.append(str(label))
        return "API returned errors: " + "; ".join(parts) if parts else "API returned errors."
