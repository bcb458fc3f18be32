"""Pydantic schemas for JSON:API wire objects read by the client."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="allow")

    type: str
    id: str

    @property
    def key(self) -> tuple[str, str]:
        """Return the ``(type, id)`` pair used for included lookups."""
        return (self.type, self.id)


class JSONAPIErrorObject(BaseModel):
    """Error object as returned in a top-level ``errors`` array."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="allow")

    id: Optional[str] = None
    status: Optional[str] = None
    code: Optional[str] = None
    title: Optional[str] = None
    detail: Optional[str] = None
    source: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None
    meta: Optional[Dict[str, Any]] = None
