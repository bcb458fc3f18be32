"""Media type parsing for JSON:API responses."""

from __future__ import annotations

from dataclasses import dataclass, field

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
JSON_MEDIA_TYPES = frozenset({JSONAPI_MEDIA_TYPE, "application/json"})


@dataclass(frozen=True)
class MediaType:
    """A ``Content-Type`` value split into its type and parameters.

    ``ext`` and ``profile`` hold the space separated URIs JSON:API allows in
    those parameters; every other parameter lands in ``params``.
    """

    media_type: str
    ext: tuple[str, ...] = ()
    profile: tuple[str, ...] = ()
    params: dict[str, str] = field(default_factory=dict)

    @property
    def is_jsonapi(self) -> bool:
        return self.media_type == JSONAPI_MEDIA_TYPE

    @property
    def is_json(self) -> bool:
        return self.media_type in JSON_MEDIA_TYPES


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_jsonapi_media_type(content_type: str | None) -> MediaType:
    """Parse a ``Content-Type`` header value."""
    media_type, *raw_params = (content_type or "").split(";")
    ext: tuple[str, ...] = ()
    profile: tuple[str, ...] = ()
    params: dict[str, str] = {}
    for raw in raw_params:
        name, sep, value = raw.partition("=")
        if not sep:
            continue
        name, value = name.strip().lower(), _unquote(value.strip())
        if name == "ext":
            ext = tuple(value.split())
        elif name == "profile":
            profile = tuple(value.split())
        else:
            params[name] = value
    return MediaType(media_type.strip().lower(), ext, profile, params)


def is_json_media_type(content_type: str | None) -> bool:
    """Return True for ``application/vnd.api+json`` and ``application/json``."""
    return parse_jsonapi_media_type(content_type).is_json
