"""Key casing transformations between wire and internal formats."""

from __future__ import annotations

import re
from typing import Any, Callable, Mapping

from jsonapi_client.core.errors import UnrecognizedKeyFormatterError

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_NEEDS_UNDERSCORE = re.compile(r"[A-Z-]")


def camelize(key: str) -> str:
    """Return ``first_name`` as ``firstName``."""
    head, *rest = key.split("_")
    return head[:1].lower() + head[1:] + "".join(part.capitalize() for part in rest)


def underscore(key: str) -> str:
    """Return ``firstName`` or ``first-name`` as ``first_name``."""
    if not _NEEDS_UNDERSCORE.search(key):
        return key
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    word = _CAMEL_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def dasherize(key: str) -> str:
    """Return ``first_name`` as ``first-name``."""
    return key.replace("_", "-")


def undasherize(key: str) -> str:
    """Return ``first-name`` as ``first_name``."""
    return key.replace("-", "_")


KEY_FORMATS: dict[str, tuple[Callable[[str], str], Callable[[str], str]]] = {
    "dasherize": (dasherize, undasherize),
    "camelize": (camelize, underscore),
}


class KeyFormatter:
    """Convert the keys of a JSON tree between internal and wire casing.

    ``key_format`` is ``"dasherize"``, ``"camelize"`` or a mapping with
    ``format`` and ``unformat`` callables.
    """

    def __init__(self, key_format: str | Mapping[str, Callable[[str], str]]) -> None:
        self.key_format = key_format
        self._format, self._unformat = self._resolve(key_format)

    @staticmethod
    def _resolve(key_format: Any) -> tuple[Callable[[str], str], Callable[[str], str]]:
        if isinstance(key_format, Mapping):
            format_, unformat = key_format.get("format"), key_format.get("unformat")
            if callable(format_) and callable(unformat):
                return format_, unformat
        elif isinstance(key_format, str) and key_format in KEY_FORMATS:
            return KEY_FORMATS[key_format]
        raise UnrecognizedKeyFormatterError(
            f"No key formatter found for {key_format!r}. Valid key formats are "
            f"{', '.join(repr(name) for name in KEY_FORMATS)} or a mapping of "
            "'format' and 'unformat' callables."
        )

    def externalize(self, tree: Any) -> Any:
        """Convert internal keys to the wire format."""
        return self._transform(tree, self._format)

    def internalize(self, tree: Any) -> Any:
        """Convert wire keys to the internal format."""
        return self._transform(tree, self._unformat)

    def _transform(self, value: Any, convert: Callable[[str], str]) -> Any:
        if isinstance(value, Mapping):
            return {
                convert(key) if isinstance(key, str) else key: self._transform(item, convert)
                for key, item in value.items()
            }
        if isinstance(value, list):
            return [self._transform(item, convert) for item in value]
        return value
