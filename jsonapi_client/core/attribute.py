"""Attribute casting and serialization rules."""

from __future__ import annotations

import copy
import re
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable

from dateutil import parser as date_parser


class CastType(str, Enum):
    """Primitive cast types understood by :class:`AttributeSchema`."""

    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    FLOAT = "float"
    DATE = "date"
    TIME = "time"


_CAST_ALIASES: dict[Any, CastType] = {
    "string": CastType.STRING,
    "str": CastType.STRING,
    str: CastType.STRING,
    "integer": CastType.INTEGER,
    "int": CastType.INTEGER,
    int: CastType.INTEGER,
    "decimal": CastType.DECIMAL,
    "bigdecimal": CastType.DECIMAL,
    Decimal: CastType.DECIMAL,
    "float": CastType.FLOAT,
    float: CastType.FLOAT,
    "date": CastType.DATE,
    date: CastType.DATE,
    "time": CastType.TIME,
    "datetime": CastType.TIME,
    datetime: CastType.TIME,
}

_INTEGER_PREFIX = re.compile(r"\s*([-+]?\d+)")


def _to_string(value: Any) -> str:
    return str(value)


def _to_integer(value: Any) -> int:
    if isinstance(value, (bool, int, float, Decimal)):
        return int(value)
    match = _INTEGER_PREFIX.match(str(value))
    return int(match.group(1)) if match else 0


def _to_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _to_float(value: Any) -> float:
    return float(value)


def _to_datetime(value: Any) -> datetime | None:
    # Only text is parsed; numbers are not read as Unix timestamps.
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError):
        return None


def _to_date(value: Any) -> date | None:
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    parsed = _to_datetime(value)
    return parsed.date() if parsed is not None else None


_CASTERS: dict[CastType, Callable[[Any], Any]] = {
    CastType.STRING: _to_string,
    CastType.INTEGER: _to_integer,
    CastType.DECIMAL: _to_decimal,
    CastType.FLOAT: _to_float,
    CastType.DATE: _to_date,
    CastType.TIME: _to_datetime,
}


def _passthrough(value: Any) -> Any:
    return value


def resolve_caster(cast_type: Any) -> Callable[[Any], Any]:
    """Return the value caster for a cast type tag or user function.

    Known tags (``"integer"``, ``int``, ``CastType.DATE`` ...) map to the
    built-in casters. Any other callable is used as-is. Unknown tags pass
    values through unchanged.
    """
    try:
        tag = _CAST_ALIASES.get(cast_type)
    except TypeError:
        tag = None
    if tag is not None:
        return _CASTERS[tag]
    if callable(cast_type):
        return cast_type
    return _passthrough


class AttributeSchema:
    """Cast, default and serialize rules for one resource attribute."""

    def __init__(
        self,
        name: str,
        cast_type: Any = None,
        *,
        default: Any = None,
        array: bool = False,
        serialize: Callable[[Any], Any] | str | None = None,
    ) -> None:
        self.name = name
        self.cast_type = cast_type
        self.default = default
        self.array = array
        self.serializer = serialize
        self._caster = resolve_caster(cast_type)

    @property
    def options(self) -> dict[str, Any]:
        """Return the declared options."""
        return {"default": self.default, "array": self.array, "serialize": self.serializer}

    def process(self, value: Any) -> Any:
        """Cast a raw wire value, falling back to the default for ``None``."""
        if value is None:
            return self.default_value()
        return self.cast(value)

    def cast(self, value: Any) -> Any:
        """Cast a value; lists are cast element by element."""
        if value is None:
            return [] if self.array else None
        if isinstance(value, (list, tuple)):
            return [self.cast_value(item) for item in value]
        return self.cast_value(value)

    def cast_value(self, value: Any) -> Any:
        """Cast a single scalar value."""
        if value is None:
            return None
        return self._caster(value)

    def serialize(self, value: Any) -> Any:
        """Convert a cast value back into its wire representation."""
        if isinstance(self.serializer, str):
            return getattr(value, self.serializer)()
        if callable(self.serializer):
            return self.serializer(value)
        return value

    def default_value(self) -> Any:
        """Return a fresh default value."""
        if callable(self.default):
            return self.default()
        if self.default is None:
            return [] if self.array else None
        return copy.deepcopy(self.default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.cast_type!r})"
