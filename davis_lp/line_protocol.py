"""InfluxDB line protocol encoding.

A point is written as::

    measurement,tag1=v1,tag2=v2 field1=1.5,field2=7i 1700000000000000000

Tags are sorted by key and their values escaped; fields keep the order
they were extracted in; integer fields carry the ``i`` suffix so a
strict-typing bucket never sees the same field as both float and int.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from davis_lp.models.field import NumericKind, TypedField

# Backslash goes first so the later substitutions are not escaped twice.
_TAG_VALUE_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    (",", "\\,"),
    ("=", "\\="),
    (" ", "\\ "),
)

_MEASUREMENT_ESCAPES: tuple[tuple[str, str], ...] = (
    (",", "\\,"),
    (" ", "\\ "),
)

# Integral floats at or above this magnitude keep exponent notation.
_PLAIN_INTEGER_LIMIT = 1e21


def _escape(text: str, escapes: tuple[tuple[str, str], ...]) -> str:
    for old, new in escapes:
        text = text.replace(old, new)
    return text


def escape_tag_value(value: object) -> str:
    return _escape(str(value), _TAG_VALUE_ESCAPES)


def escape_measurement(name: str) -> str:
    return _escape(name, _MEASUREMENT_ESCAPES)


def format_number(value: float) -> str:
    """Shortest decimal form of *value*; integral values carry no fraction.

    ``0.0`` -> ``0``, ``50.0`` -> ``50``, ``4.47`` -> ``4.47``.
    """
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < _PLAIN_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def format_field(name: str, field: TypedField) -> str:
    if field.kind is NumericKind.INTEGER:
        return f"{name}={math.trunc(field.value)}i"
    return f"{name}={format_number(field.value)}"


def format_tags(tags: Mapping[str, object | None]) -> str:
    """Sorted, escaped ``key=value`` pairs; ``None`` and empty values are dropped."""
    pairs = [
        (key, escape_tag_value(value))
        for key, value in tags.items()
        if value is not None and str(value) != ""
    ]
    return ",".join(f"{key}={value}" for key, value in sorted(pairs))


def format_fields(fields: Mapping[str, TypedField]) -> str:
    return ",".join(format_field(name, field) for name, field in fields.items())


def encode_line(
    measurement: str,
    tags: Mapping[str, object | None],
    fields: Mapping[str, TypedField],
    timestamp_ns: int,
) -> str | None:
    """Encode one point, or return ``None`` when there are no fields.

    A line without fields is rejected by InfluxDB, so it is never produced.
    """
    field_str = format_fields(fields)
    if not field_str:
        return None

    tag_str = format_tags(tags)
    series = escape_measurement(measurement)
    if tag_str:
        series = f"{series},{tag_str}"

    return f"{series} {field_str} {timestamp_ns}"
