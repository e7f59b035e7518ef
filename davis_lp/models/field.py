"""Field descriptors used by the declarative report schemas."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

Converter = Callable[[float | None], float | None]


class NumericKind(StrEnum):
    """InfluxDB field types emitted by the encoder."""

    INTEGER = "int"
    FLOAT = "float"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """How one output field is read from a raw sub-report.

    ``source`` names the key in the raw report when it differs from
    ``output_name``. ``converter`` is applied to the coerced number and may
    return ``None`` to signal "no value".
    """

    output_name: str
    kind: NumericKind = NumericKind.FLOAT
    source: str | None = None
    converter: Converter | None = None

    @property
    def source_key(self) -> str:
        return self.source or self.output_name


@dataclass(frozen=True, slots=True)
class TypedField:
    """A resolved field value ready for encoding. Never ``None`` or NaN."""

    value: float
    kind: NumericKind


Schema = tuple[FieldSpec, ...]
