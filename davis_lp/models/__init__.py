"""Domain models for the Davis line-protocol converter."""

from davis_lp.models.field import Converter, FieldSpec, NumericKind, Schema, TypedField
from davis_lp.models.reading import UNKNOWN_DEVICE_ID, RawReading, is_code, matches_structure
from davis_lp.models.result import ConversionResult, ConversionStatus, Severity

__all__ = [
    "ConversionResult",
    "ConversionStatus",
    "Converter",
    "FieldSpec",
    "NumericKind",
    "RawReading",
    "Schema",
    "Severity",
    "TypedField",
    "UNKNOWN_DEVICE_ID",
    "is_code",
    "matches_structure",
]
