"""Field schema for the AirLink ``current_conditions`` payload."""

from __future__ import annotations

from davis_lp.conversion.units import fahrenheit_to_celsius
from davis_lp.models.field import FieldSpec, NumericKind, Schema

AIR_QUALITY_STRUCTURE_TYPE = 6

_FLOAT = NumericKind.FLOAT
_INT = NumericKind.INTEGER

AIR_QUALITY_SCHEMA: Schema = (
    # Meteorological values
    FieldSpec("temp", _FLOAT, converter=fahrenheit_to_celsius),
    FieldSpec("hum", _FLOAT),
    FieldSpec("dew_point", _FLOAT, converter=fahrenheit_to_celsius),
    FieldSpec("heat_index", _FLOAT, converter=fahrenheit_to_celsius),
    FieldSpec("wet_bulb", _FLOAT, converter=fahrenheit_to_celsius),
    # Particulate matter averages (ug/m3)
    FieldSpec("pm_1", _FLOAT),
    FieldSpec("pm_2p5", _FLOAT),
    FieldSpec("pm_2p5_last_1_hour", _FLOAT),
    FieldSpec("pm_2p5_last_3_hours", _FLOAT),
    FieldSpec("pm_2p5_last_24_hours", _FLOAT),
    FieldSpec("pm_2p5_nowcast", _FLOAT),
    FieldSpec("pm_10", _FLOAT),
    FieldSpec("pm_10_last_1_hour", _FLOAT),
    FieldSpec("pm_10_last_3_hours", _FLOAT),
    FieldSpec("pm_10_last_24_hours", _FLOAT),
    FieldSpec("pm_10_nowcast", _FLOAT),
    # Last single reading (ug/m3)
    FieldSpec("pm_1_last", _INT),
    FieldSpec("pm_2p5_last", _INT),
    FieldSpec("pm_10_last", _INT),
    # Data availability (0-100 %)
    FieldSpec("pct_pm_data_last_1_hour", _INT),
    FieldSpec("pct_pm_data_last_3_hours", _INT),
    FieldSpec("pct_pm_data_last_24_hours", _INT),
    FieldSpec("pct_pm_data_nowcast", _INT),
)
