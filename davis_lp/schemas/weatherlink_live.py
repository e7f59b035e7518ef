"""Field schemas for the WeatherLink Live ``current_conditions`` payload.

The base station reports one sub-report per data structure type: ISS
outdoor conditions (one per transmitter), the console's indoor sensor and
the barometer.  Values arrive in imperial units and rain as tip counts;
the schemas below convert them to metric.
"""

from __future__ import annotations

from functools import lru_cache, partial

from davis_lp.conversion.units import (
    DEFAULT_RAIN_CUP_SIZE_MM,
    fahrenheit_to_celsius,
    inhg_to_hpa,
    inhg_to_hpa_trend,
    mph_to_ms,
    tips_to_mm,
)
from davis_lp.models.field import FieldSpec, NumericKind, Schema

OUTDOOR_STRUCTURE_TYPE = 1
BAROMETER_STRUCTURE_TYPE = 3
INDOOR_STRUCTURE_TYPE = 4

_FLOAT = NumericKind.FLOAT
_INT = NumericKind.INTEGER


@lru_cache(maxsize=16)
def build_outdoor_schema(cup_size_mm: float = DEFAULT_RAIN_CUP_SIZE_MM) -> Schema:
    """Outdoor ISS schema for a rain collector with the given cup size."""
    rain = partial(tips_to_mm, cup_size_mm=cup_size_mm)
    return (
        # Temperatures (degF -> degC)
        FieldSpec("temp", _FLOAT, converter=fahrenheit_to_celsius),
        FieldSpec("hum", _FLOAT),  # %RH
        FieldSpec("dew_point", _FLOAT, converter=fahrenheit_to_celsius),
        FieldSpec("wet_bulb", _FLOAT, converter=fahrenheit_to_celsius),
        FieldSpec("heat_index", _FLOAT, converter=fahrenheit_to_celsius),
        FieldSpec("wind_chill", _FLOAT, converter=fahrenheit_to_celsius),
        FieldSpec("thw_index", _FLOAT, converter=fahrenheit_to_celsius),
        FieldSpec("thsw_index", _FLOAT, converter=fahrenheit_to_celsius),
        # Wind speed (mph -> m/s)
        FieldSpec("wind_speed_last", _FLOAT, converter=mph_to_ms),
        FieldSpec("wind_speed_avg_last_1_min", _FLOAT, converter=mph_to_ms),
        FieldSpec("wind_speed_avg_last_2_min", _FLOAT, converter=mph_to_ms),
        FieldSpec("wind_speed_hi_last_2_min", _FLOAT, converter=mph_to_ms),
        FieldSpec("wind_speed_avg_last_10_min", _FLOAT, converter=mph_to_ms),
        FieldSpec("wind_speed_hi_last_10_min", _FLOAT, converter=mph_to_ms),
        # Wind direction (degrees)
        FieldSpec("wind_dir_last", _INT),
        FieldSpec("wind_dir_scalar_avg_last_1_min", _INT),
        FieldSpec("wind_dir_scalar_avg_last_2_min", _INT),
        FieldSpec("wind_dir_at_hi_speed_last_2_min", _INT),
        FieldSpec("wind_dir_scalar_avg_last_10_min", _INT),
        FieldSpec("wind_dir_at_hi_speed_last_10_min", _INT),
        # Rain (tips -> mm)
        FieldSpec("rain_rate_last", _FLOAT, converter=rain),
        FieldSpec("rain_rate_hi", _FLOAT, converter=rain),
        FieldSpec("rainfall_last_15_min", _FLOAT, converter=rain),
        FieldSpec("rain_rate_hi_last_15_min", _FLOAT, converter=rain),
        FieldSpec("rainfall_last_60_min", _FLOAT, converter=rain),
        FieldSpec("rainfall_last_24_hr", _FLOAT, converter=rain),
        FieldSpec("rainfall_daily", _FLOAT, converter=rain),
        FieldSpec("rainfall_monthly", _FLOAT, converter=rain),
        FieldSpec("rainfall_year", _FLOAT, converter=rain),
        FieldSpec("rain_storm", _FLOAT, converter=rain),
        FieldSpec("rain_storm_last", _FLOAT, converter=rain),
        # Solar radiation (W/m2) and UV index
        FieldSpec("solar_rad", _INT),
        FieldSpec("uv_index", _FLOAT),
    )


OUTDOOR_SCHEMA: Schema = build_outdoor_schema()

INDOOR_SCHEMA: Schema = (
    FieldSpec("temp_in", _FLOAT, converter=fahrenheit_to_celsius),
    FieldSpec("hum_in", _FLOAT),
    FieldSpec("dew_point_in", _FLOAT, converter=fahrenheit_to_celsius),
    FieldSpec("heat_index_in", _FLOAT, converter=fahrenheit_to_celsius),
)

BAROMETER_SCHEMA: Schema = (
    FieldSpec("bar_sea_level", _FLOAT, converter=inhg_to_hpa),
    FieldSpec("bar_absolute", _FLOAT, converter=inhg_to_hpa),
    FieldSpec("bar_trend", _FLOAT, converter=inhg_to_hpa_trend),
)
