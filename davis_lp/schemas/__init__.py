"""Static field schemas, one per Davis sub-report kind."""

from davis_lp.schemas.airlink import AIR_QUALITY_SCHEMA, AIR_QUALITY_STRUCTURE_TYPE
from davis_lp.schemas.weatherlink_live import (
    BAROMETER_SCHEMA,
    BAROMETER_STRUCTURE_TYPE,
    INDOOR_SCHEMA,
    INDOOR_STRUCTURE_TYPE,
    OUTDOOR_SCHEMA,
    OUTDOOR_STRUCTURE_TYPE,
    build_outdoor_schema,
)

__all__ = [
    "AIR_QUALITY_SCHEMA",
    "AIR_QUALITY_STRUCTURE_TYPE",
    "BAROMETER_SCHEMA",
    "BAROMETER_STRUCTURE_TYPE",
    "INDOOR_SCHEMA",
    "INDOOR_STRUCTURE_TYPE",
    "OUTDOOR_SCHEMA",
    "OUTDOOR_STRUCTURE_TYPE",
    "build_outdoor_schema",
]
