"""Davis WeatherLink Live / AirLink JSON to InfluxDB line protocol."""

from davis_lp.config import ConverterConfig, MeasurementConfig
from davis_lp.models.result import ConversionResult, ConversionStatus, Severity
from davis_lp.router import Device, convert, convert_airlink, convert_weatherlink_live

__version__ = "1.0.0"

__all__ = [
    "ConversionResult",
    "ConversionStatus",
    "ConverterConfig",
    "Device",
    "MeasurementConfig",
    "Severity",
    "convert",
    "convert_airlink",
    "convert_weatherlink_live",
]
