"""Converter configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from davis_lp.conversion.units import DEFAULT_RAIN_CUP_SIZE_MM
from davis_lp.models.reading import UNKNOWN_DEVICE_ID

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class MeasurementConfig:
    """Measurement name and static tags for one sub-report category."""

    measurement: str
    tags: tuple[tuple[str, str], ...] = ()
    include_sensor_id: bool = True

    def __post_init__(self) -> None:
        # Mappings are stored as (key, value) pairs.
        if isinstance(self.tags, Mapping):
            object.__setattr__(self, "tags", tuple(self.tags.items()))

    def tag_set(self, device_id: str) -> dict[str, str | None]:
        """Static tags plus the dynamic ``sensor_id`` for *device_id*."""
        tags: dict[str, str | None] = dict(self.tags)
        if self.include_sensor_id:
            tags["sensor_id"] = device_id
        return tags


def _default_outdoor() -> MeasurementConfig:
    return MeasurementConfig(
        measurement="outdoor_conditions",
        tags={"source": "davis", "location": "outside", "friendly_name": "Davis Outdoor ISS"},
    )


def _default_indoor() -> MeasurementConfig:
    return MeasurementConfig(
        measurement="indoor_conditions",
        tags={"source": "davis", "location": "indoor", "friendly_name": "Davis Indoor Console"},
    )


def _default_barometer() -> MeasurementConfig:
    return MeasurementConfig(
        measurement="barometer",
        tags={"source": "davis", "location": "indoor", "friendly_name": "Davis Barometer"},
    )


def _default_air_quality() -> MeasurementConfig:
    return MeasurementConfig(
        measurement="air_quality",
        tags={"source": "davis_airlink", "location": "outside", "friendly_name": "Davis AirLink"},
    )


@dataclass(frozen=True)
class ConverterConfig:
    """Configuration for the Davis line-protocol converter.

    Passed explicitly into every conversion call; defaults match a stock
    WeatherLink Live with a 0.2 mm rain collector and the ISS on
    transmitter 1.
    """

    rain_cup_size_mm: float = DEFAULT_RAIN_CUP_SIZE_MM
    auto_rain_size: bool = False
    outdoor_txid: int = 1
    sensor_id_fallback: str = UNKNOWN_DEVICE_ID
    log_level: str = "INFO"
    outdoor: MeasurementConfig = field(default_factory=_default_outdoor)
    indoor: MeasurementConfig = field(default_factory=_default_indoor)
    barometer: MeasurementConfig = field(default_factory=_default_barometer)
    air_quality: MeasurementConfig = field(default_factory=_default_air_quality)

    @classmethod
    def from_env(cls) -> ConverterConfig:
        """Build configuration from environment variables."""
        return cls(
            rain_cup_size_mm=float(
                os.environ.get("RAIN_CUP_SIZE_MM", str(DEFAULT_RAIN_CUP_SIZE_MM))
            ),
            auto_rain_size=os.environ.get("AUTO_RAIN_SIZE", "false").strip().lower() in _TRUTHY,
            outdoor_txid=int(os.environ.get("OUTDOOR_TXID", "1")),
            sensor_id_fallback=os.environ.get("SENSOR_ID_FALLBACK", UNKNOWN_DEVICE_ID),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),
        )

    def configure_logging(self) -> None:
        """Set up logging based on configured level."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper(), logging.INFO),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
