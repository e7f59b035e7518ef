"""Locate Davis sub-reports and convert them to line protocol.

Entry points return a :class:`ConversionResult` for every input: parse
failures, structurally invalid documents and readings without usable
fields are logged and reported as statuses, never raised.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from davis_lp.config import ConverterConfig, MeasurementConfig
from davis_lp.conversion.units import cup_size_for_rain_size
from davis_lp.extractor import extract_fields
from davis_lp.line_protocol import encode_line
from davis_lp.models.field import Schema
from davis_lp.models.reading import RawReading, matches_structure
from davis_lp.models.result import ConversionResult, ConversionStatus
from davis_lp.schemas.airlink import AIR_QUALITY_SCHEMA, AIR_QUALITY_STRUCTURE_TYPE
from davis_lp.schemas.weatherlink_live import (
    BAROMETER_SCHEMA,
    BAROMETER_STRUCTURE_TYPE,
    INDOOR_SCHEMA,
    INDOOR_STRUCTURE_TYPE,
    OUTDOOR_STRUCTURE_TYPE,
    build_outdoor_schema,
)

logger = logging.getLogger(__name__)


class Device(StrEnum):
    """Supported Davis devices."""

    WEATHERLINK_LIVE = "weatherlink-live"
    AIRLINK = "airlink"


def parse_payload(payload: str | bytes | Mapping[str, Any]) -> Any:
    """Decode *payload* if it is JSON text; pre-parsed documents pass through.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
        UnicodeDecodeError: If bytes are not valid UTF-8.
    """
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    if isinstance(payload, str):
        return json.loads(payload)
    return payload


def _is_timestamp(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, float):
        # Must survive scaling to nanoseconds.
        return value != 0 and math.isfinite(value * 1e9)
    return value != 0


def build_reading(document: Any, sensor_id_fallback: str) -> RawReading | None:
    """Build a :class:`RawReading` from a parsed document.

    Returns ``None`` when ``data.ts`` or ``data.conditions`` is missing or
    malformed. Entries of ``conditions`` that are not objects are skipped.
    """
    if not isinstance(document, Mapping):
        return None
    data = document.get("data")
    if not isinstance(data, Mapping):
        return None

    ts = data.get("ts")
    conditions = data.get("conditions")
    if not _is_timestamp(ts) or not isinstance(conditions, list):
        return None
    device_id = data.get("did") or sensor_id_fallback
    return RawReading(
        timestamp_seconds=ts,
        device_id=str(device_id),
        sub_reports=tuple(c for c in conditions if isinstance(c, Mapping)),
    )


def encode_sub_report(
    sub_report: Mapping[str, Any],
    schema: Schema,
    measurement: MeasurementConfig,
    reading: RawReading,
) -> str | None:
    """Encode one sub-report as a line, ``None`` if no field survived."""
    fields = extract_fields(sub_report, schema)
    return encode_line(
        measurement.measurement,
        measurement.tag_set(reading.device_id),
        fields,
        reading.timestamp_nanos,
    )


def _decode(payload: str | bytes | Mapping[str, Any]) -> tuple[Any, ConversionResult | None]:
    try:
        return parse_payload(payload), None
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("JSON parsing error: %s", exc)
        return None, ConversionResult.failure(
            ConversionStatus.PARSE_FAILURE,
            f"JSON parsing error: {exc}",
            status_text="JSON error",
        )


def _rain_cup_size(outdoor: Mapping[str, Any] | None, config: ConverterConfig) -> float:
    if config.auto_rain_size and outdoor is not None:
        cup_size = cup_size_for_rain_size(outdoor.get("rain_size"))
        if cup_size is not None:
            return cup_size
        logger.debug(
            "Unknown rain_size %r, using %s mm per tip",
            outdoor.get("rain_size"),
            config.rain_cup_size_mm,
        )
    return config.rain_cup_size_mm


def convert_weatherlink_live(
    payload: str | bytes | Mapping[str, Any],
    config: ConverterConfig | None = None,
) -> ConversionResult:
    """Convert a WeatherLink Live ``current_conditions`` document.

    Emits up to three lines, in order: outdoor conditions for the configured
    transmitter, indoor conditions and barometer.
    """
    config = config or ConverterConfig()

    document, failure = _decode(payload)
    if failure is not None:
        return failure

    reading = build_reading(document, config.sensor_id_fallback)
    if reading is None:
        logger.warning("Invalid payload structure")
        return ConversionResult.failure(
            ConversionStatus.STRUCTURAL_INVALID,
            "Invalid payload structure",
            status_text="Invalid structure",
        )

    outdoor = reading.find(OUTDOOR_STRUCTURE_TYPE, txid=config.outdoor_txid)
    targets: tuple[tuple[Mapping[str, Any] | None, Schema, MeasurementConfig], ...] = (
        (outdoor, build_outdoor_schema(_rain_cup_size(outdoor, config)), config.outdoor),
        (reading.find(INDOOR_STRUCTURE_TYPE), INDOOR_SCHEMA, config.indoor),
        (reading.find(BAROMETER_STRUCTURE_TYPE), BAROMETER_SCHEMA, config.barometer),
    )

    lines: list[str] = []
    for sub_report, schema, measurement in targets:
        if sub_report is None:
            continue
        line = encode_sub_report(sub_report, schema, measurement, reading)
        if line is not None:
            lines.append(line)

    if not lines:
        logger.warning("No valid data points")
        return ConversionResult.failure(
            ConversionStatus.NO_VALID_DATA,
            "No valid data points",
            status_text="No data",
        )

    logger.debug("Encoded %d points for device %s", len(lines), reading.device_id)
    return ConversionResult.success(lines, status_text=f"{len(lines)} points")


def _first_condition(document: Mapping[str, Any]) -> Any:
    conditions = document["data"]["conditions"]
    return conditions[0] if conditions else None


def convert_airlink(
    payload: str | bytes | Mapping[str, Any],
    config: ConverterConfig | None = None,
) -> ConversionResult:
    """Convert an AirLink ``current_conditions`` document.

    The first condition must be the air-quality report; anything else is
    rejected as structurally invalid.
    """
    config = config or ConverterConfig()

    document, failure = _decode(payload)
    if failure is not None:
        return failure

    reading = build_reading(document, config.sensor_id_fallback)
    air = _first_condition(document) if reading is not None else None
    if not isinstance(air, Mapping) or not matches_structure(air, AIR_QUALITY_STRUCTURE_TYPE):
        logger.warning("Invalid AirLink JSON structure - skipped")
        return ConversionResult.failure(
            ConversionStatus.STRUCTURAL_INVALID,
            "Invalid AirLink JSON structure - skipped",
            status_text="Invalid structure",
        )

    line = encode_sub_report(air, AIR_QUALITY_SCHEMA, config.air_quality, reading)
    if line is None:
        logger.warning("No valid data to write")
        return ConversionResult.failure(
            ConversionStatus.NO_VALID_DATA,
            "No valid data to write",
            status_text="No data",
        )

    return ConversionResult.success([line], status_text="AirLink OK")


def convert(
    payload: str | bytes | Mapping[str, Any],
    device: Device | str = Device.WEATHERLINK_LIVE,
    config: ConverterConfig | None = None,
) -> ConversionResult:
    """Convert *payload* from the given *device* to line protocol."""
    if Device(device) is Device.AIRLINK:
        return convert_airlink(payload, config)
    return convert_weatherlink_live(payload, config)
