"""Shared fixtures for the Davis line-protocol converter test suite.

Provides realistic WeatherLink Live and AirLink ``current_conditions``
documents plus a default configuration used across unit and integration
tests.
"""

from __future__ import annotations

import copy
import json

import pytest

from davis_lp.config import ConverterConfig

# ---------------------------------------------------------------------------
# Raw documents
# ---------------------------------------------------------------------------

_WEATHERLINK_LIVE_DOCUMENT: dict = {
    "data": {
        "did": "001D0A700002",
        "ts": 1531754005,
        "conditions": [
            {
                "lsid": 48310,
                "data_structure_type": 1,
                "txid": 2,
                "temp": 32.0,
                "hum": 10.0,
            },
            {
                "lsid": 48308,
                "data_structure_type": 1,
                "txid": 1,
                "temp": 68.0,
                "hum": 55.3,
                "dew_point": 50.0,
                "wet_bulb": None,
                "wind_speed_last": 10,
                "wind_dir_last": 180.9,
                "rain_size": 2,
                "rainfall_daily": 3,
                "rain_storm": None,
                "solar_rad": 747,
                "uv_index": 5.5,
                "rx_state": 0,
                "trans_battery_flag": 0,
            },
            {
                "lsid": 3187671188,
                "data_structure_type": 2,
                "txid": 3,
                "temp_1": 74.5,
                "moist_soil_1": 12,
            },
            {
                "lsid": 48307,
                "data_structure_type": 4,
                "temp_in": 77.0,
                "hum_in": 41.1,
                "dew_point_in": None,
                "heat_index_in": 78.8,
            },
            {
                "lsid": 48306,
                "data_structure_type": 3,
                "bar_sea_level": 29.92,
                "bar_trend": 0.031,
                "bar_absolute": 29.5,
            },
        ],
    },
    "error": None,
}

_AIRLINK_DOCUMENT: dict = {
    "data": {
        "did": "001D0A100021",
        "name": "My AirLink",
        "ts": 1700000000,
        "conditions": [
            {
                "lsid": 348414,
                "data_structure_type": 6,
                "temp": 77.0,
                "hum": 40.5,
                "dew_point": None,
                "pm_1": 3.5,
                "pm_2p5": 5.25,
                "pm_10_nowcast": "n/a",
                "pm_2p5_last": 7,
                "pm_10_last": 12.8,
                "pct_pm_data_last_1_hour": 100,
            }
        ],
    },
    "error": None,
}

# ---------------------------------------------------------------------------
# Expected lines for the documents above
# ---------------------------------------------------------------------------

_WEATHERLINK_OUTDOOR_LINE = (
    "outdoor_conditions,friendly_name=Davis\\ Outdoor\\ ISS,location=outside,"
    "sensor_id=001D0A700002,source=davis "
    "temp=20,hum=55.3,dew_point=10,wind_speed_last=4.47,wind_dir_last=180i,"
    "rainfall_daily=0.6,solar_rad=747i,uv_index=5.5 1531754005000000000"
)
_WEATHERLINK_INDOOR_LINE = (
    "indoor_conditions,friendly_name=Davis\\ Indoor\\ Console,location=indoor,"
    "sensor_id=001D0A700002,source=davis "
    "temp_in=25,hum_in=41.1,heat_index_in=26 1531754005000000000"
)
_WEATHERLINK_BAROMETER_LINE = (
    "barometer,friendly_name=Davis\\ Barometer,location=indoor,"
    "sensor_id=001D0A700002,source=davis "
    "bar_sea_level=1013.2,bar_absolute=999,bar_trend=1.05 1531754005000000000"
)
_AIRLINK_LINE = (
    "air_quality,friendly_name=Davis\\ AirLink,location=outside,"
    "sensor_id=001D0A100021,source=davis_airlink "
    "temp=25,hum=40.5,pm_1=3.5,pm_2p5=5.25,pm_2p5_last=7i,pm_10_last=12i,"
    "pct_pm_data_last_1_hour=100i 1700000000000000000"
)


@pytest.fixture()
def weatherlink_document() -> dict:
    """Return a fresh copy of a WeatherLink Live document with all sub-reports."""
    return copy.deepcopy(_WEATHERLINK_LIVE_DOCUMENT)


@pytest.fixture()
def weatherlink_json(weatherlink_document: dict) -> str:
    """Return ``weatherlink_document`` serialized as JSON text."""
    return json.dumps(weatherlink_document)


@pytest.fixture()
def airlink_document() -> dict:
    """Return a fresh copy of an AirLink document."""
    return copy.deepcopy(_AIRLINK_DOCUMENT)


@pytest.fixture()
def expected_weatherlink_lines() -> list[str]:
    """Return the outdoor, indoor and barometer lines for ``weatherlink_document``."""
    return [
        _WEATHERLINK_OUTDOOR_LINE,
        _WEATHERLINK_INDOOR_LINE,
        _WEATHERLINK_BAROMETER_LINE,
    ]


@pytest.fixture()
def expected_airlink_line() -> str:
    """Return the air-quality line for ``airlink_document``."""
    return _AIRLINK_LINE


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture()
def default_config() -> ConverterConfig:
    """Return the stock configuration (0.2 mm cup, ISS on transmitter 1)."""
    return ConverterConfig()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove converter environment variables so defaults apply."""
    for name in (
        "RAIN_CUP_SIZE_MM",
        "AUTO_RAIN_SIZE",
        "OUTDOOR_TXID",
        "SENSOR_ID_FALLBACK",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
