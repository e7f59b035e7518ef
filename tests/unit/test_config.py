"""Unit tests for ConverterConfig and MeasurementConfig."""

from __future__ import annotations

import pytest

from davis_lp.config import ConverterConfig, MeasurementConfig


class TestConverterConfigDefaults:
    """Defaults match a stock WeatherLink Live installation."""

    def test_defaults(self, default_config: ConverterConfig) -> None:
        assert default_config.rain_cup_size_mm == 0.2
        assert default_config.auto_rain_size is False
        assert default_config.outdoor_txid == 1
        assert default_config.sensor_id_fallback == "unknown"
        assert default_config.log_level == "INFO"

    def test_measurement_names(self, default_config: ConverterConfig) -> None:
        assert default_config.outdoor.measurement == "outdoor_conditions"
        assert default_config.indoor.measurement == "indoor_conditions"
        assert default_config.barometer.measurement == "barometer"
        assert default_config.air_quality.measurement == "air_quality"

    def test_static_tags(self, default_config: ConverterConfig) -> None:
        assert dict(default_config.air_quality.tags) == {
            "source": "davis_airlink",
            "location": "outside",
            "friendly_name": "Davis AirLink",
        }

    def test_config_is_frozen(self, default_config: ConverterConfig) -> None:
        with pytest.raises(AttributeError):
            default_config.outdoor_txid = 2  # type: ignore[misc]

    def test_config_is_hashable(self, default_config: ConverterConfig) -> None:
        assert hash(default_config) == hash(ConverterConfig())
        assert len({default_config, ConverterConfig(), ConverterConfig(outdoor_txid=2)}) == 2


class TestFromEnv:
    """Tests for ``ConverterConfig.from_env``."""

    def test_defaults_without_env(self, clean_env: pytest.MonkeyPatch) -> None:
        assert ConverterConfig.from_env() == ConverterConfig()

    def test_env_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("RAIN_CUP_SIZE_MM", "0.254")
        clean_env.setenv("AUTO_RAIN_SIZE", "yes")
        clean_env.setenv("OUTDOOR_TXID", "3")
        clean_env.setenv("SENSOR_ID_FALLBACK", "wll-garden")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = ConverterConfig.from_env()

        assert config.rain_cup_size_mm == 0.254
        assert config.auto_rain_size is True
        assert config.outdoor_txid == 3
        assert config.sensor_id_fallback == "wll-garden"
        assert config.log_level == "debug"

    @pytest.mark.parametrize("raw", ["0", "false", "no", ""])
    def test_auto_rain_size_falsy(self, clean_env: pytest.MonkeyPatch, raw: str) -> None:
        clean_env.setenv("AUTO_RAIN_SIZE", raw)
        assert ConverterConfig.from_env().auto_rain_size is False

    def test_invalid_txid_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("OUTDOOR_TXID", "one")
        with pytest.raises(ValueError):
            ConverterConfig.from_env()

    def test_configure_logging_unknown_level_does_not_raise(self) -> None:
        """Unknown level names fall back to INFO instead of failing."""
        ConverterConfig(log_level="verbose").configure_logging()


class TestMeasurementConfig:
    """Tests for ``MeasurementConfig.tag_set``."""

    def test_adds_sensor_id(self) -> None:
        measurement = MeasurementConfig("m", {"source": "davis"})
        assert measurement.tag_set("ABC") == {"source": "davis", "sensor_id": "ABC"}

    def test_without_sensor_id(self) -> None:
        measurement = MeasurementConfig("m", {"source": "davis"}, include_sensor_id=False)
        assert measurement.tag_set("ABC") == {"source": "davis"}

    def test_static_tags_not_mutated(self) -> None:
        tags = {"source": "davis"}
        MeasurementConfig("m", tags).tag_set("ABC")
        assert tags == {"source": "davis"}

    def test_mapping_tags_stored_as_pairs(self) -> None:
        measurement = MeasurementConfig("m", {"source": "davis", "location": "indoor"})
        assert measurement.tags == (("source", "davis"), ("location", "indoor"))
        pairs = (("source", "davis"), ("location", "indoor"))
        assert measurement == MeasurementConfig("m", pairs)
        assert hash(measurement) == hash(MeasurementConfig("m", pairs))
