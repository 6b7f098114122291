"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from weather_utils.models.config import WeatherSettings
from weather_utils.models.quantities import PressureUnit, TemperatureUnit


class TestWeatherSettings:
    def test_defaults(self, clean_env: None) -> None:
        settings = WeatherSettings(_env_file=None)
        assert settings.temperature_unit is TemperatureUnit.CELSIUS
        assert settings.pressure_unit is PressureUnit.HPA
        assert settings.output_format is None
        assert settings.precision == 2

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("WEATHER_UTILS_TEMPERATURE_UNIT", "fahrenheit")
        monkeypatch.setenv("WEATHER_UTILS_PRESSURE_UNIT", "inHg")
        monkeypatch.setenv("WEATHER_UTILS_PRECISION", "4")
        settings = WeatherSettings(_env_file=None)
        assert settings.temperature_unit is TemperatureUnit.FAHRENHEIT
        assert settings.pressure_unit is PressureUnit.INHG
        assert settings.precision == 4

    def test_invalid_precision(self, monkeypatch: pytest.MonkeyPatch, clean_env: None) -> None:
        monkeypatch.setenv("WEATHER_UTILS_PRECISION", "42")
        with pytest.raises(ValidationError):
            WeatherSettings(_env_file=None)
