"""Tests for coercing bare numbers into quantity models."""

from __future__ import annotations

import pytest

from weather_utils.errors import InvalidInputError
from weather_utils.formulas._inputs import as_pressure, as_relative_humidity, as_temperature
from weather_utils.models.quantities import PressureUnit, Temperature, TemperatureUnit


class TestAsTemperature:
    def test_bare_number_is_celsius(self) -> None:
        assert as_temperature(21.5) == Temperature(value=21.5)

    def test_explicit_unit(self) -> None:
        assert as_temperature(70.0, TemperatureUnit.FAHRENHEIT).unit is TemperatureUnit.FAHRENHEIT

    def test_model_passes_through(self) -> None:
        temp = Temperature(value=10.0)
        assert as_temperature(temp) is temp

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="degrees celsius"):
            as_temperature("abc")  # type: ignore[arg-type]

    def test_rejection_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            as_temperature("abc", TemperatureUnit.FAHRENHEIT)  # type: ignore[arg-type]


class TestAsRelativeHumidity:
    @pytest.mark.parametrize("value", [-0.1, 100.1, float("nan")])
    def test_out_of_range_rejected(self, value: float) -> None:
        with pytest.raises(InvalidInputError, match="Relative humidity"):
            as_relative_humidity(value)


class TestAsPressure:
    def test_unit_named_in_error(self) -> None:
        with pytest.raises(InvalidInputError, match="kPa"):
            as_pressure(0.0, PressureUnit.KPA)
