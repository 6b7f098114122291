"""Celsius / Fahrenheit conversions.

Both functions accept either a bare number or a :class:`Temperature` and
return the same kind of value.  A :class:`Temperature` tagged with the wrong
scale is rejected rather than silently reinterpreted.
"""

from __future__ import annotations

from typing import overload

from weather_utils._internal import units
from weather_utils.errors import InvalidInputError
from weather_utils.models.quantities import Temperature, TemperatureUnit


def _require_unit(temperature: Temperature, expected: TemperatureUnit) -> None:
    if temperature.unit is not expected:
        raise InvalidInputError(
            f"Expected a temperature in {expected.value}, got {temperature.unit.value}"
        )


@overload
def celsius_to_fahrenheit(c: float) -> float: ...
@overload
def celsius_to_fahrenheit(c: Temperature) -> Temperature: ...
def celsius_to_fahrenheit(c: Temperature | float) -> Temperature | float:
    """Convert °C to °F: ``f = c * 9/5 + 32``."""
    if isinstance(c, Temperature):
        _require_unit(c, TemperatureUnit.CELSIUS)
        return Temperature(
            value=units.celsius_to_fahrenheit(c.value), unit=TemperatureUnit.FAHRENHEIT
        )
    return units.celsius_to_fahrenheit(c)


@overload
def fahrenheit_to_celsius(f: float) -> float: ...
@overload
def fahrenheit_to_celsius(f: Temperature) -> Temperature: ...
def fahrenheit_to_celsius(f: Temperature | float) -> Temperature | float:
    """Convert °F to °C: ``c = (f - 32) * 5/9``."""
    if isinstance(f, Temperature):
        _require_unit(f, TemperatureUnit.FAHRENHEIT)
        return Temperature(
            value=units.fahrenheit_to_celsius(f.value), unit=TemperatureUnit.CELSIUS
        )
    return units.fahrenheit_to_celsius(f)
