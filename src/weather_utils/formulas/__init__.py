"""Pure weather formulas."""

from __future__ import annotations

from weather_utils.formulas.altitude import altitude, sea_level_pressure
from weather_utils.formulas.humidity import (
    absolute_humidity,
    dew_point,
    heat_index,
    saturation_vapor_pressure,
)
from weather_utils.formulas.temperature import celsius_to_fahrenheit, fahrenheit_to_celsius

__all__ = [
    "absolute_humidity",
    "altitude",
    "celsius_to_fahrenheit",
    "dew_point",
    "fahrenheit_to_celsius",
    "heat_index",
    "saturation_vapor_pressure",
    "sea_level_pressure",
]
