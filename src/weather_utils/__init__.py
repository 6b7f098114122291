"""Set of common weather-related computations.

Temperature conversions, absolute humidity, dew point, heat index and
barometric altitude as pure functions over unit-tagged quantities.
"""

from __future__ import annotations

from weather_utils.constants import (
    BAROMETRIC_EXPONENT,
    KELVIN_OFFSET,
    LAPSE_RATE_K_PER_M,
    SEA_LEVEL_PRESSURE_HPA,
    STANDARD_TEMPERATURE_C,
)
from weather_utils.errors import InvalidInputError, WeatherUtilsError
from weather_utils.formulas import (
    absolute_humidity,
    altitude,
    celsius_to_fahrenheit,
    dew_point,
    fahrenheit_to_celsius,
    heat_index,
    saturation_vapor_pressure,
    sea_level_pressure,
)
from weather_utils.models import (
    AbsoluteHumidity,
    Altitude,
    HumidityMeasurement,
    Pressure,
    PressureMeasurement,
    PressureUnit,
    RelativeHumidity,
    Temperature,
    TemperatureUnit,
    WeatherSettings,
)

__version__ = "0.1.0"

__all__ = [
    # constants
    "BAROMETRIC_EXPONENT",
    "KELVIN_OFFSET",
    "LAPSE_RATE_K_PER_M",
    "SEA_LEVEL_PRESSURE_HPA",
    "STANDARD_TEMPERATURE_C",
    # errors
    "InvalidInputError",
    "WeatherUtilsError",
    # formulas
    "absolute_humidity",
    "altitude",
    "celsius_to_fahrenheit",
    "dew_point",
    "fahrenheit_to_celsius",
    "heat_index",
    "saturation_vapor_pressure",
    "sea_level_pressure",
    # models
    "AbsoluteHumidity",
    "Altitude",
    "HumidityMeasurement",
    "Pressure",
    "PressureMeasurement",
    "PressureUnit",
    "RelativeHumidity",
    "Temperature",
    "TemperatureUnit",
    "WeatherSettings",
]
