from __future__ import annotations

from weather_utils.models.config import WeatherSettings
from weather_utils.models.measurements import HumidityMeasurement, PressureMeasurement
from weather_utils.models.quantities import (
    AbsoluteHumidity,
    Altitude,
    Pressure,
    PressureUnit,
    RelativeHumidity,
    Temperature,
    TemperatureUnit,
)

__all__ = [
    # config
    "WeatherSettings",
    # measurements
    "HumidityMeasurement",
    "PressureMeasurement",
    # quantities
    "AbsoluteHumidity",
    "Altitude",
    "Pressure",
    "PressureUnit",
    "RelativeHumidity",
    "Temperature",
    "TemperatureUnit",
]
