"""Coercion of bare numbers into validated quantity models.

Bare floats are read in the default unit of their quantity (Celsius,
percent, hectopascals) unless a unit is given.  Validation failures surface
as :class:`~weather_utils.errors.InvalidInputError`.
"""

from __future__ import annotations

from pydantic import ValidationError

from weather_utils.errors import InvalidInputError
from weather_utils.models.quantities import (
    Pressure,
    PressureUnit,
    RelativeHumidity,
    Temperature,
    TemperatureUnit,
)


def as_temperature(
    value: Temperature | float, unit: TemperatureUnit = TemperatureUnit.CELSIUS
) -> Temperature:
    if isinstance(value, Temperature):
        return value
    try:
        return Temperature(value=value, unit=unit)
    except ValidationError as exc:
        raise InvalidInputError(
            f"Temperature must be a number of degrees {unit.value}, got {value!r}"
        ) from exc


def as_relative_humidity(value: RelativeHumidity | float) -> RelativeHumidity:
    if isinstance(value, RelativeHumidity):
        return value
    try:
        return RelativeHumidity(percent=value)
    except ValidationError as exc:
        raise InvalidInputError(
            f"Relative humidity must be a percentage between 0 and 100, got {value!r}"
        ) from exc


def as_pressure(value: Pressure | float, unit: PressureUnit = PressureUnit.HPA) -> Pressure:
    if isinstance(value, Pressure):
        return value
    try:
        return Pressure(value=value, unit=unit)
    except ValidationError as exc:
        raise InvalidInputError(
            f"Pressure must be a positive, finite number of {unit.value}, got {value!r}"
        ) from exc
