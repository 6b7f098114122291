"""Immutable, unit-tagged physical quantities.

Every model is frozen: converting a quantity returns a new instance and the
unit tag always travels with its value.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from weather_utils._internal.units import (
    celsius_to_fahrenheit,
    celsius_to_kelvin,
    fahrenheit_to_celsius,
    from_hectopascals,
    meters_to_feet,
    to_hectopascals,
)

_FROZEN = ConfigDict(frozen=True)


class TemperatureUnit(StrEnum):
    """Supported temperature scales."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    @property
    def symbol(self) -> str:
        return "°C" if self is TemperatureUnit.CELSIUS else "°F"


class PressureUnit(StrEnum):
    """Supported barometric pressure units."""

    HPA = "hPa"
    MBAR = "mbar"
    PA = "Pa"
    KPA = "kPa"
    INHG = "inHg"
    MMHG = "mmHg"


class Temperature(BaseModel):
    """A temperature reading tagged with its scale.

    No physical bounds are enforced: values below absolute zero are accepted
    and converted arithmetically.
    """

    model_config = _FROZEN

    value: float
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @property
    def celsius(self) -> float:
        if self.unit is TemperatureUnit.CELSIUS:
            return self.value
        return fahrenheit_to_celsius(self.value)

    @property
    def fahrenheit(self) -> float:
        if self.unit is TemperatureUnit.FAHRENHEIT:
            return self.value
        return celsius_to_fahrenheit(self.value)

    @property
    def kelvin(self) -> float:
        return celsius_to_kelvin(self.celsius)

    def to(self, unit: TemperatureUnit | str) -> Temperature:
        """Return the same temperature expressed in *unit*."""
        target = TemperatureUnit(unit)
        if target is self.unit:
            return self
        value = self.celsius if target is TemperatureUnit.CELSIUS else self.fahrenheit
        return Temperature(value=value, unit=target)

    def __str__(self) -> str:
        return f"{self.value}{self.unit.symbol}"


class RelativeHumidity(BaseModel):
    """Relative humidity expressed as a percentage in ``[0, 100]``.

    Values outside the range are rejected at construction, never clamped.
    """

    model_config = _FROZEN

    percent: float = Field(ge=0.0, le=100.0, allow_inf_nan=False)

    @property
    def fraction(self) -> float:
        return self.percent / 100.0


class AbsoluteHumidity(BaseModel):
    """Mass of water vapour per unit volume of air."""

    model_config = _FROZEN

    grams_per_cubic_meter: float


class Pressure(BaseModel):
    """A barometric pressure reading tagged with its unit.

    Pressure must be strictly positive: a zero or negative pressure has no
    physical meaning and makes the barometric formula undefined.
    """

    model_config = _FROZEN

    value: float = Field(gt=0.0, allow_inf_nan=False)
    unit: PressureUnit = PressureUnit.HPA

    @property
    def hectopascals(self) -> float:
        return to_hectopascals(self.value, self.unit.value)

    def to(self, unit: PressureUnit | str) -> Pressure:
        """Return the same pressure expressed in *unit*."""
        target = PressureUnit(unit)
        if target is self.unit:
            return self
        return Pressure(value=from_hectopascals(self.hectopascals, target.value), unit=target)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"


class Altitude(BaseModel):
    """Height above the reference sea level."""

    model_config = _FROZEN

    meters: float

    @property
    def feet(self) -> float:
        return meters_to_feet(self.meters)
