"""Composite readings taken together by a single sensor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from weather_utils.models.quantities import (
    AbsoluteHumidity,
    Altitude,
    Pressure,
    RelativeHumidity,
    Temperature,
)

_FROZEN = ConfigDict(frozen=True)


class HumidityMeasurement(BaseModel):
    """A temperature and relative humidity read together (e.g. from a hygrometer)."""

    model_config = _FROZEN

    temperature: Temperature
    relative_humidity: RelativeHumidity

    def absolute_humidity(self) -> AbsoluteHumidity:
        from weather_utils.formulas.humidity import absolute_humidity

        return absolute_humidity(self.temperature, self.relative_humidity)

    def dew_point(self) -> Temperature:
        from weather_utils.formulas.humidity import dew_point

        return dew_point(self.temperature, self.relative_humidity)

    def heat_index(self) -> Temperature:
        from weather_utils.formulas.humidity import heat_index

        return heat_index(self.temperature, self.relative_humidity)


class PressureMeasurement(BaseModel):
    """A temperature and barometric pressure read together (e.g. from a barometer)."""

    model_config = _FROZEN

    temperature: Temperature
    pressure: Pressure

    def altitude(self) -> Altitude:
        from weather_utils.formulas.altitude import altitude

        return altitude(self.pressure, self.temperature)
