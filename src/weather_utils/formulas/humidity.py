"""Humidity-derived quantities: absolute humidity, dew point and heat index.

Relative humidity is always a **percentage** in ``[0, 100]``.  Temperatures
may be given as a :class:`Temperature` in either scale, or as a bare number
of degrees Celsius.

The saturation vapour pressure uses the Magnus formula with the Bolton (1980)
constants, accurate to about 0.1 % between -30 °C and +35 °C.  Accuracy
degrades outside the terrestrial range; the formula itself is singular at
-243.5 °C and such temperatures are rejected.
"""

from __future__ import annotations

import math

from weather_utils.constants import (
    KELVIN_OFFSET,
    MAGNUS_A,
    MAGNUS_B_C,
    MAGNUS_E0_HPA,
    WATER_VAPOR_FACTOR,
)
from weather_utils.errors import InvalidInputError
from weather_utils.formulas._inputs import as_relative_humidity, as_temperature
from weather_utils.models.quantities import (
    AbsoluteHumidity,
    RelativeHumidity,
    Temperature,
    TemperatureUnit,
)


def _magnus_exponent(temperature_c: float) -> float:
    if temperature_c <= -MAGNUS_B_C:
        raise InvalidInputError(
            f"Magnus formula is undefined at or below {-MAGNUS_B_C} °C, got {temperature_c} °C"
        )
    return MAGNUS_A * temperature_c / (temperature_c + MAGNUS_B_C)


def saturation_vapor_pressure(temperature: Temperature | float) -> float:
    """Return the saturation vapour pressure over water, in hPa."""
    t = as_temperature(temperature).celsius
    return MAGNUS_E0_HPA * math.exp(_magnus_exponent(t))


def absolute_humidity(
    temperature: Temperature | float,
    relative_humidity: RelativeHumidity | float,
) -> AbsoluteHumidity:
    """Compute the absolute humidity (g/m³) of air.

    The saturation vapour pressure is scaled by the relative humidity and
    turned into a water vapour density with the ideal gas law.

    Raises :class:`InvalidInputError` when the relative humidity is outside
    ``[0, 100]`` or not finite.
    """
    t = as_temperature(temperature).celsius
    rh = as_relative_humidity(relative_humidity)
    vapor_pressure = saturation_vapor_pressure(t)
    density = vapor_pressure * rh.percent * WATER_VAPOR_FACTOR / (t + KELVIN_OFFSET)
    return AbsoluteHumidity(grams_per_cubic_meter=density)


def dew_point(
    temperature: Temperature | float,
    relative_humidity: RelativeHumidity | float,
) -> Temperature:
    """Compute the dew point by inverting the Magnus formula.

    The result uses the scale of *temperature* (Celsius for bare numbers).
    At 100 % relative humidity the dew point equals the air temperature.
    Dry air (0 %) has no dew point and raises :class:`InvalidInputError`.
    """
    temp = as_temperature(temperature)
    rh = as_relative_humidity(relative_humidity)
    if rh.percent == 0.0:
        raise InvalidInputError("Dew point is undefined at 0% relative humidity")
    exponent = _magnus_exponent(temp.celsius)
    if rh.percent == 100.0:
        return temp

    gamma = math.log(rh.fraction) + exponent
    if not MAGNUS_A - gamma > 0.0:
        raise InvalidInputError(
            f"Dew point is undefined for {temp} at {rh.percent}% relative humidity"
        )
    dew_point_c = MAGNUS_B_C * gamma / (MAGNUS_A - gamma)
    return Temperature(value=dew_point_c).to(temp.unit)


# Rothfusz regression coefficients (NWS), temperature in °F, RH in %.
_ROTHFUSZ = (
    -42.379,
    2.04901523,
    10.14333127,
    -0.22475541,
    -0.00683783,
    -0.05481717,
    0.00122874,
    0.00085282,
    -0.00000199,
)


def _heat_index_f(t: float, rh: float) -> float:
    simple = 0.5 * (t + 61.0 + (t - 68.0) * 1.2 + rh * 0.094)
    if (simple + t) / 2.0 < 80.0:
        return simple

    c1, c2, c3, c4, c5, c6, c7, c8, c9 = _ROTHFUSZ
    hi = (
        c1
        + c2 * t
        + c3 * rh
        + c4 * t * rh
        + c5 * t * t
        + c6 * rh * rh
        + c7 * t * t * rh
        + c8 * t * rh * rh
        + c9 * t * t * rh * rh
    )
    if rh < 13.0 and 80.0 <= t <= 112.0:
        hi -= ((13.0 - rh) / 4.0) * math.sqrt((17.0 - abs(t - 95.0)) / 17.0)
    elif rh > 85.0 and 80.0 <= t <= 87.0:
        hi += ((rh - 85.0) / 10.0) * ((87.0 - t) / 5.0)
    return hi


def heat_index(
    temperature: Temperature | float,
    relative_humidity: RelativeHumidity | float,
) -> Temperature:
    """Compute the heat index ("feels like" temperature) with the NWS algorithm.

    Steadman's simple formula is used when its average with the air
    temperature is below 80 °F; otherwise the Rothfusz regression applies,
    with the NWS adjustments for very dry and very humid air.  The result
    uses the scale of *temperature*.
    """
    temp = as_temperature(temperature)
    rh = as_relative_humidity(relative_humidity)
    hi = _heat_index_f(temp.fahrenheit, rh.percent)
    return Temperature(value=hi, unit=TemperatureUnit.FAHRENHEIT).to(temp.unit)
