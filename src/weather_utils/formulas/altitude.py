"""Barometric altitude and its inverse, sea-level pressure reduction.

Both use the hypsometric form of the barometric formula for the standard
atmosphere::

    h = ((P0 / P) ** (1 / n) - 1) * (T + 273.15) / L

where ``P0`` is :data:`~weather_utils.constants.SEA_LEVEL_PRESSURE_HPA`,
``L`` the lapse rate and ``n`` the barometric exponent.  ``T`` is the
temperature measured alongside ``P``.
"""

from __future__ import annotations

import math

from weather_utils._internal.units import from_hectopascals
from weather_utils.constants import (
    BAROMETRIC_EXPONENT,
    KELVIN_OFFSET,
    LAPSE_RATE_K_PER_M,
    SEA_LEVEL_PRESSURE_HPA,
    STANDARD_TEMPERATURE_C,
)
from weather_utils.errors import InvalidInputError
from weather_utils.formulas._inputs import as_pressure, as_temperature
from weather_utils.models.quantities import Altitude, Pressure, Temperature


def _kelvin(temperature: Temperature | float) -> float:
    t_k = as_temperature(temperature).kelvin
    if not (math.isfinite(t_k) and t_k > 0.0):
        raise InvalidInputError(f"Temperature must be finite and above absolute zero, got {t_k} K")
    return t_k


def altitude(
    pressure: Pressure | float,
    temperature: Temperature | float = STANDARD_TEMPERATURE_C,
) -> Altitude:
    """Compute the altitude (m) at which *pressure* is measured.

    *pressure* is a :class:`Pressure` or a bare number of hPa; it must be
    strictly positive, otherwise :class:`InvalidInputError` is raised.
    *temperature* must be finite and above absolute zero.  At the reference
    sea-level pressure the altitude is 0 for any temperature.
    """
    p = as_pressure(pressure).hectopascals
    t_k = _kelvin(temperature)
    ratio = (SEA_LEVEL_PRESSURE_HPA / p) ** (1.0 / BAROMETRIC_EXPONENT)
    return Altitude(meters=(ratio - 1.0) * t_k / LAPSE_RATE_K_PER_M)


def sea_level_pressure(
    pressure: Pressure | float,
    altitude: Altitude | float,
    temperature: Temperature | float = STANDARD_TEMPERATURE_C,
) -> Pressure:
    """Reduce a station *pressure* measured at *altitude* to sea level.

    The inverse of :func:`altitude`.  The result is expressed in the unit of
    *pressure* (hPa for bare numbers).
    """
    station = as_pressure(pressure)
    h = altitude.meters if isinstance(altitude, Altitude) else altitude
    if not math.isfinite(h):
        raise InvalidInputError(f"Altitude must be a finite number of meters, got {h!r}")
    t_k = _kelvin(temperature)

    base = 1.0 + LAPSE_RATE_K_PER_M * h / t_k
    if not base > 0.0:
        raise InvalidInputError(
            f"Cannot reduce pressure to sea level from {h} m at {t_k - KELVIN_OFFSET} °C"
        )
    try:
        reduced_hpa = station.hectopascals * base**BAROMETRIC_EXPONENT
    except OverflowError as exc:
        raise InvalidInputError(
            f"Sea-level pressure is out of range for {station} at {h} m"
        ) from exc
    value = from_hectopascals(reduced_hpa, station.unit.value)
    if not (math.isfinite(value) and value > 0.0):
        raise InvalidInputError(f"Sea-level pressure is out of range for {station} at {h} m")
    return Pressure(value=value, unit=station.unit)
