"""Unit conversion helpers shared across the codebase."""

from __future__ import annotations

from weather_utils.constants import KELVIN_OFFSET

# Multiply by the factor to get hectopascals.
PRESSURE_TO_HPA: dict[str, float] = {
    "hPa": 1.0,
    "mbar": 1.0,
    "Pa": 0.01,
    "kPa": 10.0,
    "inHg": 33.863886666667,
    "mmHg": 1.333223684,
}

METERS_PER_FOOT = 0.3048


def fahrenheit_to_celsius(f: float) -> float:
    """Convert Fahrenheit to Celsius."""
    return (f - 32.0) * 5.0 / 9.0


def celsius_to_fahrenheit(c: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return c * 9.0 / 5.0 + 32.0


def celsius_to_kelvin(c: float) -> float:
    return c + KELVIN_OFFSET


def to_hectopascals(value: float, unit: str) -> float:
    """Convert a pressure expressed in *unit* to hectopascals."""
    return value * PRESSURE_TO_HPA[unit]


def from_hectopascals(hpa: float, unit: str) -> float:
    """Convert a pressure in hectopascals to *unit*."""
    return hpa / PRESSURE_TO_HPA[unit]


def meters_to_feet(m: float) -> float:
    return m / METERS_PER_FOOT
