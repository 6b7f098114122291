"""Exception hierarchy for weather-utils."""

from __future__ import annotations


class WeatherUtilsError(Exception):
    """Base class for all weather-utils errors."""


class InvalidInputError(WeatherUtilsError, ValueError):
    """Raised when an input violates a physical precondition of a formula.

    Examples: a non-positive barometric pressure, a relative humidity outside
    ``[0, 100]`` percent, or a temperature tagged with the wrong unit for a
    conversion.
    """
