"""Physical constants used by the formulas.

These are fixed reference values and are never configurable per call.
"""

from __future__ import annotations

# Offset between the Celsius and Kelvin scales.
KELVIN_OFFSET = 273.15

# ---------------------------------------------------------------------------
# Standard atmosphere
# ---------------------------------------------------------------------------

SEA_LEVEL_PRESSURE_HPA = 1013.25
"""Reference sea-level pressure (hPa)."""

STANDARD_TEMPERATURE_C = 15.0
"""Reference sea-level temperature (°C)."""

LAPSE_RATE_K_PER_M = 0.0065
"""Temperature lapse rate of the troposphere (K/m)."""

BAROMETRIC_EXPONENT = 5.257
"""``g * M / (R * L)`` for dry air, as used by the hypsometric formula.

g = 9.80665 m/s², M = 0.0289644 kg/mol, R = 8.3144598 J/(mol·K),
L = :data:`LAPSE_RATE_K_PER_M`.
"""

# ---------------------------------------------------------------------------
# Magnus formula (Bolton 1980) for saturation vapour pressure over water
# ---------------------------------------------------------------------------

MAGNUS_A = 17.67
MAGNUS_B_C = 243.5
MAGNUS_E0_HPA = 6.112

WATER_VAPOR_FACTOR = 2.1674
"""Scales ``e [hPa] * RH [%] / T [K]`` to water vapour density in g/m³."""
