"""CLI commands for barometric altitude and sea-level pressure."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from weather_utils.cli._options import global_options
from weather_utils.cli.convert import TEMPERATURE_UNITS
from weather_utils.constants import STANDARD_TEMPERATURE_C
from weather_utils.formulas._inputs import as_pressure, as_temperature
from weather_utils.formulas.altitude import sea_level_pressure
from weather_utils.models.measurements import PressureMeasurement
from weather_utils.models.quantities import (
    Altitude,
    PressureUnit,
    Temperature,
    TemperatureUnit,
)

if TYPE_CHECKING:
    from weather_utils.cli.main import AppContext

logger = logging.getLogger(__name__)

PRESSURE_UNITS = click.Choice([u.value for u in PressureUnit], case_sensitive=False)


def _resolve_units(
    app_ctx: AppContext, pressure_unit: str | None, unit: str | None
) -> tuple[PressureUnit, TemperatureUnit]:
    settings = app_ctx.settings
    p_unit = PressureUnit(pressure_unit) if pressure_unit else settings.pressure_unit
    t_unit = TemperatureUnit(unit) if unit else settings.temperature_unit
    return p_unit, t_unit


def _temperature(value: float | None, unit: TemperatureUnit) -> Temperature:
    """Temperature from the CLI, or the standard atmosphere's when omitted."""
    if value is None:
        return Temperature(value=STANDARD_TEMPERATURE_C).to(unit)
    return as_temperature(value, unit)


@click.command("altitude")
@click.option("--pressure", "-p", type=float, required=True, help="Barometric pressure")
@click.option(
    "--pressure-unit",
    type=PRESSURE_UNITS,
    default=None,
    help="Unit of --pressure (default: WEATHER_UTILS_PRESSURE_UNIT or hPa)",
)
@click.option(
    "--temperature",
    "-t",
    type=float,
    default=None,
    help="Temperature at the barometer (default: 15 °C)",
)
@click.option("--unit", type=TEMPERATURE_UNITS, default=None, help="Temperature scale")
@global_options
def altitude_cmd(
    app_ctx: AppContext,
    pressure: float,
    pressure_unit: str | None,
    temperature: float | None,
    unit: str | None,
) -> None:
    """Compute the altitude at which a barometric pressure was measured."""
    formatter = app_ctx.formatter
    p_unit, t_unit = _resolve_units(app_ctx, pressure_unit, unit)
    reading = PressureMeasurement(
        pressure=as_pressure(pressure, p_unit),
        temperature=_temperature(temperature, t_unit),
    )
    result = reading.altitude()
    logger.debug("Altitude for %s: %s m", reading, result.meters)

    if formatter.format == "json":
        formatter.output(
            {
                "pressure": reading.pressure,
                "temperature": reading.temperature,
                "altitude": {"meters": result.meters, "feet": result.feet},
            },
            command="altitude",
        )
    else:
        formatter.rich.altitude_report(reading.pressure, reading.temperature, result)


@click.command("sea-level")
@click.option("--pressure", "-p", type=float, required=True, help="Station pressure")
@click.option("--altitude", "-a", type=float, required=True, help="Station altitude in meters")
@click.option(
    "--pressure-unit",
    type=PRESSURE_UNITS,
    default=None,
    help="Unit of --pressure and of the result (default: hPa)",
)
@click.option(
    "--temperature",
    "-t",
    type=float,
    default=None,
    help="Temperature at the station (default: 15 °C)",
)
@click.option("--unit", type=TEMPERATURE_UNITS, default=None, help="Temperature scale")
@global_options
def sea_level_cmd(
    app_ctx: AppContext,
    pressure: float,
    altitude: float,
    pressure_unit: str | None,
    temperature: float | None,
    unit: str | None,
) -> None:
    """Reduce a station pressure to sea level."""
    formatter = app_ctx.formatter
    p_unit, t_unit = _resolve_units(app_ctx, pressure_unit, unit)
    station = as_pressure(pressure, p_unit)
    elevation = Altitude(meters=altitude)
    reduced = sea_level_pressure(station, elevation, _temperature(temperature, t_unit))
    logger.debug("Reduced %s at %s m to %s", station, altitude, reduced)

    if formatter.format == "json":
        formatter.output(
            {"station_pressure": station, "altitude": elevation, "sea_level_pressure": reduced},
            command="sea-level",
        )
    else:
        formatter.rich.sea_level_report(station, elevation, reduced)
