"""CLI command for Celsius / Fahrenheit conversion."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from weather_utils.cli._options import global_options
from weather_utils.formulas.temperature import celsius_to_fahrenheit, fahrenheit_to_celsius
from weather_utils.models.quantities import Temperature, TemperatureUnit

if TYPE_CHECKING:
    from weather_utils.cli.main import AppContext

logger = logging.getLogger(__name__)

TEMPERATURE_UNITS = click.Choice([u.value for u in TemperatureUnit], case_sensitive=False)


@click.command("convert")
@click.argument("value", type=float)
@click.option(
    "--from",
    "from_unit",
    type=TEMPERATURE_UNITS,
    default=None,
    help="Scale of VALUE (default: WEATHER_UTILS_TEMPERATURE_UNIT or celsius)",
)
@global_options
def convert_cmd(app_ctx: AppContext, value: float, from_unit: str | None) -> None:
    """Convert a temperature VALUE between Celsius and Fahrenheit.

    Use ``--`` before negative values, e.g. ``weather-utils convert -- -40``.
    """
    formatter = app_ctx.formatter
    unit = TemperatureUnit(from_unit) if from_unit else app_ctx.settings.temperature_unit
    source = Temperature(value=value, unit=unit)

    if unit is TemperatureUnit.CELSIUS:
        result = celsius_to_fahrenheit(source)
    else:
        result = fahrenheit_to_celsius(source)
    logger.debug("Converted %s to %s", source, result)

    if formatter.format == "json":
        formatter.output({"input": source, "result": result}, command="convert")
    else:
        formatter.rich.conversion(source, result)
