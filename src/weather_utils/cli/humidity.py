"""CLI command for humidity-derived quantities."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from weather_utils.cli._options import global_options
from weather_utils.cli.convert import TEMPERATURE_UNITS
from weather_utils.formulas._inputs import as_relative_humidity, as_temperature
from weather_utils.models.measurements import HumidityMeasurement
from weather_utils.models.quantities import TemperatureUnit

if TYPE_CHECKING:
    from weather_utils.cli.main import AppContext

logger = logging.getLogger(__name__)


@click.command("humidity")
@click.option("--temperature", "-t", type=float, required=True, help="Air temperature")
@click.option(
    "--rh", "relative_humidity", type=float, required=True, help="Relative humidity in percent"
)
@click.option(
    "--unit",
    type=TEMPERATURE_UNITS,
    default=None,
    help="Temperature scale (default: WEATHER_UTILS_TEMPERATURE_UNIT or celsius)",
)
@global_options
def humidity_cmd(
    app_ctx: AppContext,
    temperature: float,
    relative_humidity: float,
    unit: str | None,
) -> None:
    """Show absolute humidity, dew point and heat index for a reading."""
    formatter = app_ctx.formatter
    scale = TemperatureUnit(unit) if unit else app_ctx.settings.temperature_unit
    reading = HumidityMeasurement(
        temperature=as_temperature(temperature, scale),
        relative_humidity=as_relative_humidity(relative_humidity),
    )
    logger.debug("Humidity reading: %s", reading)

    absolute = reading.absolute_humidity()
    dew_point = reading.dew_point() if reading.relative_humidity.percent > 0 else None
    heat_index = reading.heat_index()

    if formatter.format == "json":
        formatter.output(
            {
                "temperature": reading.temperature,
                "relative_humidity": reading.relative_humidity,
                "absolute_humidity": absolute,
                "dew_point": dew_point,
                "heat_index": heat_index,
            },
            command="humidity",
        )
    else:
        formatter.rich.humidity_report(
            reading.temperature,
            reading.relative_humidity,
            absolute,
            dew_point,
            heat_index,
        )
