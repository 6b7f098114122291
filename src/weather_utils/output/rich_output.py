from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from weather_utils.models.quantities import (
        AbsoluteHumidity,
        Altitude,
        Pressure,
        RelativeHumidity,
        Temperature,
    )


class RichOutput:
    """Rich-based terminal rendering of formula results."""

    def __init__(self, console: Console, *, precision: int = 2) -> None:
        self._con = console
        self._precision = precision

    def _num(self, value: float) -> str:
        return f"{value:.{self._precision}f}"

    def _temp(self, t: Temperature) -> str:
        return f"{self._num(t.value)} {t.unit.symbol}"

    # ------------------------------------------------------------------
    # Temperature conversion
    # ------------------------------------------------------------------

    def conversion(self, source: Temperature, result: Temperature) -> None:
        """Print a single-row table mapping *source* to *result*."""
        table = Table(title="Temperature Conversion")
        table.add_column(source.unit.value.capitalize(), justify="right", style="cyan")
        table.add_column(result.unit.value.capitalize(), justify="right", style="green")
        table.add_row(self._temp(source), self._temp(result))
        self._con.print(table)

    # ------------------------------------------------------------------
    # Humidity
    # ------------------------------------------------------------------

    def humidity_report(
        self,
        temperature: Temperature,
        relative_humidity: RelativeHumidity,
        absolute: AbsoluteHumidity,
        dew_point: Temperature | None,
        heat_index: Temperature,
    ) -> None:
        """Print the quantities derived from a temperature/humidity reading."""
        table = Table(title="Humidity")
        table.add_column("Quantity", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Temperature", self._temp(temperature))
        table.add_row("Relative humidity", f"{self._num(relative_humidity.percent)} %")
        table.add_row("Absolute humidity", f"{self._num(absolute.grams_per_cubic_meter)} g/m³")
        # Dry air has no dew point
        table.add_row("Dew point", self._temp(dew_point) if dew_point is not None else "n/a")
        table.add_row("Heat index", self._temp(heat_index))

        self._con.print(table)

    # ------------------------------------------------------------------
    # Pressure / altitude
    # ------------------------------------------------------------------

    def altitude_report(
        self, pressure: Pressure, temperature: Temperature, altitude: Altitude
    ) -> None:
        table = Table(title="Barometric Altitude")
        table.add_column("Quantity", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Pressure", f"{self._num(pressure.value)} {pressure.unit.value}")
        table.add_row("Temperature", self._temp(temperature))
        table.add_row("Altitude", f"{self._num(altitude.meters)} m")
        table.add_row("", f"[dim]{self._num(altitude.feet)} ft[/dim]")

        self._con.print(table)

    def sea_level_report(self, station: Pressure, altitude: Altitude, reduced: Pressure) -> None:
        table = Table(title="Sea-level Pressure")
        table.add_column("Quantity", style="bold")
        table.add_column("Value", justify="right")

        table.add_row("Station pressure", f"{self._num(station.value)} {station.unit.value}")
        table.add_row("Altitude", f"{self._num(altitude.meters)} m")
        table.add_row("Sea-level pressure", f"{self._num(reduced.value)} {reduced.unit.value}")

        self._con.print(table)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._con.print(f"[bold red]Error:[/bold red] {message}")

    def info(self, message: str) -> None:
        self._con.print(message)
