"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click

from weather_utils._internal.log import configure_logging
from weather_utils.errors import InvalidInputError
from weather_utils.models.config import WeatherSettings
from weather_utils.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    settings: WeatherSettings = dataclasses.field(default_factory=WeatherSettings)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format
            self._formatter = OutputFormatter(
                force_format=force, precision=self.settings.precision
            )
        return self._formatter


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["rich", "json", "quiet"]),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging")
@click.version_option(package_name="weather-utils")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Weather-related computations: temperature, humidity and altitude."""
    configure_logging(verbose)
    settings = WeatherSettings()
    logger.debug("Loaded settings: %s", settings.model_dump())
    ctx.ensure_object(dict)
    ctx.obj = AppContext(
        output_format=output_format or settings.output_format,
        quiet=quiet,
        verbose=verbose,
        settings=settings,
    )


# ---------------------------------------------------------------------------
# Register subcommands
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Attach all subcommands to the root CLI."""
    from weather_utils.cli.altitude import altitude_cmd, sea_level_cmd
    from weather_utils.cli.convert import convert_cmd
    from weather_utils.cli.humidity import humidity_cmd

    cli.add_command(altitude_cmd)
    cli.add_command(convert_cmd)
    cli.add_command(humidity_cmd)
    cli.add_command(sea_level_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        with cli.make_context("weather-utils", args) as ctx:
            _invoke(ctx)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None


def _invoke(ctx: click.Context) -> None:
    """Run the command, reporting failures while *ctx* is still active."""
    try:
        cli.invoke(ctx)
    except (click.ClickException, click.exceptions.Exit, click.exceptions.Abort):
        raise
    except Exception as exc:
        app_ctx = ctx.obj if isinstance(ctx.obj, AppContext) else None
        formatter = app_ctx.formatter if app_ctx else OutputFormatter()
        cmd_name = ctx.invoked_subcommand or "unknown"

        if not _handle_known_error(exc, formatter, cmd_name):
            logger.debug("Unhandled error in %s", cmd_name, exc_info=True)
            formatter.output_error(
                code=type(exc).__name__,
                message=str(exc),
                command=cmd_name,
            )
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Returns ``True`` if the error was handled.
    """
    if isinstance(exc, InvalidInputError):
        _handle_invalid_input(exc, formatter, cmd_name)
        return True
    return False


def _handle_invalid_input(
    exc: InvalidInputError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    """Explain a rejected physical input and how to correct it."""
    message = str(exc)
    if formatter.format == "json":
        formatter.output_error(code="invalid_input", message=message, command=cmd_name)
        return

    formatter.rich.error(message)
    formatter.rich.info(
        "[dim]Relative humidity is a percentage (0-100) and pressure must be positive.[/dim]"
    )
