from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console

from weather_utils.output.json_output import format_json_error, format_json_response
from weather_utils.output.rich_output import RichOutput

if TYPE_CHECKING:
    from io import TextIOBase


class OutputFormatter:
    """Route command results to Rich tables or a JSON envelope.

    Terminals get tables, pipes get JSON unless *force_format* says otherwise.
    *precision* sets the decimals shown in the tables.
    """

    def __init__(
        self,
        *,
        stream: TextIOBase | Any | None = None,
        force_format: str | None = None,
        precision: int = 2,
    ) -> None:
        self._stream = stream or sys.stdout
        if force_format is not None:
            self._format = force_format
        elif hasattr(self._stream, "isatty") and self._stream.isatty():
            self._format = "rich"
        else:
            self._format = "json"

        console = Console(stderr=True) if self._format == "quiet" else Console()
        self._rich = RichOutput(console, precision=precision)

    @property
    def format(self) -> str:  # noqa: A003
        """The active format: ``"rich"``, ``"json"`` or ``"quiet"``."""
        return self._format

    @property
    def rich(self) -> RichOutput:
        return self._rich

    def output(self, data: Any, *, command: str) -> None:
        """Write *data* under *command* in JSON mode, else echo it as text."""
        if self._format == "json":
            print(  # noqa: T201
                format_json_response(data=data, command=command),
                file=self._stream,
            )
        else:
            self._rich.info(str(data))

    def output_error(self, *, code: str, message: str, command: str) -> None:
        if self._format == "json":
            print(  # noqa: T201
                format_json_error(code=code, message=message, command=command),
                file=self._stream,
            )
        else:
            self._rich.error(message)
