"""Execution tests for the weather-utils CLI."""

from __future__ import annotations

import json
from typing import Any

import pytest
from click.testing import CliRunner

from weather_utils.cli.main import cli, main
from weather_utils.errors import InvalidInputError


def _json(runner: CliRunner, *args: str, env: dict[str, str] | None = None) -> dict[str, Any]:
    result = runner.invoke(cli, ["--format", "json", *args], env=env)
    assert result.exit_code == 0, result.output
    parsed: dict[str, Any] = json.loads(result.output)
    assert parsed["ok"] is True
    return parsed["data"]


class TestHelp:
    def test_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("convert", "humidity", "altitude", "sea-level"):
            assert name in result.output

    def test_main_help_exits_cleanly(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["convert", "--help"])
        assert excinfo.value.code == 0


class TestConvert:
    def test_celsius_to_fahrenheit(self, runner: CliRunner) -> None:
        data = _json(runner, "convert", "100")
        assert data["input"] == {"value": 100.0, "unit": "celsius"}
        assert data["result"] == {"value": 212.0, "unit": "fahrenheit"}

    def test_fahrenheit_to_celsius(self, runner: CliRunner) -> None:
        data = _json(runner, "convert", "212", "--from", "fahrenheit")
        assert data["result"] == {"value": 100.0, "unit": "celsius"}

    def test_unit_choice_is_case_insensitive(self, runner: CliRunner) -> None:
        data = _json(runner, "convert", "212", "--from", "FAHRENHEIT")
        assert data["input"] == {"value": 212.0, "unit": "fahrenheit"}
        assert data["result"] == {"value": 100.0, "unit": "celsius"}

    def test_negative_value_after_separator(self, runner: CliRunner) -> None:
        data = _json(runner, "convert", "--", "-40")
        assert data["result"]["value"] == pytest.approx(-40.0)

    def test_default_unit_from_environment(self, runner: CliRunner) -> None:
        data = _json(
            runner, "convert", "32", env={"WEATHER_UTILS_TEMPERATURE_UNIT": "fahrenheit"}
        )
        assert data["result"] == {"value": 0.0, "unit": "celsius"}

    def test_format_after_subcommand(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["convert", "0", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["result"]["value"] == 32.0

    def test_rich_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "rich", "convert", "100"])
        assert result.exit_code == 0
        assert "212.00 °F" in result.output

    def test_rich_precision_from_environment(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            ["--format", "rich", "convert", "100"],
            env={"WEATHER_UTILS_PRECISION": "0"},
        )
        assert result.exit_code == 0
        assert "212 °F" in result.output


class TestHumidity:
    def test_reading(self, runner: CliRunner) -> None:
        data = _json(runner, "humidity", "-t", "21.18", "--rh", "45.59")
        assert data["absolute_humidity"]["grams_per_cubic_meter"] == pytest.approx(8.43, abs=0.01)
        assert data["relative_humidity"] == {"percent": 45.59}
        assert data["dew_point"]["unit"] == "celsius"
        assert data["dew_point"]["value"] < 21.18
        assert data["heat_index"]["unit"] == "celsius"

    def test_fahrenheit_reading(self, runner: CliRunner) -> None:
        data = _json(runner, "humidity", "-t", "90", "--rh", "50", "--unit", "fahrenheit")
        assert data["heat_index"]["value"] == pytest.approx(94.6, abs=0.05)
        assert data["heat_index"]["unit"] == "fahrenheit"

    def test_dry_air_has_no_dew_point(self, runner: CliRunner) -> None:
        data = _json(runner, "humidity", "-t", "20", "--rh", "0")
        assert data["dew_point"] is None
        assert data["absolute_humidity"]["grams_per_cubic_meter"] == 0.0

    def test_out_of_range_humidity_raises(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["humidity", "-t", "20", "--rh", "150"])
        assert result.exit_code == 1
        assert isinstance(result.exception, InvalidInputError)


class TestAltitude:
    def test_altitude(self, runner: CliRunner) -> None:
        data = _json(runner, "altitude", "-p", "991.32", "-t", "20.55")
        assert data["altitude"]["meters"] == pytest.approx(188.46, abs=0.01)
        assert data["pressure"] == {"value": 991.32, "unit": "hPa"}

    def test_pressure_unit(self, runner: CliRunner) -> None:
        data = _json(runner, "altitude", "-p", "99.132", "--pressure-unit", "kPa", "-t", "20.55")
        assert data["altitude"]["meters"] == pytest.approx(188.46, abs=0.01)

    def test_pressure_unit_is_case_insensitive(self, runner: CliRunner) -> None:
        data = _json(runner, "altitude", "-p", "99.132", "--pressure-unit", "KPA", "-t", "20.55")
        assert data["pressure"] == {"value": 99.132, "unit": "kPa"}

    def test_standard_temperature_default(self, runner: CliRunner) -> None:
        data = _json(runner, "altitude", "-p", "1013.25")
        assert data["temperature"] == {"value": 15.0, "unit": "celsius"}
        assert data["altitude"]["meters"] == pytest.approx(0.0, abs=1e-9)

    def test_rich_output(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli, ["--format", "rich", "altitude", "-p", "991.32", "-t", "20.55"]
        )
        assert result.exit_code == 0
        assert "188.46 m" in result.output

    def test_sea_level(self, runner: CliRunner) -> None:
        data = _json(runner, "sea-level", "-p", "962.81", "-a", "439.25", "-t", "19.37")
        assert data["sea_level_pressure"]["value"] == pytest.approx(1013.25, abs=0.01)
        assert data["altitude"] == {"meters": 439.25}


class TestErrorReporting:
    def test_invalid_pressure_json_envelope(
        self, clean_env: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--format", "json", "altitude", "-p", "0"])
        assert excinfo.value.code == 1

        parsed = json.loads(capsys.readouterr().out)
        assert parsed["ok"] is False
        assert parsed["command"] == "altitude"
        assert parsed["error"]["code"] == "invalid_input"
        assert "Pressure" in parsed["error"]["message"]

    def test_invalid_humidity_rich_message(
        self, clean_env: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--format", "rich", "humidity", "-t", "20", "--rh=-3"])
        assert excinfo.value.code == 1
        assert "Relative humidity" in capsys.readouterr().out

    def test_usage_error(self, clean_env: None) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["altitude"])
        assert excinfo.value.code == 2
