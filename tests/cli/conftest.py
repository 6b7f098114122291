"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

import pytest
from click.testing import CliRunner


@pytest.fixture()
def runner(clean_env: None) -> CliRunner:
    """A CliRunner isolated from any WEATHER_UTILS_* settings in the environment."""
    return CliRunner()
