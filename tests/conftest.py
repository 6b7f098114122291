"""Shared fixtures."""

from __future__ import annotations

import os

import pytest


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove any WEATHER_UTILS_* variables inherited from the environment."""
    for key in list(os.environ):
        if key.startswith("WEATHER_UTILS_"):
            monkeypatch.delenv(key)
