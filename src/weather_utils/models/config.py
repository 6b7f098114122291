from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_utils.models.quantities import PressureUnit, TemperatureUnit


class WeatherSettings(BaseSettings):
    """CLI defaults populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WEATHER_UTILS_",
        extra="ignore",
    )

    temperature_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    pressure_unit: PressureUnit = PressureUnit.HPA
    output_format: str | None = None
    precision: int = Field(default=2, ge=0, le=10)
