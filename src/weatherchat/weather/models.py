"""Data models for weather lookups."""

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A geocoded position (Nominatim returns these as strings)."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class DayForecast(BaseModel):
    """Weather for a single day, serialised with camelCase keys.

    Temperatures are None when the forecast series has a gap.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    weather: str = Field(description="Human-readable weather label")
    max_temp: float | None = Field(alias="maxTemp")
    min_temp: float | None = Field(alias="minTemp")


class DailyForecast(BaseModel):
    """Today's and tomorrow's raw daily series values."""

    model_config = ConfigDict(frozen=True)

    today: DayForecast
    tomorrow: DayForecast


class WeatherReport(BaseModel):
    """Successful result of a weather query."""

    model_config = ConfigDict(frozen=True)

    location: str
    today: DayForecast
    tomorrow: DayForecast

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class WeatherError(BaseModel):
    """Failed weather query."""

    model_config = ConfigDict(frozen=True)

    error: str

    def to_payload(self) -> dict:
        return self.model_dump()


WeatherQueryResult = WeatherReport | WeatherError
