# ABOUTME: Pydantic BaseModels for the flattened forecast returned by the API.
# ABOUTME: Fields are snake_case in Python and serialised with camelCase aliases.

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

UNKNOWN = "不明"
NOT_AVAILABLE = "N/A"


class ForecastPeriod(BaseModel):
    """One time slot of the 36-hour forecast, seeded with the documented defaults."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_time: str | None = None
    end_time: str | None = None
    weather: str = UNKNOWN
    rain: str = "0%"
    min_temp: str = NOT_AVAILABLE
    max_temp: str = NOT_AVAILABLE
    comfort: str = UNKNOWN
    wind_speed: str = "0"


class WeatherReport(BaseModel):
    """Forecast for one city as served by GET /api/weather/{city}."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    city: str
    city_id: str
    update_time: str | None = None
    forecast_time: str | None = None
    forecasts: list[ForecastPeriod] = []
