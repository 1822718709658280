# ABOUTME: Service layer that turns CWA forecast documents into flat forecast periods.
# ABOUTME: Holds the element-to-field normalizer and the per-city weather orchestration.

from src.cities import City
from src.cwa_client import fetch_forecast
from src.deps import WeatherDeps
from src.errors import InvalidCityCode, NotFoundError
from src.models import NOT_AVAILABLE, UNKNOWN, ForecastPeriod, WeatherReport

# elementName -> (ForecastPeriod field, fallback for an empty parameterName, suffix)
ELEMENT_FIELDS = {
    "Wx": ("weather", UNKNOWN, ""),
    "PoP": ("rain", "0", "%"),
    "MinT": ("min_temp", NOT_AVAILABLE, "°C"),
    "MaxT": ("max_temp", NOT_AVAILABLE, "°C"),
    "CI": ("comfort", UNKNOWN, ""),
    "WS": ("wind_speed", "0", ""),
}


async def get_city_weather(deps: WeatherDeps, city_code: str) -> WeatherReport:
    """Validate the city code, fetch its forecast from CWA and flatten it."""
    city = deps.registry.lookup(city_code)
    if city is None:
        raise InvalidCityCode(deps.registry.list_all())

    payload = await fetch_forecast(
        deps.http_client,
        deps.settings.cwa_api_key,
        city.api_name,
        base_url=deps.settings.cwa_api_base_url,
    )
    return build_weather_report(city, payload)


def build_weather_report(city: City, payload: dict) -> WeatherReport:
    """Build the outward-facing report from a CWA document with at least one location."""
    records = payload["records"]
    location = records["location"][0]

    elements = location.get("weatherElement")
    if not isinstance(elements, list) or not elements:
        raise NotFoundError(city.display_name)

    first_slots = elements[0].get("time") or [{}]
    return WeatherReport(
        city=city.display_name,
        city_id=city.id,
        update_time=records.get("datasetDescription"),
        forecast_time=first_slots[0].get("startTime"),
        forecasts=parse_forecast_periods(elements),
    )


def parse_forecast_periods(weather_elements: list[dict]) -> list[ForecastPeriod]:
    """Parse CWA per-element time series into one ForecastPeriod per time slot.

    The first element's time axis decides the number of periods and their start and
    end times. Every element is read at the same index, so an element with fewer
    slots than the first raises IndexError; extra slots are ignored.
    """
    time_axis = weather_elements[0]["time"]

    result = []
    for i, slot in enumerate(time_axis):
        values = {}
        for element in weather_elements:
            parameter = element["time"][i].get("parameter")
            mapping = ELEMENT_FIELDS.get(element.get("elementName"))
            if parameter is None or mapping is None:
                continue
            field, fallback, suffix = mapping
            values[field] = f"{parameter.get('parameterName') or fallback}{suffix}"
        result.append(
            ForecastPeriod(
                start_time=slot.get("startTime"),
                end_time=slot.get("endTime"),
                **values,
            )
        )
    return result
