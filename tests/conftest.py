# ABOUTME: Shared test fixtures for the weather API test suite.
# ABOUTME: Provides CWA F-C0032-001 payload builders and settings fixtures.

import pytest

from src.config import Settings

TIME_SLOTS = [
    ("2025-01-15 18:00:00", "2025-01-16 06:00:00"),
    ("2025-01-16 06:00:00", "2025-01-16 18:00:00"),
    ("2025-01-16 18:00:00", "2025-01-17 06:00:00"),
]


def _element(name: str, values: list, slots: list[tuple[str, str]] = TIME_SLOTS) -> dict:
    """Build one CWA weatherElement; a None value produces a slot without a parameter."""
    time = []
    for (start, end), value in zip(slots, values):
        slot = {"startTime": start, "endTime": end}
        if value is not None:
            slot["parameter"] = {"parameterName": value}
        time.append(slot)
    return {"elementName": name, "time": time}


def _payload(elements: list[dict], location_name: str = "臺北市") -> dict:
    return {
        "success": "true",
        "records": {
            "datasetDescription": "三十六小時天氣預報",
            "location": [{"locationName": location_name, "weatherElement": elements}],
        },
    }


def _standard_elements() -> list[dict]:
    return [
        _element("Wx", ["多雲", "晴時多雲", "多雲時陰"]),
        _element("PoP", ["20", "10", "30"]),
        _element("MinT", ["16", "17", "15"]),
        _element("CI", ["稍有寒意", "舒適", "寒冷"]),
        _element("MaxT", ["21", "24", "19"]),
    ]


@pytest.fixture
def make_element():
    return _element


@pytest.fixture
def make_payload():
    return _payload


@pytest.fixture
def weather_elements() -> list[dict]:
    return _standard_elements()


@pytest.fixture
def forecast_payload() -> dict:
    return _payload(_standard_elements())


@pytest.fixture
def settings() -> Settings:
    return Settings(cwa_api_key="CWA-TEST-KEY", cwa_api_base_url="https://cwa.test/api")


@pytest.fixture
def settings_without_key() -> Settings:
    return Settings(cwa_api_base_url="https://cwa.test/api")
