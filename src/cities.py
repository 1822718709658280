# ABOUTME: Static registry of the six Taiwanese municipalities served by the API.
# ABOUTME: Maps URL city codes to CWA location names and display names.

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict


class City(BaseModel):
    """One municipality: URL code, CWA query name, and the name shown to callers."""

    model_config = ConfigDict(frozen=True)

    id: str
    api_name: str
    display_name: str

    def to_summary(self) -> dict:
        return {"id": self.id, "name": self.display_name, "apiName": self.api_name}


TAIWAN_MUNICIPALITIES: tuple[City, ...] = (
    City(id="taipei", api_name="臺北市", display_name="台北市"),
    City(id="newtaipei", api_name="新北市", display_name="新北市"),
    City(id="taoyuan", api_name="桃園市", display_name="桃園市"),
    City(id="taichung", api_name="臺中市", display_name="台中市"),
    City(id="tainan", api_name="臺南市", display_name="台南市"),
    City(id="kaohsiung", api_name="高雄市", display_name="高雄市"),
)


class CityRegistry:
    """Read-only lookup of cities by code, preserving registration order."""

    def __init__(self, cities: Iterable[City]):
        self._cities = {city.id: city for city in cities}

    def lookup(self, code: str) -> City | None:
        return self._cities.get(code)

    def list_all(self) -> list[City]:
        return list(self._cities.values())

    def ids(self) -> list[str]:
        return list(self._cities)

    def __len__(self) -> int:
        return len(self._cities)


DEFAULT_REGISTRY = CityRegistry(TAIWAN_MUNICIPALITIES)
