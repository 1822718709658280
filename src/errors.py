# ABOUTME: Error taxonomy for the weather API and the JSON envelopes they render to.
# ABOUTME: Each error knows its HTTP status, display label, machine-readable code and message.

from src.cities import City

GENERIC_FAILURE_MESSAGE = "無法取得天氣資料，請稍後再試"


class WeatherApiError(Exception):
    """Base error for failures that map to a specific HTTP response."""

    status_code = 500
    error = "伺服器錯誤"
    code = "internal_error"

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.error, "code": self.code, "message": self.message}


class InvalidCityCode(WeatherApiError):
    """The requested city code is not one of the registered municipalities."""

    status_code = 400
    error = "無效的城市代碼"
    code = "invalid_city"

    def __init__(self, valid_cities: list[City]):
        self.valid_cities = valid_cities
        codes = ", ".join(city.id for city in valid_cities)
        super().__init__(f"城市代碼必須是: {codes}")

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["validCities"] = [{"id": city.id, "name": city.display_name} for city in self.valid_cities]
        return body


class ConfigurationError(WeatherApiError):
    """The CWA API key is not configured."""

    error = "伺服器設定錯誤"
    code = "configuration_error"

    def __init__(self, message: str = "請在 .env 檔案中設定 CWA_API_KEY"):
        super().__init__(message)


class UpstreamHttpError(WeatherApiError):
    """CWA answered with a non-success status; status and body are passed through."""

    error = "CWA API 錯誤"
    code = "upstream_http_error"

    def __init__(self, status_code: int, body):
        self.status_code = status_code
        self.body = body
        message = body.get("message") if isinstance(body, dict) else None
        super().__init__(message or "無法取得天氣資料")

    def to_dict(self) -> dict:
        body = super().to_dict()
        body["details"] = self.body
        return body


class NotFoundError(WeatherApiError):
    """CWA returned no usable location data for the city."""

    status_code = 404
    error = "查無資料"
    code = "not_found"

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"無法取得 {location} 的天氣資料")


class TransportError(WeatherApiError):
    """The request to CWA failed below HTTP (timeout, DNS, connection reset)."""

    code = "transport_error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__()


class InternalError(WeatherApiError):
    """Unclassified failure, including malformed forecast payloads."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__()
