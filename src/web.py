# ABOUTME: ASGI web entry point for the Taiwan six-municipality weather API.
# ABOUTME: Creates a Starlette app with CORS, JSON error envelopes and the weather routes.

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import httpx
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from src.cities import DEFAULT_REGISTRY
from src.config import Settings
from src.deps import WeatherDeps, create_http_client
from src.errors import InternalError, WeatherApiError
from src.weather_service import get_city_weather

logger = logging.getLogger(__name__)

WEATHER_ENDPOINT = "/api/weather/:city"


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _error_response(error: WeatherApiError) -> JSONResponse:
    return JSONResponse(error.to_dict(), status_code=error.status_code)


async def index(request: Request) -> JSONResponse:
    deps: WeatherDeps = request.app.state.deps
    return JSONResponse(
        {
            "message": "歡迎使用台灣六都天氣預報 API",
            "description": "提供台北市、新北市、桃園市、台中市、台南市和高雄市的天氣預報",
            "endpoint": WEATHER_ENDPOINT,
            "availableCities": [city.to_summary() for city in deps.registry.list_all()],
            "example": "/api/weather/taipei",
        }
    )


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "OK", "timestamp": utc_timestamp()})


async def list_cities(request: Request) -> JSONResponse:
    deps: WeatherDeps = request.app.state.deps
    return JSONResponse({"success": True, "cities": [city.to_summary() for city in deps.registry.list_all()]})


async def city_weather(request: Request) -> JSONResponse:
    """Return the flattened 36-hour forecast for one city, or a typed error envelope."""
    deps: WeatherDeps = request.app.state.deps
    city_code = request.path_params["city"]
    try:
        report = await get_city_weather(deps, city_code)
    except WeatherApiError as e:
        logger.warning("Weather request for %r failed: %s %s", city_code, e.code, e.message)
        return _error_response(e)
    except Exception as e:
        logger.exception("Failed to build weather report for %r", city_code)
        return _error_response(InternalError(str(e)))
    return JSONResponse({"success": True, "data": report.model_dump(by_alias=True)})


async def not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"error": "找不到此路徑", "message": "請使用正確的 API 端點"}, status_code=404)


async def server_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse({"error": "伺服器錯誤", "message": str(exc)}, status_code=500)


routes = [
    Route("/", index, methods=["GET"]),
    Route("/api/health", health, methods=["GET"]),
    Route("/api/cities", list_cities, methods=["GET"]),
    Route("/api/weather/{city}", city_weather, methods=["GET"]),
]


def create_app(settings: Settings | None = None, http_client: httpx.AsyncClient | None = None) -> Starlette:
    """Build the ASGI app.

    A client passed in stays owned by the caller; one created here is closed on shutdown.
    """
    if settings is None:
        settings = Settings.from_env()
    owns_client = http_client is None
    if http_client is None:
        http_client = create_http_client()

    @asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        if owns_client:
            await http_client.aclose()

    app = Starlette(
        routes=routes,
        middleware=[
            Middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]),
        ],
        # Unsupported methods on known paths fall through to the same 404 as unknown paths
        exception_handlers={404: not_found, 405: not_found, Exception: server_error},
        lifespan=lifespan,
    )
    app.state.deps = WeatherDeps(settings=settings, registry=DEFAULT_REGISTRY, http_client=http_client)
    return app


app = create_app()
