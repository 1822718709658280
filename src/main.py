# ABOUTME: Command-line entry point that configures logging and serves the API with uvicorn.
# ABOUTME: Used by `python -m src.main` and the taiwan-weather-api console script.

import logging

import uvicorn

from src.cities import DEFAULT_REGISTRY
from src.config import Settings
from src.web import create_app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    logger.info("Server listening on %s:%d", settings.host, settings.port)
    logger.info("Environment: %s", settings.environment)
    logger.info("Supported cities: %s", ", ".join(city.display_name for city in DEFAULT_REGISTRY.list_all()))
    if not settings.cwa_api_key:
        logger.warning("CWA_API_KEY is not set; weather requests will fail with a configuration error")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
