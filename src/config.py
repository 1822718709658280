# ABOUTME: Process configuration loaded once at startup from .env and the environment.
# ABOUTME: Settings is frozen and shared by reference with the request handlers.

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.cwa_client import CWA_API_BASE_URL

# Settings field -> environment variable
ENV_VARS = {
    "port": "PORT",
    "host": "HOST",
    "cwa_api_key": "CWA_API_KEY",
    "cwa_api_base_url": "CWA_API_BASE_URL",
    "environment": "APP_ENV",
    "log_level": "LOG_LEVEL",
}


class Settings(BaseModel):
    """Runtime settings for the weather API server."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=3000, ge=1, le=65535)
    host: str = "0.0.0.0"
    cwa_api_key: str | None = None
    cwa_api_base_url: str = CWA_API_BASE_URL
    environment: str = "development"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from environment variables, loading .env first.

        Blank values are treated as unset so the field default applies.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        values = {field: environ.get(var, "").strip() for field, var in ENV_VARS.items()}
        return cls(**{field: value for field, value in values.items() if value})
