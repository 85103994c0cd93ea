"""
Configuration models for the worker dashboard service.
"""

import os

from pydantic import BaseModel, field_validator

from .charts import DISTRICT_DATA

DEFAULT_API_URL = "https://mgnrega-backend-raqv.onrender.com"
API_URL_ENV = "MGNREGA_API_URL"


class DashboardConfig(BaseModel):
    """Runtime configuration for a dashboard instance."""

    api_url: str = DEFAULT_API_URL
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    default_district: str = "Madurai"
    load_on_startup: bool = True
    log_level: str = "info"

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("default_district")
    @classmethod
    def _known_district(cls, value: str) -> str:
        if value not in DISTRICT_DATA:
            raise ValueError(
                f"unknown district {value!r}, expected one of {', '.join(DISTRICT_DATA)}"
            )
        return value


def default_api_url() -> str:
    """Backend base URL from the environment, falling back to the hosted API."""
    return os.environ.get(API_URL_ENV) or DEFAULT_API_URL
