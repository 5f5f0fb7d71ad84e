"""
Configuration for the Open-Meteo Tools

Settings come from the process environment, after loading any .env file.
They are read once and shared, read-only, by every tool call.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"
DEFAULT_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"

# Seconds allowed for a full request/response cycle.
REQUEST_TIMEOUT_SECONDS = 30


@dataclass(frozen=True)
class OpenMeteoSettings:
    """
    Endpoint and logging settings.

    Attributes:
        forecast_url: Forecast endpoint used by current weather and forecasts
        archive_url: Archive endpoint used by historical queries
        geocoding_url: Geocoding endpoint used by location search
        log_level: Logging level name for the server process
    """
    forecast_url: str = DEFAULT_FORECAST_URL
    archive_url: str = DEFAULT_ARCHIVE_URL
    geocoding_url: str = DEFAULT_GEOCODING_URL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "OpenMeteoSettings":
        return cls(
            forecast_url=os.getenv("OPENMETEO_FORECAST_URL", DEFAULT_FORECAST_URL),
            archive_url=os.getenv("OPENMETEO_ARCHIVE_URL", DEFAULT_ARCHIVE_URL),
            geocoding_url=os.getenv("OPENMETEO_GEOCODING_URL", DEFAULT_GEOCODING_URL),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def load_settings(dotenv_path: Optional[str] = None) -> OpenMeteoSettings:
    """
    Load .env values (without overriding the real environment) and build settings.

    Args:
        dotenv_path: Optional explicit path to a .env file

    Returns:
        OpenMeteoSettings populated from the environment
    """
    load_dotenv(dotenv_path)
    return OpenMeteoSettings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """
    Send log records to stderr.

    stdout is reserved for MCP protocol messages when serving over stdio.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
