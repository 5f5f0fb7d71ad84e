"""
Open-Meteo Tool Implementation

Implements the four weather tools exposed over MCP. Each tool validates its
input, issues one request to Open-Meteo, and renders the response as text.

Every tool returns a dictionary with two keys:
    - status: "success" or "error"
    - text: the report, or a message describing what went wrong

Functions:
    - get_current_weather: Current conditions for a coordinate
    - get_weather_forecast: Daily forecast for up to 16 days
    - get_historical_weather: Archive statistics for a date range
    - search_locations: Geocode a place name to candidate coordinates
"""

import logging
from typing import Any, Callable, Dict, Optional

from .config import load_settings
from .formatting import (
    format_current_weather,
    format_historical_weather,
    format_locations,
    format_weather_forecast,
)
from .query_builder import (
    build_current_weather_url,
    build_forecast_url,
    build_historical_url,
    build_location_search_url,
)
from .tool_schema import parameter_bounds
from .transport import OpenMeteoClient, TransportError
from .validation import (
    ValidationError,
    clamp_count,
    validate_coordinates,
    validate_date,
    validate_query,
)

logger = logging.getLogger(__name__)

settings = load_settings()
client = OpenMeteoClient()


def _success(text: str) -> Dict[str, str]:
    return {"status": "success", "text": text}


def _error(text: str) -> Dict[str, str]:
    return {"status": "error", "text": text}


async def _fetch_and_format(
    action: str,
    url: str,
    render: Callable[[Any], str],
    *,
    label: str = "OpenMeteo API",
    include_body: bool = False,
) -> Dict[str, str]:
    """
    Run the fetching-and-formatting stage shared by all tools.

    Args:
        action: Human description used in log lines and error text
        url: Request URL built from validated input
        render: Formatter applied to the decoded JSON
        label: Endpoint name for transport error messages
        include_body: Surface response bodies in transport errors

    Returns:
        Success result with the report, or error result naming the provider symptom
    """
    try:
        data = await client.fetch_json(url, label=label, include_body=include_body)
    except TransportError as e:
        message = f"Error {action}: {e}"
        logger.error(message)
        return _error(message)

    text = render(data)
    logger.info(f"Successfully completed: {action}")
    return _success(text)


async def get_current_weather(latitude: float, longitude: float) -> Dict[str, str]:
    """
    Get current weather conditions for a specific location. Returns real-time
    weather data including temperature, humidity, precipitation, wind, and
    atmospheric conditions.

    Args:
        latitude: Latitude coordinate (-90 to 90)
        longitude: Longitude coordinate (-180 to 180)

    Returns:
        Dictionary with "status" ("success" or "error") and the report "text"

    Example:
        >>> result = await get_current_weather(48.85, 2.35)
        >>> print(result["text"])
    """
    logger.info(f"Getting current weather: latitude={latitude}, longitude={longitude}")

    try:
        lat, lon = validate_coordinates(latitude, longitude)
    except ValidationError as e:
        logger.error(f"Invalid coordinates: {e}")
        return _error(str(e))

    return await _fetch_and_format(
        "retrieving current weather",
        build_current_weather_url(settings.forecast_url, lat, lon),
        lambda data: format_current_weather(data, lat, lon),
    )


async def get_weather_forecast(
    latitude: float,
    longitude: float,
    days: Optional[int] = None,
) -> Dict[str, str]:
    """
    Get weather forecast for a specific location. Returns detailed forecast
    data for up to 16 days including daily temperature, precipitation, wind,
    and weather conditions.

    Args:
        latitude: Latitude coordinate (-90 to 90)
        longitude: Longitude coordinate (-180 to 180)
        days: Number of forecast days (1-16, default: 7)

    Returns:
        Dictionary with "status" ("success" or "error") and the report "text"
    """
    try:
        days = clamp_count("days", days, **parameter_bounds("get_weather_forecast", "days"))
        logger.info(f"Getting weather forecast: latitude={latitude}, longitude={longitude}, days={days}")
        lat, lon = validate_coordinates(latitude, longitude)
    except ValidationError as e:
        logger.error(f"Invalid forecast request: {e}")
        return _error(str(e))

    return await _fetch_and_format(
        f"retrieving weather forecast for {days} days",
        build_forecast_url(settings.forecast_url, lat, lon, days),
        lambda data: format_weather_forecast(data, lat, lon, days),
    )


async def get_historical_weather(
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
) -> Dict[str, str]:
    """
    Get historical weather data for a specific location and date range.
    Returns daily weather statistics including temperature, precipitation,
    and other meteorological data for analysis.

    Args:
        latitude: Latitude coordinate (-90 to 90)
        longitude: Longitude coordinate (-180 to 180)
        start_date: Start date (YYYY-MM-DD)
        end_date: End date (YYYY-MM-DD)

    Returns:
        Dictionary with "status" ("success" or "error") and the report "text"
    """
    logger.info(
        f"Getting historical weather: latitude={latitude}, longitude={longitude}, "
        f"start_date={start_date}, end_date={end_date}"
    )

    # start_date may fall after end_date; the provider decides how to answer.
    try:
        lat, lon = validate_coordinates(latitude, longitude)
        validate_date(start_date)
        validate_date(end_date)
    except ValidationError as e:
        logger.error(f"Invalid historical request: {e}")
        return _error(str(e))

    return await _fetch_and_format(
        "retrieving historical weather",
        build_historical_url(settings.archive_url, lat, lon, start_date, end_date),
        lambda data: format_historical_weather(data, lat, lon, start_date, end_date),
    )


async def search_locations(query: str, limit: Optional[int] = None) -> Dict[str, str]:
    """
    Search for locations by name to get their coordinates and details. Use
    format 'city, country' where country is optional (e.g., 'Paris, France'
    or just 'Tokyo'). Returns a list of matching locations with coordinates
    and other geographic information.

    Args:
        query: Location search query, e.g. 'Paris, France' or 'Tokyo'
        limit: Maximum number of results (1-100, default: 10)

    Returns:
        Dictionary with "status" ("success" or "error") and the report "text"
    """
    try:
        limit = clamp_count("limit", limit, **parameter_bounds("search_locations", "limit"))
        logger.info(f"Searching locations: query={query!r}, limit={limit}")
        query = validate_query(query)
    except ValidationError as e:
        logger.error(f"Invalid location search: {e}")
        return _error(str(e))

    return await _fetch_and_format(
        "searching locations",
        build_location_search_url(settings.geocoding_url, query, limit),
        format_locations,
        label="OpenMeteo Geocoding API",
        include_body=True,
    )


__all__ = [
    "get_current_weather",
    "get_weather_forecast",
    "get_historical_weather",
    "search_locations",
]
