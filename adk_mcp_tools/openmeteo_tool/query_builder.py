"""
Open-Meteo request URL construction.

Each tool requests a fixed set of fields. Coordinates and counts are
interpolated with Python's default number formatting; free-text location
queries are percent-encoded.
"""

from urllib.parse import quote

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "rain",
    "showers",
    "snowfall",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
)

FORECAST_DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "sunrise",
    "sunset",
    "daylight_duration",
    "sunshine_duration",
    "uv_index_max",
    "precipitation_sum",
    "rain_sum",
    "showers_sum",
    "snowfall_sum",
    "precipitation_hours",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "wind_gusts_10m_max",
    "wind_direction_10m_dominant",
    "shortwave_radiation_sum",
)

ARCHIVE_DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "temperature_2m_mean",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "apparent_temperature_mean",
    "sunrise",
    "sunset",
    "daylight_duration",
    "sunshine_duration",
    "precipitation_sum",
    "rain_sum",
    "snowfall_sum",
    "precipitation_hours",
    "wind_speed_10m_max",
    "wind_gusts_10m_max",
    "wind_direction_10m_dominant",
)


def build_current_weather_url(base_url: str, latitude: float, longitude: float) -> str:
    return (
        f"{base_url}?latitude={latitude}&longitude={longitude}"
        f"&current={','.join(CURRENT_FIELDS)}"
    )


def build_forecast_url(base_url: str, latitude: float, longitude: float, days: int) -> str:
    return (
        f"{base_url}?latitude={latitude}&longitude={longitude}"
        f"&daily={','.join(FORECAST_DAILY_FIELDS)}&forecast_days={days}"
    )


def build_historical_url(
    base_url: str,
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
) -> str:
    """Build an archive URL; dates are passed through exactly as validated."""
    return (
        f"{base_url}?latitude={latitude}&longitude={longitude}"
        f"&start_date={start_date}&end_date={end_date}"
        f"&daily={','.join(ARCHIVE_DAILY_FIELDS)}"
    )


def build_location_search_url(base_url: str, query: str, limit: int) -> str:
    """
    Build a geocoding search URL.

    Example:
        >>> build_location_search_url("https://geo.test/v1/search", "Paris, France", 5)
        'https://geo.test/v1/search?name=Paris%2C%20France&count=5&language=en&format=json'
    """
    return f"{base_url}?name={quote(query, safe='')}&count={limit}&language=en&format=json"
