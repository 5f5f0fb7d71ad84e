"""
Response Formatting for Open-Meteo Payloads

Renders provider JSON into fixed-layout text reports. Provider payloads are
walked as plain dicts and lists; every field is optional and falls back to a
type-appropriate default, so a report is always produced as long as the body
parsed as JSON.

Functions:
    - format_current_weather: Single snapshot report
    - format_weather_forecast: Daily forecast series
    - format_historical_weather: Archive summary statistics and daily preview
    - format_locations: Numbered geocoding matches
"""

from typing import Any, Dict, List, Optional

from .weather_codes import describe

DEFAULT_TEMPERATURE_UNIT = "°C"
DEFAULT_HUMIDITY_UNIT = "%"
DEFAULT_PRECIPITATION_UNIT = "mm"
DEFAULT_WIND_UNIT = "km/h"
DEFAULT_PRESSURE_UNIT = "hPa"

HISTORICAL_PREVIEW_DAYS = 5
NO_LOCATIONS_MESSAGE = "No locations found matching your search query."


# --- Defensive accessors ---

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_float(value: Any) -> Optional[float]:
    if not _is_number(value):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def get_object(obj: Any, key: str) -> Dict[str, Any]:
    """Return obj[key] when it is a JSON object, else an empty dict."""
    value = obj.get(key) if isinstance(obj, dict) else None
    return value if isinstance(value, dict) else {}


def get_array(obj: Any, key: str) -> List[Any]:
    """Return obj[key] when it is a JSON array, else an empty list."""
    value = obj.get(key) if isinstance(obj, dict) else None
    return value if isinstance(value, list) else []


def get_number(obj: Any, key: str) -> Optional[float]:
    value = obj.get(key) if isinstance(obj, dict) else None
    return _to_float(value)


def get_number_or(obj: Any, key: str, default: float = 0.0) -> float:
    value = get_number(obj, key)
    return default if value is None else value


def get_count(obj: Any, key: str) -> Optional[int]:
    """Return obj[key] when it is a non-negative JSON integer."""
    value = obj.get(key) if isinstance(obj, dict) else None
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


def get_count_or(obj: Any, key: str, default: int = 0) -> int:
    value = get_count(obj, key)
    return default if value is None else value


def get_string(obj: Any, key: str) -> Optional[str]:
    value = obj.get(key) if isinstance(obj, dict) else None
    return value if isinstance(value, str) else None


def get_string_or(obj: Any, key: str, default: str = "Unknown") -> str:
    value = get_string(obj, key)
    return default if value is None else value


def number_at(values: List[Any], index: int) -> Optional[float]:
    if index < len(values):
        return _to_float(values[index])
    return None


def count_at(values: List[Any], index: int) -> int:
    if index < len(values):
        value = values[index]
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
    return 0


def string_at(values: List[Any], index: int, default: str = "Unknown") -> str:
    if index < len(values) and isinstance(values[index], str):
        return values[index]
    return default


def _or_zero(value: Optional[float]) -> float:
    return 0.0 if value is None else value


# --- Reports ---

def format_current_weather(data: Any, latitude: float, longitude: float) -> str:
    """
    Render the current-conditions report.

    Args:
        data: Decoded forecast-endpoint JSON containing "current" and "current_units"
        latitude: Requested latitude, echoed in the header
        longitude: Requested longitude, echoed in the header

    Returns:
        Multi-line report text
    """
    current = get_object(data, "current")
    units = get_object(data, "current_units")

    temp_unit = get_string_or(units, "temperature_2m", DEFAULT_TEMPERATURE_UNIT)
    humidity_unit = get_string_or(units, "relative_humidity_2m", DEFAULT_HUMIDITY_UNIT)
    precip_unit = get_string_or(units, "precipitation", DEFAULT_PRECIPITATION_UNIT)
    wind_unit = get_string_or(units, "wind_speed_10m", DEFAULT_WIND_UNIT)
    pressure_unit = get_string_or(units, "pressure_msl", DEFAULT_PRESSURE_UNIT)

    is_day = get_count_or(current, "is_day") == 1
    conditions = describe(get_count_or(current, "weather_code"), is_day)

    return (
        f"🌍 Current Weather\n"
        f"Location: {latitude:.2f}°, {longitude:.2f}°\n"
        f"Time: {get_string_or(current, 'time')}\n"
        f"\n"
        f"🌡️ Temperature: {get_number_or(current, 'temperature_2m'):.1f}{temp_unit}\n"
        f"🤔 Feels like: {get_number_or(current, 'apparent_temperature'):.1f}{temp_unit}\n"
        f"💧 Humidity: {get_number_or(current, 'relative_humidity_2m'):.0f}{humidity_unit}\n"
        f"☔ Precipitation: {get_number_or(current, 'precipitation'):.1f}{precip_unit}\n"
        f"💨 Wind: {get_number_or(current, 'wind_speed_10m'):.1f}{wind_unit} "
        f"from {get_number_or(current, 'wind_direction_10m'):g}°\n"
        f"🌫️ Cloud cover: {get_number_or(current, 'cloud_cover'):.0f}%\n"
        f"📊 Pressure: {get_number_or(current, 'pressure_msl'):.1f}{pressure_unit}\n"
        f"☀️ Conditions: {conditions}\n"
        f"🕒 Daylight: {'Day' if is_day else 'Night'}"
    )


def format_weather_forecast(data: Any, latitude: float, longitude: float, days: int) -> str:
    """
    Render the daily forecast report.

    The loop runs to min(days, len(daily.time)); shorter or missing value
    arrays fall back to zero for that day rather than failing.
    """
    daily = get_object(data, "daily")
    units = get_object(data, "daily_units")

    dates = get_array(daily, "time")
    temp_max = get_array(daily, "temperature_2m_max")
    temp_min = get_array(daily, "temperature_2m_min")
    weather_codes = get_array(daily, "weather_code")
    precipitation = get_array(daily, "precipitation_sum")
    wind_speed = get_array(daily, "wind_speed_10m_max")

    temp_unit = get_string_or(units, "temperature_2m_max", DEFAULT_TEMPERATURE_UNIT)
    precip_unit = get_string_or(units, "precipitation_sum", DEFAULT_PRECIPITATION_UNIT)
    wind_unit = get_string_or(units, "wind_speed_10m_max", DEFAULT_WIND_UNIT)

    lines = [
        f"🌍 {days}-Day Weather Forecast",
        f"Location: {latitude:.2f}°, {longitude:.2f}°",
        "",
    ]

    for i in range(min(days, len(dates))):
        lines.extend([
            f"📅 {string_at(dates, i)}",
            f"🌡️ {_or_zero(number_at(temp_max, i)):.1f}{temp_unit} / "
            f"{_or_zero(number_at(temp_min, i)):.1f}{temp_unit}",
            # forecast days are described with the daytime phrase
            f"☀️ {describe(count_at(weather_codes, i), True)}",
            f"☔ {_or_zero(number_at(precipitation, i)):.1f}{precip_unit}",
            f"💨 {_or_zero(number_at(wind_speed, i)):.1f}{wind_unit}",
            "",
        ])

    return "\n".join(lines)


def format_historical_weather(
    data: Any,
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
) -> str:
    """
    Render the historical report: summary statistics, then a daily preview.

    Summary statistics only use days where max, min and mean temperature and
    precipitation are all present; partial days are skipped, not zero-filled.
    The preview shows at most the first five days, each field defaulted on
    its own.

    Args:
        data: Decoded archive-endpoint JSON containing "daily" and "daily_units"
        latitude: Requested latitude
        longitude: Requested longitude
        start_date: Requested start date, echoed in the header
        end_date: Requested end date, echoed in the header

    Returns:
        Multi-line report text
    """
    daily = get_object(data, "daily")
    units = get_object(data, "daily_units")

    dates = get_array(daily, "time")
    temp_max = get_array(daily, "temperature_2m_max")
    temp_min = get_array(daily, "temperature_2m_min")
    temp_mean = get_array(daily, "temperature_2m_mean")
    precipitation = get_array(daily, "precipitation_sum")

    temp_unit = get_string_or(units, "temperature_2m_max", DEFAULT_TEMPERATURE_UNIT)
    precip_unit = get_string_or(units, "precipitation_sum", DEFAULT_PRECIPITATION_UNIT)

    lines = [
        "🌍 Historical Weather Data",
        f"Location: {latitude:.2f}°, {longitude:.2f}°",
        f"Period: {start_date} to {end_date}",
        "",
    ]

    total_max = total_min = total_mean = total_precip = 0.0
    count = 0
    for i in range(len(dates)):
        values = (
            number_at(temp_max, i),
            number_at(temp_min, i),
            number_at(temp_mean, i),
            number_at(precipitation, i),
        )
        if None in values:
            continue
        max_temp, min_temp, mean_temp, precip = values
        total_max += max_temp
        total_min += min_temp
        total_mean += mean_temp
        total_precip += precip
        count += 1

    if count > 0:
        lines.extend([
            f"📊 Summary Statistics ({count} days):",
            f"🌡️ Average High: {total_max / count:.1f}{temp_unit}",
            f"🌡️ Average Low: {total_min / count:.1f}{temp_unit}",
            f"🌡️ Average Mean: {total_mean / count:.1f}{temp_unit}",
            f"☔ Total Precipitation: {total_precip:.1f}{precip_unit}",
            f"☔ Average Daily Precipitation: {total_precip / count:.1f}{precip_unit}",
            "",
        ])

    lines.append(f"📅 Daily Data (first {HISTORICAL_PREVIEW_DAYS} days):")
    for i in range(min(HISTORICAL_PREVIEW_DAYS, len(dates))):
        lines.append(
            f"{string_at(dates, i)}: "
            f"{_or_zero(number_at(temp_max, i)):.1f}{temp_unit} / "
            f"{_or_zero(number_at(temp_min, i)):.1f}{temp_unit}, "
            f"{_or_zero(number_at(precipitation, i)):.1f}{precip_unit}"
        )

    return "\n".join(lines) + "\n"


def format_locations(data: Any) -> str:
    """Render geocoding matches as a numbered list."""
    results = get_array(data, "results")
    if not results:
        return NO_LOCATIONS_MESSAGE

    lines = ["🌍 Location Search Results:", ""]
    for position, result in enumerate(results, start=1):
        admin1 = get_string(result, "admin1")
        population = get_count(result, "population")

        admin_info = f", {admin1}" if admin1 is not None else ""
        lines.append(
            f"{position}. 📍 {get_string_or(result, 'name')}{admin_info}, "
            f"{get_string_or(result, 'country')}"
        )
        lines.append(
            f"📐 Coordinates: {get_number_or(result, 'latitude'):.4f}°, "
            f"{get_number_or(result, 'longitude'):.4f}°"
        )
        lines.append(f"🕐 Timezone: {get_string_or(result, 'timezone')}")
        if population is not None:
            lines.append(f"👥 Population: {population}")
        lines.append("")

    return "\n".join(lines)
