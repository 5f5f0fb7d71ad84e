"""
Input Validation for the Open-Meteo Tools

Checks caller-supplied coordinates, dates and counts before any request is
sent to the provider. Every check either returns a normalized value or raises
ValidationError with a message naming the offending input.
"""

import re
from datetime import date, datetime
from typing import Any, Optional, Tuple

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class ValidationError(ValueError):
    """Raised when tool input is rejected before any network access."""


def _as_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {name}: {value!r}. Must be a number.")
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"Invalid {name}: {value!r}. Must be a number.") from None


def validate_coordinates(latitude: Any, longitude: Any) -> Tuple[float, float]:
    """
    Validate a latitude/longitude pair.

    Args:
        latitude: Latitude in decimal degrees (-90 to 90)
        longitude: Longitude in decimal degrees (-180 to 180)

    Returns:
        The coordinates as floats

    Raises:
        ValidationError: If either value is not numeric or is out of range
    """
    lat = _as_float("latitude", latitude)
    lon = _as_float("longitude", longitude)

    if not -90 <= lat <= 90:
        raise ValidationError(f"Invalid latitude: {lat}. Must be between -90 and 90.")
    if not -180 <= lon <= 180:
        raise ValidationError(f"Invalid longitude: {lon}. Must be between -180 and 180.")

    return lat, lon


def validate_date(date_str: Any) -> date:
    """
    Parse a calendar date in YYYY-MM-DD format.

    Args:
        date_str: Raw date string from the caller

    Returns:
        The parsed date

    Raises:
        ValidationError: If the string is not a real YYYY-MM-DD date
    """
    message = f"Invalid date format: '{date_str}'. Expected YYYY-MM-DD."
    if not isinstance(date_str, str) or not _DATE_PATTERN.fullmatch(date_str):
        raise ValidationError(message)
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(message) from None


def clamp_count(name: str, value: Optional[Any], default: int, low: int, high: int) -> int:
    """
    Apply a default to an optional count and clamp it into [low, high].

    Args:
        name: Parameter name used in error messages
        value: Caller value, or None to use the default
        default: Value used when the caller omits the parameter
        low: Smallest accepted value
        high: Largest accepted value

    Returns:
        The clamped integer

    Example:
        >>> clamp_count("days", 30, 7, 1, 16)
        16
    """
    if value is None:
        count = default
    elif isinstance(value, bool):
        raise ValidationError(f"Invalid {name}: {value!r}. Must be an integer.")
    else:
        try:
            count = int(value)
        except (TypeError, ValueError, OverflowError):
            raise ValidationError(f"Invalid {name}: {value!r}. Must be an integer.") from None

    return max(low, min(high, count))


def validate_query(query: Any) -> str:
    """Check that a location search query is text; blank text is left to the geocoder."""
    if not isinstance(query, str):
        raise ValidationError(f"Invalid query: {query!r}. Provide a location name such as 'Paris, France'.")
    return query
