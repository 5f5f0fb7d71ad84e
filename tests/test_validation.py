from datetime import date

import pytest

from adk_mcp_tools.openmeteo_tool.validation import (
    ValidationError,
    clamp_count,
    validate_coordinates,
    validate_date,
    validate_query,
)


@pytest.mark.parametrize("latitude, longitude", [(0, 0), (-90, -180), (90, 180), (48.85, 2.35)])
def test_coordinates_in_range_are_accepted(latitude, longitude):
    assert validate_coordinates(latitude, longitude) == (float(latitude), float(longitude))


@pytest.mark.parametrize("latitude", [-90.0001, 90.5, 1000])
def test_latitude_out_of_range_names_bound_and_value(latitude):
    with pytest.raises(ValidationError) as exc_info:
        validate_coordinates(latitude, 0)

    message = str(exc_info.value)
    assert "latitude" in message
    assert str(float(latitude)) in message
    assert "between -90 and 90" in message


@pytest.mark.parametrize("longitude", [-180.5, 181, 360])
def test_longitude_out_of_range_names_bound_and_value(longitude):
    with pytest.raises(ValidationError) as exc_info:
        validate_coordinates(0, longitude)

    message = str(exc_info.value)
    assert "longitude" in message
    assert "between -180 and 180" in message


def test_numeric_strings_are_coerced():
    assert validate_coordinates("48.85", "2.35") == (48.85, 2.35)


@pytest.mark.parametrize("value", ["north", None, [], True])
def test_non_numeric_coordinates_are_rejected(value):
    with pytest.raises(ValidationError, match="Must be a number"):
        validate_coordinates(value, 0)


def test_nan_latitude_is_rejected():
    with pytest.raises(ValidationError):
        validate_coordinates(float("nan"), 0)


def test_valid_date_is_parsed():
    assert validate_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize("raw", ["2024-13-40", "not-a-date", "", "2023-02-29", "2024-1-5", "20240105"])
def test_invalid_date_message_contains_input(raw):
    with pytest.raises(ValidationError) as exc_info:
        validate_date(raw)

    assert f"'{raw}'" in str(exc_info.value)
    assert "YYYY-MM-DD" in str(exc_info.value)


def test_non_string_date_is_rejected():
    with pytest.raises(ValidationError):
        validate_date(20240101)


@pytest.mark.parametrize(
    "value, expected",
    [(None, 7), (30, 16), (0, 1), (-3, 1), (5, 5), ("12", 12)],
)
def test_clamp_count(value, expected):
    assert clamp_count("days", value, default=7, low=1, high=16) == expected


def test_clamp_count_rejects_non_integer_text():
    with pytest.raises(ValidationError, match="Invalid days"):
        clamp_count("days", "a week", default=7, low=1, high=16)


def test_query_must_be_text():
    assert validate_query("Tokyo") == "Tokyo"
    assert validate_query("   ") == "   "
    with pytest.raises(ValidationError):
        validate_query(None)
    with pytest.raises(ValidationError):
        validate_query(42)


@pytest.mark.parametrize("value", [10 ** 400, -(10 ** 400)])
def test_coordinates_too_large_for_float_are_rejected(value):
    with pytest.raises(ValidationError, match="Must be a number"):
        validate_coordinates(value, 0)
    with pytest.raises(ValidationError, match="Must be a number"):
        validate_coordinates(0, value)


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_clamp_count_rejects_non_finite_floats(value):
    with pytest.raises(ValidationError, match="Invalid days"):
        clamp_count("days", value, default=7, low=1, high=16)
