import pytest


@pytest.fixture
def current_weather_payload():
    """Forecast-endpoint response for Paris with every current field present."""
    return {
        "latitude": 48.86,
        "longitude": 2.3399997,
        "current_units": {
            "time": "iso8601",
            "temperature_2m": "°C",
            "relative_humidity_2m": "%",
            "apparent_temperature": "°C",
            "precipitation": "mm",
            "wind_speed_10m": "km/h",
            "wind_direction_10m": "°",
            "pressure_msl": "hPa",
            "cloud_cover": "%",
        },
        "current": {
            "time": "2024-05-01T12:00",
            "temperature_2m": 15.2,
            "relative_humidity_2m": 60,
            "apparent_temperature": 14.1,
            "is_day": 1,
            "precipitation": 0.0,
            "weather_code": 1,
            "cloud_cover": 25,
            "pressure_msl": 1016.4,
            "wind_speed_10m": 11.5,
            "wind_direction_10m": 270,
        },
    }


@pytest.fixture
def forecast_payload():
    return {
        "daily_units": {
            "temperature_2m_max": "°C",
            "precipitation_sum": "mm",
            "wind_speed_10m_max": "km/h",
        },
        "daily": {
            "time": ["2024-05-01", "2024-05-02", "2024-05-03"],
            "weather_code": [0, 61, 95],
            "temperature_2m_max": [18.4, 16.0, 21.7],
            "temperature_2m_min": [9.1, 10.3, 12.8],
            "precipitation_sum": [0.0, 4.2, 12.5],
            "wind_speed_10m_max": [12.0, 20.5, 31.3],
        },
    }


@pytest.fixture
def historical_payload():
    """Six archive days; the mean temperature for 2024-01-03 is missing."""
    return {
        "daily_units": {
            "temperature_2m_max": "°C",
            "precipitation_sum": "mm",
        },
        "daily": {
            "time": [
                "2024-01-01",
                "2024-01-02",
                "2024-01-03",
                "2024-01-04",
                "2024-01-05",
                "2024-01-06",
            ],
            "temperature_2m_max": [10.0, 12.0, 14.0, 16.0, 18.0, 20.0],
            "temperature_2m_min": [2.0, 4.0, 6.0, 8.0, 10.0, 12.0],
            "temperature_2m_mean": [6.0, 8.0, None, 12.0, 14.0, 16.0],
            "precipitation_sum": [1.0, 0.0, 2.0, 0.5, 0.0, 3.0],
        },
    }


@pytest.fixture
def geocode_payload():
    return {
        "results": [
            {
                "name": "Paris",
                "latitude": 48.85341,
                "longitude": 2.3488,
                "country": "France",
                "admin1": "Île-de-France",
                "timezone": "Europe/Paris",
                "population": 2138551,
            },
            {
                "name": "Paris",
                "latitude": 33.66094,
                "longitude": -95.55551,
                "country": "United States",
                "timezone": "America/Chicago",
            },
        ]
    }
