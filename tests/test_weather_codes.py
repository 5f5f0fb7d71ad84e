import pytest

from adk_mcp_tools.openmeteo_tool.weather_codes import UNKNOWN_CONDITIONS, WEATHER_CODES, describe


@pytest.mark.parametrize(
    "code, phrase",
    [
        (0, "Clear sky"),
        (1, "Mainly clear"),
        (2, "Partly cloudy"),
        (3, "Overcast"),
        (45, "Fog"),
        (48, "Depositing rime fog"),
        (51, "Light drizzle"),
        (53, "Moderate drizzle"),
        (55, "Dense drizzle"),
        (56, "Light freezing drizzle"),
        (57, "Dense freezing drizzle"),
        (61, "Slight rain"),
        (63, "Moderate rain"),
        (65, "Heavy rain"),
        (66, "Light freezing rain"),
        (67, "Heavy freezing rain"),
        (71, "Slight snow fall"),
        (73, "Moderate snow fall"),
        (75, "Heavy snow fall"),
        (77, "Snow grains"),
        (80, "Slight rain showers"),
        (81, "Moderate rain showers"),
        (82, "Violent rain showers"),
        (85, "Slight snow showers"),
        (86, "Heavy snow showers"),
        (95, "Thunderstorm"),
        (96, "Thunderstorm with slight hail"),
        (99, "Thunderstorm with heavy hail"),
    ],
)
def test_known_codes(code, phrase):
    assert describe(code) == phrase


def test_table_has_exactly_the_listed_codes():
    assert sorted(WEATHER_CODES) == [
        0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
        71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99,
    ]


@pytest.mark.parametrize("code", [4, 50, 100, 999, -1])
def test_unknown_codes(code):
    assert describe(code) == UNKNOWN_CONDITIONS == "Unknown conditions"


def test_day_flag_does_not_change_phrase():
    for code in WEATHER_CODES:
        assert describe(code, is_day=True) == describe(code, is_day=False)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        WEATHER_CODES[0] = "Sunny"
