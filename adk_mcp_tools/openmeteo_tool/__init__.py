"""
Open-Meteo Weather Tools for ADK and MCP

This package exposes Open-Meteo weather data as four callable tools: current
conditions, daily forecasts, historical archives and location search. Each
tool validates its input, issues one HTTP request to Open-Meteo, and returns
a human-readable text report.

Modules:
    - validation: Coordinate, date and count checks
    - query_builder: Provider URL construction with fixed field sets
    - transport: aiohttp client and transport error taxonomy
    - formatting: Defensive JSON accessors and text reports
    - weather_codes: WMO weather code phrases
    - tool_schema: Parameter reference and server instructions
    - tool_implementation: The four tool entry points
    - weather_server: MCP server wrapper exposing the tools over stdio
"""

from .tool_implementation import (
    get_current_weather,
    get_weather_forecast,
    get_historical_weather,
    search_locations,
)

__version__ = "0.1.0"
__all__ = [
    "get_current_weather",
    "get_weather_forecast",
    "get_historical_weather",
    "search_locations",
]
