"""
Tool Parameter Reference for the Open-Meteo Tools

Describes the four tools exposed over MCP: parameter descriptions, defaults
and accepted ranges. The dispatcher reads defaults and ranges from here and
the server advertises SERVER_INSTRUCTIONS at initialization.
"""

from typing import Any, Dict

COORDINATE_PARAMETERS: Dict[str, Dict[str, Any]] = {
    "latitude": {
        "type": "number",
        "required": True,
        "description": "Latitude coordinate (-90 to 90)",
        "range": [-90, 90],
    },
    "longitude": {
        "type": "number",
        "required": True,
        "description": "Longitude coordinate (-180 to 180)",
        "range": [-180, 180],
    },
}

TOOL_SCHEMA: Dict[str, Dict[str, Any]] = {
    "get_current_weather": {
        "description": "Get current weather conditions for a specific location.",
        "parameters": dict(COORDINATE_PARAMETERS),
    },
    "get_weather_forecast": {
        "description": "Get a daily weather forecast of up to 16 days for a specific location.",
        "parameters": {
            **COORDINATE_PARAMETERS,
            "days": {
                "type": "integer",
                "required": False,
                "default": 7,
                "range": [1, 16],
                "description": "Number of forecast days (1-16, default: 7)",
            },
        },
    },
    "get_historical_weather": {
        "description": "Get daily historical weather for a location and date range.",
        "parameters": {
            **COORDINATE_PARAMETERS,
            "start_date": {
                "type": "string",
                "required": True,
                "description": "Start date (YYYY-MM-DD)",
            },
            "end_date": {
                "type": "string",
                "required": True,
                "description": "End date (YYYY-MM-DD)",
            },
        },
    },
    "search_locations": {
        "description": "Search for locations by name to get their coordinates and details.",
        "parameters": {
            "query": {
                "type": "string",
                "required": True,
                "description": (
                    "Location search query in format 'city, country' (country is optional). "
                    "Examples: 'Paris, France', 'Tokyo', 'New York, USA'"
                ),
            },
            "limit": {
                "type": "integer",
                "required": False,
                "default": 10,
                "range": [1, 100],
                "description": "Maximum number of results (default: 10)",
            },
        },
    },
}

SERVER_INSTRUCTIONS = (
    "This server provides tools to interact with the OpenMeteo Weather API for weather data and forecasts.\n"
    "Available tools:\n"
    "- 'get_current_weather': Get current weather conditions for a specific location. "
    "Requires 'latitude' and 'longitude' parameters.\n"
    "- 'get_weather_forecast': Get weather forecast for a specific location. "
    "Requires 'latitude' and 'longitude' parameters. Optional 'days' parameter (1-16, defaults to 7).\n"
    "- 'get_historical_weather': Get historical weather data for a specific location and date range. "
    "Requires 'latitude', 'longitude', 'start_date', and 'end_date' parameters (dates in YYYY-MM-DD format).\n"
    "- 'search_locations': Search for locations by name to get their coordinates. "
    "Requires 'query' parameter in format 'city, country' (country is optional, e.g., 'Paris, France' or 'Tokyo'). "
    "Optional 'limit' parameter (defaults to 10, max 100).\n\n"
    "Coordinates must be valid: latitude between -90 and 90, longitude between -180 and 180.\n"
    "All weather data is provided by OpenMeteo (https://open-meteo.com/) and is free to use."
)


def parameter_bounds(tool_name: str, parameter: str) -> Dict[str, int]:
    """
    Return the default and clamp range for an optional count parameter.

    Example:
        >>> parameter_bounds("get_weather_forecast", "days")
        {'default': 7, 'low': 1, 'high': 16}
    """
    param = TOOL_SCHEMA[tool_name]["parameters"][parameter]
    low, high = param["range"]
    return {"default": param["default"], "low": low, "high": high}


def to_input_schema(tool_name: str) -> Dict[str, Any]:
    """
    Build the JSON Schema advertised for a tool's arguments.

    Ranges are left to the tool itself: coordinates are validated with a
    descriptive message and counts are clamped.
    """
    properties: Dict[str, Any] = {}
    required = []
    for name, param in TOOL_SCHEMA[tool_name]["parameters"].items():
        prop: Dict[str, Any] = {"type": param["type"], "description": param["description"]}
        if "default" in param:
            prop["default"] = param["default"]
        properties[name] = prop
        if param["required"]:
            required.append(name)
    return {"type": "object", "properties": properties, "required": required}
