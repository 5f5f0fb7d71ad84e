"""
MCP Server for the Open-Meteo Weather Tools

Exposes the weather tools via Model Context Protocol (MCP) over stdio. Tool
calls run through ADK FunctionTool wrappers; advertised schemas come from
the parameter reference in tool_schema.
"""

import asyncio
import json
import logging
from typing import Any, Dict

# MCP Server Imports
from mcp import types as mcp_types
from mcp.server.lowlevel import Server, NotificationOptions
from mcp.server.models import InitializationOptions
import mcp.server.stdio

# ADK Tool Imports
from google.adk.tools.function_tool import FunctionTool

from . import __version__
from .config import configure_logging
from .tool_implementation import (
    get_current_weather,
    get_weather_forecast,
    get_historical_weather,
    search_locations,
    settings,
)
from .tool_schema import SERVER_INSTRUCTIONS, TOOL_SCHEMA, to_input_schema

logger = logging.getLogger(__name__)

SERVER_NAME = "openmeteo-mcp-server"


class ToolCallError(Exception):
    """Raised to report a failed tool call; the MCP server marks the result as an error."""


# --- Initialize ADK Tools ---
weather_tools: Dict[str, FunctionTool] = {
    "get_current_weather": FunctionTool(get_current_weather),
    "get_weather_forecast": FunctionTool(get_weather_forecast),
    "get_historical_weather": FunctionTool(get_historical_weather),
    "search_locations": FunctionTool(search_locations),
}

# --- MCP Server Setup ---
app = Server(SERVER_NAME)


@app.list_tools()
async def list_mcp_tools() -> list[mcp_types.Tool]:
    """
    MCP handler to list all available weather tools.

    Returns:
        List of MCP Tool schemas
    """
    logger.debug("Received list_tools request")
    return [
        mcp_types.Tool(
            name=tool_name,
            description=TOOL_SCHEMA[tool_name]["description"],
            inputSchema=to_input_schema(tool_name),
        )
        for tool_name in weather_tools
    ]


def _result_text(tool_response: Any) -> str:
    if isinstance(tool_response, dict):
        if "text" in tool_response:
            return str(tool_response["text"])
        if "error" in tool_response:
            return str(tool_response["error"])
    return json.dumps(tool_response, indent=2, default=str)


@app.call_tool()
async def call_mcp_tool(name: str, arguments: dict) -> list[mcp_types.Content]:
    """
    MCP handler to execute a weather tool call.

    Args:
        name: Tool name to execute
        arguments: Dictionary of arguments for the tool

    Returns:
        List with a single text content holding the report

    Raises:
        ToolCallError: If the tool is unknown or reports an error
    """
    logger.info(f"Received call_tool request for '{name}' with arguments {json.dumps(arguments)}")

    if name not in weather_tools:
        available = ", ".join(weather_tools)
        raise ToolCallError(f"Tool '{name}' not found. Available tools: {available}")

    adk_tool_response = await weather_tools[name].run_async(
        args=arguments or {},
        tool_context=None,
    )
    text = _result_text(adk_tool_response)

    failed = isinstance(adk_tool_response, dict) and (
        adk_tool_response.get("status") == "error" or "error" in adk_tool_response
    )
    if failed:
        raise ToolCallError(text)

    return [mcp_types.TextContent(type="text", text=text)]


# --- MCP Server Runner ---
async def run_mcp_stdio_server() -> None:
    """
    Runs the MCP server, listening for connections over standard input/output.
    """
    logger.info(f"Exposing {len(weather_tools)} tools via MCP: {', '.join(weather_tools)}")

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        await app.run(
            read_stream,
            write_stream,
            InitializationOptions(
                server_name=app.name,
                server_version=__version__,
                capabilities=app.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
                instructions=SERVER_INSTRUCTIONS,
            ),
        )
        logger.info("Run loop finished or client disconnected")


def main() -> None:
    """
    Main entry point for the Open-Meteo MCP Server.
    """
    configure_logging(settings.log_level)
    logger.info("Starting OpenMeteo MCP Server via stdio")
    try:
        asyncio.run(run_mcp_stdio_server())
    except KeyboardInterrupt:
        logger.info("OpenMeteo MCP Server stopped by user")
    finally:
        logger.info("OpenMeteo MCP Server process exiting")


if __name__ == "__main__":
    main()
