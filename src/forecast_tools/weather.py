import sys
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import Field

from .nws import WeatherClient, WeatherError


def register_weather(mcp: FastMCP, client: WeatherClient | None = None):
    """
    Registers the weather.gov forecast tool with the MCP server.
    """
    client = client or WeatherClient()

    @mcp.tool(name="weather_forecast", description="Busca previsão do tempo da Weather.gov (USA)")
    def weather_forecast(
        lat: Annotated[str, Field(description="Latitude for the weather forecast")],
        lon: Annotated[str, Field(description="Longitude for the weather forecast")],
    ):
        print(f"DEBUG: Starting weather_forecast for {lat},{lon}", file=sys.stderr)
        try:
            data = client.get_forecast(lat, lon)
        except WeatherError as e:
            print(f"ERROR: weather_forecast failed: {e}", file=sys.stderr)
            raise ToolError(f"erro na API de clima: {e}") from e
        return str(data)

