"""Weather lookup tool."""

from typing import Any

from ..weather import WeatherClient, WeatherError
from .base import BaseTool
from .models import ToolInvocation, ToolOutput


class FetchWeatherTool(BaseTool):
    """Looks up today's and tomorrow's weather for a place name."""

    name = "fetchWeather"
    description = "指定された地名の現在の天気、最高気温、最低気温を取得します。"
    parameters = {
        "type": "OBJECT",
        "properties": {
            "location": {
                "type": "STRING",
                "description": "地名（例：東京、大阪府、札幌市など）",
            },
        },
        "required": ["location"],
    }

    def __init__(self, weather_client: WeatherClient):
        super().__init__()
        self._weather = weather_client

    def set_debug_callback(self, callback: Any) -> None:
        super().set_debug_callback(callback)
        self._weather.set_debug_callback(callback)

    async def invoke(self, invocation: ToolInvocation) -> ToolOutput:
        location = invocation.arguments.get("location")
        if not location:
            return self._output({"error": "location parameter is required"}, is_error=True)

        self._debug("info", "Tool", f"fetchWeather(location='{location}')")
        result = await self._weather.fetch_weather(str(location))
        return self._output(result.to_payload(), is_error=isinstance(result, WeatherError))
