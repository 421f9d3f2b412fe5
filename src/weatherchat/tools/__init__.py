"""Tools exposed to the model for function calling."""

from .base import BaseTool
from .models import ToolInvocation, ToolOutput
from .registry import ToolRegistry
from .weather import FetchWeatherTool

__all__ = [
    "BaseTool",
    "FetchWeatherTool",
    "ToolInvocation",
    "ToolOutput",
    "ToolRegistry",
]
