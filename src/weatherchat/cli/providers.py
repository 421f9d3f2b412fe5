"""Provider factory functions for CLI.

Centralizes creation of the LLM provider, weather client and responders
from environment variables. Hides configuration details from command
implementations.
"""

import os
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..chat import FunctionCallingResponder, ModelClient, Responder, SimpleResponder
from ..config import (
    API_KEY_ENV,
    DEFAULT_MODEL,
    DEFAULT_USER_AGENT,
    MODE_FUNCTIONS,
    MODE_SIMPLE,
    MODEL_ENV,
    USER_AGENT_ENV,
)
from ..llm import LLMProvider, create_llm_provider
from ..tools import FetchWeatherTool, ToolRegistry
from ..weather import WeatherClient

# Default console for output
_console = Console()


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create the Gemini provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    con = console or _console
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        con.print(f"[yellow]Warning: {API_KEY_ENV} not set[/yellow]")
        return None
    model = os.getenv(MODEL_ENV, DEFAULT_MODEL)
    return create_llm_provider("gemini", api_key=api_key, model=model)


def require_llm(console: Console | None = None) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Raises:
        SystemExit: If the API key is not set
    """
    import typer

    con = console or _console
    llm = get_llm(con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm


def get_weather_client() -> WeatherClient:
    """Create the weather client.

    Environment variables:
        WEATHERCHAT_USER_AGENT: User-Agent sent to Nominatim
            (default: weatherchat/<version>)
    """
    return WeatherClient(user_agent=os.getenv(USER_AGENT_ENV, DEFAULT_USER_AGENT))


def build_responder(
    mode: str,
    client: ModelClient,
    weather: WeatherClient | None = None
) -> Responder:
    """Create the responder for a chat mode.

    Args:
        mode: 'simple' or 'functions'
        client: Model client
        weather: Weather client (required for 'functions')

    Raises:
        ValueError: If the mode is unknown
    """
    if mode == MODE_SIMPLE:
        return SimpleResponder(client)
    if mode == MODE_FUNCTIONS:
        if weather is None:
            raise ValueError("functions mode requires a weather client")
        registry = ToolRegistry([FetchWeatherTool(weather)])
        return FunctionCallingResponder(client, registry)
    raise ValueError(f"Unknown mode: {mode}. Supported modes: '{MODE_SIMPLE}', '{MODE_FUNCTIONS}'")


def console_debug_callback(console: Console | None = None) -> Any:
    """Debug callback that prints log lines to a Rich console."""
    con = console or _console
    colors = {"debug": "dim", "info": "cyan", "warning": "yellow", "error": "red"}

    def _callback(level: str, component: str, message: str) -> None:
        color = colors.get(level, "white")
        con.print(f"[{color}]{level.upper():<7}[/] [bold]{escape(component)}[/]: {escape(message)}", highlight=False)

    return _callback
