"""Main CLI application using Typer."""
import asyncio
from enum import Enum

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from ..chat import InputHandler, ModelClient
from ..config import MODE_FUNCTIONS, MODE_SIMPLE
from ..weather import WeatherError
from .console_view import ConsoleChatView
from .providers import (
    build_responder,
    console_debug_callback,
    get_weather_client,
    require_llm,
)

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="weatherchat",
    help="Chat with Gemini, with optional weather function calling",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


class ChatMode(str, Enum):
    SIMPLE = MODE_SIMPLE
    FUNCTIONS = MODE_FUNCTIONS


MODE_OPTION = typer.Option(
    ChatMode.FUNCTIONS,
    "--mode",
    "-m",
    help="simple: stateless replies; functions: chat session with fetchWeather"
)


@app.command(name="tui")
def tui_command(
    mode: ChatMode = MODE_OPTION,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI chat page."""
    async def _tui():
        from ..ui import run_textual_tui

        llm = require_llm(console)
        weather = get_weather_client()
        client = ModelClient(llm)

        try:
            responder = build_responder(mode.value, client, weather)
            await run_textual_tui(
                responder=responder,
                mode=mode.value,
                model_name=llm.model,
                log_level=log_level,
            )
        finally:
            await weather.close()
            await client.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


@app.command()
def chat(
    mode: ChatMode = MODE_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print execution log"),
):
    """Interactive console chat."""
    async def _chat():
        llm = require_llm(console)
        weather = get_weather_client()
        client = ModelClient(llm)

        try:
            view = ConsoleChatView(console, echo=False)
            handler = InputHandler(view, build_responder(mode.value, client, weather))
            if verbose:
                handler.set_debug_callback(console_debug_callback(console))

            console.print(f"[bold cyan]Weatherchat[/bold cyan] [dim]({escape(llm.model)}, {mode.value})[/dim]")
            console.print("[dim]Type 'exit', 'quit', or 'q' to leave[/dim]\n")

            while True:
                try:
                    user_input = console.input("[bold yellow]You:[/bold yellow] ")
                except (KeyboardInterrupt, EOFError):
                    console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip().lower() in ("exit", "quit", "q"):
                    console.print("[dim]Goodbye![/dim]")
                    break

                await handler.submit(user_input)
        finally:
            await weather.close()
            await client.close()

    asyncio.run(_chat())


@app.command()
def ask(
    message: str = typer.Argument(..., help="Message to send"),
    mode: ChatMode = MODE_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print execution log"),
):
    """Send a single message and print the reply."""
    async def _ask() -> bool:
        llm = require_llm(console)
        weather = get_weather_client()
        client = ModelClient(llm)

        try:
            view = ConsoleChatView(console)
            handler = InputHandler(view, build_responder(mode.value, client, weather))
            if verbose:
                handler.set_debug_callback(console_debug_callback(console))
            return await handler.submit(message)
        finally:
            await weather.close()
            await client.close()

    if not asyncio.run(_ask()):
        raise typer.Exit(code=1)


@app.command()
def weather(
    location: str = typer.Argument(..., help="Place name, e.g. 東京"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print execution log"),
):
    """Show today's and tomorrow's forecast without the model."""
    async def _weather():
        async with get_weather_client() as client:
            if verbose:
                client.set_debug_callback(console_debug_callback(console))
            return await client.fetch_weather(location)

    result = asyncio.run(_weather())

    if isinstance(result, WeatherError):
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=Text(result.location))
    table.add_column("Day", style="cyan")
    table.add_column("Weather")
    table.add_column("Max °C", justify="right", style="red")
    table.add_column("Min °C", justify="right", style="blue")

    for label, day in (("today", result.today), ("tomorrow", result.tomorrow)):
        table.add_row(label, day.weather, _temperature(day.max_temp), _temperature(day.min_temp))

    console.print(table)


def _temperature(value: float | None) -> str:
    return "-" if value is None else f"{value:.1f}"


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
