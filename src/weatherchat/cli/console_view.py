"""ChatView implementation for the console commands."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..chat import ChatView
from ..config import BUSY_MESSAGE, ECHO_LABEL


class ConsoleChatView(ChatView):
    """Renders the echo and response regions as Rich output.

    The console has no persistent input field, so clearing it is a no-op;
    the loading state is shown as a status spinner.
    """

    def __init__(self, console: Console, echo: bool = True) -> None:
        self.console = console
        self.echo = echo
        self.last_response: str | None = None
        self._status = None

    def show_validation_error(self, input_message: str, response_message: str) -> None:
        self.console.print(f"[red]{input_message}[/red]")
        self.console.print(f"[red]{response_message}[/red]")

    def echo_input(self, text: str) -> None:
        if self.echo:
            self.console.print(Text.assemble((f"{ECHO_LABEL}: ", "dim"), text), highlight=False)

    def clear_input(self) -> None:
        pass

    def reset_response(self) -> None:
        self.last_response = None

    def show_loading(self, text: str) -> None:
        self._stop_status()
        self._status = self.console.status(Text(text, style="dim"))
        self._status.start()

    def set_pending(self, pending: bool) -> None:
        if not pending:
            self._stop_status()

    def _stop_status(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def show_response(self, text: str) -> None:
        self._stop_status()
        self.last_response = text
        self.console.print(Panel(Text(text), border_style="green", title="Gemini", title_align="left"))

    def show_busy(self) -> None:
        self.console.print(f"[yellow]{BUSY_MESSAGE}[/yellow]")
