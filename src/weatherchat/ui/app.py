"""Main Textual TUI application.

Lays out the input, echo and response regions and hands submissions to
the shared InputHandler.
"""

from typing import Any

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..chat import InputHandler, Responder
from ..config import MODE_FUNCTIONS
from .config import LogLevel
from .styles import APP_CSS
from .themes import CLEAR_SKY
from .view import TextualChatView
from .widgets import DebugPanel, MessageInputBar, TextRegion


class WeatherChatApp(App):
    """Textual TUI for chatting with the model."""

    CSS = APP_CSS
    TITLE = "Weatherchat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+l", "clear", "Clear"),
        Binding("ctrl+n", "new_session", "New Session"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        responder: Responder,
        mode: str = MODE_FUNCTIONS,
        model_name: str = "unknown",
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._responder = responder
        self._mode = mode
        self._model_name = model_name
        self._log_level = log_level
        self._handler: InputHandler | None = None

    @property
    def handler(self) -> InputHandler | None:
        return self._handler

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield TextRegion(id="input-history")
        yield TextRegion(id="response")
        yield DebugPanel(id="debug-panel")
        yield MessageInputBar(id="input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Wire the view, handler and log panel together."""
        self.register_theme(CLEAR_SKY)
        self.theme = "clear-sky"
        self.sub_title = f"{self._model_name} | {self._mode}"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.parse(self._log_level)
            log_panel.show()

        input_bar = self.query_one("#input-bar", MessageInputBar)
        view = TextualChatView(
            echo=self.query_one("#input-history", TextRegion),
            response=self.query_one("#response", TextRegion),
            input_bar=input_bar,
            app=self,
        )
        self._handler = InputHandler(view, self._responder)
        self._handler.set_debug_callback(log_panel.record)

        log_panel.record("info", "TUI", f"Mode: {self._mode}, model: {self._model_name}")
        input_bar.focus_input()

    def on_message_input_bar_submitted(self, event: MessageInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._submit(event.value)

    @work(group="submit")
    async def _submit(self, text: str) -> None:
        if self._handler is not None:
            await self._handler.submit(text)

    def action_clear(self) -> None:
        """Clear the echo and response regions."""
        echo = self.query_one("#input-history", TextRegion)
        response = self.query_one("#response", TextRegion)
        echo.remove_class("-visible", "-error")
        echo.show_text("")
        response.remove_class("-error", "-loading")
        response.show_text("")

    def action_new_session(self) -> None:
        """Start a fresh conversation."""
        if self._handler is not None and self._handler.pending:
            self.notify("Wait for the current response", severity="warning", timeout=2)
            return
        self._responder.reset()
        self.action_clear()
        self.notify("New session started", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_textual_tui(
    responder: Responder,
    mode: str = MODE_FUNCTIONS,
    model_name: str = "unknown",
    log_level: str | None = None,
    **kwargs: Any,
) -> None:
    """Run the Textual TUI.

    Args:
        responder: Responder for the selected mode
        mode: Mode label shown in the header
        model_name: Model name shown in the header
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = WeatherChatApp(
        responder=responder,
        mode=mode,
        model_name=model_name,
        log_level=log_level,
    )
    await app.run_async(**kwargs)
