"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input bar composition and submit triggers
- Text regions that remember what they display
- Log rendering with level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from .config import (
    COMPONENT_COLORS,
    LEVEL_COLORS,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    LogLevel,
)


class MessageInputBar(Horizontal):
    """Single-line input with a Send button.

    Enter in the input and clicking Send both post ``Submitted`` with the
    current raw value. Validation is left to the input handler.
    """

    class Submitted(Message):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def compose(self):
        yield Input(placeholder="メッセージを入力", id="user-input")
        yield Button("送信", id="send", variant="success")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send":
            event.stop()
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if not self.query_one("#send", Button).disabled:
            self._submit()

    def _submit(self) -> None:
        self.post_message(self.Submitted(self.value))

    @property
    def value(self) -> str:
        return self.query_one("#user-input", Input).value

    def clear(self) -> None:
        self.query_one("#user-input", Input).value = ""

    def set_pending(self, pending: bool) -> None:
        """Disable the Send button while a message is being processed."""
        self.query_one("#send", Button).disabled = pending

    def focus_input(self) -> None:
        self.query_one("#user-input", Input).focus()


class TextRegion(Static):
    """A display region that keeps the plain text it last rendered."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__("", *args, markup=False, **kwargs)
        self.text = ""

    def show_text(self, text: str) -> None:
        self.text = text
        self.update(text)


class DebugPanel(RichLog):
    """Execution log, hidden until --log-level is given or Ctrl+D is pressed.

    Entries below the panel's level are dropped, not just hidden.
    """

    BORDER_TITLE = "Log"

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(*args, markup=True, highlight=False, wrap=True, **kwargs)
        self._log_level = log_level

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._refresh_subtitle()

    def _refresh_subtitle(self) -> None:
        self.border_subtitle = f"Level: {self._log_level.name}" if self.display else "Hidden"

    def record(self, level: str, component: str, message: str) -> None:
        """Debug-callback entry point: Callable(level, component, message)."""
        self.write_entry(component, message, LogLevel.parse(level))

    def write_entry(self, component: str, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."
        stamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        tag_color = COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{stamp}[/] [{LEVEL_COLORS[level]}]{level.name:<7}[/] "
            f"[{tag_color}]{escape('[' + component + ']')}[/] {escape(message)}"
        )

    def show(self) -> None:
        self.display = True
        self._refresh_subtitle()

    def toggle(self) -> bool:
        """Flip visibility and return whether the panel is now shown."""
        self.display = not self.display
        self._refresh_subtitle()
        return self.display
