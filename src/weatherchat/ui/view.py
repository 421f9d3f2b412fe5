"""ChatView implementation backed by the TUI widgets."""

from typing import TYPE_CHECKING

from ..chat import ChatView
from ..config import BUSY_MESSAGE, ECHO_LABEL

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import MessageInputBar, TextRegion


class TextualChatView(ChatView):
    """Maps input handler callbacks onto widget content and CSS classes."""

    def __init__(
        self,
        echo: "TextRegion",
        response: "TextRegion",
        input_bar: "MessageInputBar",
        app: "App | None" = None
    ) -> None:
        self.echo = echo
        self.response = response
        self.input_bar = input_bar
        self.app = app

    def show_validation_error(self, input_message: str, response_message: str) -> None:
        self.echo.add_class("-visible", "-error")
        self.echo.show_text(input_message)
        self.response.remove_class("-loading")
        self.response.add_class("-error")
        self.response.show_text(response_message)

    def echo_input(self, text: str) -> None:
        self.echo.remove_class("-error")
        self.echo.add_class("-visible")
        self.echo.show_text(f"{ECHO_LABEL}\n\n{text}")

    def clear_input(self) -> None:
        self.input_bar.clear()

    def reset_response(self) -> None:
        self.response.remove_class("-error", "-loading")

    def show_loading(self, text: str) -> None:
        self.response.add_class("-loading")
        self.response.show_text(text)

    def show_response(self, text: str) -> None:
        self.response.remove_class("-loading")
        self.response.show_text(text)

    def set_pending(self, pending: bool) -> None:
        self.input_bar.set_pending(pending)

    def show_busy(self) -> None:
        if self.app is not None:
            self.app.notify(BUSY_MESSAGE, severity="warning", timeout=2)
