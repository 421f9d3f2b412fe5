"""Input handling shared by every front-end.

The handler validates submitted text and drives a ChatView; front-ends
(Textual TUI, console REPL) only implement the view.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..config import (
    EMPTY_INPUT_MESSAGE,
    EMPTY_INPUT_RESPONSE,
    MODEL_ERROR_MESSAGE,
    THINKING_MESSAGE,
)
from .responders import Responder


class ChatView(ABC):
    """Display surface: an input field, an echo region and a response region."""

    @abstractmethod
    def show_validation_error(self, input_message: str, response_message: str) -> None:
        """Show the empty-input error in the echo and response regions."""
        pass

    @abstractmethod
    def echo_input(self, text: str) -> None:
        """Show the submitted text in the echo region."""
        pass

    @abstractmethod
    def clear_input(self) -> None:
        pass

    @abstractmethod
    def reset_response(self) -> None:
        """Return the response region to its neutral style."""
        pass

    @abstractmethod
    def show_loading(self, text: str) -> None:
        pass

    @abstractmethod
    def show_response(self, text: str) -> None:
        pass

    def set_pending(self, pending: bool) -> None:
        """Enable or disable the submit control."""
        pass

    def show_busy(self) -> None:
        """Tell the user a submission was rejected because one is pending."""
        pass


class InputHandler:
    """Validates user input and forwards it to a responder.

    At most one submission is in flight; others are rejected until it
    completes.

    Example:
        handler = InputHandler(view, SimpleResponder(client))
        await handler.submit("こんにちは")
    """

    def __init__(self, view: ChatView, responder: Responder):
        self._view = view
        self._responder = responder
        self._pending = False
        self._debug_callback: Any | None = None

    @property
    def pending(self) -> bool:
        return self._pending

    @property
    def responder(self) -> Responder:
        return self._responder

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback and propagate it to the responder.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._responder.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def submit(self, text: str) -> bool:
        """Handle a submit trigger.

        Args:
            text: Current value of the input field

        Returns:
            True if the message was sent to the responder
        """
        if self._pending:
            self._debug("warning", "Input", "Submission rejected: previous message pending")
            self._view.show_busy()
            return False

        if not text:
            self._debug("debug", "Input", "Empty message rejected")
            self._view.show_validation_error(EMPTY_INPUT_MESSAGE, EMPTY_INPUT_RESPONSE)
            return False

        self._view.echo_input(text)
        self._view.clear_input()
        self._view.reset_response()
        self._view.show_loading(THINKING_MESSAGE)

        self._pending = True
        try:
            self._view.set_pending(True)
            self._debug("info", "Input", f"Submitted: '{text[:50]}'")
            reply = await self._responder.respond(text)
        except Exception as e:
            self._debug("error", "Input", f"Unexpected error: {e}")
            reply = MODEL_ERROR_MESSAGE
        finally:
            self._pending = False
            self._view.set_pending(False)

        self._view.show_response(reply)
        return True
