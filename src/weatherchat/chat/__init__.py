"""Chat orchestration: input handling, model client and dispatch loop."""

from .client import ModelClient
from .dispatcher import FunctionDispatcher
from .input_handler import ChatView, InputHandler
from .models import DispatchResult, DispatchState
from .responders import FunctionCallingResponder, Responder, SimpleResponder

__all__ = [
    "ChatView",
    "DispatchResult",
    "DispatchState",
    "FunctionCallingResponder",
    "FunctionDispatcher",
    "InputHandler",
    "ModelClient",
    "Responder",
    "SimpleResponder",
]
