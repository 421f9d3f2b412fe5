"""Data structures for the function dispatch loop."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class DispatchState(str, Enum):
    """States of one user message's trip through the dispatch loop."""

    AWAITING_MODEL = "awaiting_model"
    AWAITING_FUNCTION_RESULT = "awaiting_function_result"
    DONE = "done"


class DispatchResult(BaseModel):
    """Outcome of dispatching one user message.

    Attributes:
        text: Text to display in the response region
        states: States visited, in order
        function_name: Function the model requested, if any
        function_result: Payload sent back to the model, if any
        error: Whether the model call failed
    """

    text: str
    states: list[DispatchState] = Field(default_factory=list)
    function_name: str | None = None
    function_result: dict[str, Any] | None = None
    error: bool = False
