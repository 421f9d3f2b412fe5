"""Tool infrastructure for function calling."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .models import ToolInvocation, ToolOutput


class BaseTool(ABC):
    """A function the model may call.

    Subclasses set ``name``, ``description`` and ``parameters`` (a Gemini
    OpenAPI-style schema) and implement ``invoke``.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    parameters: ClassVar[dict[str, Any]]

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def _output(self, payload: dict[str, Any], is_error: bool = False) -> ToolOutput:
        return ToolOutput(name=self.name, payload=payload, is_error=is_error)

    @abstractmethod
    async def invoke(self, invocation: ToolInvocation) -> ToolOutput:
        """Run the tool for one model request.

        Must not raise for bad arguments or upstream failures; those are
        reported through an error payload.
        """
        pass

    def declaration(self) -> dict[str, Any]:
        """Function declaration offered to the model when a session starts."""
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }
