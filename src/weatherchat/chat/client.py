"""Model client: the single entry point for talking to the model."""

from typing import Any

from ..config import MODEL_ERROR_MESSAGE
from ..exceptions import ModelServiceError
from ..llm import ChatSession, FunctionResult, LLMProvider, ModelResponse
from ..tools import ToolRegistry


class ModelClient:
    """Wraps an LLM provider for both chat modes.

    Hidden design decisions:
    - Stateless calls swallow model errors into a fixed display string
    - Session turns raise ModelServiceError so the dispatch loop can
      decide what to show
    """

    def __init__(self, llm: LLMProvider):
        """Initialize the model client.

        Args:
            llm: LLM provider for generation
        """
        self._llm = llm
        self._debug_callback: Any | None = None

    @property
    def model(self) -> str:
        return self._llm.model

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def send_simple(self, message: str) -> str:
        """Send a single message without conversation context.

        Args:
            message: The user message

        Returns:
            The model's text, or the fixed error message on failure
        """
        self._debug("debug", "LLM", f"generate_content ({self.model})")
        try:
            response = await self._llm.generate_text(message)
        except ModelServiceError as e:
            self._debug("error", "LLM", str(e))
            return MODEL_ERROR_MESSAGE

        if response.usage:
            self._debug("debug", "LLM", f"Usage: {response.usage}")
        return response.content

    def start_session(self, registry: ToolRegistry | None = None) -> ChatSession:
        """Create a chat session offering the registry's tools.

        Args:
            registry: Tools the model may call (None for a plain chat)

        Returns:
            A new ChatSession
        """
        declarations = registry.function_declarations() if registry else None
        names = registry.names if registry else []
        self._debug("info", "LLM", f"Chat session started (tools: {names or 'none'})")
        return self._llm.start_chat(function_declarations=declarations)

    async def send_turn(
        self,
        session: ChatSession,
        message: str | FunctionResult
    ) -> ModelResponse:
        """Send one turn into a session.

        Args:
            session: Session owned by the caller
            message: User text or a function result

        Returns:
            TextResponse or FunctionCallResponse

        Raises:
            ModelServiceError: If the model call fails
        """
        kind = "function result" if isinstance(message, FunctionResult) else "message"
        self._debug("debug", "LLM", f"Sending {kind}")
        response = await session.send(message)
        self._debug("debug", "LLM", f"Received {response.kind}")
        return response

    async def close(self) -> None:
        await self._llm.close()
