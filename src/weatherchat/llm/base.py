from abc import ABC, abstractmethod
from typing import Any

from .models import FunctionResult, LLMResponse, ModelResponse


class ChatSession(ABC):
    """An ongoing exchange with the model.

    The turn history lives inside the session (for Gemini, inside the SDK
    chat object) and is advanced by every ``send``. A session is owned by
    exactly one caller; it is not safe to send concurrently.
    """

    @abstractmethod
    async def send(self, message: str | FunctionResult) -> ModelResponse:
        """Send a user message or a function result.

        Args:
            message: User text, or the result of a requested function

        Returns:
            TextResponse or FunctionCallResponse

        Raises:
            ModelServiceError: If the model API call fails
        """
        pass


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which model API is used.
    Implementations handle:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping SDK errors to ModelServiceError

    Supports async context manager protocol for resource cleanup:
        async with provider:
            response = await provider.generate_text("hello")
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Default model name."""
        pass

    @abstractmethod
    async def generate_text(
        self,
        message: str,
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a stateless single-message completion.

        Args:
            message: The user message
            model: Model to use (None uses provider's default)
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and metadata

        Raises:
            ModelServiceError: If the model API call fails
        """
        pass

    @abstractmethod
    def start_chat(
        self,
        function_declarations: list[dict[str, Any]] | None = None,
        model: str | None = None
    ) -> ChatSession:
        """Start a new chat session.

        Args:
            function_declarations: Tools the model may call
                ({name, description, parameters})
            model: Model to use (None uses provider's default)

        Returns:
            A fresh ChatSession with empty history
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Suppresses "Event loop is closed" errors raised by httpx/anyio
        during interpreter shutdown.
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
