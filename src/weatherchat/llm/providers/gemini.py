"""Google Gemini LLM provider implementation.

Uses the official Google GenAI SDK for async generation and chat sessions.
Reference: https://github.com/googleapis/python-genai

Function declarations are passed as plain schemas (no Python callables),
so the SDK never runs functions automatically: a requested call comes back
as a function_call part and the caller decides what to execute.
"""

from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ...exceptions import ModelServiceError
from ..base import ChatSession, LLMProvider
from ..models import (
    FunctionCallResponse,
    FunctionResult,
    LLMResponse,
    ModelResponse,
    TextResponse,
)


def extract_text(response: types.GenerateContentResponse) -> str:
    """Extract text content from a Gemini response, handling empty responses.

    Args:
        response: Gemini GenerateContentResponse

    Returns:
        Text content or empty string
    """
    if response.candidates:
        candidate = response.candidates[0]
        if candidate.content and candidate.content.parts:
            texts = [part.text for part in candidate.content.parts if part.text]
            if texts:
                return "".join(texts)

    # Fallback to response.text (may raise or return None)
    try:
        return response.text or ""
    except (ValueError, AttributeError):
        return ""


def to_model_response(response: types.GenerateContentResponse) -> ModelResponse:
    """Convert a Gemini response to TextResponse or FunctionCallResponse.

    Only the first function call is kept.
    """
    calls = response.function_calls or []
    if calls:
        call = calls[0]
        return FunctionCallResponse(
            name=call.name or "",
            args=dict(call.args or {}),
            ignored_calls=len(calls) - 1,
        )
    return TextResponse(text=extract_text(response))


def _usage(response: types.GenerateContentResponse) -> dict[str, int] | None:
    if not response.usage_metadata:
        return None
    return {
        "prompt_tokens": response.usage_metadata.prompt_token_count or 0,
        "completion_tokens": response.usage_metadata.candidates_token_count or 0,
        "total_tokens": response.usage_metadata.total_token_count or 0,
    }


def _service_error(operation: str, error: Exception) -> ModelServiceError:
    status_code = getattr(error, "code", None)
    if not isinstance(status_code, int):
        status_code = None
    return ModelServiceError(f"{operation} failed: {error}", status_code=status_code)


class GeminiChatSession(ChatSession):
    """Chat session backed by a google-genai AsyncChat.

    Hidden design decisions:
    - History is recorded by the SDK chat object
    - Function results are sent as function_response parts wrapped
      in {"content": ...}
    """

    def __init__(self, chat: Any):
        self._chat = chat

    async def send(self, message: str | FunctionResult) -> ModelResponse:
        if isinstance(message, FunctionResult):
            payload: Any = types.Part.from_function_response(
                name=message.name,
                response={"content": message.response},
            )
        else:
            payload = message

        try:
            response = await self._chat.send_message(payload)
        except (errors.APIError, httpx.HTTPError) as e:
            raise _service_error("Chat turn", e) from e

        return to_model_response(response)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - Function declaration conversion
    - SDK error mapping
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default model (gemini-2.5-flash)
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def generate_text(
        self,
        message: str,
        model: str | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a stateless completion for a single message.

        Args:
            message: The user message
            model: Model to use (overrides default)
            **kwargs: Additional GenerateContentConfig fields

        Returns:
            LLMResponse with generated content
        """
        model_to_use = model or self._model
        config = types.GenerateContentConfig(**kwargs) if kwargs else None

        try:
            response = await self._client.aio.models.generate_content(
                model=model_to_use,
                contents=message,
                config=config,
            )
        except (errors.APIError, httpx.HTTPError) as e:
            raise _service_error("Generation", e) from e

        return LLMResponse(
            content=extract_text(response),
            model=model_to_use,
            usage=_usage(response),
        )

    def start_chat(
        self,
        function_declarations: list[dict[str, Any]] | None = None,
        model: str | None = None
    ) -> GeminiChatSession:
        """Start a chat session with optional function declarations.

        Args:
            function_declarations: Tool schemas ({name, description, parameters})
            model: Model to use (overrides default)

        Returns:
            GeminiChatSession with empty history
        """
        config = None
        if function_declarations:
            tool = types.Tool(
                function_declarations=[
                    types.FunctionDeclaration(**declaration)
                    for declaration in function_declarations
                ]
            )
            config = types.GenerateContentConfig(tools=[tool])

        chat = self._client.aio.chats.create(
            model=model or self._model,
            config=config,
        )
        return GeminiChatSession(chat)

    async def close(self) -> None:
        """Close the Gemini client.

        The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
