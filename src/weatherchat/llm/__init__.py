from .base import ChatSession, LLMProvider
from ..exceptions import ModelServiceError, WeatherChatError
from .factory import create_llm_provider
from .models import (
    FunctionCallResponse,
    FunctionResult,
    LLMResponse,
    ModelResponse,
    TextResponse,
)
from .providers import GeminiChatSession, GeminiProvider

__all__ = [
    "ChatSession",
    "LLMProvider",
    "ModelServiceError",
    "WeatherChatError",
    "create_llm_provider",
    "FunctionCallResponse",
    "FunctionResult",
    "LLMResponse",
    "ModelResponse",
    "TextResponse",
    "GeminiChatSession",
    "GeminiProvider",
]
