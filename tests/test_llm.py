"""Unit tests for the llm module."""
from types import SimpleNamespace

import httpx
import pytest
from google.genai import types
from pydantic import TypeAdapter, ValidationError

from weatherchat.exceptions import ModelServiceError
from weatherchat.llm import (
    FunctionCallResponse,
    FunctionResult,
    GeminiChatSession,
    GeminiProvider,
    LLMProvider,
    ModelResponse,
    TextResponse,
    create_llm_provider,
)
from weatherchat.llm.providers.gemini import extract_text, to_model_response


def _text_response(text: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))]
    )


def _call_response(*calls: tuple[str, dict]) -> types.GenerateContentResponse:
    parts = [
        types.Part(function_call=types.FunctionCall(name=name, args=args))
        for name, args in calls
    ]
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
    )


class FakeChat:
    """Stands in for google-genai's AsyncChat."""

    def __init__(self, responses=None, error: Exception | None = None):
        self.responses = list(responses or [])
        self.error = error
        self.sent = []

    async def send_message(self, message):
        self.sent.append(message)
        if self.error:
            raise self.error
        return self.responses.pop(0)


class TestLLMProviderInterface:
    """Tests for the abstract LLMProvider interface."""

    def test_provider_is_abstract(self):
        with pytest.raises(TypeError):
            LLMProvider()  # type: ignore


class TestModelResponse:
    """Tests for the tagged ModelResponse union."""

    def test_discriminates_on_kind(self):
        adapter = TypeAdapter(ModelResponse)

        text = adapter.validate_python({"kind": "text", "text": "hi"})
        call = adapter.validate_python(
            {"kind": "function_call", "name": "fetchWeather", "args": {"location": "東京"}}
        )

        assert isinstance(text, TextResponse)
        assert isinstance(call, FunctionCallResponse)
        assert call.ignored_calls == 0

    def test_unknown_kind_fails(self):
        with pytest.raises(ValidationError):
            TypeAdapter(ModelResponse).validate_python({"kind": "image", "text": "x"})


class TestGeminiConversion:
    """Tests for Gemini response conversion helpers."""

    def test_text_response(self):
        result = to_model_response(_text_response("こんにちは！"))

        assert result == TextResponse(text="こんにちは！")

    def test_function_call_response(self):
        result = to_model_response(_call_response(("fetchWeather", {"location": "東京"})))

        assert result == FunctionCallResponse(name="fetchWeather", args={"location": "東京"})

    def test_only_first_call_is_kept(self):
        result = to_model_response(_call_response(
            ("fetchWeather", {"location": "東京"}),
            ("fetchWeather", {"location": "大阪"}),
        ))

        assert isinstance(result, FunctionCallResponse)
        assert result.args == {"location": "東京"}
        assert result.ignored_calls == 1

    def test_empty_response_is_empty_text(self):
        assert extract_text(types.GenerateContentResponse(candidates=[])) == ""


class TestGeminiProvider:
    """Tests for GeminiProvider with the SDK client replaced."""

    def _provider(self, generate=None, chat=None):
        provider = GeminiProvider(api_key="fake-key")
        created = {}

        def _create(**kwargs):
            created.update(kwargs)
            return chat

        provider._client = SimpleNamespace(
            aio=SimpleNamespace(
                models=SimpleNamespace(generate_content=generate),
                chats=SimpleNamespace(create=_create),
            )
        )
        return provider, created

    def test_default_model(self):
        assert GeminiProvider(api_key="fake-key").model == "gemini-2.5-flash"

    @pytest.mark.asyncio
    async def test_generate_text(self):
        seen = {}

        async def _generate(**kwargs):
            seen.update(kwargs)
            return _text_response("晴れです")

        provider, _ = self._provider(generate=_generate)

        response = await provider.generate_text("今日の天気は？")

        assert response.content == "晴れです"
        assert response.model == "gemini-2.5-flash"
        assert seen["contents"] == "今日の天気は？"
        assert seen["model"] == "gemini-2.5-flash"

    @pytest.mark.asyncio
    async def test_generate_text_wraps_transport_errors(self):
        async def _generate(**kwargs):
            raise httpx.ConnectError("network down")

        provider, _ = self._provider(generate=_generate)

        with pytest.raises(ModelServiceError, match="Generation failed"):
            await provider.generate_text("hello")

    def test_start_chat_declares_tools(self):
        provider, created = self._provider(chat=FakeChat())

        session = provider.start_chat(function_declarations=[{
            "name": "fetchWeather",
            "description": "天気を取得",
            "parameters": {
                "type": "OBJECT",
                "properties": {"location": {"type": "STRING"}},
                "required": ["location"],
            },
        }])

        assert isinstance(session, GeminiChatSession)
        assert created["model"] == "gemini-2.5-flash"
        declaration = created["config"].tools[0].function_declarations[0]
        assert declaration.name == "fetchWeather"
        assert declaration.parameters.required == ["location"]

    def test_start_chat_without_tools(self):
        provider, created = self._provider(chat=FakeChat())

        provider.start_chat()

        assert created["config"] is None


class TestGeminiChatSession:
    """Tests for GeminiChatSession."""

    @pytest.mark.asyncio
    async def test_send_text(self):
        chat = FakeChat([_text_response("こんにちは")])
        session = GeminiChatSession(chat)

        response = await session.send("こんにちは")

        assert response == TextResponse(text="こんにちは")
        assert chat.sent == ["こんにちは"]

    @pytest.mark.asyncio
    async def test_send_function_result_wraps_content(self):
        chat = FakeChat([_text_response("東京は晴れです")])
        session = GeminiChatSession(chat)

        await session.send(FunctionResult(name="fetchWeather", response={"location": "東京"}))

        part = chat.sent[0]
        assert part.function_response.name == "fetchWeather"
        assert part.function_response.response == {"content": {"location": "東京"}}

    @pytest.mark.asyncio
    async def test_send_wraps_errors(self):
        session = GeminiChatSession(FakeChat(error=httpx.ReadTimeout("slow")))

        with pytest.raises(ModelServiceError, match="Chat turn failed"):
            await session.send("hello")


class TestLLMFactory:
    """Tests for the provider factory."""

    def test_create_gemini(self):
        provider = create_llm_provider("Gemini", api_key="fake-key", model="gemini-2.5-pro")

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-2.5-pro"

    def test_missing_api_key(self):
        with pytest.raises(TypeError, match="api_key"):
            create_llm_provider("gemini")

    def test_unsupported_provider(self):
        with pytest.raises(ValueError, match="Unsupported provider"):
            create_llm_provider("openai", api_key="sk-test")
