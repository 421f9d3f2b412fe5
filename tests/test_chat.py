"""Unit tests for the chat module: model client, dispatch loop, responders."""
import pytest
from conftest import FakeProvider, FakeSession

from weatherchat.chat import (
    DispatchState,
    FunctionCallingResponder,
    FunctionDispatcher,
    ModelClient,
    SimpleResponder,
)
from weatherchat.config import MODEL_ERROR_MESSAGE, NO_ANSWER_MESSAGE
from weatherchat.exceptions import ModelServiceError
from weatherchat.llm import FunctionCallResponse, FunctionResult, TextResponse
from weatherchat.tools import FetchWeatherTool, ToolRegistry
from weatherchat.weather import WeatherClient


@pytest.fixture
def registry(weather_http):
    return ToolRegistry([FetchWeatherTool(WeatherClient(http_client=weather_http))])


class TestModelClient:
    """Tests for ModelClient."""

    @pytest.mark.asyncio
    async def test_send_simple_returns_text(self):
        provider = FakeProvider(text="こんにちは！")
        client = ModelClient(provider)

        assert await client.send_simple("こんにちは") == "こんにちは！"
        assert provider.messages == ["こんにちは"]

    @pytest.mark.asyncio
    async def test_send_simple_maps_errors_to_fixed_message(self):
        client = ModelClient(FakeProvider(error=ModelServiceError("quota exceeded", status_code=429)))

        assert await client.send_simple("こんにちは") == MODEL_ERROR_MESSAGE

    def test_start_session_passes_declarations(self, registry):
        provider = FakeProvider()
        client = ModelClient(provider)

        client.start_session(registry)

        assert [d["name"] for d in provider.declarations[0]] == ["fetchWeather"]

    def test_start_session_without_registry(self):
        provider = FakeProvider()

        ModelClient(provider).start_session()

        assert provider.declarations == [None]

    @pytest.mark.asyncio
    async def test_send_turn_propagates_errors(self):
        session = FakeSession([ModelServiceError("boom")])

        with pytest.raises(ModelServiceError):
            await ModelClient(FakeProvider()).send_turn(session, "hello")

    @pytest.mark.asyncio
    async def test_close_closes_provider(self):
        provider = FakeProvider()

        await ModelClient(provider).close()

        assert provider.closed


class TestFunctionDispatcher:
    """Tests for the function dispatch loop."""

    @pytest.mark.asyncio
    async def test_text_response_completes_directly(self, registry, weather_transport):
        session = FakeSession([TextResponse(text="こんにちは！何かお手伝いできますか？")])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        result = await dispatcher.run(session, "こんにちは")

        assert result.text == "こんにちは！何かお手伝いできますか？"
        assert result.states == [DispatchState.AWAITING_MODEL, DispatchState.DONE]
        assert result.function_name is None
        assert session.sent == ["こんにちは"]
        assert weather_transport.requests == []

    @pytest.mark.asyncio
    async def test_weather_round_trip(self, registry, weather_transport):
        session = FakeSession([
            FunctionCallResponse(name="fetchWeather", args={"location": "東京"}),
            TextResponse(text="東京は今日晴れ、最高22.4度です。"),
        ])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        result = await dispatcher.run(session, "東京の天気は？")

        assert result.states == [
            DispatchState.AWAITING_MODEL,
            DispatchState.AWAITING_FUNCTION_RESULT,
            DispatchState.DONE,
        ]
        assert result.text == "東京は今日晴れ、最高22.4度です。"
        assert result.function_name == "fetchWeather"

        sent_back = session.sent[1]
        assert isinstance(sent_back, FunctionResult)
        assert sent_back.name == "fetchWeather"
        assert sent_back.response["location"] == "東京"
        assert sent_back.response["today"] == {"weather": "晴れ", "maxTemp": 22.4, "minTemp": 15.1}
        assert sent_back.response["tomorrow"]["weather"] == "小雨"
        assert weather_transport.paths() == ["/search", "/v1/forecast"]

    @pytest.mark.asyncio
    async def test_location_not_found_is_relayed_to_model(self, registry, weather_transport):
        weather_transport.geocode_json = []
        session = FakeSession([
            FunctionCallResponse(name="fetchWeather", args={"location": "架空の町"}),
            TextResponse(text="その場所は見つかりませんでした。"),
        ])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        result = await dispatcher.run(session, "架空の町の天気は？")

        assert set(session.sent[1].response) == {"error"}
        assert result.text == "その場所は見つかりませんでした。"
        assert weather_transport.paths() == ["/search"]

    @pytest.mark.asyncio
    async def test_only_first_function_call_is_executed(self, registry, weather_transport):
        session = FakeSession([
            FunctionCallResponse(name="fetchWeather", args={"location": "東京"}, ignored_calls=2),
            TextResponse(text="東京は晴れです。"),
        ])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        await dispatcher.run(session, "東京と大阪と札幌の天気は？")

        assert weather_transport.paths().count("/search") == 1
        assert len(session.sent) == 2

    @pytest.mark.asyncio
    async def test_unknown_function_is_answered_with_error(self, registry, weather_transport):
        session = FakeSession([
            FunctionCallResponse(name="getStockPrice", args={"ticker": "7203"}),
            TextResponse(text="その機能は使えません。"),
        ])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)
        logs = []
        dispatcher.set_debug_callback(lambda *entry: logs.append(entry))

        result = await dispatcher.run(session, "トヨタの株価は？")

        assert session.sent[1] == FunctionResult(
            name="getStockPrice", response={"error": "unsupported function: getStockPrice"}
        )
        assert result.text == "その機能は使えません。"
        assert weather_transport.requests == []
        assert any(level == "warning" for level, _, _ in logs)

    @pytest.mark.asyncio
    async def test_chained_function_call_is_not_followed(self, registry):
        session = FakeSession([
            FunctionCallResponse(name="fetchWeather", args={"location": "東京"}),
            FunctionCallResponse(name="fetchWeather", args={"location": "大阪"}),
        ])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        result = await dispatcher.run(session, "東京と大阪の天気は？")

        assert result.text == NO_ANSWER_MESSAGE
        assert result.states[-1] == DispatchState.DONE
        assert len(session.sent) == 2

    @pytest.mark.asyncio
    async def test_model_error_on_first_turn(self, registry):
        session = FakeSession([ModelServiceError("unavailable", status_code=503)])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        result = await dispatcher.run(session, "こんにちは")

        assert result.error is True
        assert result.text == MODEL_ERROR_MESSAGE
        assert result.states == [DispatchState.AWAITING_MODEL, DispatchState.DONE]

    @pytest.mark.asyncio
    async def test_model_error_after_function_result(self, registry):
        session = FakeSession([
            FunctionCallResponse(name="fetchWeather", args={"location": "東京"}),
            ModelServiceError("unavailable"),
        ])
        dispatcher = FunctionDispatcher(ModelClient(FakeProvider()), registry)

        result = await dispatcher.run(session, "東京の天気は？")

        assert result.error is True
        assert result.text == MODEL_ERROR_MESSAGE
        assert result.function_name == "fetchWeather"
        assert result.function_result["location"] == "東京"


class TestResponders:
    """Tests for the per-mode responders."""

    @pytest.mark.asyncio
    async def test_simple_responder(self):
        provider = FakeProvider(text="やあ")

        assert await SimpleResponder(ModelClient(provider)).respond("こんにちは") == "やあ"
        assert provider.sessions == []

    @pytest.mark.asyncio
    async def test_function_responder_reuses_one_session(self, registry):
        provider = FakeProvider(session_responses=[
            TextResponse(text="一つ目"),
            TextResponse(text="二つ目"),
        ])
        responder = FunctionCallingResponder(ModelClient(provider), registry)

        first = await responder.respond("a")
        second = await responder.respond("b")

        assert (first, second) == ("一つ目", "二つ目")
        assert len(provider.sessions) == 1
        assert provider.sessions[0].sent == ["a", "b"]

    def test_function_responder_reset_starts_new_session(self, registry):
        provider = FakeProvider()
        responder = FunctionCallingResponder(ModelClient(provider), registry)
        first = responder.session

        responder.reset()

        assert responder.session is not first
        assert len(provider.sessions) == 2

    def test_separate_responders_do_not_share_sessions(self, registry):
        provider = FakeProvider()

        a = FunctionCallingResponder(ModelClient(provider), registry)
        b = FunctionCallingResponder(ModelClient(provider), registry)

        assert a.session is not b.session
