"""Pytest configuration and shared fixtures."""
import os
from typing import Any

import httpx
import pytest

from weatherchat.chat import ChatView
from weatherchat.llm import (
    ChatSession,
    FunctionResult,
    LLMProvider,
    LLMResponse,
    ModelResponse,
)


class FakeSession(ChatSession):
    """Chat session that replays scripted responses (or raises them)."""

    def __init__(self, responses: list[Any]):
        self.responses = list(responses)
        self.sent: list[str | FunctionResult] = []

    async def send(self, message: str | FunctionResult) -> ModelResponse:
        self.sent.append(message)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class FakeProvider(LLMProvider):
    """LLM provider that never touches the network."""

    def __init__(
        self,
        text: str = "fake reply",
        session_responses: list[Any] | None = None,
        error: Exception | None = None,
    ):
        self.text = text
        self.session_responses = session_responses or []
        self.error = error
        self.messages: list[str] = []
        self.sessions: list[FakeSession] = []
        self.declarations: list[list[dict[str, Any]] | None] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def generate_text(self, message: str, model: str | None = None, **kwargs: Any) -> LLMResponse:
        self.messages.append(message)
        if self.error:
            raise self.error
        return LLMResponse(content=self.text, model=self.model)

    def start_chat(self, function_declarations=None, model=None) -> FakeSession:
        self.declarations.append(function_declarations)
        session = FakeSession(self.session_responses)
        self.sessions.append(session)
        return session

    async def close(self) -> None:
        self.closed = True


class RecordingView(ChatView):
    """ChatView that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.input_value = ""

    def show_validation_error(self, input_message: str, response_message: str) -> None:
        self.calls.append(("validation_error", input_message, response_message))

    def echo_input(self, text: str) -> None:
        self.calls.append(("echo", text))

    def clear_input(self) -> None:
        self.input_value = ""
        self.calls.append(("clear",))

    def reset_response(self) -> None:
        self.calls.append(("reset",))

    def show_loading(self, text: str) -> None:
        self.calls.append(("loading", text))

    def show_response(self, text: str) -> None:
        self.calls.append(("response", text))

    def set_pending(self, pending: bool) -> None:
        self.calls.append(("pending", pending))

    def show_busy(self) -> None:
        self.calls.append(("busy",))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


NOMINATIM_TOKYO = [
    {"place_id": 1, "lat": "35.6768601", "lon": "139.7638947", "display_name": "東京都, 日本"}
]

OPEN_METEO_TOKYO = {
    "latitude": 35.7,
    "longitude": 139.75,
    "timezone": "Asia/Tokyo",
    "daily": {
        "time": ["2026-10-19", "2026-10-20"],
        "weathercode": [1, 61],
        "temperature_2m_max": [22.4, 19.8],
        "temperature_2m_min": [15.1, 14.0],
    },
}


class WeatherTransport:
    """Routes Nominatim and Open-Meteo requests to canned JSON, recording them."""

    def __init__(self, geocode_json: Any = None, forecast_json: Any = None, forecast_status: int = 200):
        self.geocode_json = NOMINATIM_TOKYO if geocode_json is None else geocode_json
        self.forecast_json = OPEN_METEO_TOKYO if forecast_json is None else forecast_json
        self.forecast_status = forecast_status
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/search":
            return httpx.Response(200, json=self.geocode_json)
        if request.url.path == "/v1/forecast":
            return httpx.Response(self.forecast_status, json=self.forecast_json)
        return httpx.Response(404)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def recording_view():
    return RecordingView()


@pytest.fixture
def weather_transport():
    return WeatherTransport()


@pytest.fixture
def weather_http(weather_transport):
    """httpx.AsyncClient backed by the canned weather transport."""
    return httpx.AsyncClient(transport=httpx.MockTransport(weather_transport))


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }
