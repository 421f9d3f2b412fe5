"""Per-mode glue from a user message to the text that gets displayed."""

from abc import ABC, abstractmethod
from typing import Any

from ..llm import ChatSession
from ..tools import ToolRegistry
from .client import ModelClient
from .dispatcher import FunctionDispatcher


class Responder(ABC):
    """Turns a validated user message into display text.

    Implementations never raise for model failures; they return the
    fixed error message instead.
    """

    @abstractmethod
    async def respond(self, message: str) -> str:
        pass

    def set_debug_callback(self, callback: Any) -> None:
        pass

    def reset(self) -> None:
        """Forget conversation state, if any."""
        pass


class SimpleResponder(Responder):
    """Stateless mode: every message is an independent generation."""

    def __init__(self, client: ModelClient):
        self._client = client

    async def respond(self, message: str) -> str:
        return await self._client.send_simple(message)

    def set_debug_callback(self, callback: Any) -> None:
        self._client.set_debug_callback(callback)


class FunctionCallingResponder(Responder):
    """Session mode with function calling.

    Owns the chat session for its lifetime; the session is created once
    here and handed to the dispatcher on every message.
    """

    def __init__(self, client: ModelClient, registry: ToolRegistry):
        self._client = client
        self._registry = registry
        self._dispatcher = FunctionDispatcher(client, registry)
        self._session: ChatSession = client.start_session(registry)

    @property
    def session(self) -> ChatSession:
        return self._session

    async def respond(self, message: str) -> str:
        result = await self._dispatcher.run(self._session, message)
        return result.text

    def set_debug_callback(self, callback: Any) -> None:
        self._client.set_debug_callback(callback)
        self._dispatcher.set_debug_callback(callback)

    def reset(self) -> None:
        self._session = self._client.start_session(self._registry)
