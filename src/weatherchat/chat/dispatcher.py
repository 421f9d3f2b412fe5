"""Function dispatch loop.

One user message makes at most one function round-trip:

    awaiting_model -> done
    awaiting_model -> awaiting_function_result -> done
"""

from typing import Any

from ..config import MODEL_ERROR_MESSAGE, NO_ANSWER_MESSAGE
from ..exceptions import ModelServiceError
from ..llm import ChatSession, FunctionCallResponse, FunctionResult, TextResponse
from ..tools import ToolInvocation, ToolRegistry
from .client import ModelClient
from .models import DispatchResult, DispatchState


class FunctionDispatcher:
    """Runs requested functions and feeds their results back to the model.

    Hidden design decisions:
    - Only the first function call of a response is executed
    - Unregistered function names are answered with an error result so
      the session history stays well-formed
    - No chained calls: a function call in reply to a function result
      ends the loop with a fixed message
    """

    def __init__(self, client: ModelClient, registry: ToolRegistry):
        """Initialize the dispatcher.

        Args:
            client: Model client used for every turn
            registry: Tools that may be executed
        """
        self._client = client
        self._registry = registry
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback and propagate it to all tools.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback
        self._registry.set_debug_callback(callback)

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def run(self, session: ChatSession, message: str) -> DispatchResult:
        """Dispatch one user message.

        Args:
            session: The caller's chat session
            message: Non-empty user message

        Returns:
            DispatchResult with the text to display
        """
        states = [DispatchState.AWAITING_MODEL]
        function_name: str | None = None
        payload: dict[str, Any] | None = None

        try:
            response = await self._client.send_turn(session, message)

            if isinstance(response, FunctionCallResponse):
                function_name = response.name
                if response.ignored_calls:
                    self._debug(
                        "warning", "Dispatch",
                        f"Ignoring {response.ignored_calls} additional function call(s)"
                    )

                states.append(DispatchState.AWAITING_FUNCTION_RESULT)
                payload = await self._execute(response)
                response = await self._client.send_turn(
                    session, FunctionResult(name=response.name, response=payload)
                )

        except ModelServiceError as e:
            self._debug("error", "Dispatch", str(e))
            states.append(DispatchState.DONE)
            return DispatchResult(
                text=MODEL_ERROR_MESSAGE,
                states=states,
                function_name=function_name,
                function_result=payload,
                error=True,
            )

        states.append(DispatchState.DONE)

        if isinstance(response, TextResponse):
            text = response.text
        else:
            self._debug(
                "warning", "Dispatch",
                f"Chained function call '{response.name}' not supported"
            )
            text = NO_ANSWER_MESSAGE

        return DispatchResult(
            text=text,
            states=states,
            function_name=function_name,
            function_result=payload,
        )

    async def _execute(self, call: FunctionCallResponse) -> dict[str, Any]:
        tool = self._registry.get(call.name)
        if tool is None:
            self._debug("warning", "Dispatch", f"Unsupported function requested: {call.name}")
            return {"error": f"unsupported function: {call.name}"}

        self._debug("info", "Dispatch", f"Calling {call.name}({call.args})")
        output = await tool.invoke(ToolInvocation(name=call.name, arguments=call.args))
        if output.is_error:
            self._debug("warning", "Dispatch", f"{call.name} returned an error: {output.payload}")
        return output.payload
