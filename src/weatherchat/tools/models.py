"""Tool invocation and output models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ToolInvocation(BaseModel):
    """A function call requested by the model, addressed to one tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    arguments: dict[str, Any] = Field(default_factory=dict)


class ToolOutput(BaseModel):
    """What a tool hands back to the model.

    ``payload`` is sent verbatim as the function result; ``is_error`` only
    affects logging, the model sees errors as ordinary payloads.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    payload: dict[str, Any]
    is_error: bool = False
