from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class LLMResponse(BaseModel):
    """Response from a stateless generation call."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )


class TextResponse(BaseModel):
    """The model answered with text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str = Field(description="Answer text (may be empty)")


class FunctionCallResponse(BaseModel):
    """The model asked the caller to run a named function.

    Only the first call of a response is represented; ``ignored_calls``
    counts the others.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["function_call"] = "function_call"
    name: str = Field(description="Requested function name")
    args: dict[str, Any] = Field(default_factory=dict)
    ignored_calls: int = Field(default=0, ge=0)


ModelResponse = Annotated[
    TextResponse | FunctionCallResponse,
    Field(discriminator="kind"),
]


class FunctionResult(BaseModel):
    """A function-result turn sent back into a chat session."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Name of the function that was executed")
    response: dict[str, Any] = Field(description="Result payload for the model")
