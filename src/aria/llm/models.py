"""Provider-neutral request and response records."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One role-tagged entry of a completion request."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who wrote the text; back-ends relabel 'assistant' as needed")
    content: str = Field(description="Raw text, sent as-is")


class LLMResponse(BaseModel):
    """What a back-end returns for one completion call."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(default="", description="Text of the first candidate, empty if there was none")
    model: str = Field(description="Model that answered")
    usage: dict[str, Any] | None = Field(default=None, description="Token counts, when reported")
