from __future__ import annotations

from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints


MessageText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ChatRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    message: MessageText = Field(..., description="User message text")


class ChatResponse(BaseModel):
    response: str


class ChatError(BaseModel):
    error: str
    details: Optional[Any] = None


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    role: Literal["user", "assistant"]
    content: str
