"""
Pydantic schemas for the chat relay API.
"""
from typing import Optional

from pydantic import BaseModel, Field

from .enums import ErrorKind

ERROR_PREFIX = "AI Error: "


class ChatRequest(BaseModel):
    """Request model for the chat endpoint."""
    # Blank text is forwarded as-is; callers filter blank submissions.
    message: str = Field(..., description="User message to send to the AI")


class ChatError(BaseModel):
    """Classified provider failure."""
    kind: ErrorKind = Field(..., description="Failure category")
    detail: str = Field(..., description="Provider-supplied failure details")


class RelayResult(BaseModel):
    """
    Outcome of one relay call.

    `reply` is always displayable: the provider text on success, or an
    "AI Error: ..." sentence on failure. `error` tells the two apart.
    """
    reply: str
    error: Optional[ChatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "RelayResult":
        return cls(reply=text)

    @classmethod
    def failure(cls, kind: ErrorKind, detail: str) -> "RelayResult":
        return cls(
            reply=f"{ERROR_PREFIX}{detail}",
            error=ChatError(kind=kind, detail=detail),
        )


class ChatResponse(BaseModel):
    """Response model for the chat endpoint."""
    reply: str = Field(..., description="AI reply, or an 'AI Error: ...' sentence")
    error: Optional[ChatError] = Field(
        default=None,
        description="Set when the reply is a stringified provider failure"
    )


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    model: str
