"""
Transcript data for the chat client.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Role(str, Enum):
    USER = "user"

    ASSISTANT = "assistant"


class Turn(BaseModel):
    """One message in the transcript. Frozen once created."""
    model_config = ConfigDict(frozen=True)

    role: Role
    text: str
    # Relay-reported failure category for assistant turns, e.g. "quota".
    error_kind: Optional[str] = None

    @property
    def label(self) -> str:
        return "User" if self.role is Role.USER else "Assistant"


class RelayError(BaseModel):
    """Failure details the relay attaches to an "AI Error: ..." reply."""
    kind: str
    detail: str = ""


class RelayReply(BaseModel):
    """Body of a relay /api/chat response."""
    reply: str
    error: Optional[RelayError] = None

    @field_validator("error", mode="before")
    @classmethod
    def drop_unrecognized_error(cls, v):
        # The reply text is still usable when the error details are not.
        if isinstance(v, dict) and "kind" in v:
            return v
        if isinstance(v, RelayError):
            return v
        return None

    @property
    def error_kind(self) -> Optional[str]:
        if self.error is None:
            return None
        return self.error.kind
