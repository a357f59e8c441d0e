"""
Data models and schemas for the chat relay.
"""
from .enums import ErrorKind
from .schemas import (
    ERROR_PREFIX,
    ChatError,
    ChatRequest,
    ChatResponse,
    HealthCheckResponse,
    RelayResult,
)

__all__ = [
    "ERROR_PREFIX",
    "ErrorKind",
    "ChatError",
    "ChatRequest",
    "ChatResponse",
    "HealthCheckResponse",
    "RelayResult",
]
