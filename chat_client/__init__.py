"""
Chat client: transcript state, relay transport and a terminal front end.
"""
from .models import RelayError, RelayReply, Role, Turn
from .session import CONNECT_ERROR, GREETING, ChatSession, SessionState
from .transport import ChatClientError, RelayClient, RelayUnavailableError

__all__ = [
    "CONNECT_ERROR",
    "GREETING",
    "ChatClientError",
    "ChatSession",
    "RelayClient",
    "RelayError",
    "RelayReply",
    "RelayUnavailableError",
    "Role",
    "SessionState",
    "Turn",
]
