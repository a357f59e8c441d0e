"""
View state for one chat session: the transcript plus an Idle/Awaiting-Reply flag.
"""
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .models import Role, Turn
from .transport import RelayUnavailableError

GREETING = "Hi! Ask me anything."
CONNECT_ERROR = "Error: Could not connect to backend."

Listener = Callable[["ChatSession"], None]


class SessionState(str, Enum):
    IDLE = "idle"

    AWAITING_REPLY = "awaiting_reply"


class ChatSession:
    """
    Ordered transcript of Turns with at most one relay call in flight.

    `relay` is anything with an async `send(message) -> RelayReply`, normally
    a RelayClient. Listeners are called with the session after every
    transcript append and every pending-flag change.
    """

    def __init__(self, relay, greeting: str = GREETING):
        self.relay = relay
        self.state = SessionState.IDLE
        self.draft = ""
        self._turns: List[Turn] = [Turn(role=Role.ASSISTANT, text=greeting)]
        self._listeners: List[Listener] = []

    @property
    def transcript(self) -> Tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def pending(self) -> bool:
        return self.state is SessionState.AWAITING_REPLY

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a render callback; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _append(self, turn: Turn) -> None:
        self._turns.append(turn)
        self._notify()

    def _set_state(self, state: SessionState) -> None:
        if state is self.state:
            return
        self.state = state
        self._notify()

    async def submit(self, text: Optional[str] = None) -> bool:
        """
        Send `text` (or the current draft) to the relay.

        Returns False without touching anything when the text is blank or a
        reply is still pending. Otherwise appends the user turn, waits for
        the relay and appends the assistant turn, always ending Idle.
        """
        if text is None:
            text = self.draft
        trimmed = text.strip()
        if not trimmed or self.pending:
            return False

        self._append(Turn(role=Role.USER, text=trimmed))
        self.draft = ""
        try:
            self._set_state(SessionState.AWAITING_REPLY)
            try:
                reply = await self.relay.send(trimmed)
                turn = Turn(role=Role.ASSISTANT, text=reply.reply, error_kind=reply.error_kind)
            except RelayUnavailableError:
                turn = Turn(role=Role.ASSISTANT, text=CONNECT_ERROR, error_kind="unreachable")
            self._append(turn)
        finally:
            self._set_state(SessionState.IDLE)
        return True
