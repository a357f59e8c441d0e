"""
HTTP transport from the chat client to the relay service.
"""
import logging
import os
from typing import Optional

import httpx

from .models import RelayReply

logger = logging.getLogger(__name__)

DEFAULT_RELAY_URL = "http://127.0.0.1:8080"
CHAT_PATH = "/api/chat"


class ChatClientError(Exception):
    """Base error for the chat client."""


class RelayUnavailableError(ChatClientError):
    """The relay could not be reached or did not answer with a reply."""


def relay_url_from_env() -> str:
    return os.getenv("CHAT_RELAY_URL", DEFAULT_RELAY_URL)


class RelayClient:
    """
    Async client for the relay's POST /api/chat endpoint.

    No timeout is applied unless one is given: a hung relay keeps the
    caller waiting, just like a browser fetch would.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or relay_url_from_env()).rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def send(self, message: str) -> RelayReply:
        """
        Relay `message` and return the parsed reply.

        Raises:
            RelayUnavailableError: on connection failure, non-2xx status, or
                a body that is not a relay reply
        """
        try:
            response = await self._http.post(CHAT_PATH, json={"message": message})
            response.raise_for_status()
            return RelayReply.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Relay at {self.base_url} unavailable: {str(e)}")
            raise RelayUnavailableError(str(e)) from e

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "RelayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
