"""
Google Gen AI relay: forwards one prompt to Gemini and returns its text.
"""
import logging
from typing import Dict, Optional

import httpx
from google import genai
from google.auth import exceptions as auth_exceptions
from google.genai import errors as genai_errors

from ..config import Settings, settings
from ..models.enums import ErrorKind
from ..models.schemas import RelayResult

logger = logging.getLogger(__name__)

AUTH_CODES = {401, 403}
QUOTA_CODES = {429}


class MalformedResponseError(Exception):
    """The provider answered without any text."""


def classify_error(exc: Exception) -> ErrorKind:
    """Map a provider-side exception to an ErrorKind."""
    if isinstance(exc, MalformedResponseError):
        return ErrorKind.MALFORMED
    if isinstance(exc, auth_exceptions.GoogleAuthError):
        return ErrorKind.AUTH
    if isinstance(exc, genai_errors.ClientError):
        if exc.code in AUTH_CODES:
            return ErrorKind.AUTH
        if exc.code in QUOTA_CODES:
            return ErrorKind.QUOTA
        return ErrorKind.PROVIDER
    if isinstance(exc, genai_errors.APIError):
        return ErrorKind.PROVIDER
    if isinstance(exc, (httpx.TransportError, OSError)):
        return ErrorKind.NETWORK
    return ErrorKind.UNKNOWN


class RelayService:
    """Stateless pass-through from a chat message to Google Gen AI."""

    def __init__(self, config: Settings = settings, client: Optional[genai.Client] = None):
        self.config = config
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> genai.Client:
        """
        Create a Google Gen AI client bound to the configured Vertex AI scope.

        Authentication goes through Application Default Credentials (ADC).
        """
        client = genai.Client(
            vertexai=self.config.GOOGLE_GENAI_USE_VERTEXAI,
            project=self.config.GOOGLE_CLOUD_PROJECT or None,
            location=self.config.GOOGLE_CLOUD_LOCATION,
        )
        logger.info(
            f"Initialized GenAI client - project: {self.config.GOOGLE_CLOUD_PROJECT or '(default)'}, "
            f"location: {self.config.GOOGLE_CLOUD_LOCATION}"
        )
        return client

    async def ask(self, message: str) -> RelayResult:
        """
        Send `message` as the whole prompt and return a tagged result.

        Never raises: any failure, including building the client, comes back
        as a failure result whose reply reads "AI Error: <details>".
        """
        try:
            response = await self.client.aio.models.generate_content(
                model=self.config.GENAI_MODEL,
                contents=message,
            )
            text = response.text
            if text is None:
                raise MalformedResponseError("model returned no text")
            return RelayResult.success(text)
        except Exception as e:
            kind = classify_error(e)
            logger.error(f"Error generating response ({kind.value}): {str(e)}")
            return RelayResult.failure(kind, str(e))

    async def answer(self, message: str) -> str:
        """Return the provider text, or an "AI Error: ..." string on failure."""
        result = await self.ask(message)
        return result.reply

    def check_health(self) -> Dict[str, str]:
        """Check service health."""
        return {
            'status': 'healthy',
            'service': 'Chat Relay',
            'model': self.config.GENAI_MODEL,
        }


# Global service instance
_relay_service: Optional[RelayService] = None


def get_relay_service() -> RelayService:
    """Get or create the relay service singleton."""
    global _relay_service
    if _relay_service is None:
        _relay_service = RelayService()
    return _relay_service
