"""
Dependency injection for the chat relay.
"""
from fastapi import Request

from .services.relay_service import RelayService, get_relay_service as _get_relay_service


def get_relay_service(request: Request) -> RelayService:
    """
    Dependency injection for the relay service.

    Uses the service bound to the app by `create_app`, falling back to the
    process-wide singleton.

    Returns:
        RelayService instance
    """
    service = getattr(request.app.state, "relay_service", None)
    if service is None:
        service = _get_relay_service()
    return service
