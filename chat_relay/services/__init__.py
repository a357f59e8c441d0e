"""
Service layer for the chat relay.
"""
from .relay_service import RelayService, classify_error, get_relay_service

__all__ = ["RelayService", "classify_error", "get_relay_service"]
