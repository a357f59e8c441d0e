"""
Chat relay: a single-endpoint FastAPI service in front of Google Gen AI.

Project Structure:
- api/: the POST /api/chat endpoint
- models/: Pydantic schemas and enums
- services/: the relay itself (Gemini on Vertex AI)
- util/: logging setup
- config.py: Configuration management
- deps.py: Dependency injection
- main.py: FastAPI application entry point

Quick Start:
    1. Set environment variables:
       export GOOGLE_CLOUD_PROJECT="your-project-id"
       export GOOGLE_CLOUD_LOCATION="us-central1"

    2. Install:
       pip install -e .

    3. Run the service:
       python -m chat_relay
       # or
       uvicorn chat_relay.main:app --reload

    4. Talk to it:
       python -m chat_client --url http://localhost:8080
"""
from .main import app, create_app
from .services import RelayService, get_relay_service
from .models import (
    ChatError,
    ChatRequest,
    ChatResponse,
    ErrorKind,
    HealthCheckResponse,
    RelayResult,
)

__all__ = [
    "app",
    "create_app",
    "RelayService",
    "get_relay_service",
    "ChatError",
    "ChatRequest",
    "ChatResponse",
    "ErrorKind",
    "HealthCheckResponse",
    "RelayResult",
]

__version__ = "1.0.0"
