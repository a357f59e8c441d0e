"""
API routes for the chat relay.
"""
from fastapi import APIRouter
from .chat import router as chat_router

# Main API router - prefix is added in main.py
api_router = APIRouter()
api_router.include_router(chat_router)

__all__ = ["api_router"]
