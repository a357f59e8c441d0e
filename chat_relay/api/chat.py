"""
API route for relaying chat messages.
"""
from fastapi import APIRouter, Depends

from ..deps import get_relay_service
from ..models.schemas import ChatRequest, ChatResponse
from ..services.relay_service import RelayService

router = APIRouter(tags=["Chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    service: RelayService = Depends(get_relay_service)
):
    """
    Send a message to the AI and get its reply.

    Provider failures come back with status 200: `reply` holds an
    "AI Error: ..." sentence and `error` carries the classified cause.
    """
    result = await service.ask(request.message)
    return ChatResponse(reply=result.reply, error=result.error)
