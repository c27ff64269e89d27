"""Chatbot API endpoints."""
import logging
from typing import List
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.core.dependencies import get_restaurant_session
from app.services.chatbot.bot import Chatbot, ChatMessage
from app.services.chatbot.rules import ChatContext
from app.services.session.models import RestaurantSession

router = APIRouter()
logger = logging.getLogger(__name__)


class SendMessageRequest(BaseModel):
    """Chat message request model."""
    content: str = Field(min_length=1)


class ChatReplyResponse(BaseModel):
    """Bot reply with the delay a client should show as typing."""
    message: ChatMessage
    typing_delay_ms: int


class TranscriptResponse(BaseModel):
    messages: List[ChatMessage]
    suggestions: List[str] = []


@router.get("/api/chat", response_model=TranscriptResponse)
async def get_transcript(session: RestaurantSession = Depends(get_restaurant_session)):
    """Get the chat transcript."""
    return TranscriptResponse(
        messages=session.chatbot.messages,
        suggestions=session.chatbot.suggestions,
    )


@router.post("/api/chat/messages", response_model=ChatReplyResponse)
async def send_message(
    body: SendMessageRequest,
    session: RestaurantSession = Depends(get_restaurant_session),
):
    """Send a message to the chatbot."""
    context = ChatContext(cart=session.cart.state, menu_items=session.catalog.items)
    reply = session.chatbot.send_message(body.content, context)
    return ChatReplyResponse(message=reply, typing_delay_ms=Chatbot.typing_delay_ms())


@router.delete("/api/chat", response_model=TranscriptResponse)
async def clear_transcript(session: RestaurantSession = Depends(get_restaurant_session)):
    """Reset the transcript to the welcome message."""
    session.chatbot.clear_messages()
    return TranscriptResponse(
        messages=session.chatbot.messages,
        suggestions=session.chatbot.suggestions,
    )
