"""Chatbot conversation state."""
import itertools
import logging
import random
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel

from app.core.config import settings
from app.services.chatbot.constants import WELCOME_MESSAGE, WELCOME_SUGGESTIONS
from app.services.chatbot.rules import ChatContext, find_rule, reply_for

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    """A turn in the chat transcript."""

    id: str
    role: str  # user, assistant
    content: str
    timestamp: datetime
    suggestions: List[str] = []


class Chatbot:
    """Per-session chat transcript answered by the keyword rules.

    The bot keeps no memory between turns: each reply depends only on the
    latest message and the current cart and menu.
    """

    def __init__(self):
        self._sequence = itertools.count(1)
        self.messages: List[ChatMessage] = []
        self.suggestions: List[str] = []
        self.clear_messages()

    def _welcome(self) -> ChatMessage:
        return ChatMessage(
            id="welcome",
            role="assistant",
            content=WELCOME_MESSAGE,
            timestamp=datetime.now(timezone.utc),
            suggestions=list(WELCOME_SUGGESTIONS),
        )

    def send_message(self, content: str, context: ChatContext) -> ChatMessage:
        """
        Record a user message and the bot's answer to it.

        Args:
            content: Text typed by the customer
            context: Current cart and menu

        Returns:
            The assistant message appended to the transcript
        """
        turn = next(self._sequence)
        self.messages.append(
            ChatMessage(
                id=f"user-{turn}",
                role="user",
                content=content,
                timestamp=datetime.now(timezone.utc),
            )
        )

        rule = find_rule(content)
        reply = reply_for(rule, context)
        logger.debug(f"[CHAT] Message answered by rule: {rule.name if rule else 'fallback'}")

        bot_message = ChatMessage(
            id=f"bot-{turn}",
            role="assistant",
            content=reply.content,
            timestamp=datetime.now(timezone.utc),
            suggestions=reply.suggestions,
        )
        self.messages.append(bot_message)
        self.suggestions = list(reply.suggestions)
        return bot_message

    def clear_messages(self) -> None:
        """Reset the transcript to the welcome message."""
        self.messages = [self._welcome()]
        self.suggestions = list(WELCOME_SUGGESTIONS)

    @staticmethod
    def typing_delay_ms(rng: Optional[random.Random] = None) -> int:
        """How long a client should show the bot as typing before the reply."""
        rng = rng or random
        return rng.randint(settings.chat_min_delay_ms, settings.chat_max_delay_ms)
