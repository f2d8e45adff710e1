"""View state for the streaming chat assistant."""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Callable
from enum import Enum

from recruit_kit.clients.llm_client import ChatSession
from recruit_kit.models.chat import ChatMessage
from recruit_kit.prompts.chat import CHAT_GREETING

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "..."
CHAT_ERROR_TEXT = "Sorry, I encountered an error."


class ChatPhase(str, Enum):
    IDLE = "idle"
    AWAITING_FIRST_CHUNK = "awaiting_first_chunk"
    STREAMING = "streaming"


class ChatScreen:
    """Transcript plus the single chat session it talks to.

    One turn at a time: ``send`` is ignored while a reply is streaming.
    """

    def __init__(
        self,
        session: ChatSession,
        *,
        clock: Callable[[], float] = time.time,
        greeting: str = CHAT_GREETING,
    ):
        self.session = session
        self._clock = clock
        self._seq = itertools.count()
        self.messages: list[ChatMessage] = [ChatMessage(id="init", role="model", text=greeting)]
        self.phase = ChatPhase.IDLE

    @property
    def loading(self) -> bool:
        return self.phase is not ChatPhase.IDLE

    def _next_id(self) -> str:
        return f"{int(self._clock() * 1000)}-{next(self._seq)}"

    async def send(
        self,
        text: str,
        on_update: Callable[[ChatMessage], None] | None = None,
    ) -> None:
        """Append the user turn and stream the model's reply into the transcript.

        ``on_update`` is called with the model message after every change to
        its text, so a UI can redraw it while chunks arrive.
        """
        if not text.strip() or self.loading:
            return

        self.messages.append(ChatMessage(id=self._next_id(), role="user", text=text))
        reply = ChatMessage(id=self._next_id(), role="model", text=PLACEHOLDER_TEXT)
        self.messages.append(reply)
        self.phase = ChatPhase.AWAITING_FIRST_CHUNK

        full_response = ""
        try:
            async for chunk in self.session.send_message_stream(text):
                self.phase = ChatPhase.STREAMING
                full_response += chunk
                reply.text = full_response
                if on_update is not None:
                    on_update(reply)
        except Exception:
            logger.exception("Chat error")
            reply.text = CHAT_ERROR_TEXT
            if on_update is not None:
                on_update(reply)
        finally:
            self.phase = ChatPhase.IDLE
