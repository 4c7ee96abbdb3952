"""In-memory conversation state for one chat session.

The store owns the ordered message list and the in-flight flag. Front-ends
subscribe to it and re-render (or scroll to the latest message) whenever it
notifies them.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple
from uuid import uuid4

from ..models import Message
from .transport import ChatTransport


logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = "I'm sorry, I couldn't get a response right now. Please try again."

Listener = Callable[["ConversationStore"], None]


def new_message_id() -> str:
    return f"m-{uuid4().hex}"


class ConversationStore:
    def __init__(self, transport: ChatTransport):
        self._transport = transport
        self._messages: List[Message] = []
        self._pending = False
        self._listeners: List[Listener] = []
        self._generation = 0

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def pending(self) -> bool:
        return self._pending

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Conversation listener failed")

    def _append(self, role: str, content: str) -> Message:
        msg = Message(id=new_message_id(), role=role, content=content)
        self._messages.append(msg)
        self._notify()
        return msg

    def _set_pending(self, value: bool) -> None:
        if self._pending != value:
            self._pending = value
            self._notify()

    async def submit(self, text: str) -> Optional[Message]:
        """Send one user message and wait for the assistant reply.

        Blank text, or a call made while another submission is in flight, is
        ignored and returns None. Otherwise exactly one assistant message is
        appended: the reply, or APOLOGY_MESSAGE when the exchange fails or is
        cancelled. A reply that arrives after reset() belongs to the discarded
        session; it is dropped and None is returned.
        """
        content = (text or "").strip()
        if not content or self._pending:
            return None

        generation = self._generation
        self._append("user", content)
        self._set_pending(True)
        response = APOLOGY_MESSAGE
        reply = None
        try:
            response = await self._transport.send(content)
        except Exception as exc:
            logger.warning("Chat request failed: %r", exc)
        finally:
            if generation == self._generation:
                reply = self._append("assistant", response)
                self._set_pending(False)
            else:
                logger.info("Dropping reply for a conversation that was reset")
        return reply

    def reset(self) -> None:
        self._generation += 1
        self._messages.clear()
        self._pending = False
        self._notify()
