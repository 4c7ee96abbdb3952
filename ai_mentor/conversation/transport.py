from __future__ import annotations

from typing import Optional, Protocol

import httpx

from ..errors import ChatProxyError
from ..models import ChatResponse


class ChatTransport(Protocol):
    """How a ConversationStore reaches the chat proxy.

    send() returns the assistant text or raises; the store treats every
    exception as a failed exchange.
    """

    async def send(self, message: str) -> str:
        ...


class HttpChatTransport:
    """Posts to ``<base_url>/api/chat`` with httpx.

    An injected AsyncClient is used as-is and left open for its owner; without
    one a client is opened per call.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None, timeout: float = 90.0):
        self._url = base_url.rstrip("/") + "/api/chat"
        self._client = client
        self._timeout = timeout

    async def send(self, message: str) -> str:
        if self._client is not None:
            resp = await self._client.post(self._url, json={"message": message})
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(self._url, json={"message": message})
        if not resp.is_success:
            raise ChatProxyError(resp.status_code, _error_text(resp))
        return ChatResponse.model_validate(resp.json()).response


def _error_text(resp: httpx.Response) -> str:
    try:
        return str(resp.json().get("error", ""))
    except (ValueError, AttributeError):
        return resp.text[:200]
