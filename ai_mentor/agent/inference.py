from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..config import MentorConfig
from ..errors import ConfigurationError, UpstreamError
from .replies import ProviderReply, classify


logger = logging.getLogger(__name__)

CONFIG_ERROR_MESSAGE = "AI Mentor is not properly configured. Please set up the API key."
UPSTREAM_ERROR_MESSAGE = "Failed to get response from AI Mentor"


class InferenceClient:
    """Forwards one user message to the hosted agent and classifies its reply.

    Routing identifiers and the API key come from the MentorConfig. The optional
    transport lets tests swap the network for an ``httpx.MockTransport``.
    """

    def __init__(self, config: MentorConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    def ensure_configured(self) -> None:
        if not self._config.api_key:
            logger.error("LYZR_API_KEY is not configured")
            raise ConfigurationError(code="MISSING_API_KEY", message=CONFIG_ERROR_MESSAGE, http_status=500)

    def _payload(self, message: str) -> dict:
        return {
            "user_id": self._config.user_id,
            "agent_id": self._config.agent_id,
            "session_id": self._config.session_id,
            "message": message,
        }

    async def send(self, message: str) -> ProviderReply:
        """Post the message once; no retry.

        Raises ConfigurationError when the key is missing and UpstreamError on a
        non-2xx status. Network failures propagate as httpx errors.
        """
        self.ensure_configured()
        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport, follow_redirects=True
        ) as client:
            resp = await client.post(
                self._config.api_url,
                json=self._payload(message),
                headers={
                    "Content-Type": "application/json",
                    "x-api-key": self._config.api_key,
                },
            )
        if not resp.is_success:
            logger.error("Lyzr API error: %s %s", resp.status_code, resp.reason_phrase)
            raise UpstreamError(
                code="UPSTREAM_ERROR",
                message=UPSTREAM_ERROR_MESSAGE,
                http_status=502,
                upstream_status=resp.status_code,
            )
        return classify(resp.json())
