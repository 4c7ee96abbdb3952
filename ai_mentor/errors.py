"""Errors raised across the chat proxy.

Every error that reaches the HTTP boundary is a MentorError, so the route can
answer with its status and its user-safe message while the code and any extra
fields stay in the server log.
"""

from __future__ import annotations

from typing import Any


class MentorError(Exception):
    """Base error.

    Attributes:
        code: machine readable code, e.g. "MISSING_API_KEY".
        message: text that is safe to send to the client.
        http_status: status used when the error is turned into a response.
        extra: additional fields for logging only.
    """

    def __init__(self, code: str, message: str, http_status: int = 500, **extra: Any):
        self.code = code
        self.message = message
        self.http_status = http_status
        self.extra = extra
        super().__init__(message)


class ConfigurationError(MentorError):
    """The server is missing a required setting such as the provider API key."""


class UpstreamError(MentorError):
    """The inference provider answered with a non-2xx status."""


class ChatProxyError(Exception):
    """Raised on the client side when /api/chat answers with a non-2xx status."""

    def __init__(self, status_code: int, error: str = ""):
        self.status_code = status_code
        self.error = error
        super().__init__(f"chat proxy returned {status_code}: {error}")
