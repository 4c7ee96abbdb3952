"""
Shared pytest fixtures for the AI Mentor tests.
"""
import json
import os
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient

from ai_mentor.app import create_app
from ai_mentor.config import MentorConfig


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env():
    """Keep a developer's .env or shell settings out of the tests."""
    keys = ["LYZR_API_URL", "LYZR_API_KEY", "LYZR_USER_ID", "LYZR_AGENT_ID", "LYZR_SESSION_ID", "LYZR_TIMEOUT"]
    with patch.dict(os.environ, {}, clear=False):
        for key in keys:
            os.environ.pop(key, None)
        yield


@pytest.fixture
def config():
    return MentorConfig(
        api_url="https://provider.test/v3/inference/chat/",
        api_key="test-key",
        user_id="user-1",
        agent_id="agent-1",
        session_id="session-1",
        timeout=5.0,
    )


class FakeProvider:
    """Records outbound calls and answers with a canned status and body."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {"response": "hello"}
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, bytes):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def app(config, provider):
    return create_app(config=config, transport=httpx.MockTransport(provider.handler))


@pytest.fixture
def client(app):
    return TestClient(app)
