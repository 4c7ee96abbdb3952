from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_API_URL = "https://agent-prod.studio.lyzr.ai/v3/inference/chat/"
DEFAULT_TIMEOUT = 60.0
LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"

_ENV_LOADED = False


def init_env() -> None:
    global _ENV_LOADED
    if not _ENV_LOADED:
        # Real environment variables win over .env entries
        load_dotenv(override=False)
        _ENV_LOADED = True


def _timeout() -> float:
    raw = os.getenv("LYZR_TIMEOUT", "")
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


@dataclass(frozen=True)
class MentorConfig:
    """Read-only settings for the chat proxy, built once at startup."""

    api_url: str = DEFAULT_API_URL
    api_key: Optional[str] = None
    user_id: str = ""
    agent_id: str = ""
    session_id: str = ""
    timeout: float = DEFAULT_TIMEOUT

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "MentorConfig":
        init_env()
        return cls(
            api_url=os.getenv("LYZR_API_URL") or DEFAULT_API_URL,
            api_key=os.getenv("LYZR_API_KEY") or None,
            user_id=os.getenv("LYZR_USER_ID", ""),
            agent_id=os.getenv("LYZR_AGENT_ID", ""),
            session_id=os.getenv("LYZR_SESSION_ID", ""),
            timeout=_timeout(),
        )


def client_base_url() -> str:
    init_env()
    return os.getenv("AI_MENTOR_URL", "http://127.0.0.1:8000")


def configure_logging(default_level: str = "INFO") -> None:
    init_env()
    level = os.getenv("LOG_LEVEL", default_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
