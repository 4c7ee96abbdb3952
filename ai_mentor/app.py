from __future__ import annotations

import logging
import os
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .agent.inference import InferenceClient
from .config import MentorConfig, configure_logging
from .routes.chat import router as chat_router


logger = logging.getLogger(__name__)


def create_app(
    config: Optional[MentorConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    configure_logging()
    config = config or MentorConfig.from_env()

    app = FastAPI(title="AI Mentor", version="0.1.0")
    app.state.config = config
    app.state.inference = InferenceClient(config, transport=transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if not config.configured:
        logger.warning("LYZR_API_KEY is not set; /api/chat will answer 500 until it is configured")

    @app.get("/")
    def health():
        return {"ok": True, "configured": config.configured}

    app.include_router(chat_router)
    return app


def serve() -> None:
    import uvicorn

    uvicorn.run(
        "ai_mentor.app:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


app = create_app()
