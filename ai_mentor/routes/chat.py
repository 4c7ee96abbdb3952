from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..agent.inference import InferenceClient
from ..agent.replies import reply_text
from ..errors import MentorError
from ..models import ChatError, ChatRequest, ChatResponse


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def get_inference_client(request: Request) -> InferenceClient:
    return request.app.state.inference


def _error(status_code: int, error: str, details: Any = None) -> JSONResponse:
    body = ChatError(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


async def _read_json(request: Request) -> Any:
    raw = await request.body()
    return json.loads(raw or b"null")


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ChatError}, 500: {"model": ChatError}, 502: {"model": ChatError}},
)
async def post_chat(request: Request, inference: InferenceClient = Depends(get_inference_client)):
    try:
        # Misconfiguration is reported before the body is even looked at
        inference.ensure_configured()

        try:
            body = await _read_json(request)
        except ValueError as exc:
            # JSONDecodeError, undecodable bytes and oversized integer literals
            details = [{"type": "json_invalid", "loc": ["body"], "msg": f"Invalid JSON: {exc}"}]
            return _error(400, "Invalid request", details)

        try:
            req = ChatRequest.model_validate(body)
        except ValidationError as exc:
            return _error(400, "Invalid request", exc.errors(include_url=False))

        reply = await inference.send(req.message)
        logger.info("Chat reply resolved as %s", type(reply).__name__)
        return ChatResponse(response=reply_text(reply))
    except MentorError as exc:
        logger.warning("Chat request failed: code=%s extra=%s", exc.code, exc.extra)
        return _error(exc.http_status, exc.message)
    except Exception:
        logger.exception("Chat API error")
        return _error(500, UNEXPECTED_ERROR_MESSAGE)
