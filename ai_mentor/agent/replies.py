from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class HasResponseField:
    text: str


@dataclass(frozen=True)
class HasMessageField:
    text: str


@dataclass(frozen=True)
class PlainString:
    text: str


@dataclass(frozen=True)
class Opaque:
    body: Any


ProviderReply = Union[HasResponseField, HasMessageField, PlainString, Opaque]


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def classify(body: Any) -> ProviderReply:
    """Sort a decoded provider body into one reply kind.

    First match wins: a non-empty string ``response`` field, then a non-empty
    string ``message`` field, then a bare JSON string, then anything else.
    """
    if isinstance(body, Mapping):
        if _non_empty_str(body.get("response")):
            return HasResponseField(body["response"])
        if _non_empty_str(body.get("message")):
            return HasMessageField(body["message"])
    if isinstance(body, str):
        return PlainString(body)
    return Opaque(body)


def reply_text(reply: ProviderReply) -> str:
    if isinstance(reply, Opaque):
        return json.dumps(reply.body, ensure_ascii=False, separators=(",", ":"), default=str)
    return reply.text
