"""Request/response envelopes exchanged with a client.

Every message is a JSON object ``{"msg": <type>, "body": <payload>}``.
Responses to clicks use the node status as ``msg``; all other responses
use a :class:`MessageType`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dotline.core.enums import NodeStatus
from dotline.core.types import Line, Point
from dotline.game.state import StateUpdate

Envelope = dict[str, Any]


class MessageType(str, Enum):
    INITIALIZE = "INITIALIZE"
    NODE_CLICKED = "NODE_CLICKED"
    ERROR = "ERROR"
    UPDATE_TEXT = "UPDATE_TEXT"

    def __str__(self) -> str:
        return self.value


class ProtocolError(ValueError):
    """Raised for envelopes that cannot be decoded."""


@dataclass(frozen=True, slots=True)
class Request:
    msg: str
    body: Any = None


# ── Decoding ─────────────────────────────────────────────────────────────────


def decode_request(raw: str | bytes | Envelope) -> Request:
    """Parse a request envelope from JSON text or an already-decoded dict."""
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ProtocolError(f"Invalid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ProtocolError(f"Envelope must be an object, got {type(raw).__name__}")
    msg = raw.get("msg")
    if not isinstance(msg, str) or not msg:
        raise ProtocolError("Envelope is missing 'msg'")
    return Request(msg=msg, body=raw.get("body"))


def point_from_body(body: Any) -> Point:
    """Read a ``{"x": int, "y": int}`` body."""
    if not isinstance(body, dict):
        raise ProtocolError(f"Point body must be an object, got {body!r}")
    x, y = body.get("x"), body.get("y")
    for name, value in (("x", x), ("y", y)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ProtocolError(f"Point coordinate {name!r} must be an integer")
    return Point(x, y)


# ── Encoding ─────────────────────────────────────────────────────────────────


def point_to_dict(point: Point) -> dict[str, int]:
    return {"x": point.x, "y": point.y}


def line_to_dict(line: Line | None) -> dict[str, dict[str, int]] | None:
    if line is None:
        return None
    return {"start": point_to_dict(line.start), "end": point_to_dict(line.end)}


def encode_update(msg: MessageType | NodeStatus, update: StateUpdate) -> Envelope:
    """Wrap a :class:`StateUpdate` in an envelope tagged with *msg*."""
    return {
        "msg": str(msg),
        "body": {
            "newLine": line_to_dict(update.new_line),
            "heading": update.heading,
            "message": update.message,
        },
    }


def dumps(envelope: Envelope) -> str:
    """Serialise an envelope as a single line of JSON."""
    return json.dumps(envelope, ensure_ascii=False, separators=(",", ":"))
