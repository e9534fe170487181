"""Transport glue: envelope protocol, Qt bridge, stdio streams."""

from dotline.server.protocol import (
    MessageType,
    ProtocolError,
    Request,
    decode_request,
    encode_update,
)
from dotline.server.qt_bridge import GameServer

__all__ = [
    "GameServer",
    "MessageType",
    "ProtocolError",
    "Request",
    "decode_request",
    "encode_update",
]
