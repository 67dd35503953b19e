import time
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

from .utils import get_logger


class MessageType(str, Enum):
    OPEN_FILE = "OPEN_FILE"
    FILE_OPENED = "FILE_OPENED"
    ERROR = "ERROR"


@dataclass
class MessagePayload:
    message_id: str
    timestamp: int
    path: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"messageId": self.message_id, "timestamp": self.timestamp}
        if self.path is not None:
            data["path"] = self.path
        if self.error is not None:
            data["error"] = self.error
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MessagePayload":
        return cls(
            message_id=data["messageId"],
            timestamp=int(data["timestamp"]),
            path=data.get("path"),
            error=data.get("error"),
        )


@dataclass
class KDEMessage:
    type: MessageType
    payload: MessagePayload

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "payload": self.payload.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KDEMessage":
        return cls(type=MessageType(data["type"]), payload=MessagePayload.from_dict(data["payload"]))


def make_message(
    message_type: MessageType,
    path: Optional[str] = None,
    error: Optional[str] = None,
) -> KDEMessage:
    payload = MessagePayload(
        message_id=str(uuid.uuid4()),
        timestamp=int(time.time() * 1000),
        path=path,
        error=error,
    )
    return KDEMessage(type=MessageType(message_type), payload=payload)


@dataclass
class MessageEvent:
    origin: str
    data: Any


class WindowHost(Protocol):
    """The embedding window: inbound listeners plus the parent's postMessage."""

    def add_listener(self, callback: Callable[[MessageEvent], None]) -> None: ...

    def remove_listener(self, callback: Callable[[MessageEvent], None]) -> None: ...

    def post_to_parent(self, data: Any, target_origin: str) -> None: ...


class KDEWindow:
    def __init__(
        self,
        allowed_origins: Iterable[str],
        host: WindowHost,
        on_message: Optional[Callable[[Any], None]] = None,
    ):
        self.allowed_origins = list(allowed_origins)
        self.host = host
        self.on_message = on_message
        self.logger = get_logger("kdesdk.window")
        # keep the exact callable so cleanup() removes what was added
        self._listener = self.handle_message
        self.host.add_listener(self._listener)

    def handle_message(self, event: MessageEvent) -> bool:
        if event.origin not in self.allowed_origins:
            self.logger.error("Invalid origin: %s", event.origin)
            return False
        self.logger.info("Received message: %s", event.data)
        if self.on_message is not None:
            self.on_message(event.data)
        return True

    def send_message(self, message: KDEMessage) -> None:
        self.host.post_to_parent(message.to_dict(), "*")

    def cleanup(self) -> None:
        self.host.remove_listener(self._listener)
