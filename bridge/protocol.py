"""Protocol message shapes for HTTP (subscribe, publish, messages, errors, health)."""

from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence, Tuple

from bridge.exceptions import BridgeError
from bridge.message import Message


def format_timestamp(value: datetime) -> str:
    """UTC ISO 8601 with milliseconds (e.g. 2025-08-25T10:00:00.000Z)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def now_ts() -> str:
    """Current UTC timestamp, formatted as format_timestamp does."""
    return format_timestamp(datetime.now(timezone.utc))


# ---- Subscribe ----

@dataclass
class SubscribeResponse:
    """Response for PUT /subscribe/ (201) and DELETE /subscribe/{id} (200)."""
    subscriber: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SubscriptionsResponse:
    """Response for GET /subscribe/{id}."""
    subscriber: str
    topics: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---- Publish ----

@dataclass
class PublishResponse:
    """Response for PUT /publish/{topic}: id of the accepted message."""
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---- Messages ----

def readable_message(message: Message) -> Dict[str, Any]:
    return {
        "from": message.from_subscriber,
        "text": message.text,
        "topic": message.topic,
        "created": format_timestamp(message.created),
    }


def messages_response(subscriber_id: str, messages: Sequence[Message]) -> Dict[str, Any]:
    """Response for GET /messages/{subscriber}."""
    return {
        "subscriber": subscriber_id,
        "messages": [readable_message(m) for m in messages],
    }


# ---- Health / stats ----

@dataclass
class HealthResponse:
    """Response for GET /health."""
    uptime_sec: float
    topics: int
    subscribers: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uptime_sec": int(self.uptime_sec),
            "topics": self.topics,
            "subscribers": self.subscribers,
        }


def stats_response(topics_stats: Dict[str, Dict[str, int]], counters: Dict[str, int]) -> Dict[str, Any]:
    """Response for GET /stats."""
    return {"topics": topics_stats, "counters": counters}


# ---- Errors ----

ERROR_INVALID_REQUEST = "invalid request"
INVALID_REQUEST_MESSAGE = "the request to the server can not be interpreted"


def error_response(exc: Optional[BridgeError]) -> Tuple[int, str, str]:
    """
    Map a core error to (status, code, message).
    ``None`` stands for input the transport could not parse or validate.
    """
    if exc is None:
        return 400, ERROR_INVALID_REQUEST, INVALID_REQUEST_MESSAGE
    return exc.status, exc.code, exc.message


def error_body(code: str, message: str, ts: Optional[str] = None) -> Dict[str, Any]:
    return {"error": code, "message": message, "timestamp": ts or now_ts()}
