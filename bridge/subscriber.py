"""Subscriber record: fixed topic set plus a per-subscriber inbox."""

import threading
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Sequence, Tuple

from bridge.observability import get_logger

if TYPE_CHECKING:
    from bridge.message import Message


class Subscriber:
    """Holds an immutable topic tuple and an inbox guarded by its own lock.

    Delivery appends to the inbox and ``drain`` takes everything at once, so
    unrelated subscribers never contend with each other. Once closed (deleted
    from the registry) the inbox is discarded and further deliveries are
    dropped.
    """

    def __init__(self, subscriber_id: str, topics: Sequence[str], inbox_warn_size: int = 0) -> None:
        self._subscriber_id = subscriber_id
        self._topics: Tuple[str, ...] = tuple(topics)
        self._inbox: Deque["Message"] = deque()
        self._lock = threading.Lock()
        self._closed = False
        self._inbox_warn_size = inbox_warn_size
        self._logger = get_logger("bridge.subscriber")

    @property
    def subscriber_id(self) -> str:
        return self._subscriber_id

    @property
    def topics(self) -> Tuple[str, ...]:
        return self._topics

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def messages(self) -> List["Message"]:
        """Copy of the unread messages, oldest first. Does not consume them."""
        with self._lock:
            return list(self._inbox)

    @property
    def inbox_size(self) -> int:
        with self._lock:
            return len(self._inbox)

    def deliver_message(self, message: "Message") -> bool:
        """Append ``message`` to the inbox. Returns False if the subscriber is closed."""
        with self._lock:
            if self._closed:
                return False
            self._inbox.append(message)
            size = len(self._inbox)
        if self._inbox_warn_size and size == self._inbox_warn_size:
            self._logger.warning(
                "inbox_backlog",
                extra={"subscriber_id": self._subscriber_id, "inbox_size": size},
            )
        return True

    def drain(self) -> List["Message"]:
        """Take and clear every unread message in arrival order, as one step."""
        with self._lock:
            taken = list(self._inbox)
            self._inbox.clear()
        return taken

    def close(self) -> None:
        """Discard the inbox and refuse later deliveries."""
        with self._lock:
            self._closed = True
            self._inbox.clear()

    def on_subscribe(self) -> None:
        """Called when this subscriber is registered (for observability)."""
        self._logger.info(
            "subscribed",
            extra={"topics": list(self._topics), "subscriber_id": self._subscriber_id},
        )

    def on_delete(self) -> None:
        """Called when this subscriber is removed (for observability)."""
        self._logger.info(
            "deleted",
            extra={"topics": list(self._topics), "subscriber_id": self._subscriber_id},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._subscriber_id!r}, topics={list(self._topics)!r})"
