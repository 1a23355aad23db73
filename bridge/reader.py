"""Inbox reader: consume-once drain of a subscriber's unread messages."""

from typing import List, Optional

from bridge.message import Message
from bridge.observability import Metrics, get_logger
from bridge.registry import SubscriberRegistry


class InboxReader:
    def __init__(self, registry: SubscriberRegistry, metrics: Optional[Metrics] = None) -> None:
        self._registry = registry
        self._metrics = metrics or Metrics()
        self._logger = get_logger("bridge.reader")

    def read_messages(self, subscriber_id: str) -> List[Message]:
        """Return and clear every unread message, oldest first. A second read returns []."""
        messages = self._registry.get(subscriber_id).drain()
        if messages:
            self._logger.info(
                "inbox_drained",
                extra={"subscriber_id": subscriber_id, "count": len(messages)},
            )
        self._metrics.increment("messages_read", len(messages))
        return messages
