"""Message router: synchronous fan-out of a published message to topic subscribers."""

from typing import Optional

from bridge.identity import Clock, IdSource, new_id, utc_now
from bridge.message import Message
from bridge.observability import Metrics, get_logger
from bridge.registry import SubscriberRegistry


class MessageRouter:
    """Publishes in-memory directly into each matching subscriber's inbox."""

    def __init__(
        self,
        registry: SubscriberRegistry,
        id_source: Optional[IdSource] = None,
        clock: Optional[Clock] = None,
        metrics: Optional[Metrics] = None,
    ) -> None:
        self._registry = registry
        self._id_source = id_source or new_id
        self._clock = clock or utc_now
        self._metrics = metrics or Metrics()
        self._logger = get_logger("bridge.router")

    def message(self, from_subscriber: str, topic: str, text: str) -> Message:
        """
        Deliver ``text`` under ``topic`` to every current subscriber of it.

        The publisher must exist but need not subscribe to ``topic``. Each
        recipient gets its own copy with a fresh id; the returned message is
        the publisher's receipt and is not stored in any inbox.
        """
        self._registry.get(from_subscriber)
        receipt = Message(
            message_id=self._id_source(),
            from_subscriber=from_subscriber,
            topic=topic,
            text=text,
            created=self._clock(),
        )
        recipients = self._registry.find_by_topic(topic)
        self._logger.info(
            "delivering",
            extra={
                "topic": topic,
                "message_id": receipt.message_id,
                "from_subscriber": from_subscriber,
                "subscriber_count": len(recipients),
            },
        )
        delivered = 0
        for subscriber in recipients:
            copy = receipt.copy_for(subscriber.subscriber_id, self._id_source())
            if subscriber.deliver_message(copy):
                delivered += 1
        self._metrics.increment("messages_published")
        self._metrics.increment("messages_delivered", delivered)
        return receipt
