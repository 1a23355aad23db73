"""Subscriber service: the operations the transport layer calls into."""

from typing import List, Optional, Sequence

from bridge.identity import Clock, IdSource
from bridge.message import Message
from bridge.observability import Metrics
from bridge.reader import InboxReader
from bridge.registry import SubscriberRegistry
from bridge.router import MessageRouter
from bridge.subscriber import Subscriber


class SubscriberService:
    """Owns one registry and wires the router and inbox reader to it.

    Each instance is an independent store; tests and the HTTP app create
    their own instead of sharing module-level state.
    """

    def __init__(
        self,
        id_source: Optional[IdSource] = None,
        clock: Optional[Clock] = None,
        inbox_warn_size: int = 0,
    ) -> None:
        self.metrics = Metrics()
        self.registry = SubscriberRegistry(id_source=id_source, inbox_warn_size=inbox_warn_size)
        self.router = MessageRouter(self.registry, id_source=id_source, clock=clock, metrics=self.metrics)
        self.reader = InboxReader(self.registry, metrics=self.metrics)

    def create(self, topics: Sequence[str]) -> Subscriber:
        subscriber = self.registry.create(topics)
        self.metrics.increment("subscribers_created")
        return subscriber

    def get(self, subscriber_id: str) -> Subscriber:
        return self.registry.get(subscriber_id)

    def delete(self, subscriber_id: str) -> None:
        self.registry.delete(subscriber_id)
        self.metrics.increment("subscribers_deleted")

    def delete_all(self) -> None:
        """Full state reset (administrative / test support)."""
        self.registry.delete_all()
        self.metrics.reset()

    def find_by_topic(self, topic: str) -> List[Subscriber]:
        return self.registry.find_by_topic(topic)

    def message(self, from_subscriber: str, topic: str, text: str) -> Message:
        return self.router.message(from_subscriber, topic, text)

    def read_messages(self, subscriber_id: str) -> List[Message]:
        return self.reader.read_messages(subscriber_id)
