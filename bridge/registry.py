"""In-memory subscriber registry; sole owner and mutator of the topic index."""

import threading
from typing import Dict, List, Optional, Sequence

from bridge.exceptions import MissingParametersError, SubscriberNotFoundError
from bridge.identity import IdSource, new_id
from bridge.observability import get_logger
from bridge.subscriber import Subscriber
from bridge.topic_index import TopicIndex

logger = get_logger("bridge.registry")


class SubscriberRegistry:
    """
    Subscriber records keyed by id, plus the topic index that mirrors them.

    Every mutation of the subscriber table and the index happens under one
    lock, so no caller can observe a subscriber in one but not the other.
    """

    def __init__(self, id_source: Optional[IdSource] = None, inbox_warn_size: int = 0) -> None:
        self._id_source = id_source or new_id
        self._inbox_warn_size = inbox_warn_size
        self._subscribers: Dict[str, Subscriber] = {}
        self._index = TopicIndex()
        self._lock = threading.Lock()

    def create(self, topics: Sequence[str]) -> Subscriber:
        """
        Create a subscriber on ``topics`` with an empty inbox.
        Duplicate topic names collapse to one, keeping first-seen order.
        """
        if not topics:
            raise MissingParametersError("topics must be provided")
        unique_topics = list(dict.fromkeys(topics))
        subscriber_id = self._id_source()
        subscriber = Subscriber(subscriber_id, unique_topics, self._inbox_warn_size)
        with self._lock:
            if subscriber_id in self._subscribers:
                raise RuntimeError(f"identifier collision for subscriber {subscriber_id!r}")
            self._subscribers[subscriber_id] = subscriber
            self._index.add(subscriber_id, subscriber.topics)
        subscriber.on_subscribe()
        return subscriber

    def get(self, subscriber_id: str) -> Subscriber:
        """Return subscriber by id or raise SubscriberNotFoundError."""
        with self._lock:
            subscriber = self._subscribers.get(subscriber_id)
        if subscriber is None:
            raise SubscriberNotFoundError(subscriber_id)
        return subscriber

    def delete(self, subscriber_id: str) -> None:
        """Remove subscriber from every topic and discard its inbox."""
        with self._lock:
            subscriber = self._subscribers.pop(subscriber_id, None)
            if subscriber is None:
                raise SubscriberNotFoundError(subscriber_id)
            self._index.remove(subscriber_id, subscriber.topics)
            subscriber.close()
        subscriber.on_delete()

    def delete_all(self) -> None:
        """Drop every subscriber and the whole topic index."""
        with self._lock:
            subscribers = list(self._subscribers.values())
            self._subscribers.clear()
            self._index.clear()
            for subscriber in subscribers:
                subscriber.close()
        logger.info("registry_cleared", extra={"subscribers": len(subscribers)})

    def find_by_topic(self, topic: str) -> List[Subscriber]:
        """Return every registered subscriber of ``topic`` (empty list if none)."""
        with self._lock:
            return [self._subscribers[sid] for sid in self._index.subscribers_of(topic)]

    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def topic_count(self) -> int:
        """Number of topics with at least one subscriber."""
        return self._index.topic_count()

    def topic_stats(self) -> Dict[str, Dict[str, int]]:
        """Return { topic_name: { subscribers } } for the stats endpoint."""
        return {
            name: {"subscribers": count}
            for name, count in self._index.snapshot().items()
        }
