"""Topic index: topic name -> ids of the subscribers interested in it (in-memory only)."""

import threading
from typing import Dict, Iterable, List, Set


class TopicIndex:
    """Maps each topic to the set of subscriber ids holding it; empty topics are dropped eagerly."""

    def __init__(self) -> None:
        self._topics: Dict[str, Set[str]] = {}
        self._lock = threading.Lock()

    def add(self, subscriber_id: str, topics: Iterable[str]) -> None:
        """Register a subscriber under each of ``topics``."""
        with self._lock:
            for topic in topics:
                self._topics.setdefault(topic, set()).add(subscriber_id)

    def remove(self, subscriber_id: str, topics: Iterable[str]) -> None:
        """Remove a subscriber from each of ``topics``."""
        with self._lock:
            for topic in topics:
                ids = self._topics.get(topic)
                if ids is None:
                    continue
                ids.discard(subscriber_id)
                if not ids:
                    del self._topics[topic]

    def subscribers_of(self, topic: str) -> List[str]:
        """Return a copy of the subscriber ids for ``topic`` (under lock)."""
        with self._lock:
            return sorted(self._topics.get(topic, ()))

    def clear(self) -> None:
        with self._lock:
            self._topics.clear()

    def topic_count(self) -> int:
        """Number of topics with at least one subscriber."""
        with self._lock:
            return len(self._topics)

    def snapshot(self) -> Dict[str, int]:
        """Return { topic_name: subscriber_count }."""
        with self._lock:
            return {name: len(ids) for name, ids in self._topics.items()}

    def __contains__(self, topic: object) -> bool:
        with self._lock:
            return topic in self._topics

    def __repr__(self) -> str:
        return f"TopicIndex(topics={len(self._topics)})"
