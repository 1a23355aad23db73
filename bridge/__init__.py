"""Topic-based message bridge: subscribers, fan-out and consume-once inboxes (in-memory only)."""

from bridge.exceptions import BridgeError, MissingParametersError, SubscriberNotFoundError
from bridge.message import Message
from bridge.registry import SubscriberRegistry
from bridge.router import MessageRouter
from bridge.reader import InboxReader
from bridge.service import SubscriberService
from bridge.subscriber import Subscriber
from bridge.topic_index import TopicIndex

__all__ = [
    "BridgeError",
    "MissingParametersError",
    "SubscriberNotFoundError",
    "Message",
    "SubscriberRegistry",
    "MessageRouter",
    "InboxReader",
    "SubscriberService",
    "Subscriber",
    "TopicIndex",
]
