import itertools
from datetime import datetime, timezone

import pytest

from bridge.service import SubscriberService

FIXED_NOW = datetime(2025, 8, 25, 10, 0, 0, 123000, tzinfo=timezone.utc)

NEWS_TOPIC = "news"
HELLO_TOPIC = "hello"
NOT_TOPIC = "no topic"
SINGLE_TOPIC = [NEWS_TOPIC]
MULTIPLE_TOPICS = [NEWS_TOPIC, HELLO_TOPIC]
INVALID_SUBSCRIBER = "invalid"


@pytest.fixture
def id_source():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def service(id_source, clock):
    return SubscriberService(id_source=id_source, clock=clock)
