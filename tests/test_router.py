import pytest

from bridge.exceptions import SubscriberNotFoundError

from tests.conftest import FIXED_NOW, HELLO_TOPIC, INVALID_SUBSCRIBER, MULTIPLE_TOPICS, NEWS_TOPIC, NOT_TOPIC, SINGLE_TOPIC

TEXT_MESSAGE_1 = "text message 1"
TEXT_MESSAGE_2 = "text message 2"


def test_add_messages(service) -> None:
    first = service.create(SINGLE_TOPIC)
    second = service.create(MULTIPLE_TOPICS)

    service.message(first.subscriber_id, NEWS_TOPIC, TEXT_MESSAGE_1)
    service.message(first.subscriber_id, NEWS_TOPIC, TEXT_MESSAGE_1)

    subscribers = service.find_by_topic(NEWS_TOPIC)
    assert len(subscribers) == 2
    for subscriber in subscribers:
        assert [m.text for m in subscriber.messages] == [TEXT_MESSAGE_1, TEXT_MESSAGE_1]

    service.message(second.subscriber_id, HELLO_TOPIC, TEXT_MESSAGE_2)

    (hello,) = service.find_by_topic(HELLO_TOPIC)
    assert [m.text for m in hello.messages] == [TEXT_MESSAGE_1, TEXT_MESSAGE_1, TEXT_MESSAGE_2]
    assert len(first.messages) == 2


def test_each_recipient_gets_its_own_copy(service) -> None:
    a = service.create(MULTIPLE_TOPICS)
    b = service.create(SINGLE_TOPIC)

    receipt = service.message(a.subscriber_id, NEWS_TOPIC, "hi")

    (copy_a,) = a.messages
    (copy_b,) = b.messages
    assert copy_a.target_subscriber == a.subscriber_id
    assert copy_b.target_subscriber == b.subscriber_id
    assert len({receipt.message_id, copy_a.message_id, copy_b.message_id}) == 3
    for copy in (copy_a, copy_b):
        assert copy.topic == NEWS_TOPIC
        assert copy.text == "hi"
        assert copy.from_subscriber == a.subscriber_id
        assert copy.created == FIXED_NOW
    assert receipt.target_subscriber is None


def test_publisher_need_not_subscribe_to_topic(service) -> None:
    publisher = service.create([HELLO_TOPIC])
    listener = service.create(SINGLE_TOPIC)

    service.message(publisher.subscriber_id, NEWS_TOPIC, "hi")

    assert publisher.messages == []
    assert len(listener.messages) == 1


def test_publish_to_topic_without_subscribers(service) -> None:
    publisher = service.create(SINGLE_TOPIC)
    receipt = service.message(publisher.subscriber_id, NOT_TOPIC, "nobody")
    assert receipt.message_id
    assert publisher.messages == []


def test_publish_count_matches_topic_subscribers(service) -> None:
    publisher = service.create([HELLO_TOPIC])
    for _ in range(3):
        service.create(SINGLE_TOPIC)

    before = {s.subscriber_id: s.inbox_size for s in service.find_by_topic(NEWS_TOPIC)}
    service.message(publisher.subscriber_id, NEWS_TOPIC, "hi")
    after = {s.subscriber_id: s.inbox_size for s in service.find_by_topic(NEWS_TOPIC)}

    assert len(before) == 3
    assert all(after[sid] == before[sid] + 1 for sid in before)
    assert publisher.inbox_size == 0
    assert service.metrics.get_counter("messages_delivered") == 3


def test_unknown_publisher_fails_without_delivery(service) -> None:
    listener = service.create(SINGLE_TOPIC)
    with pytest.raises(SubscriberNotFoundError):
        service.message(INVALID_SUBSCRIBER, NEWS_TOPIC, TEXT_MESSAGE_1)
    assert listener.messages == []


def test_deleted_publisher_fails(service) -> None:
    publisher = service.create(SINGLE_TOPIC)
    service.delete(publisher.subscriber_id)
    with pytest.raises(SubscriberNotFoundError):
        service.message(publisher.subscriber_id, NEWS_TOPIC, TEXT_MESSAGE_1)


def test_closed_subscriber_drops_delivery(service) -> None:
    subscriber = service.create(SINGLE_TOPIC)
    subscriber.close()
    publisher = service.create(SINGLE_TOPIC)
    service.message(publisher.subscriber_id, NEWS_TOPIC, "late")
    assert subscriber.messages == []
    assert service.metrics.get_counter("messages_delivered") == 1
