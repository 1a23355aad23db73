"""Example: in-memory subscribe, publish and drain (no HTTP)."""

import logging

from bridge import SubscriberService

logging.basicConfig(level=logging.INFO)


def main() -> None:
    service = SubscriberService()

    robot = service.create(["news", "hello"])
    console = service.create(["news"])

    service.message(robot.subscriber_id, "news", "battery at 80%")
    service.message(console.subscriber_id, "hello", "ping")

    for message in service.read_messages(robot.subscriber_id):
        print(message.to_dict())
    for message in service.read_messages(console.subscriber_id):
        print(message.to_dict())

    service.delete(robot.subscriber_id)
    service.delete(console.subscriber_id)


if __name__ == "__main__":
    main()
