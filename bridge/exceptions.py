"""Typed failures raised by the bridge core."""


class BridgeError(Exception):
    """Base class; ``status`` and ``code`` are what the HTTP layer reports."""

    status: int = 500
    code: str = "internal error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SubscriberNotFoundError(BridgeError):
    """Referenced subscriber id does not exist (or was deleted)."""

    status = 404
    code = "subscriber not found"

    def __init__(self, subscriber_id: str) -> None:
        super().__init__(f"subscriber '{subscriber_id}' not found")
        self.subscriber_id = subscriber_id


class MissingParametersError(BridgeError):
    """Malformed input to subscribe, e.g. an empty topic list."""

    status = 400
    code = "missing parameters"
