"""Identifier and clock sources for subscribers and messages."""

import uuid
from datetime import datetime, timezone
from typing import Callable

IdSource = Callable[[], str]
Clock = Callable[[], datetime]


def new_id() -> str:
    """Return a fresh random identifier (uuid4, hex)."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
