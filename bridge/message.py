"""Message class for a single inbox entry."""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Message:
    """A message delivered under a topic. Each recipient holds its own copy."""

    message_id: str
    from_subscriber: str
    topic: str
    text: str
    created: datetime
    target_subscriber: Optional[str] = None

    def copy_for(self, target_subscriber: str, message_id: str) -> "Message":
        """Return an independent copy addressed to ``target_subscriber``."""
        return replace(self, message_id=message_id, target_subscriber=target_subscriber)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize message for logging or transport."""
        return {
            "message_id": self.message_id,
            "from_subscriber": self.from_subscriber,
            "topic": self.topic,
            "text": self.text,
            "created": self.created.isoformat(),
            "target_subscriber": self.target_subscriber,
        }
