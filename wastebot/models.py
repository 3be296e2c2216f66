import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

_ids = itertools.count(1)


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


@dataclass(frozen=True)
class Message:
    content: str
    sender: Sender
    # Process-wide counter, so ids order by creation
    id: int = field(default_factory=lambda: next(_ids))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_user(cls, content: str) -> "Message":
        return cls(content=content, sender=Sender.USER)

    @classmethod
    def from_bot(cls, content: str) -> "Message":
        return cls(content=content, sender=Sender.BOT)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "sender": self.sender.value,
            "timestamp": self.timestamp.isoformat(),
        }
