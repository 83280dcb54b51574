"""Chat domain models."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .intent import ChatIntent

USER = "user"
BOT = "bot"


def _copy(metadata: Optional[dict]) -> Optional[dict]:
    return dict(metadata) if metadata is not None else None


@dataclass(frozen=True)
class ChatMessage:
    """One conversation turn."""
    sender: str  # "user" | "bot"
    text: str
    timestamp: datetime = field(default_factory=datetime.now)
    metadata: Optional[dict[str, Any]] = None

    @property
    def is_user(self) -> bool:
        return self.sender == USER

    @property
    def is_bot(self) -> bool:
        return self.sender == BOT

    def to_dict(self) -> dict:
        data = {
            "sender": self.sender,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.metadata is not None:
            data["metadata"] = dict(self.metadata)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ChatMessage":
        if not isinstance(data, dict):
            raise ValueError(f"Expected a message object, got {type(data).__name__}")
        raw_timestamp = data.get("timestamp")
        timestamp = (
            datetime.fromisoformat(raw_timestamp) if raw_timestamp else datetime.now()
        )
        metadata = data.get("metadata")
        return cls(
            sender=data["sender"],
            text=data["text"],
            timestamp=timestamp,
            metadata=_copy(metadata),
        )


class ConversationContext:
    """Bounded message history plus short-term memory for one session.

    Remembers the last intent, the last discussed product and a
    key/value store for active filters (category, price bounds).
    Not safe for concurrent writers; one conversation owns one context.
    """

    def __init__(self, max_history_length: int = 50):
        if max_history_length < 1:
            raise ValueError(f"max_history_length must be at least 1, got {max_history_length}")
        self.max_history_length = max_history_length
        self._history: list[ChatMessage] = []
        self._last_intent: Optional[ChatIntent] = None
        self._last_product_id: Optional[str] = None
        self._metadata: dict[str, Any] = {}

    def add_user_message(self, text: str, metadata: Optional[dict] = None) -> None:
        self._add(ChatMessage(sender=USER, text=text, metadata=_copy(metadata)))

    def add_bot_message(self, text: str, metadata: Optional[dict] = None) -> None:
        self._add(ChatMessage(sender=BOT, text=text, metadata=_copy(metadata)))

    def _add(self, message: ChatMessage) -> None:
        self._history.append(message)
        if len(self._history) > self.max_history_length:
            self._history = self._history[-self.max_history_length:]

    @property
    def history(self) -> list[ChatMessage]:
        return list(self._history)

    @property
    def user_messages(self) -> list[ChatMessage]:
        return [m for m in self._history if m.is_user]

    @property
    def bot_messages(self) -> list[ChatMessage]:
        return [m for m in self._history if m.is_bot]

    def recent_messages(self, count: int) -> list[ChatMessage]:
        """Last ``count`` messages in order, or all of them if fewer."""
        if count <= 0:
            return []
        return self._history[-count:]

    @property
    def last_user_message(self) -> Optional[ChatMessage]:
        for message in reversed(self._history):
            if message.is_user:
                return message
        return None

    @property
    def last_bot_message(self) -> Optional[ChatMessage]:
        for message in reversed(self._history):
            if message.is_bot:
                return message
        return None

    @property
    def last_intent(self) -> Optional[ChatIntent]:
        return self._last_intent

    @property
    def last_product_id(self) -> Optional[str]:
        return self._last_product_id

    def set_last_intent(self, intent: ChatIntent, product_id: Optional[str] = None) -> None:
        """Record the intent; the remembered product changes only if one is given."""
        self._last_intent = intent
        if product_id is not None:
            self._last_product_id = product_id

    def set_metadata(self, key: str, value: Any) -> None:
        self._metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self._metadata.get(key, default)

    def has_metadata(self, key: str) -> bool:
        return key in self._metadata

    def clear_metadata(self, key: str) -> None:
        self._metadata.pop(key, None)

    @property
    def metadata(self) -> dict[str, Any]:
        return dict(self._metadata)

    def clear(self) -> None:
        """Reset to a fresh session."""
        self._history.clear()
        self._last_intent = None
        self._last_product_id = None
        self._metadata.clear()

    @property
    def is_empty(self) -> bool:
        return not self._history

    @property
    def message_count(self) -> int:
        return len(self._history)

    def to_list(self) -> list[dict]:
        """Convert to sender/text dicts for rendering."""
        return [{"sender": m.sender, "text": m.text} for m in self._history]

    def to_structured(self) -> dict:
        """Export the full state as plain data."""
        return {
            "history": [m.to_dict() for m in self._history],
            "lastIntent": self._last_intent.value if self._last_intent else None,
            "lastProductId": self._last_product_id,
            "sessionMetadata": dict(self._metadata),
        }

    @classmethod
    def from_structured(
        cls, data: dict, max_history_length: int = 50
    ) -> "ConversationContext":
        """Rebuild a context exported with ``to_structured``.

        Unrecognized intent names become ``ChatIntent.UNKNOWN``.

        Raises:
            ValueError: If the data does not have the exported shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a context object, got {type(data).__name__}")

        history = data.get("history") or []
        metadata = data.get("sessionMetadata") or {}
        if not isinstance(history, list):
            raise ValueError("history must be a list")
        if not isinstance(metadata, dict):
            raise ValueError("sessionMetadata must be an object")

        context = cls(max_history_length=max_history_length)

        for item in history:
            context._add(ChatMessage.from_dict(item))

        intent_name = data.get("lastIntent")
        if intent_name is not None:
            context._last_intent = ChatIntent.from_name(intent_name)

        context._last_product_id = data.get("lastProductId")

        context._metadata.update(metadata)

        return context
