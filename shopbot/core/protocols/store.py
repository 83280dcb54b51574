"""Conversation store protocol for dependency injection."""
from typing import Optional, Protocol, runtime_checkable

from ..models.chat import ConversationContext


@runtime_checkable
class ConversationStoreProtocol(Protocol):
    """Protocol for session persistence."""

    def load(self, session_id: str) -> Optional[ConversationContext]:
        """Restore a saved conversation.

        Args:
            session_id: Session identifier.

        Returns:
            The restored context, or None if nothing usable is stored.
        """
        ...

    def save(self, session_id: str, context: ConversationContext) -> None:
        """Persist a conversation.

        Args:
            session_id: Session identifier.
            context: Context to store.
        """
        ...

    def delete(self, session_id: str) -> None:
        """Forget a stored conversation."""
        ...
