"""Conversation store implementations."""
from .json_store import JsonConversationStore

__all__ = ["JsonConversationStore"]
