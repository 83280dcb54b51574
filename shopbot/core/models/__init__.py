"""Domain models."""
from .chat import ChatMessage, ConversationContext
from .intent import ChatIntent, IntentPattern
from .product import PriceRange, Product

__all__ = [
    "ChatMessage",
    "ConversationContext",
    "ChatIntent",
    "IntentPattern",
    "PriceRange",
    "Product",
]
