"""Core business services."""
from .chatbot_service import ChatbotService
from .handler_registry import IntentHandlerRegistry
from .intent_catalog import DEFAULT_PATTERNS, load_intent_patterns
from .intent_classifier import IntentClassifier

__all__ = [
    "ChatbotService",
    "IntentHandlerRegistry",
    "DEFAULT_PATTERNS",
    "load_intent_patterns",
    "IntentClassifier",
]
