"""Chatbot service - coordinates context, classification and handlers."""

import logging
from typing import Optional, Sequence

from ..handlers.utility import UNKNOWN_REPLY
from ..models.chat import ConversationContext
from ..models.product import Product
from ..protocols.catalog import ProductCatalogProtocol
from .handler_registry import IntentHandlerRegistry
from .intent_classifier import IntentClassifier

logger = logging.getLogger(__name__)


class ChatbotService:
    """Single entry point for one conversation.

    One service owns one context; calls on the same instance must not
    interleave.
    """

    def __init__(
        self,
        classifier: IntentClassifier,
        registry: IntentHandlerRegistry,
        context: Optional[ConversationContext] = None,
        catalog: Optional[ProductCatalogProtocol] = None,
        max_history_length: int = 50,
    ):
        """Initialize chatbot service.

        Args:
            classifier: Intent classifier.
            registry: Intent handler registry.
            context: Existing conversation (e.g. restored from storage).
            catalog: Product source used when ``respond`` gets no products.
            max_history_length: History bound for a new context.
        """
        self._classifier = classifier
        self._registry = registry
        self._catalog = catalog
        self._context = context or ConversationContext(max_history_length=max_history_length)

    @property
    def context(self) -> ConversationContext:
        return self._context

    def respond(self, query: str, products: Optional[Sequence[Product]] = None) -> str:
        """Answer a user message.

        Flow:
            1. Record the user message.
            2. Classify the intent against the context.
            3. Dispatch to the intent handler.
            4. Record and return the reply.

        Args:
            query: Raw user text, may be empty.
            products: Catalog snapshot; pulled from the catalog if omitted.

        Returns:
            Non-empty reply text.
        """
        query = query or ""
        self._context.add_user_message(query)

        try:
            if products is None:
                products = self._catalog.list_products() if self._catalog else []

            intent = self._classifier.classify(query, self._context)
            reply = self._registry.dispatch(intent, query, products, self._context)
            self._context.set_last_intent(intent)

            logger.info(f"Intent {intent.value} for '{query[:50]}'")
        except Exception as e:
            logger.exception(f"Failed to answer '{query[:50]}': {e}")
            reply = UNKNOWN_REPLY

        if not reply:
            reply = UNKNOWN_REPLY

        self._context.add_bot_message(reply)
        return reply

    def clear_history(self) -> None:
        """Start a fresh session."""
        self._context.clear()

    def get_history(self) -> list[dict]:
        """Transcript as ordered sender/text pairs."""
        return self._context.to_list()
