"""Intent handler registry - maps every intent to its responder."""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from ..handlers import (
    IntentHandler,
    handle_category_filter,
    handle_cheapest_product,
    handle_greeting,
    handle_help,
    handle_most_expensive_product,
    handle_price_inquiry,
    handle_price_range_search,
    handle_product_search,
    handle_stock_check,
    handle_unknown,
)
from ..models.chat import ConversationContext
from ..models.intent import ChatIntent
from ..models.product import Product

logger = logging.getLogger(__name__)


def _missing_intents(handlers: Mapping[ChatIntent, IntentHandler]) -> list[ChatIntent]:
    return [intent for intent in ChatIntent if intent not in handlers]


DEFAULT_HANDLERS: Mapping[ChatIntent, IntentHandler] = MappingProxyType({
    ChatIntent.PRICE_INQUIRY: handle_price_inquiry,
    ChatIntent.STOCK_CHECK: handle_stock_check,
    ChatIntent.PRODUCT_SEARCH: handle_product_search,
    ChatIntent.CATEGORY_FILTER: handle_category_filter,
    ChatIntent.PRICE_RANGE_SEARCH: handle_price_range_search,
    ChatIntent.CHEAPEST_PRODUCT: handle_cheapest_product,
    ChatIntent.MOST_EXPENSIVE_PRODUCT: handle_most_expensive_product,
    ChatIntent.GREETING: handle_greeting,
    ChatIntent.HELP: handle_help,
    ChatIntent.UNKNOWN: handle_unknown,
})

if _missing_intents(DEFAULT_HANDLERS):
    raise RuntimeError(
        f"No default handler for: {[i.value for i in _missing_intents(DEFAULT_HANDLERS)]}"
    )


class IntentHandlerRegistry:
    """Dispatches an intent to its handler."""

    def __init__(self, handlers: Optional[Mapping[ChatIntent, IntentHandler]] = None):
        """Initialize registry.

        Args:
            handlers: Custom intent → handler table. Intents it leaves out
                are answered by the unknown handler.
        """
        self._handlers = dict(DEFAULT_HANDLERS if handlers is None else handlers)

        missing = _missing_intents(self._handlers)
        if missing:
            logger.warning(
                f"No handler for {[i.value for i in missing]}, "
                "these intents fall back to the unknown reply"
            )

    def dispatch(
        self,
        intent: ChatIntent,
        query: str,
        products: Sequence[Product],
        context: Optional[ConversationContext] = None,
    ) -> str:
        """Run the handler for an intent.

        Args:
            intent: Classified intent.
            query: Raw user text.
            products: Catalog snapshot.
            context: Conversation context, updated in place by the handler.

        Returns:
            Reply text.
        """
        handler = self._handlers.get(intent)
        if handler is None:
            logger.warning(f"No handler registered for {intent.value}")
            handler = self._handlers.get(ChatIntent.UNKNOWN, handle_unknown)
        return handler(query, products, context)

    def has_handler(self, intent: ChatIntent) -> bool:
        return intent in self._handlers

    @property
    def registered_intents(self) -> list[ChatIntent]:
        return list(self._handlers)
