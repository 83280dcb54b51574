"""Intent handlers. All share one signature: (query, products, context) -> reply."""
from typing import Callable, Optional, Sequence

from ..models.chat import ConversationContext
from ..models.product import Product
from .price_comparison import handle_cheapest_product, handle_most_expensive_product
from .product_inquiry import handle_price_inquiry, handle_stock_check
from .search import handle_category_filter, handle_price_range_search, handle_product_search
from .utility import handle_greeting, handle_help, handle_unknown

IntentHandler = Callable[[str, Sequence[Product], Optional[ConversationContext]], str]

__all__ = [
    "IntentHandler",
    "handle_cheapest_product",
    "handle_most_expensive_product",
    "handle_price_inquiry",
    "handle_stock_check",
    "handle_category_filter",
    "handle_price_range_search",
    "handle_product_search",
    "handle_greeting",
    "handle_help",
    "handle_unknown",
]
