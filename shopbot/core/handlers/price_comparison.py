"""Cheapest / most expensive product replies."""
from typing import Optional, Sequence

from ..models.chat import ConversationContext
from ..models.product import Product
from .formatter import format_product_list

COMPARISON_LIMIT = 3

NO_PRODUCTS_REPLY = "Sorry, no products are currently available."


def _top_by_price(products: Sequence[Product], descending: bool) -> list[Product]:
    return sorted(products, key=lambda p: p.price, reverse=descending)[:COMPARISON_LIMIT]


def handle_cheapest_product(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """List the three cheapest products.

    Examples: "What are the cheapest products?", "Was sind die billigsten Produkte?"
    """
    if not products:
        return NO_PRODUCTS_REPLY
    cheapest = _top_by_price(products, descending=False)
    return f"💰 Here are our cheapest products:\n\n{format_product_list(cheapest)}"


def handle_most_expensive_product(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """List the three most expensive products.

    Examples: "What are the most expensive products?", "Show me premium items"
    """
    if not products:
        return NO_PRODUCTS_REPLY
    priciest = _top_by_price(products, descending=True)
    return f"💎 Here are our most expensive products:\n\n{format_product_list(priciest)}"
