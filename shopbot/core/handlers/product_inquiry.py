"""Price and stock questions about a specific product."""
import logging
from typing import Optional, Sequence

from ..models.chat import ConversationContext
from ..models.intent import ChatIntent
from ..models.product import Product
from .extractors import extract_product
from .formatter import format_price
from .price_comparison import NO_PRODUCTS_REPLY

logger = logging.getLogger(__name__)


def _find_by_id(products: Sequence[Product], product_id: str) -> Optional[Product]:
    for product in products:
        if product.id == product_id:
            return product
    return None


def _resolve_follow_up(
    query: str,
    products: Sequence[Product],
    context: Optional[ConversationContext],
    deictics: tuple[str, ...],
) -> Optional[Product]:
    """Resolve "it"/"that" to the product discussed last.

    A remembered id that is no longer in the catalog counts as no context.
    """
    if context is None or context.last_product_id is None:
        return None
    text = query.lower()
    if not any(word in text for word in deictics):
        return None
    product = _find_by_id(products, context.last_product_id)
    if product is None:
        logger.info(
            f"Last product {context.last_product_id!r} is not in the catalog, ignoring it"
        )
    return product


def _price_reply(product: Product) -> str:
    return f"The {product.name} costs {format_price(product.price)}."


def _stock_reply(product: Product) -> str:
    if product.in_stock:
        return f"Yes, {product.name} is available! We have {product.stock} units in stock."
    return f"Sorry, {product.name} is currently out of stock."


def handle_price_inquiry(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """Answer "how much is ...?".

    Examples: "How much is the laptop?", "Was kostet die Tastatur?"

    ``context`` is updated in place with the resolved product.
    """
    product = extract_product(query, products) or _resolve_follow_up(
        query, products, context, ("it", "that")
    )

    if product is not None:
        if context is not None:
            context.set_last_intent(ChatIntent.PRICE_INQUIRY, product_id=product.id)
        return _price_reply(product)

    if not products:
        return NO_PRODUCTS_REPLY

    product_list = "\n".join(f"• {p.name}: {format_price(p.price)}" for p in products)
    return (
        "I couldn't identify the specific product. "
        f"Here are all our products with prices:\n\n{product_list}"
    )


def handle_stock_check(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """Answer "is ... available?".

    Examples: "Is the mouse in stock?", "Habt ihr Tastaturen verfügbar?"

    ``context`` is updated in place with the resolved product.
    """
    product = extract_product(query, products) or _resolve_follow_up(
        query, products, context, ("it", "that", "available")
    )

    if product is not None:
        if context is not None:
            context.set_last_intent(ChatIntent.STOCK_CHECK, product_id=product.id)
        return _stock_reply(product)

    available = [p for p in products if p.in_stock]
    if not available:
        return "Sorry, we currently have no products in stock."

    product_list = "\n".join(f"• {p.name} ({p.stock} in stock)" for p in available)
    return (
        "Sorry, I don't know which product you mean. "
        f"We currently have the following products available:\n\n{product_list}"
    )
