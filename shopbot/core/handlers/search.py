"""Product search, category filter and price range replies."""
from typing import Optional, Sequence

from ..models.chat import ConversationContext
from ..models.intent import ChatIntent
from ..models.product import PriceRange, Product
from .extractors import extract_category, extract_price_range
from .formatter import (
    CURRENCY,
    format_list_with_suffix,
    format_price,
    format_price_range,
    format_product_list,
    format_simple_list,
    format_stock,
)
from .utility import handle_unknown

DISPLAY_LIMIT = 5

# Session metadata keys
ACTIVE_CATEGORY = "activeCategory"
PRICE_RANGE_MIN = "priceRangeMin"
PRICE_RANGE_MAX = "priceRangeMax"

PRICE_RANGE_HINT = (
    "I couldn't understand the price range. Try asking like:\n\n"
    "• \"Show products under 50 euros\"\n"
    "• \"What's between 20 and 100 euros?\"\n"
    "• \"Products cheaper than 30\""
)


def _in_category(products: Sequence[Product], category: str) -> list[Product]:
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]


def _in_range(products: Sequence[Product], price_range: PriceRange) -> list[Product]:
    return [p for p in products if price_range.contains(p.price)]


def _remember_range(context: Optional[ConversationContext], price_range: PriceRange) -> None:
    if context is None:
        return
    context.set_metadata(PRICE_RANGE_MIN, price_range.min_price)
    context.set_metadata(PRICE_RANGE_MAX, price_range.max_price)


def _range_phrase(price_range: PriceRange) -> str:
    if price_range.min_price > 0 and price_range.is_bounded:
        return (
            f"between {CURRENCY}{price_range.min_price:.0f} "
            f"and {CURRENCY}{price_range.max_price:.0f}"
        )
    return format_price_range(price_range)


def handle_product_search(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """Find products by name or description.

    Examples: "Show me laptops", "I'm looking for a mouse", "Zeig mir Tastaturen"

    ``context`` is updated in place with the first match.
    """
    text = query.lower().strip()
    if not text:
        return handle_unknown(query, products, context)

    matches = [
        p for p in products
        if text in p.name.lower()
        or text in p.description.lower()
        or (p.name and p.name.lower() in text)
    ]

    if not matches:
        return handle_unknown(query, products, context)

    if context is not None:
        context.set_last_intent(ChatIntent.PRODUCT_SEARCH, product_id=matches[0].id)

    if len(matches) == 1:
        p = matches[0]
        return (
            f"I found **{p.name}** for {format_price(p.price)}.\n"
            f"{format_stock(p)}\n\n"
            f"{p.description}\n\n"
            "Would you like to know more about it?"
        )

    return f"Here are the products I found:\n\n{format_product_list(matches)}"


def handle_category_filter(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """List products of one category, optionally within a price range.

    Examples: "Show electronics", "Electronics between 50 and 200 euros"

    Records the active category, price bounds and first shown product
    on ``context``.
    """
    category = extract_category(query, products)

    if category is None:
        categories = sorted({p.category for p in products})
        return (
            "I couldn't identify the category, or there are no products in this "
            f"category. Available categories are:\n\n{format_simple_list(categories)}\n\n"
            "Try asking like: \"Show electronics\" or \"List food items\""
        )

    if context is not None:
        context.set_metadata(ACTIVE_CATEGORY, category)
        context.set_last_intent(ChatIntent.CATEGORY_FILTER)

    matches = _in_category(products, category)
    if not matches:
        return f"Sorry, there are no products in the {category} category."

    range_text = ""
    price_range = extract_price_range(query)
    if price_range is not None:
        _remember_range(context, price_range)
        matches = _in_range(matches, price_range)
        range_text = f" {_range_phrase(price_range)}"
        if not matches:
            return f"Sorry, there are no products in the {category} category{range_text}."

    shown = matches[:DISPLAY_LIMIT]
    if context is not None:
        context.set_last_intent(ChatIntent.CATEGORY_FILTER, product_id=shown[0].id)

    product_list = format_list_with_suffix(
        format_product_list(shown),
        len(matches),
        len(shown),
        item_type="products in this category",
    )
    return f"🏷️ Products in **{category}** category{range_text}:\n\n{product_list}"


def handle_price_range_search(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    """List products within a price range, cheapest first.

    Examples: "Show products under 50 euros", "Items from 10 to 50 euros",
    "Show food items under 20 euros"

    Records the price bounds and any named category on ``context``.
    """
    price_range = extract_price_range(query)
    if price_range is None:
        return PRICE_RANGE_HINT

    _remember_range(context, price_range)
    if context is not None:
        context.set_last_intent(ChatIntent.PRICE_RANGE_SEARCH)

    range_text = format_price_range(price_range)

    matches = _in_range(products, price_range)
    if not matches:
        return f"Sorry, no products found in the price range {range_text}."

    category_text = ""
    category = extract_category(query, products)
    if category is not None:
        if context is not None:
            context.set_metadata(ACTIVE_CATEGORY, category)
        matches = _in_category(matches, category)
        category_text = f" in **{category}**"
        if not matches:
            return (
                f"Sorry, there are no products in the {category} category "
                f"in the price range {range_text}."
            )

    matches.sort(key=lambda p: p.price)
    shown = matches[:DISPLAY_LIMIT]

    product_list = format_list_with_suffix(
        format_product_list(shown),
        len(matches),
        len(shown),
        item_type="products in this range",
    )
    return f"💶 Products{category_text} in price range {range_text}:\n\n{product_list}"
