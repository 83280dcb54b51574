"""Response formatting shared by the intent handlers."""
from typing import Sequence

from ..models.product import PriceRange, Product

CURRENCY = "€"


def format_price(amount: float) -> str:
    return f"{CURRENCY}{amount:.2f}"


def format_stock(product: Product) -> str:
    if product.in_stock:
        return f"✅ In stock ({product.stock})"
    return "❌ Out of stock"


def format_product(product: Product, include_description: bool = True) -> str:
    """Format one product with price and stock status."""
    if include_description:
        return (
            f"**{product.name}**: {format_price(product.price)}\n"
            f"{format_stock(product)}\n"
            f"{product.description}"
        )
    return f"**{product.name}**: {format_price(product.price)} - {format_stock(product)}"


def format_product_list(
    products: Sequence[Product], include_description: bool = True
) -> str:
    """Format products as a bulleted list."""
    items = []
    for p in products:
        if include_description:
            items.append(
                f"• **{p.name}**: {format_price(p.price)}\n"
                f"  {format_stock(p)}\n"
                f"  {p.description}"
            )
        else:
            items.append(f"• **{p.name}**: {format_price(p.price)} - {format_stock(p)}")
    return "\n\n".join(items)


def format_price_range(price_range: PriceRange) -> str:
    """Human-readable range: "under €50", "over €50" or "€20 - €100"."""
    low = max(price_range.min_price, 0.0)
    if low == 0.0 and price_range.is_bounded:
        return f"under {CURRENCY}{price_range.max_price:.0f}"
    if not price_range.is_bounded:
        return f"over {CURRENCY}{low:.0f}"
    return f"{CURRENCY}{low:.0f} - {CURRENCY}{price_range.max_price:.0f}"


def format_list_with_suffix(
    formatted_list: str, total_count: int, displayed_count: int, item_type: str = "items"
) -> str:
    """Append "(and K more ...)" when the list was truncated."""
    if total_count > displayed_count:
        return f"{formatted_list}\n\n(and {total_count - displayed_count} more {item_type})"
    return formatted_list


def format_simple_list(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items)
