"""Parameter extraction from free-text queries."""

import re
from typing import Optional, Sequence

from ..models.product import PriceRange, Product

_CURRENCY = r"(?:€|euro|euros)?"

_UNDER_RE = re.compile(
    rf"(?:under|below|cheaper than|less than|bis|maximum|max|unter)\s*{_CURRENCY}\s*(?P<max>\d+)"
)
_OVER_RE = re.compile(
    rf"(?:over|above|more than|greater than|ab|minimum|min|über)\s*{_CURRENCY}\s*(?P<min>\d+)"
)
_BETWEEN_RE = re.compile(
    rf"(?:between|from|von)\s*{_CURRENCY}\s*(?P<min>\d+)\s*{_CURRENCY}\s*"
    rf"(?:and|to|bis)\s*{_CURRENCY}\s*(?P<max>\d+)"
)
_SIMPLE_RANGE_RE = re.compile(
    rf"{_CURRENCY}\s*(?P<min>\d+)\s*{_CURRENCY}\s*(?:-|to|bis)\s*{_CURRENCY}\s*(?P<max>\d+)"
)

_WORD_SPLIT_RE = re.compile(r"[\s\-_,;]+")

# Words too generic to identify a product by.
_COMMON_WORDS = frozenset({
    "the", "a", "an", "is", "of", "for", "what", "how", "much", "price",
    "cost", "available", "in", "stock", "one", "first", "second", "third",
    "fourth", "fifth", "last", "next", "it", "that", "this", "show", "me", "get",
})


def extract_category(query: str, products: Sequence[Product]) -> Optional[str]:
    """Find a catalog category named in the query.

    Args:
        query: User query.
        products: Catalog snapshot; its categories are the candidates.

    Returns:
        The first category (in catalog order) contained in the query.
    """
    text = query.lower()
    seen: set[str] = set()
    for product in products:
        category = product.category
        if category in seen:
            continue
        seen.add(category)
        if category and category.lower() in text:
            return category
    return None


def _to_range(min_price: float, max_price: float) -> PriceRange:
    if min_price > max_price:
        min_price, max_price = max_price, min_price
    return PriceRange(min_price=min_price, max_price=max_price)


def extract_price_range(query: str) -> Optional[PriceRange]:
    """Parse a price range such as "under 50" or "between 20 and 100 euros".

    Shapes are tried in order: upper bound, lower bound, between,
    bare "N - M".

    Args:
        query: User query.

    Returns:
        Inclusive price range, or None if no shape matches.
    """
    text = query.lower()

    match = _UNDER_RE.search(text)
    if match:
        return PriceRange(min_price=0.0, max_price=float(match.group("max")))

    match = _OVER_RE.search(text)
    if match:
        return PriceRange(min_price=float(match.group("min")))

    match = _BETWEEN_RE.search(text)
    if match:
        return _to_range(float(match.group("min")), float(match.group("max")))

    match = _SIMPLE_RANGE_RE.search(text)
    if match:
        return _to_range(float(match.group("min")), float(match.group("max")))

    return None


def _split_words(text: str) -> list[str]:
    return [w for w in _WORD_SPLIT_RE.split(text) if w]


def extract_product(query: str, products: Sequence[Product]) -> Optional[Product]:
    """Resolve the product a query talks about.

    Full product names contained in the query win. Otherwise any
    significant query word is matched against the words of each
    product name, in both directions, so "t-shirt" finds "T-Shirt"
    and "shirts" finds "Shirt".

    Args:
        query: User query.
        products: Catalog snapshot.

    Returns:
        The first matching product, or None.
    """
    text = query.lower()

    for product in products:
        name = product.name.lower()
        if name and name in text:
            return product

    query_words = [
        w for w in _split_words(text) if len(w) > 2 and w not in _COMMON_WORDS
    ]
    if not query_words:
        return None

    for product in products:
        for product_word in _split_words(product.name.lower()):
            for query_word in query_words:
                if query_word == product_word:
                    return product
                if len(product_word) >= 3 and product_word in query_word:
                    return product
                if len(query_word) >= 3 and query_word in product_word:
                    return product

    return None
