"""Intent domain models."""
import re
from dataclasses import dataclass, field
from enum import Enum


class ChatIntent(Enum):
    """What the user wants to achieve with a message."""
    PRICE_INQUIRY = "priceInquiry"
    STOCK_CHECK = "stockCheck"
    PRODUCT_SEARCH = "productSearch"
    CHEAPEST_PRODUCT = "cheapestProduct"
    MOST_EXPENSIVE_PRODUCT = "mostExpensiveProduct"
    GREETING = "greeting"
    HELP = "help"
    CATEGORY_FILTER = "categoryFilter"
    PRICE_RANGE_SEARCH = "priceRangeSearch"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str | None) -> "ChatIntent":
        """Look up an intent by its value, falling back to UNKNOWN."""
        for intent in cls:
            if intent.value == name:
                return intent
        return cls.UNKNOWN


@dataclass(frozen=True)
class IntentPattern:
    """Keywords and regexes that recognize one intent.

    Higher priority patterns are checked first and weigh more in
    keyword scoring.
    """
    intent: ChatIntent
    keywords: tuple[str, ...]
    patterns: tuple[re.Pattern, ...] = field(default_factory=tuple)
    priority: int = 0

    def matches(self, text: str) -> bool:
        """Check if any precise pattern matches the normalized text."""
        return any(p.search(text) for p in self.patterns)

    def score(self, text: str) -> int:
        """Priority once per keyword contained in the text."""
        return sum(self.priority for keyword in self.keywords if keyword in text)
