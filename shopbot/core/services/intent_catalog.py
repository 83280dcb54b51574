"""Intent pattern catalog - keywords and regexes per intent."""

import json
import logging
import re
from pathlib import Path

from ..models.intent import ChatIntent, IntentPattern

logger = logging.getLogger(__name__)

_CATEGORY_WORDS = "electronics|food|clothing|general|elektronik|lebensmittel|kleidung|allgemein"
_CURRENCY = r"(€|euro|euros)?"


def _compile(*expressions: str) -> tuple[re.Pattern, ...]:
    return tuple(re.compile(e) for e in expressions)


# Declaration order matters: it breaks ties between equal priorities.
DEFAULT_PATTERNS: tuple[IntentPattern, ...] = (
    IntentPattern(
        intent=ChatIntent.PRICE_INQUIRY,
        keywords=(
            "price", "cost", "kostet", "teuer", "much",
            "preis", "expensive", "cheap", "euro",
        ),
        patterns=_compile(
            r"how much (is|are|does|do|cost)",
            r"what.*price",
            r"was kostet",
            r"wie teuer",
            r"(is|are) .* (expensive|cheap)",
        ),
        priority=1,
    ),
    IntentPattern(
        intent=ChatIntent.STOCK_CHECK,
        keywords=(
            "available", "stock", "have", "verfügbar",
            "lager", "vorrätig", "in stock",
        ),
        patterns=_compile(
            r"(do you|habt ihr|have you) have",
            r"is .* (available|in stock|verfügbar)",
            r"(any|some) .* (available|in stock)",
        ),
        priority=2,
    ),
    IntentPattern(
        intent=ChatIntent.GREETING,
        keywords=(
            "hello", "hey", "hallo", "guten tag", "moin",
            "servus", "greetings", "good morning", "good evening",
        ),
        patterns=_compile(
            r"^(hi|hello|hey|hallo)\b",
            r"\b(hi|hello|hey|hallo)$",
            r"^guten (tag|morgen|abend)",
            r"^(good (morning|evening|afternoon)|greetings)",
        ),
        priority=3,
    ),
    IntentPattern(
        intent=ChatIntent.CHEAPEST_PRODUCT,
        keywords=(
            "cheap", "cheapest", "affordable", "budget", "billig",
            "billigste", "günstig", "günstigste", "low price", "lowest price",
        ),
        patterns=_compile(
            r"\b(cheapest|most affordable|lowest price)",
            r"\b(billigste|günstigste)",
            r"what.*cheapest",
            r"show.*(cheap|affordable|budget)",
        ),
        priority=2,
    ),
    IntentPattern(
        intent=ChatIntent.MOST_EXPENSIVE_PRODUCT,
        keywords=(
            "expensive", "most expensive", "pricey", "costly", "teuer",
            "teuerste", "high price", "highest price", "premium",
        ),
        patterns=_compile(
            r"\b(most expensive|highest price|priciest)",
            r"\b(teuerste)",
            r"what.*most expensive",
            r"show.*(expensive|premium|luxury)",
        ),
        priority=2,
    ),
    IntentPattern(
        intent=ChatIntent.HELP,
        keywords=("help", "hilfe", "can you", "kannst du", "what can", "wie kann"),
        patterns=_compile(
            r"(help|hilfe)",
            r"what can (you|i)",
            r"kannst du",
        ),
        priority=1,
    ),
    IntentPattern(
        intent=ChatIntent.PRICE_RANGE_SEARCH,
        keywords=(
            "under", "below", "over", "above", "between", "from", "to",
            "cheaper", "expensive", "euro", "euros", "price range",
            "unter", "über", "zwischen", "von", "bis", "günstiger", "teurer",
        ),
        patterns=_compile(
            rf"(under|below|cheaper than|less than|unter|maximum|max)\s*{_CURRENCY}\s*\d+",
            rf"(over|above|more than|greater than|über|minimum|min)\s*{_CURRENCY}\s*\d+",
            rf"(between|from|von)\s*{_CURRENCY}\s*\d+\s*(and|to|bis|-)?\s*{_CURRENCY}\s*\d+",
            rf"{_CURRENCY}\s*\d+\s*(-|to|bis)\s*{_CURRENCY}\s*\d+",
            r"price range",
        ),
        priority=2,
    ),
    IntentPattern(
        intent=ChatIntent.CATEGORY_FILTER,
        keywords=(
            "category", "categories", "kategorie", "kategorien",
            "electronics", "elektronik", "food", "lebensmittel", "essen",
            "clothing", "kleidung", "clothes", "general", "allgemein",
            "accessories", "zubehör",
        ),
        patterns=_compile(
            rf"(show|list|zeig|liste|display).*({_CATEGORY_WORDS})",
            rf"({_CATEGORY_WORDS}).*(items|products|produkte|artikel)",
            r"(what|was|which|welche).*(in|im|in der).*(category|kategorie)",
            r"(whats|was ist).*(in|im).*(electronics|food|clothing|general)",
            r"\b(electronics|elektronik)\b",
            r"\b(food|lebensmittel|essen)\b",
            r"\b(clothing|kleidung)\b",
            r"\b(general|allgemein)\b",
        ),
        priority=2,
    ),
    # Broad catch-all for search phrasing, checked last.
    IntentPattern(
        intent=ChatIntent.PRODUCT_SEARCH,
        keywords=("show", "find", "search", "looking for", "zeig", "suche", "finde"),
        patterns=_compile(
            r"(show|zeig) (me|mir)",
            r"(looking|searching) for",
            r"ich suche",
        ),
        priority=1,
    ),
)


def _parse_entry(item: dict) -> IntentPattern | None:
    if not isinstance(item, dict):
        logger.error(f"Skipping pattern entry that is not an object: {item!r}")
        return None

    intent = ChatIntent.from_name(item.get("intent"))
    if intent is ChatIntent.UNKNOWN and item.get("intent") != ChatIntent.UNKNOWN.value:
        logger.error(f"Skipping pattern entry with unknown intent: {item.get('intent')!r}")
        return None

    keywords = item.get("keywords", [])
    expressions = item.get("patterns", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        logger.error(f"Skipping {intent.value} entry: keywords must be a list of strings")
        return None
    if not isinstance(expressions, list):
        logger.error(f"Skipping {intent.value} entry: patterns must be a list")
        return None

    try:
        priority = int(item.get("priority", 0))
    except (TypeError, ValueError):
        logger.error(f"Skipping {intent.value} entry: invalid priority {item.get('priority')!r}")
        return None

    compiled = []
    for expression in expressions:
        try:
            compiled.append(re.compile(expression))
        except (re.error, TypeError) as e:
            logger.error(f"Skipping invalid regex {expression!r} for {intent.value}: {e}")

    return IntentPattern(
        intent=intent,
        keywords=tuple(k.lower() for k in keywords),
        patterns=tuple(compiled),
        priority=priority,
    )


def load_intent_patterns(path: str) -> tuple[IntentPattern, ...]:
    """Load the pattern catalog from JSON, or the built-in one.

    Args:
        path: Path to a JSON file with a ``patterns`` list.

    Returns:
        Patterns in declaration order.
    """
    config_file = Path(path)
    if not config_file.exists():
        logger.warning(f"Intent patterns {path} not found, using defaults")
        return DEFAULT_PATTERNS

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load intent patterns from {path}: {e}")
        return DEFAULT_PATTERNS

    entries = config.get("patterns", []) if isinstance(config, dict) else None
    if not isinstance(entries, list):
        logger.error(f"Intent patterns {path} has no 'patterns' list, using defaults")
        return DEFAULT_PATTERNS

    patterns = []
    for item in entries:
        entry = _parse_entry(item)
        if entry is not None:
            patterns.append(entry)

    if not patterns:
        logger.warning(f"No usable patterns in {path}, using defaults")
        return DEFAULT_PATTERNS

    logger.info(f"Loaded {len(patterns)} intent patterns from {path}")
    return tuple(patterns)
