"""Intent classifier - follow-up context, regex patterns, keyword scoring."""

import logging
from typing import Optional, Sequence

import numpy as np

from ..models.chat import ConversationContext
from ..models.intent import ChatIntent, IntentPattern
from .intent_catalog import DEFAULT_PATTERNS

logger = logging.getLogger(__name__)

FOLLOW_UP_INDICATORS = (
    "it", "that", "this", "them", "those",
    "yes", "yeah", "yep", "sure", "ok", "okay",
    "tell me more", "more info", "more details",
    "about it", "about that", "what about",
)

PRICE_INDICATORS = (
    "price", "cost", "how much", "expensive", "cheap", "$", "€", "euro", "dollar",
)

STOCK_INDICATORS = (
    "stock", "available", "in stock", "availability", "have", "get", "buy", "order",
)

_FOLLOW_UP_INTENTS = frozenset({
    ChatIntent.PRODUCT_SEARCH,
    ChatIntent.PRICE_INQUIRY,
    ChatIntent.STOCK_CHECK,
})


class IntentClassifier:
    """Layered classifier: follow-up → regex patterns → keyword scores."""

    def __init__(
        self,
        patterns: Sequence[IntentPattern] = DEFAULT_PATTERNS,
        debug: bool = False,
    ):
        """Initialize classifier.

        Args:
            patterns: Pattern catalog in declaration order.
            debug: Log every classification step.
        """
        self._patterns = tuple(patterns)
        # sorted() is stable, so equal priorities keep declaration order
        self._by_priority = tuple(
            sorted(self._patterns, key=lambda p: p.priority, reverse=True)
        )
        self._debug = debug

    def _log(self, message: str) -> None:
        """Log debug message."""
        if self._debug:
            logger.info(f"[classifier] {message}")

    @property
    def patterns(self) -> tuple[IntentPattern, ...]:
        return self._patterns

    def classify(
        self, query: str, context: Optional[ConversationContext] = None
    ) -> ChatIntent:
        """Classify a user query.

        Args:
            query: Raw user text.
            context: Conversation context, read but never modified.

        Returns:
            The detected intent, or ``ChatIntent.UNKNOWN``.
        """
        text = query.lower().strip()

        if not text:
            self._log("Empty query")
            return ChatIntent.UNKNOWN

        follow_up = self._classify_follow_up(text, context)
        if follow_up is not None:
            return follow_up

        for pattern in self._by_priority:
            if pattern.matches(text):
                self._log(f"Pattern match: {pattern.intent.value} (priority={pattern.priority})")
                return pattern.intent

        return self._score_keywords(text)

    def _classify_follow_up(
        self, text: str, context: Optional[ConversationContext]
    ) -> Optional[ChatIntent]:
        """Resolve price/stock follow-ups about the last discussed product."""
        if context is None or context.last_intent not in _FOLLOW_UP_INTENTS:
            return None

        if not any(i in text for i in FOLLOW_UP_INDICATORS):
            return None

        if any(i in text for i in PRICE_INDICATORS):
            self._log(f"Follow-up after {context.last_intent.value}: price")
            return ChatIntent.PRICE_INQUIRY

        if any(i in text for i in STOCK_INDICATORS):
            self._log(f"Follow-up after {context.last_intent.value}: stock")
            return ChatIntent.STOCK_CHECK

        return None

    def _score_keywords(self, text: str) -> ChatIntent:
        """Pick the intent with the highest keyword score.

        Ties go to the intent declared first in the catalog.
        """
        intents: list[ChatIntent] = []
        totals: list[int] = []
        for pattern in self._patterns:
            score = pattern.score(text)
            if pattern.intent in intents:
                totals[intents.index(pattern.intent)] += score
            else:
                intents.append(pattern.intent)
                totals.append(score)

        if not totals:
            return ChatIntent.UNKNOWN

        scores = np.array(totals)
        max_score = int(np.max(scores))
        if max_score <= 0:
            self._log("No keyword matched")
            return ChatIntent.UNKNOWN

        best = intents[int(np.argmax(scores))]
        self._log(f"Keyword score: {best.value}={max_score}")
        return best
