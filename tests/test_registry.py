"""
Handler registry tests
"""
import pytest

from shopbot.core.handlers.utility import GREETING_REPLY, UNKNOWN_REPLY, handle_greeting
from shopbot.core.models.intent import ChatIntent
from shopbot.core.services.handler_registry import DEFAULT_HANDLERS, IntentHandlerRegistry


def test_default_table_covers_every_intent():
    registry = IntentHandlerRegistry()

    assert set(DEFAULT_HANDLERS) == set(ChatIntent)
    assert all(registry.has_handler(intent) for intent in ChatIntent)
    assert len(registry.registered_intents) == len(ChatIntent)


def test_default_table_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_HANDLERS[ChatIntent.GREETING] = handle_greeting


@pytest.mark.parametrize("intent", list(ChatIntent))
def test_every_handler_accepts_empty_input(intent):
    reply = IntentHandlerRegistry().dispatch(intent, "", [], None)
    assert isinstance(reply, str)
    assert reply


def test_partial_table_falls_back_to_unknown(products):
    registry = IntentHandlerRegistry({ChatIntent.GREETING: handle_greeting})

    assert registry.dispatch(ChatIntent.GREETING, "hi", products) == GREETING_REPLY
    assert registry.dispatch(ChatIntent.HELP, "help", products) == UNKNOWN_REPLY
    assert not registry.has_handler(ChatIntent.HELP)


def test_custom_unknown_handler_is_used_for_gaps(products):
    registry = IntentHandlerRegistry({ChatIntent.UNKNOWN: lambda q, p, c: "custom"})
    assert registry.dispatch(ChatIntent.STOCK_CHECK, "is it here", products) == "custom"


def test_empty_table():
    registry = IntentHandlerRegistry({})
    assert registry.registered_intents == []
    assert registry.dispatch(ChatIntent.PRICE_INQUIRY, "price", []) == UNKNOWN_REPLY


def test_dispatch_passes_context(products, context):
    seen = []

    def _record(query, catalog, ctx):
        seen.append((query, len(catalog), ctx))
        return "ok"

    registry = IntentHandlerRegistry({**DEFAULT_HANDLERS, ChatIntent.HELP: _record})

    assert registry.dispatch(ChatIntent.HELP, "help", products, context) == "ok"
    assert seen == [("help", 5, context)]
