"""
PyTest configuration and fixtures
"""
import logging

import pytest

from shopbot.core.models.chat import ConversationContext
from shopbot.core.models.product import Product
from shopbot.core.services.chatbot_service import ChatbotService
from shopbot.core.services.handler_registry import IntentHandlerRegistry
from shopbot.core.services.intent_classifier import IntentClassifier

# Keep test output quiet
logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def products():
    """Small mixed catalog"""
    return [
        Product(id="1", name="Shirt", description="Blue cotton shirt", price=10.0, stock=5, category="Clothing"),
        Product(id="2", name="Pants", description="Black pants", price=20.0, stock=3, category="Clothing"),
        Product(id="3", name="Laptop", description="Fast notebook computer", price=999.0, stock=2, category="Electronics"),
        Product(id="4", name="Mouse", description="Wireless mouse", price=25.0, stock=0, category="Electronics"),
        Product(id="5", name="Coffee", description="Ground coffee beans", price=7.5, stock=40, category="Food"),
    ]


@pytest.fixture
def context():
    """Fresh conversation context"""
    return ConversationContext()


@pytest.fixture
def classifier():
    return IntentClassifier()


@pytest.fixture
def chatbot():
    """Chatbot wired with the default catalog and handlers"""
    return ChatbotService(classifier=IntentClassifier(), registry=IntentHandlerRegistry())


@pytest.fixture
def make_products():
    """Factory for ``count`` products priced start_price, start_price + 1, ..."""
    def _make(count, category="General", start_price=1.0):
        return [
            Product(
                id=f"g{i}",
                name=f"Gadget {i}",
                description=f"Gadget number {i}",
                price=start_price + i,
                stock=i,
                category=category,
            )
            for i in range(count)
        ]
    return _make
