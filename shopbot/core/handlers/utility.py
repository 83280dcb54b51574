"""Fixed informational replies: greeting, help, fallback."""
from typing import Optional, Sequence

from ..models.chat import ConversationContext
from ..models.product import Product

GREETING_REPLY = (
    "Hello! 👋 Welcome to our shop! I'm your AI Shopping Assistant.\n\n"
    "I can help you with:\n"
    "• Finding products\n"
    "• Checking prices\n"
    "• Checking availability\n\n"
    "What can I help you with today?"
)

HELP_REPLY = (
    "I'm here to help! 🤖\n\n"
    "You can ask me:\n\n"
    "📋 **Product Search:**\n"
    "• \"Show me laptops\"\n"
    "• \"Do you have keyboards?\"\n\n"
    "🏷️ **Category Filter:**\n"
    "• \"Show electronics\"\n"
    "• \"List food items\"\n"
    "• \"What's in clothing category?\"\n\n"
    "💰 **Prices:**\n"
    "• \"How much is the laptop?\"\n"
    "• \"What's the price of the mouse?\"\n"
    "• \"What are the cheapest products?\"\n"
    "• \"Show me the most expensive items\"\n\n"
    "💶 **Price Range:**\n"
    "• \"Show products under 50 euros\"\n"
    "• \"What's between 20 and 100 euros?\"\n"
    "• \"Products cheaper than 30\"\n\n"
    "📦 **Availability:**\n"
    "• \"Is the keyboard in stock?\"\n"
    "• \"What products are available?\"\n\n"
    "Just type your question naturally!"
)

UNKNOWN_REPLY = (
    "I'm not sure I understood that. 🤔\n\n"
    "Try asking me about:\n"
    "• Product prices\n"
    "• Product availability\n"
    "• Searching for products\n"
    "• Filtering by category\n"
    "• Price ranges (e.g., 'under 50 euros')\n"
    "• Cheapest or most expensive items\n\n"
    "Or type 'help' to see what I can do!"
)


def handle_greeting(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    return GREETING_REPLY


def handle_help(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    return HELP_REPLY


def handle_unknown(
    query: str, products: Sequence[Product], context: Optional[ConversationContext] = None
) -> str:
    return UNKNOWN_REPLY
