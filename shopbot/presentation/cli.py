import logging
import sys

from shopbot.config.settings import settings
from shopbot.container import configure_container, container
from shopbot.core.models.chat import ConversationContext
from shopbot.core.protocols.catalog import ProductCatalogProtocol
from shopbot.core.protocols.store import ConversationStoreProtocol
from shopbot.core.services.chatbot_service import ChatbotService
from shopbot.core.services.handler_registry import IntentHandlerRegistry
from shopbot.core.services.intent_classifier import IntentClassifier

logger = logging.getLogger(__name__)

_EXIT_WORDS = {"exit", "quit", "bye"}


def _build_chatbot(context: ConversationContext | None = None) -> ChatbotService:
    if context is None:
        return container.resolve(ChatbotService)
    return ChatbotService(
        classifier=container.resolve(IntentClassifier),
        registry=container.resolve(IntentHandlerRegistry),
        context=context,
        catalog=container.resolve(ProductCatalogProtocol),
    )


def cmd_chat(session_id: str | None = None):
    """Chat command - interactive conversation."""
    store = container.resolve(ConversationStoreProtocol)

    context = store.load(session_id) if session_id else None
    if context is not None:
        logger.info(f"Restored session {session_id} ({context.message_count} messages)")
    chatbot = _build_chatbot(context)

    print("Shop assistant ready. Type 'exit' to leave.")
    while True:
        try:
            query = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if query.strip().lower() in _EXIT_WORDS:
            break

        print(chatbot.respond(query))
        print()

        if session_id:
            store.save(session_id, chatbot.context)


def cmd_ask(query: str):
    """Ask command - one reply, no session."""
    chatbot = _build_chatbot()
    print(chatbot.respond(query))


def cmd_classify(query: str):
    """Classify command - print the detected intent."""
    classifier = container.resolve(IntentClassifier)
    print(classifier.classify(query).value)


def main():
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    if len(sys.argv) < 2:
        print("Usage: shopbot <command> [args]")
        print("Commands: chat [--session ID], ask <query>, classify <query>")
        sys.exit(1)

    configure_container(settings)

    command = sys.argv[1]
    args = sys.argv[2:]

    if command == "chat":
        session_id = None
        if len(args) >= 2 and args[0] == "--session":
            session_id = args[1]
        cmd_chat(session_id)
    elif command == "ask" and args:
        cmd_ask(" ".join(args))
    elif command == "classify" and args:
        cmd_classify(" ".join(args))
    else:
        print(f"Unknown command: {' '.join(sys.argv[1:])}")
        sys.exit(1)


if __name__ == "__main__":
    main()
