import logging
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        if singleton:
            self._singleton_flags.add(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


container = Container()


def configure_container(settings: Settings) -> Container:
    """Configure container with all dependencies.

    ``ChatbotService`` is registered per resolve: every conversation gets
    its own context.

    Args:
        settings: Application settings.

    Returns:
        Configured container.
    """
    from .core.protocols.catalog import ProductCatalogProtocol
    from .core.protocols.store import ConversationStoreProtocol
    from .core.services.chatbot_service import ChatbotService
    from .core.services.handler_registry import IntentHandlerRegistry
    from .core.services.intent_catalog import load_intent_patterns
    from .core.services.intent_classifier import IntentClassifier
    from .infrastructure.catalogs.http_catalog import HttpProductCatalog
    from .infrastructure.catalogs.json_catalog import JsonProductCatalog
    from .infrastructure.stores.json_store import JsonConversationStore

    if settings.catalog_base_url:
        container.register(
            ProductCatalogProtocol,
            lambda: HttpProductCatalog(
                base_url=settings.catalog_base_url,
                timeout=settings.catalog_timeout,
            ),
            singleton=True,
        )
    else:
        container.register(
            ProductCatalogProtocol,
            lambda: JsonProductCatalog(settings.products_path),
            singleton=True,
        )

    container.register(
        ConversationStoreProtocol,
        lambda: JsonConversationStore(
            directory=settings.sessions_path,
            max_history_length=settings.chat_max_history_length,
        ),
        singleton=True,
    )

    container.register(
        IntentClassifier,
        lambda: IntentClassifier(
            patterns=load_intent_patterns(settings.intent_patterns_path),
            debug=settings.classifier_debug,
        ),
        singleton=True,
    )

    container.register(IntentHandlerRegistry, IntentHandlerRegistry, singleton=True)

    container.register(
        ChatbotService,
        lambda: ChatbotService(
            classifier=container.resolve(IntentClassifier),
            registry=container.resolve(IntentHandlerRegistry),
            catalog=container.resolve(ProductCatalogProtocol),
            max_history_length=settings.chat_max_history_length,
        ),
    )

    logger.info("Container configured")
    return container
