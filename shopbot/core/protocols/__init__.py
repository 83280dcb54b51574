"""Protocol interfaces for dependency injection."""
from .catalog import ProductCatalogProtocol
from .store import ConversationStoreProtocol

__all__ = [
    "ProductCatalogProtocol",
    "ConversationStoreProtocol",
]
