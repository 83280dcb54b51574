"""Product catalog protocol for dependency injection."""
from typing import Optional, Protocol, runtime_checkable

from ..models.product import Product


@runtime_checkable
class ProductCatalogProtocol(Protocol):
    """Protocol for the product persistence layer."""

    def list_products(self) -> list[Product]:
        """Get a snapshot of all products.

        Returns:
            Products in catalog order.
        """
        ...

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a single product.

        Args:
            product_id: Product id.

        Returns:
            The product, or None if it does not exist.
        """
        ...
