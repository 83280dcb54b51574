"""Product domain models."""
import math
from dataclasses import dataclass
from typing import Any


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return 0
    return 0


@dataclass(frozen=True)
class Product:
    """Catalog product, read-only for the assistant."""
    id: str
    name: str
    description: str
    price: float
    stock: int
    category: str = "General"
    image_url: str = ""

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    @classmethod
    def from_map(cls, data: dict, product_id: str | None = None) -> "Product":
        """Build a product from a stored document.

        Accepts the storefront schema (``productName``, ``productPrice``...)
        as well as plain keys. Malformed numbers become 0, text fields are
        converted to strings.

        Args:
            data: Raw key-value pairs.
            product_id: Document id; defaults to ``data["id"]``.

        Returns:
            Parsed product.
        """
        if product_id is None:
            product_id = str(data.get("id", ""))

        price = _to_float(data.get("productPrice", data.get("price")))
        stock = _to_int(data.get("stock"))

        return cls(
            id=product_id,
            name=str(data.get("productName") or data.get("name") or ""),
            description=str(data.get("productDescription") or data.get("description") or ""),
            price=max(price, 0.0),
            stock=max(stock, 0),
            category=str(data.get("category") or "General"),
            image_url=str(data.get("imageUrl") or ""),
        )


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds. ``max_price`` is infinite when unbounded."""
    min_price: float = 0.0
    max_price: float = math.inf

    @property
    def is_bounded(self) -> bool:
        return math.isfinite(self.max_price)

    def contains(self, price: float) -> bool:
        return self.min_price <= price <= self.max_price
