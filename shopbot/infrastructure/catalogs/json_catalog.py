import json
import logging
from pathlib import Path
from typing import Optional

from shopbot.core.models.product import Product

logger = logging.getLogger(__name__)


class JsonProductCatalog:
    """Product catalog backed by a JSON file.

    The file holds either a list of product records or an object with a
    ``products`` list. Records use the storefront document schema.
    """

    def __init__(self, path: str = "products.json"):
        self._path = Path(path)

    def list_products(self) -> list[Product]:
        if not self._path.exists():
            logger.warning(f"Product file {self._path} not found")
            return []

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load products from {self._path}: {e}")
            return []

        records = data.get("products", []) if isinstance(data, dict) else data
        products = [Product.from_map(r) for r in records if isinstance(r, dict)]
        logger.info(f"Loaded {len(products)} products from {self._path}")
        return products

    def get_product(self, product_id: str) -> Optional[Product]:
        for product in self.list_products():
            if product.id == product_id:
                return product
        return None
