import logging
from typing import Optional

import httpx

from shopbot.core.models.product import Product

logger = logging.getLogger(__name__)


class HttpProductCatalog:
    """Product catalog served over HTTP.

    Expects ``GET /products`` to return a list of records with an ``id``
    and ``GET /products/{id}`` to return one record.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize HTTP catalog.

        Args:
            base_url: Catalog API root.
            timeout: Request timeout in seconds.
            transport: Custom transport (for testing).
        """
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"), timeout=timeout, transport=transport
        )

    def list_products(self) -> list[Product]:
        try:
            resp = self._client.get("/products")
            resp.raise_for_status()
            records = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Product catalog request failed: {e}")
            return []

        if isinstance(records, dict):
            records = records.get("products", [])

        return [Product.from_map(r) for r in records if isinstance(r, dict)]

    def get_product(self, product_id: str) -> Optional[Product]:
        try:
            resp = self._client.get(f"/products/{product_id}")
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            record = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Product {product_id} request failed: {e}")
            return None

        if not isinstance(record, dict):
            return None
        return Product.from_map(record, product_id)

    def close(self) -> None:
        self._client.close()
