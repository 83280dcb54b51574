"""Product catalog implementations."""
from .http_catalog import HttpProductCatalog
from .json_catalog import JsonProductCatalog

__all__ = ["HttpProductCatalog", "JsonProductCatalog"]
