"""Brocade product catalog client package."""

from .client import BASE_URL, BrocadeClient, BrocadeConfig
from .exceptions import BrocadeError
from .schemas import Product, ProductList

__all__ = [
    "BASE_URL",
    "BrocadeClient",
    "BrocadeConfig",
    "BrocadeError",
    "Product",
    "ProductList",
]
