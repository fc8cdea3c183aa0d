"""GTIN value type package."""

from .exceptions import GTINClassificationError, GTINError, GTINInvariantError, GTINParseError
from .gtin import GTIN, GTINType

__all__ = [
    "GTIN",
    "GTINType",
    "GTINError",
    "GTINParseError",
    "GTINClassificationError",
    "GTINInvariantError",
]
