"""Pydantic schemas for Brocade catalog records."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gtincatalog.services.gtin_impl import GTIN


class Product(BaseModel):
    """A single catalog record as returned by the Brocade products endpoint."""

    model_config = ConfigDict(extra="ignore")

    gtin14: str = Field(..., description="Canonical 14-digit GTIN of the product")
    brand_name: Optional[str] = Field(None, description="Brand, when the catalog knows it")
    name: Optional[str] = Field(None, description="Product name, when the catalog knows it")

    def to_gtin(self) -> GTIN:
        """Parses `gtin14`. Raises GTINParseError if the catalog sent a malformed code."""
        return GTIN.parse(self.gtin14)


# Products in server response order.
ProductList = List[Product]
