from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import Field

from .base import NonBlankStr, UtcDatetime, WarehouseRecord


class ProductCategory(str, Enum):
    AUTOMOTIVE = "automotive"
    BEAUTY = "beauty"
    ELECTRONICS = "electronics"
    FOOD = "food"
    APPAREL = "apparel"
    INDUSTRIAL = "industrial"
    GENERAL = "general"


class Dimensions(WarehouseRecord):
    """Package dimensions in inches."""

    length: Decimal = Field(gt=0)
    width: Decimal = Field(gt=0)
    height: Decimal = Field(gt=0)

    @property
    def volume(self) -> Decimal:
        return self.length * self.width * self.height


class Product(WarehouseRecord):
    """A SKU stored in the warehouse on behalf of a client."""

    sku: NonBlankStr
    client_id: NonBlankStr
    name: NonBlankStr
    description: str = ""
    category: ProductCategory
    weight: Decimal = Field(gt=0)
    dimensions: Dimensions
    is_fragile: bool = False
    is_hazmat: bool = False
    requires_refrigeration: bool = False
    unit_cost: Decimal = Field(default=Decimal(0), ge=0)
    expiration_date: UtcDatetime | None = None
