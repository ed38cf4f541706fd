from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from .base import NonBlankStr, UtcDatetime, WarehouseRecord


class InventoryStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    QUARANTINE = "quarantine"
    DAMAGED = "damaged"
    EXPIRED = "expired"
    IN_TRANSIT = "in_transit"


class Inventory(WarehouseRecord):
    """Stock of one SKU held at one storage location."""

    id: NonBlankStr
    sku: NonBlankStr
    client_id: NonBlankStr
    location_id: NonBlankStr
    quantity: int = Field(ge=0)
    reorder_point: int = Field(ge=0)
    max_quantity: int
    last_count_date: UtcDatetime
    status: InventoryStatus = InventoryStatus.AVAILABLE
    quarantine_until: UtcDatetime | None = None

    @model_validator(mode="after")
    def _capacity(self) -> Inventory:
        if self.max_quantity < self.reorder_point:
            raise ValueError(
                "Max quantity must be greater than or equal to reorder point"
            )
        return self
