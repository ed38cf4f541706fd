from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import Field, model_validator

from .base import NonBlankStr, UtcDatetime, WarehouseRecord


class ShipmentStatus(str, Enum):
    CREATED = "created"
    PICKED_UP = "picked_up"
    IN_TRANSIT = "in_transit"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    DELAYED = "delayed"
    EXCEPTION = "exception"
    RETURNED = "returned"


class Shipment(WarehouseRecord):
    """An outbound shipment handed to a carrier."""

    id: NonBlankStr
    order_id: NonBlankStr
    client_id: NonBlankStr
    ship_date: UtcDatetime
    carrier: NonBlankStr
    tracking_number: NonBlankStr
    weight: Decimal = Field(gt=0)
    status: ShipmentStatus = ShipmentStatus.CREATED
    delivery_date: UtcDatetime | None = None

    @model_validator(mode="after")
    def _delivered_after_shipping(self) -> Shipment:
        if self.delivery_date is not None and self.delivery_date < self.ship_date:
            raise ValueError("Delivery date cannot be before ship date")
        return self
