from __future__ import annotations

from enum import Enum

from pydantic import Field, model_validator

from .base import NonBlankStr, UtcDatetime, WarehouseRecord


class OrderPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    RUSH = "rush"
    SAME_DAY = "same_day"


class ShippingMethod(str, Enum):
    GROUND = "ground"
    TWO_DAY_AIR = "two_day_air"
    OVERNIGHT = "overnight"
    INTERNATIONAL = "international"
    FREIGHT = "freight"


class OrderStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    PICKED = "picked"
    PACKED = "packed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    ON_HOLD = "on_hold"


class OrderLine(WarehouseRecord):
    sku: NonBlankStr
    quantity_ordered: int = Field(gt=0)
    quantity_picked: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _picked_within_ordered(self) -> OrderLine:
        if self.quantity_picked > self.quantity_ordered:
            raise ValueError("Quantity picked cannot exceed quantity ordered")
        return self

    @property
    def is_fully_picked(self) -> bool:
        return self.quantity_picked >= self.quantity_ordered

    @property
    def is_partially_picked(self) -> bool:
        return 0 < self.quantity_picked < self.quantity_ordered


class Order(WarehouseRecord):
    """A customer order to be fulfilled from the warehouse."""

    id: NonBlankStr
    client_id: NonBlankStr
    order_date: UtcDatetime
    required_date: UtcDatetime
    priority: OrderPriority
    shipping_method: ShippingMethod
    destination_country: NonBlankStr
    status: OrderStatus
    lines: tuple[OrderLine, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _required_after_order(self) -> Order:
        if self.required_date < self.order_date:
            raise ValueError("Required date must be on or after order date")
        return self
