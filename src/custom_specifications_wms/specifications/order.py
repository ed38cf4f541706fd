"""Rules over customer orders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from custom_specifications import BaseSpecification

from ..clock import total_hours
from ..models import Order, OrderPriority, OrderStatus, ShippingMethod
from .common import (
    BelongsToClientSpecification,
    ClockedSpecification,
    HasStatusSpecification,
    require_non_negative,
    require_positive,
    require_text,
    require_value,
)

if TYPE_CHECKING:
    from ..clock import Clock

__all__ = [
    "BelongsToClientSpecification",
    "HasStatusSpecification",
    "HasPrioritySpecification",
    "IsUrgentSpecification",
    "IsOverdueSpecification",
    "IsDueSoonSpecification",
    "IsInternationalSpecification",
    "HasShippingMethodSpecification",
    "IsReadyToShipSpecification",
    "IsCompletelyPickedSpecification",
    "HasPartialPicksSpecification",
    "IsLargeOrderSpecification",
    "RequiresExpeditedProcessingSpecification",
    "IsPlacedTodaySpecification",
]

URGENT_PRIORITIES = frozenset({OrderPriority.RUSH, OrderPriority.SAME_DAY})
EXPRESS_METHODS = frozenset({ShippingMethod.OVERNIGHT, ShippingMethod.TWO_DAY_AIR})
CLOSED_STATUSES = frozenset(
    {OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED}
)


class HasPrioritySpecification(BaseSpecification[Order]):
    def __init__(self, priority: OrderPriority) -> None:
        self.priority = require_value(priority, "priority")

    def is_satisfied_by(self, candidate: Order) -> bool:
        return candidate.priority == self.priority

    def to_dict(self) -> dict[str, Any]:
        return {"op": "has_priority", "priority": self.priority.value}


class IsUrgentSpecification(BaseSpecification[Order]):
    def is_satisfied_by(self, candidate: Order) -> bool:
        return candidate.priority in URGENT_PRIORITIES


class IsOverdueSpecification(ClockedSpecification[Order]):
    """Past its required date and not yet shipped, delivered or cancelled."""

    def is_satisfied_by(self, candidate: Order) -> bool:
        return (
            candidate.required_date < self.now()
            and candidate.status not in CLOSED_STATUSES
        )


class IsDueSoonSpecification(ClockedSpecification[Order]):
    """Required date falls within the next *hours* hours."""

    def __init__(self, hours: int = 24, *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self.hours = require_non_negative(hours, "hours")

    def is_satisfied_by(self, candidate: Order) -> bool:
        remaining = total_hours(candidate.required_date - self.now())
        return 0 < remaining <= self.hours

    def to_dict(self) -> dict[str, Any]:
        return {"op": "due_soon", "hours": self.hours}


class IsInternationalSpecification(BaseSpecification[Order]):
    """Destination differs from *domestic_country*, ignoring case."""

    def __init__(self, domestic_country: str = "USA") -> None:
        self.domestic_country = require_text(domestic_country, "domestic_country")

    def is_satisfied_by(self, candidate: Order) -> bool:
        return (
            candidate.destination_country.casefold()
            != self.domestic_country.casefold()
        )

    def to_dict(self) -> dict[str, Any]:
        return {"op": "international", "domestic_country": self.domestic_country}


class HasShippingMethodSpecification(BaseSpecification[Order]):
    def __init__(self, shipping_method: ShippingMethod) -> None:
        self.shipping_method = require_value(shipping_method, "shipping_method")

    def is_satisfied_by(self, candidate: Order) -> bool:
        return candidate.shipping_method == self.shipping_method

    def to_dict(self) -> dict[str, Any]:
        return {"op": "has_shipping_method", "method": self.shipping_method.value}


class IsReadyToShipSpecification(BaseSpecification[Order]):
    def is_satisfied_by(self, candidate: Order) -> bool:
        return candidate.status == OrderStatus.PACKED


class IsCompletelyPickedSpecification(BaseSpecification[Order]):
    def is_satisfied_by(self, candidate: Order) -> bool:
        return all(line.is_fully_picked for line in candidate.lines)


class HasPartialPicksSpecification(BaseSpecification[Order]):
    def is_satisfied_by(self, candidate: Order) -> bool:
        return any(line.is_partially_picked for line in candidate.lines)


class IsLargeOrderSpecification(BaseSpecification[Order]):
    """More than *threshold* order lines."""

    def __init__(self, threshold: int = 10) -> None:
        self.threshold = require_positive(threshold, "threshold")

    def is_satisfied_by(self, candidate: Order) -> bool:
        return len(candidate.lines) > self.threshold

    def to_dict(self) -> dict[str, Any]:
        return {"op": "large_order", "threshold": self.threshold}


class RequiresExpeditedProcessingSpecification(ClockedSpecification[Order]):
    """Urgent priority, an express shipping method, or due within the window.

    The window is *window_hours* hours from now; an order already past its
    required date is inside it.
    """

    def __init__(self, window_hours: int = 8, *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self.window_hours = require_non_negative(window_hours, "window_hours")

    def is_satisfied_by(self, candidate: Order) -> bool:
        if candidate.priority in URGENT_PRIORITIES:
            return True
        if candidate.shipping_method in EXPRESS_METHODS:
            return True
        return total_hours(candidate.required_date - self.now()) < self.window_hours

    def to_dict(self) -> dict[str, Any]:
        return {"op": "requires_expedited", "window_hours": self.window_hours}


class IsPlacedTodaySpecification(ClockedSpecification[Order]):
    """Order date falls on the current UTC calendar day."""

    def is_satisfied_by(self, candidate: Order) -> bool:
        return candidate.order_date.date() == self.now().date()
