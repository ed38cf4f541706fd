"""Rules over inventory stock records."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from custom_specifications import BaseSpecification, ValidationError

from ..clock import whole_days
from ..models import Inventory, InventoryStatus
from .common import (
    BelongsToClientSpecification,
    ClockedSpecification,
    HasStatusSpecification,
    as_decimal,
    require_non_negative,
    require_text,
)

if TYPE_CHECKING:
    from ..clock import Clock

__all__ = [
    "BelongsToClientSpecification",
    "HasStatusSpecification",
    "IsBelowReorderPointSpecification",
    "IsOutOfStockSpecification",
    "IsNearCapacitySpecification",
    "IsInQuarantineSpecification",
    "CanReleaseFromQuarantineSpecification",
    "NeedsCycleCountSpecification",
    "IsAvailableSpecification",
    "IsAtLocationSpecification",
    "RequiresImmediateAttentionSpecification",
]


class IsBelowReorderPointSpecification(BaseSpecification[Inventory]):
    """Available stock at or below its reorder point."""

    def is_satisfied_by(self, candidate: Inventory) -> bool:
        return (
            candidate.quantity <= candidate.reorder_point
            and candidate.status == InventoryStatus.AVAILABLE
        )


class IsOutOfStockSpecification(BaseSpecification[Inventory]):
    def is_satisfied_by(self, candidate: Inventory) -> bool:
        return candidate.quantity == 0


class IsNearCapacitySpecification(BaseSpecification[Inventory]):
    """Quantity is at least *threshold* (a fraction, 0 to 1) of the maximum.

    Records with a zero maximum never qualify.
    """

    def __init__(self, threshold: Decimal | float = Decimal("0.9")) -> None:
        threshold = as_decimal(threshold)
        if not 0 <= threshold <= 1:
            raise ValidationError(
                f"'threshold' must be between 0 and 1, got {threshold}",
                path="threshold",
            )
        self.threshold = threshold

    def is_satisfied_by(self, candidate: Inventory) -> bool:
        if candidate.max_quantity == 0:
            return False
        utilization = Decimal(candidate.quantity) / Decimal(candidate.max_quantity)
        return utilization >= self.threshold

    def to_dict(self) -> dict[str, Any]:
        return {"op": "near_capacity", "threshold": str(self.threshold)}


class IsInQuarantineSpecification(ClockedSpecification[Inventory]):
    def is_satisfied_by(self, candidate: Inventory) -> bool:
        until = candidate.quarantine_until
        return (
            candidate.status == InventoryStatus.QUARANTINE
            and until is not None
            and until > self.now()
        )


class CanReleaseFromQuarantineSpecification(ClockedSpecification[Inventory]):
    def is_satisfied_by(self, candidate: Inventory) -> bool:
        until = candidate.quarantine_until
        return (
            candidate.status == InventoryStatus.QUARANTINE
            and until is not None
            and until <= self.now()
        )


class NeedsCycleCountSpecification(ClockedSpecification[Inventory]):
    """Last counted more than *days* whole days ago."""

    def __init__(self, days: int = 30, *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self.days = require_non_negative(days, "days")

    def is_satisfied_by(self, candidate: Inventory) -> bool:
        return whole_days(self.now() - candidate.last_count_date) > self.days

    def to_dict(self) -> dict[str, Any]:
        return {"op": "needs_cycle_count", "days": self.days}


class IsAvailableSpecification(BaseSpecification[Inventory]):
    def is_satisfied_by(self, candidate: Inventory) -> bool:
        return candidate.status == InventoryStatus.AVAILABLE and candidate.quantity > 0


class IsAtLocationSpecification(BaseSpecification[Inventory]):
    def __init__(self, location_id: str) -> None:
        self.location_id = require_text(location_id, "location_id")

    def is_satisfied_by(self, candidate: Inventory) -> bool:
        return candidate.location_id == self.location_id

    def to_dict(self) -> dict[str, Any]:
        return {"op": "at_location", "location_id": self.location_id}


class RequiresImmediateAttentionSpecification(BaseSpecification[Inventory]):
    """Damaged or expired stock, or an available slot that has run dry."""

    def is_satisfied_by(self, candidate: Inventory) -> bool:
        if candidate.status in (InventoryStatus.DAMAGED, InventoryStatus.EXPIRED):
            return True
        return candidate.quantity == 0 and candidate.status == InventoryStatus.AVAILABLE
