"""Rules over outbound shipments."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from custom_specifications import BaseSpecification, ValidationError

from ..clock import whole_days
from ..models import Shipment, ShipmentStatus
from ..models.base import as_utc
from .common import (
    BelongsToClientSpecification,
    ClockedSpecification,
    HasStatusSpecification,
    as_decimal,
    require_positive,
    require_text,
    require_value,
)

if TYPE_CHECKING:
    from datetime import datetime

__all__ = [
    "BelongsToClientSpecification",
    "HasStatusSpecification",
    "IsCarrierSpecification",
    "IsDelayedSpecification",
    "IsInTransitSpecification",
    "IsDeliveredSpecification",
    "IsShippedInDateRangeSpecification",
    "HasLongDeliveryTimeSpecification",
    "IsHeavyShipmentSpecification",
    "IsReturnedSpecification",
    "IsShippedTodaySpecification",
    "HasDeliveryIssuesSpecification",
]

DELAYED_STATUSES = frozenset({ShipmentStatus.DELAYED, ShipmentStatus.EXCEPTION})
MOVING_STATUSES = frozenset(
    {ShipmentStatus.IN_TRANSIT, ShipmentStatus.OUT_FOR_DELIVERY}
)
ISSUE_STATUSES = DELAYED_STATUSES | {ShipmentStatus.RETURNED}


class IsCarrierSpecification(BaseSpecification[Shipment]):
    """Carrier name matches, ignoring case."""

    def __init__(self, carrier: str) -> None:
        self.carrier = require_text(carrier, "carrier")

    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.carrier.casefold() == self.carrier.casefold()

    def to_dict(self) -> dict[str, Any]:
        return {"op": "is_carrier", "carrier": self.carrier}


class IsDelayedSpecification(BaseSpecification[Shipment]):
    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.status in DELAYED_STATUSES


class IsInTransitSpecification(BaseSpecification[Shipment]):
    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.status in MOVING_STATUSES


class IsDeliveredSpecification(BaseSpecification[Shipment]):
    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return (
            candidate.status == ShipmentStatus.DELIVERED
            and candidate.delivery_date is not None
        )


class IsShippedInDateRangeSpecification(BaseSpecification[Shipment]):
    """Ship date within ``[start, end]``, both bounds inclusive."""

    def __init__(self, start: datetime, end: datetime) -> None:
        start = as_utc(require_value(start, "start"))
        end = as_utc(require_value(end, "end"))
        if end < start:
            raise ValidationError("'end' must be on or after 'start'", path="end")
        self.start = start
        self.end = end

    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return self.start <= candidate.ship_date <= self.end

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "shipped_between",
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
        }


class HasLongDeliveryTimeSpecification(BaseSpecification[Shipment]):
    """Delivered more than *expected_days* whole days after shipping."""

    def __init__(self, expected_days: int = 7) -> None:
        self.expected_days = require_positive(expected_days, "expected_days")

    def is_satisfied_by(self, candidate: Shipment) -> bool:
        if candidate.delivery_date is None:
            return False
        elapsed = candidate.delivery_date - candidate.ship_date
        return whole_days(elapsed) > self.expected_days

    def to_dict(self) -> dict[str, Any]:
        return {"op": "long_delivery_time", "expected_days": self.expected_days}


class IsHeavyShipmentSpecification(BaseSpecification[Shipment]):
    def __init__(self, threshold: Decimal | float = Decimal(150)) -> None:
        self.threshold = require_positive(as_decimal(threshold), "threshold")

    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.weight > self.threshold

    def to_dict(self) -> dict[str, Any]:
        return {"op": "heavy_shipment", "threshold": str(self.threshold)}


class IsReturnedSpecification(BaseSpecification[Shipment]):
    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.status == ShipmentStatus.RETURNED


class IsShippedTodaySpecification(ClockedSpecification[Shipment]):
    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.ship_date.date() == self.now().date()


class HasDeliveryIssuesSpecification(BaseSpecification[Shipment]):
    """Delayed, held up by a carrier exception, or returned."""

    def is_satisfied_by(self, candidate: Shipment) -> bool:
        return candidate.status in ISSUE_STATUSES
