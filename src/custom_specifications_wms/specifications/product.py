"""Rules over stored products."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any

from custom_specifications import BaseSpecification

from ..clock import whole_days
from ..models import Product, ProductCategory
from .common import (
    BelongsToClientSpecification,
    ClockedSpecification,
    as_decimal,
    require_non_negative,
    require_value,
)

if TYPE_CHECKING:
    from ..clock import Clock

__all__ = [
    "BelongsToClientSpecification",
    "IsHazmatSpecification",
    "IsFragileSpecification",
    "RequiresRefrigerationSpecification",
    "IsPerishableSpecification",
    "IsExpiredSpecification",
    "IsExpiringSpecification",
    "IsCategorySpecification",
    "ExceedsWeightSpecification",
    "IsHighValueSpecification",
    "RequiresSpecialHandlingSpecification",
    "IsOversizedSpecification",
]


class IsHazmatSpecification(BaseSpecification[Product]):
    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.is_hazmat


class IsFragileSpecification(BaseSpecification[Product]):
    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.is_fragile


class RequiresRefrigerationSpecification(BaseSpecification[Product]):
    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.requires_refrigeration


class IsPerishableSpecification(BaseSpecification[Product]):
    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.expiration_date is not None


class IsExpiredSpecification(ClockedSpecification[Product]):
    def is_satisfied_by(self, candidate: Product) -> bool:
        expires = candidate.expiration_date
        return expires is not None and expires < self.now()


class IsExpiringSpecification(ClockedSpecification[Product]):
    """Expires within the next *days* whole days (today included)."""

    def __init__(self, days: int = 30, *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self.days = require_non_negative(days, "days")

    def is_satisfied_by(self, candidate: Product) -> bool:
        if candidate.expiration_date is None:
            return False
        remaining = whole_days(candidate.expiration_date - self.now())
        return 0 <= remaining <= self.days

    def to_dict(self) -> dict[str, Any]:
        return {"op": "expiring", "days": self.days}


class IsCategorySpecification(BaseSpecification[Product]):
    def __init__(self, category: ProductCategory) -> None:
        self.category = require_value(category, "category")

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.category == self.category

    def to_dict(self) -> dict[str, Any]:
        return {"op": "is_category", "category": self.category.value}


class ExceedsWeightSpecification(BaseSpecification[Product]):
    def __init__(self, threshold: Decimal | float) -> None:
        self.threshold = require_non_negative(as_decimal(threshold), "threshold")

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.weight > self.threshold

    def to_dict(self) -> dict[str, Any]:
        return {"op": "exceeds_weight", "threshold": str(self.threshold)}


class IsHighValueSpecification(BaseSpecification[Product]):
    """Unit cost strictly above *threshold*."""

    def __init__(self, threshold: Decimal | float = Decimal(1000)) -> None:
        self.threshold = require_non_negative(as_decimal(threshold), "threshold")

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.unit_cost > self.threshold

    def to_dict(self) -> dict[str, Any]:
        return {"op": "high_value", "threshold": str(self.threshold)}


class RequiresSpecialHandlingSpecification(BaseSpecification[Product]):
    """Hazardous, fragile or refrigerated goods."""

    def is_satisfied_by(self, candidate: Product) -> bool:
        return (
            candidate.is_hazmat
            or candidate.is_fragile
            or candidate.requires_refrigeration
        )


class IsOversizedSpecification(BaseSpecification[Product]):
    """Package volume, in cubic inches, strictly above *threshold*."""

    def __init__(self, threshold: Decimal | float = Decimal(10000)) -> None:
        self.threshold = require_non_negative(as_decimal(threshold), "threshold")

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.dimensions.volume > self.threshold

    def to_dict(self) -> dict[str, Any]:
        return {"op": "oversized", "threshold": str(self.threshold)}
