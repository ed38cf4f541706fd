"""Rules over client accounts."""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any

from custom_specifications import BaseSpecification

from ..clock import whole_days
from ..models import Client, ClientTier
from .common import ClockedSpecification, require_non_negative, require_value

if TYPE_CHECKING:
    from ..clock import Clock

LONG_TERM_CONTRACT = timedelta(days=365)


class IsActiveSpecification(BaseSpecification[Client]):
    def is_satisfied_by(self, candidate: Client) -> bool:
        return candidate.is_active


class IsTierSpecification(BaseSpecification[Client]):
    def __init__(self, tier: ClientTier) -> None:
        self.tier = require_value(tier, "tier")

    def is_satisfied_by(self, candidate: Client) -> bool:
        return candidate.tier == self.tier

    def to_dict(self) -> dict[str, Any]:
        return {"op": "is_tier", "tier": self.tier.value}


class HasExpiredContractSpecification(ClockedSpecification[Client]):
    def is_satisfied_by(self, candidate: Client) -> bool:
        end = candidate.contract_end_date
        return end is not None and end < self.now()


class ContractExpiringSpecification(ClockedSpecification[Client]):
    """Contract ends within the next *days* whole days (today included)."""

    def __init__(self, days: int = 30, *, clock: Clock | None = None) -> None:
        super().__init__(clock=clock)
        self.days = require_non_negative(days, "days")

    def is_satisfied_by(self, candidate: Client) -> bool:
        if candidate.contract_end_date is None:
            return False
        remaining = whole_days(candidate.contract_end_date - self.now())
        return 0 <= remaining <= self.days

    def to_dict(self) -> dict[str, Any]:
        return {"op": "contract_expiring", "days": self.days}


class IsPremiumOrEnterpriseSpecification(BaseSpecification[Client]):
    def is_satisfied_by(self, candidate: Client) -> bool:
        return candidate.tier in (ClientTier.PREMIUM, ClientTier.ENTERPRISE)


class HasLongTermContractSpecification(BaseSpecification[Client]):
    """Contract with a fixed end date lasting at least a year."""

    def is_satisfied_by(self, candidate: Client) -> bool:
        if candidate.contract_end_date is None:
            return False
        duration = candidate.contract_end_date - candidate.contract_start_date
        return duration >= LONG_TERM_CONTRACT
