from __future__ import annotations

from enum import Enum

from pydantic import model_validator

from .base import NonBlankStr, UtcDatetime, WarehouseRecord


class ClientTier(str, Enum):
    STANDARD = "standard"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class Client(WarehouseRecord):
    """An online retailer using the warehouse's fulfilment services."""

    id: NonBlankStr
    name: NonBlankStr
    contact_email: NonBlankStr
    tier: ClientTier
    contract_start_date: UtcDatetime
    contract_end_date: UtcDatetime | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def _contract_dates(self) -> Client:
        if (
            self.contract_end_date is not None
            and self.contract_end_date <= self.contract_start_date
        ):
            raise ValueError("Contract end date must be after start date")
        return self
