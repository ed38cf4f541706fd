"""Demo configuration."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .clock import fixed_clock, utc_now


class WarehouseSettings(BaseModel):
    """Thresholds used by the warehouse scenarios.

    ``now`` pins the reference clock; leave it unset to use the current
    UTC time.
    """

    model_config = ConfigDict(frozen=True)

    domestic_country: str = "USA"
    expedite_window_hours: int = Field(default=8, ge=0)
    cycle_count_days: int = Field(default=30, ge=0)
    expiring_days: int = Field(default=30, ge=0)
    expiring_soon_days: int = Field(default=7, ge=0)
    cycle_count_top: int = Field(default=10, gt=0)
    now: datetime | None = None

    @field_validator("domestic_country")
    @classmethod
    def _country_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("domestic_country must not be blank")
        return value.strip()

    def clock(self) -> datetime:
        if self.now is None:
            return utc_now()
        return fixed_clock(self.now)()
