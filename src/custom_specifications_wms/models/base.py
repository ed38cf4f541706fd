"""Immutable base record for warehouse data."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class WarehouseRecord(BaseModel):
    """Base class for warehouse records.

    Records are immutable and validated at construction; an invalid record
    raises ``pydantic.ValidationError``.  Equality is structural.
    Naive timestamps are read as UTC.
    """

    model_config = ConfigDict(frozen=True)
