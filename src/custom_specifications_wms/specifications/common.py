"""Building blocks shared by the warehouse rules."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, TypeVar

from custom_specifications import BaseSpecification, ValidationError

from ..clock import utc_now

if TYPE_CHECKING:
    from datetime import datetime
    from enum import Enum

    from ..clock import Clock

T = TypeVar("T")


def require_text(value: str | None, path: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"'{path}' must not be blank", path=path)
    return value


def require_value(value: Any, path: str) -> Any:
    if value is None:
        raise ValidationError(f"'{path}' must not be None", path=path)
    return value


def require_non_negative(value: Any, path: str) -> Any:
    if value < 0:
        raise ValidationError(f"'{path}' must be non-negative, got {value}", path=path)
    return value


def require_positive(value: Any, path: str) -> Any:
    if value <= 0:
        raise ValidationError(f"'{path}' must be positive, got {value}", path=path)
    return value


class ClockedSpecification(BaseSpecification[T]):
    """A rule evaluated against a reference time.

    *clock* returns the current aware UTC time; it is called once per
    evaluation.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else utc_now

    def now(self) -> datetime:
        return self._clock()


class BelongsToClientSpecification(BaseSpecification[Any]):
    """Satisfied by any record whose ``client_id`` equals *client_id*."""

    def __init__(self, client_id: str) -> None:
        self.client_id = require_text(client_id, "client_id")

    def is_satisfied_by(self, candidate: Any) -> bool:
        return bool(candidate.client_id == self.client_id)

    def to_dict(self) -> dict[str, Any]:
        return {"op": "belongs_to_client", "client_id": self.client_id}


class HasStatusSpecification(BaseSpecification[Any]):
    """Satisfied by any record whose ``status`` equals *status*."""

    def __init__(self, status: Enum) -> None:
        self.status = require_value(status, "status")

    def is_satisfied_by(self, candidate: Any) -> bool:
        return bool(candidate.status == self.status)

    def to_dict(self) -> dict[str, Any]:
        return {"op": "has_status", "status": self.status.value}


def as_decimal(value: Decimal | float | int) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))
