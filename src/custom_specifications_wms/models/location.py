from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import Field

from .base import NonBlankStr, WarehouseRecord


class LocationType(str, Enum):
    RECEIVING = "receiving"
    STORAGE = "storage"
    PICKING = "picking"
    PACKING = "packing"
    SHIPPING = "shipping"
    QUARANTINE = "quarantine"
    RETURNS = "returns"


class Location(WarehouseRecord):
    """A storage slot, addressed by zone / aisle / bay / level."""

    id: NonBlankStr
    zone: NonBlankStr
    aisle: NonBlankStr
    bay: NonBlankStr
    level: NonBlankStr
    type: LocationType
    is_temperature_controlled: bool = False
    max_weight: Decimal = Field(default=Decimal(5000), gt=0)
    is_hazmat_approved: bool = False
