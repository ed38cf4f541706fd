"""Fixtures for the warehouse rules: a pinned clock and record factories."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any

import pytest

from custom_specifications_wms import WarehouseSettings, build_snapshot, fixed_clock
from custom_specifications_wms.models import (
    Client,
    ClientTier,
    Dimensions,
    Inventory,
    Order,
    OrderLine,
    OrderPriority,
    OrderStatus,
    Product,
    ProductCategory,
    Shipment,
    ShipmentStatus,
    ShippingMethod,
)

NOW = datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def clock():
    return fixed_clock(NOW)


@pytest.fixture
def settings() -> WarehouseSettings:
    return WarehouseSettings(now=NOW)


@pytest.fixture
def snapshot():
    return build_snapshot(NOW)


@pytest.fixture
def make_client():
    def _make(**overrides: Any) -> Client:
        fields: dict[str, Any] = {
            "id": "CL001",
            "name": "Client",
            "contact_email": "ops@client.com",
            "tier": ClientTier.STANDARD,
            "contract_start_date": NOW - timedelta(days=400),
            "contract_end_date": NOW + timedelta(days=200),
        }
        fields.update(overrides)
        return Client(**fields)

    return _make


@pytest.fixture
def make_inventory():
    def _make(**overrides: Any) -> Inventory:
        fields: dict[str, Any] = {
            "id": "INV-100",
            "sku": "SKU-100",
            "client_id": "CL001",
            "location_id": "LOC-A1",
            "quantity": 50,
            "reorder_point": 20,
            "max_quantity": 100,
            "last_count_date": NOW - timedelta(days=5),
        }
        fields.update(overrides)
        return Inventory(**fields)

    return _make


@pytest.fixture
def make_order():
    def _make(**overrides: Any) -> Order:
        fields: dict[str, Any] = {
            "id": "ORD-100",
            "client_id": "CL001",
            "order_date": NOW - timedelta(days=1),
            "required_date": NOW + timedelta(days=3),
            "priority": OrderPriority.NORMAL,
            "shipping_method": ShippingMethod.GROUND,
            "destination_country": "USA",
            "status": OrderStatus.PENDING,
            "lines": (OrderLine(sku="SKU-100", quantity_ordered=2),),
        }
        fields.update(overrides)
        return Order(**fields)

    return _make


@pytest.fixture
def make_product():
    def _make(**overrides: Any) -> Product:
        fields: dict[str, Any] = {
            "sku": "SKU-100",
            "client_id": "CL001",
            "name": "Widget",
            "category": ProductCategory.GENERAL,
            "weight": Decimal("2.0"),
            "dimensions": Dimensions(length=10, width=10, height=10),
            "unit_cost": Decimal("10.00"),
        }
        fields.update(overrides)
        return Product(**fields)

    return _make


@pytest.fixture
def make_shipment():
    def _make(**overrides: Any) -> Shipment:
        fields: dict[str, Any] = {
            "id": "SHIP-100",
            "order_id": "ORD-100",
            "client_id": "CL001",
            "ship_date": NOW - timedelta(days=2),
            "carrier": "UPS",
            "tracking_number": "1Z0000000000000000",
            "weight": Decimal("10.0"),
            "status": ShipmentStatus.IN_TRANSIT,
        }
        fields.update(overrides)
        return Shipment(**fields)

    return _make
