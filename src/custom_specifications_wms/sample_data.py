"""
Sample warehouse data for the demo scenarios.

Every timestamp is generated relative to a reference time, so the same
``as_of`` always yields the same snapshot.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from .models import (
    Client,
    ClientTier,
    Dimensions,
    Inventory,
    Location,
    LocationType,
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
from .models.base import as_utc


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's end."""
    index = moment.month - 1 + months
    year, month = moment.year + index // 12, index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class WarehouseSnapshot(BaseModel):
    """All records of the demo warehouse at ``as_of``."""

    model_config = ConfigDict(frozen=True)

    as_of: datetime
    clients: tuple[Client, ...]
    products: tuple[Product, ...]
    inventory: tuple[Inventory, ...]
    locations: tuple[Location, ...]
    orders: tuple[Order, ...]
    shipments: tuple[Shipment, ...]

    def client(self, client_id: str) -> Client | None:
        return next((c for c in self.clients if c.id == client_id), None)

    def product(self, sku: str) -> Product | None:
        return next((p for p in self.products if p.sku == sku), None)


def sample_clients(now: datetime) -> list[Client]:
    return [
        Client(
            id="TR001",
            name="Tire Rack",
            contact_email="logistics@tirerack.com",
            tier=ClientTier.ENTERPRISE,
            contract_start_date=add_months(now, -24),
            contract_end_date=add_months(now, 12),
        ),
        Client(
            id="FB001",
            name="Fenty Beauty",
            contact_email="warehouse@fentybeauty.com",
            tier=ClientTier.PREMIUM,
            contract_start_date=add_months(now, -12),
            contract_end_date=add_months(now, 6),
        ),
        Client(
            id="NE001",
            name="Newegg",
            contact_email="fulfillment@newegg.com",
            tier=ClientTier.ENTERPRISE,
            contract_start_date=add_months(now, -36),
            contract_end_date=add_months(now, 24),
        ),
        Client(
            id="SM001",
            name="Small Retailer",
            contact_email="orders@small.com",
            tier=ClientTier.STANDARD,
            contract_start_date=add_months(now, -6),
            contract_end_date=add_months(now, 6),
        ),
    ]


def _dims(length: int, width: int, height: int) -> Dimensions:
    return Dimensions(length=length, width=width, height=height)


def sample_products(now: datetime) -> list[Product]:
    return [
        Product(
            sku="TIRE-001",
            client_id="TR001",
            name="All-Season Tire 225/65R17",
            description="Premium all-season tire",
            category=ProductCategory.AUTOMOTIVE,
            weight=Decimal("25.0"),
            dimensions=_dims(28, 9, 28),
            unit_cost=Decimal("120.00"),
        ),
        Product(
            sku="FB-LIP-001",
            client_id="FB001",
            name="Fenty Icon Lipstick",
            description="Velvet liquid lipstick",
            category=ProductCategory.BEAUTY,
            weight=Decimal("0.15"),
            dimensions=_dims(4, 1, 1),
            is_fragile=True,
            unit_cost=Decimal("25.00"),
            expiration_date=add_months(now, 18),
        ),
        Product(
            sku="NE-GPU-001",
            client_id="NE001",
            name="RTX 4090 Graphics Card",
            description="High-end GPU",
            category=ProductCategory.ELECTRONICS,
            weight=Decimal("5.0"),
            dimensions=_dims(12, 5, 2),
            is_fragile=True,
            unit_cost=Decimal("1599.00"),
        ),
        Product(
            sku="CHEM-001",
            client_id="TR001",
            name="Tire Sealant Spray",
            description="Emergency tire repair",
            category=ProductCategory.AUTOMOTIVE,
            weight=Decimal("1.5"),
            dimensions=_dims(10, 3, 3),
            is_hazmat=True,
            unit_cost=Decimal("15.00"),
        ),
        Product(
            sku="FB-FOUND-001",
            client_id="FB001",
            name="Pro Filt'r Foundation",
            description="Soft matte foundation",
            category=ProductCategory.BEAUTY,
            weight=Decimal("0.3"),
            dimensions=_dims(5, 2, 2),
            is_fragile=True,
            unit_cost=Decimal("40.00"),
            expiration_date=now + timedelta(days=10),
        ),
    ]


def sample_inventory(now: datetime) -> list[Inventory]:
    rows = [
        # id, sku, client, location, qty, reorder point, max qty, days since count
        ("INV-001", "TIRE-001", "TR001", "LOC-A1", 45, 100, 500, 45),
        ("INV-002", "FB-LIP-001", "FB001", "LOC-B2", 250, 200, 1000, 15),
        ("INV-003", "NE-GPU-001", "NE001", "LOC-C3", 8, 10, 50, 20),
        ("INV-004", "CHEM-001", "TR001", "LOC-D4", 0, 50, 200, 60),
        ("INV-005", "FB-FOUND-001", "FB001", "LOC-B1", 150, 100, 800, 10),
    ]
    return [
        Inventory(
            id=id,
            sku=sku,
            client_id=client_id,
            location_id=location_id,
            quantity=quantity,
            reorder_point=reorder_point,
            max_quantity=max_quantity,
            last_count_date=now - timedelta(days=age),
        )
        for (
            id, sku, client_id, location_id, quantity, reorder_point, max_quantity, age
        ) in rows
    ]


def sample_locations() -> list[Location]:
    rows = [
        # id, zone, aisle, bay, level, temperature controlled, max weight, hazmat
        ("LOC-A1", "A", "01", "01", "1", False, 5000, False),
        ("LOC-B1", "B", "02", "01", "1", True, 2000, False),
        ("LOC-B2", "B", "02", "02", "2", True, 2000, False),
        ("LOC-C3", "C", "03", "03", "1", False, 1000, False),
        ("LOC-D4", "D", "04", "01", "1", False, 3000, True),
    ]
    return [
        Location(
            id=id,
            zone=zone,
            aisle=aisle,
            bay=bay,
            level=level,
            type=LocationType.STORAGE,
            is_temperature_controlled=temperature,
            max_weight=max_weight,
            is_hazmat_approved=hazmat,
        )
        for id, zone, aisle, bay, level, temperature, max_weight, hazmat in rows
    ]


def sample_orders(now: datetime) -> list[Order]:
    return [
        Order(
            id="ORD-001",
            client_id="TR001",
            order_date=now - timedelta(days=1),
            required_date=now + timedelta(hours=6),
            priority=OrderPriority.RUSH,
            shipping_method=ShippingMethod.OVERNIGHT,
            destination_country="USA",
            status=OrderStatus.PENDING,
            lines=(OrderLine(sku="TIRE-001", quantity_ordered=4),),
        ),
        Order(
            id="ORD-002",
            client_id="FB001",
            order_date=now - timedelta(days=2),
            required_date=now + timedelta(days=3),
            priority=OrderPriority.NORMAL,
            shipping_method=ShippingMethod.GROUND,
            destination_country="USA",
            status=OrderStatus.PENDING,
            lines=(
                OrderLine(sku="FB-LIP-001", quantity_ordered=50),
                OrderLine(sku="FB-FOUND-001", quantity_ordered=30),
            ),
        ),
        Order(
            id="ORD-003",
            client_id="NE001",
            order_date=now,
            required_date=now + timedelta(days=1),
            priority=OrderPriority.HIGH,
            shipping_method=ShippingMethod.TWO_DAY_AIR,
            destination_country="Canada",
            status=OrderStatus.PENDING,
            lines=(OrderLine(sku="NE-GPU-001", quantity_ordered=2),),
        ),
    ]


def sample_shipments(now: datetime) -> list[Shipment]:
    return [
        Shipment(
            id="SHIP-001",
            order_id="ORD-100",
            client_id="TR001",
            ship_date=now - timedelta(days=5),
            carrier="FedEx",
            tracking_number="1Z999AA10123456784",
            weight=Decimal("100.0"),
            status=ShipmentStatus.IN_TRANSIT,
        ),
        Shipment(
            id="SHIP-002",
            order_id="ORD-101",
            client_id="FB001",
            ship_date=now - timedelta(days=3),
            carrier="UPS",
            tracking_number="1Z999AA10123456785",
            weight=Decimal("5.0"),
            status=ShipmentStatus.DELAYED,
        ),
        Shipment(
            id="SHIP-003",
            order_id="ORD-102",
            client_id="NE001",
            ship_date=now - timedelta(days=10),
            carrier="USPS",
            tracking_number="9400100000000000000000",
            weight=Decimal("10.0"),
            status=ShipmentStatus.DELIVERED,
            delivery_date=now - timedelta(days=2),
        ),
    ]


def build_snapshot(as_of: datetime) -> WarehouseSnapshot:
    now = as_utc(as_of)
    return WarehouseSnapshot(
        as_of=now,
        clients=tuple(sample_clients(now)),
        products=tuple(sample_products(now)),
        inventory=tuple(sample_inventory(now)),
        locations=tuple(sample_locations()),
        orders=tuple(sample_orders(now)),
        shipments=tuple(sample_shipments(now)),
    )
