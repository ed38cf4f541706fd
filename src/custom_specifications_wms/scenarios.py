"""
Warehouse scenarios built from composed rules.

Each scenario reads a :class:`WarehouseSnapshot`, writes a report to
*out* and returns what it found.  Rules are evaluated against a clock
fixed at the snapshot's ``as_of`` time, so reports are reproducible.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from custom_specifications import LambdaSpecification, where

from .clock import fixed_clock, total_hours, whole_days
from .config import WarehouseSettings
from .models import ClientTier, OrderStatus, ShipmentStatus, ShippingMethod
from .sample_data import WarehouseSnapshot, build_snapshot
from .specifications import (
    BelongsToClientSpecification,
    HasDeliveryIssuesSpecification,
    HasShippingMethodSpecification,
    HasStatusSpecification,
    IsActiveSpecification,
    IsAvailableSpecification,
    IsBelowReorderPointSpecification,
    IsExpiredSpecification,
    IsExpiringSpecification,
    IsInternationalSpecification,
    IsOutOfStockSpecification,
    IsPremiumOrEnterpriseSpecification,
    IsUrgentSpecification,
    NeedsCycleCountSpecification,
    RequiresExpeditedProcessingSpecification,
    RequiresSpecialHandlingSpecification,
)

if TYPE_CHECKING:
    from typing import TextIO

    from custom_specifications import BaseSpecification

    from .models import Inventory, Location, Order, Product, Shipment

logger = logging.getLogger(__name__)

_TIER_RANK = {
    ClientTier.ENTERPRISE: 3,
    ClientTier.PREMIUM: 2,
    ClientTier.STANDARD: 1,
}
_STATUS_ORDER = {status: index for index, status in enumerate(ShipmentStatus)}


def _print(out: TextIO, text: str = "") -> None:
    out.write(text + "\n")


def _stamp(moment: Any) -> str:
    return f"{moment:%Y-%m-%d %H:%M}"


def low_stock_premium_clients(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> dict[str, list[Inventory]]:
    """Low or empty stock held for active premium and enterprise clients."""
    out = out or sys.stdout
    _print(out, "=== Example 1: Low Stock Alert for Premium Clients ===")
    _print(out)

    premium_active = where(
        data.clients, IsPremiumOrEnterpriseSpecification() & IsActiveSpecification()
    ).to_list()
    low_stock = where(
        data.inventory,
        IsBelowReorderPointSpecification() | IsOutOfStockSpecification(),
    ).to_list()

    report: dict[str, list[Inventory]] = {}
    _print(out, "Premium clients with low stock items:")
    for client in premium_active:
        items = where(low_stock, BelongsToClientSpecification(client.id)).to_list()
        if not items:
            continue
        report[client.id] = items
        _print(out)
        _print(out, f"  Client: {client.name} (Tier: {client.tier.name.title()})")
        for inv in items:
            _print(
                out,
                f"    - SKU: {inv.sku}, Qty: {inv.quantity}, "
                f"Reorder Point: {inv.reorder_point}",
            )
    _print(out)
    return report


def expedited_order_processing(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> list[Order]:
    """Pending orders that need expedited handling, earliest due first."""
    out = out or sys.stdout
    _print(out, "=== Example 2: Expedited Order Processing ===")
    _print(out)
    clock = fixed_clock(data.as_of)

    requires_expedited = RequiresExpeditedProcessingSpecification(
        settings.expedite_window_hours, clock=clock
    )
    is_pending = HasStatusSpecification(OrderStatus.PENDING)
    urgent = sorted(
        where(data.orders, requires_expedited & is_pending),
        key=lambda order: order.required_date,
    )

    _print(
        out,
        f"Urgent pending orders requiring immediate processing ({len(urgent)}):",
    )
    _print(out)
    for order in urgent:
        remaining = total_hours(order.required_date - data.as_of)
        _print(out, f"  Order: {order.id}")
        _print(
            out,
            f"    Priority: {order.priority.name.title()}, "
            f"Shipping: {order.shipping_method.name.title()}",
        )
        _print(out, f"    Due: {_stamp(order.required_date)} ({remaining:.1f} hours)")
        _print(out, f"    Lines: {len(order.lines)} items")
        _print(out)
    return urgent


def _storage_rule(product: Product) -> BaseSpecification[Location]:
    """Locations able to take *product*: weight, hazmat and temperature."""
    rule: BaseSpecification[Location] = LambdaSpecification(
        lambda loc: product.weight <= loc.max_weight, name="carries_weight"
    )
    if product.is_hazmat:
        rule = rule & LambdaSpecification(
            lambda loc: loc.is_hazmat_approved, name="hazmat_approved"
        )
    if product.requires_refrigeration:
        rule = rule & LambdaSpecification(
            lambda loc: loc.is_temperature_controlled, name="temperature_controlled"
        )
    return rule


def special_handling_locations(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> dict[str, list[Location]]:
    """Candidate storage locations for products needing special handling."""
    out = out or sys.stdout
    _print(out, "=== Example 3: Special Handling Location Assignment ===")
    _print(out)

    special = where(data.products, RequiresSpecialHandlingSpecification()).to_list()
    _print(out, f"Products requiring special handling ({len(special)}):")
    _print(out)

    assignments: dict[str, list[Location]] = {}
    for product in special:
        flags = [
            label
            for label, present in (
                ("Hazmat", product.is_hazmat),
                ("Fragile", product.is_fragile),
                ("Refrigerated", product.requires_refrigeration),
            )
            if present
        ]
        suitable = where(data.locations, _storage_rule(product)).to_list()
        assignments[product.sku] = suitable

        _print(out, f"  SKU: {product.sku} - {product.name}")
        _print(out, f"    Attributes: {' '.join(flags)}")
        _print(out, f"    Suitable locations: {len(suitable)}")
        for loc in suitable[:3]:
            _print(
                out,
                f"      - {loc.id} ({loc.zone}-{loc.aisle}-{loc.bay}-{loc.level})",
            )
        _print(out)
    return assignments


def expiring_inventory(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> dict[str, list[Product]]:
    """Products bucketed into expired, expiring soon and expiring."""
    out = out or sys.stdout
    _print(out, "=== Example 4: Expiring Inventory Management ===")
    _print(out)
    clock = fixed_clock(data.as_of)

    is_expiring = IsExpiringSpecification(settings.expiring_days, clock=clock)
    is_expiring_soon = IsExpiringSpecification(settings.expiring_soon_days, clock=clock)
    is_expired = IsExpiredSpecification(clock=clock)

    buckets = {
        "expired": where(data.products, is_expired).to_list(),
        "expiring_soon": where(data.products, is_expiring_soon - is_expired).to_list(),
        "expiring": where(data.products, is_expiring - is_expiring_soon).to_list(),
    }
    in_stock = {inv.sku: inv for inv in data.inventory if inv.quantity > 0}

    _print(out, "Expiring Inventory Report:")
    _print(out)
    soon, later = settings.expiring_soon_days, settings.expiring_days
    headings = (
        ("expired", "CRITICAL - Expired", "x"),
        ("expiring_soon", f"HIGH - Expiring within {soon} days", "!"),
        ("expiring", f"MEDIUM - Expiring within {later} days", "*"),
    )
    for key, heading, marker in headings:
        products = buckets[key]
        _print(out, f"{heading} ({len(products)}):")
        for product in products:
            inv = in_stock.get(product.sku)
            if inv is None or product.expiration_date is None:
                continue
            if key == "expired":
                detail = f"Expired: {product.expiration_date:%Y-%m-%d}"
            else:
                left = whole_days(product.expiration_date - data.as_of)
                detail = f"Days left: {left}"
            _print(out, f"  {marker} {product.sku} - Qty: {inv.quantity}, {detail}")
        _print(out)
    return buckets


def order_batching(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> dict[str, list[Order]]:
    """Pending, non-urgent ground orders grouped per client."""
    out = out or sys.stdout
    _print(out, "=== Example 5: Order Batching Logic ===")
    _print(out)

    batchable = (
        HasStatusSpecification(OrderStatus.PENDING)
        & HasShippingMethodSpecification(ShippingMethod.GROUND)
        & ~IsUrgentSpecification()
    )
    orders = where(data.orders, batchable).to_list()

    batches: dict[str, list[Order]] = {}
    for order in orders:
        batches.setdefault(order.client_id, []).append(order)

    _print(out, f"Orders eligible for batching ({len(orders)}):")
    _print(out)
    for client_id, batch in batches.items():
        _print(out, f"  Client: {client_id}")
        _print(out, f"    Orders in batch: {len(batch)}")
        _print(out, f"    Total line items: {sum(len(o.lines) for o in batch)}")
        _print(out, f"    Order IDs: {', '.join(o.id for o in batch)}")
        _print(out)
    return batches


def sla_compliance(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> list[tuple[Shipment, str]]:
    """Shipments with delivery issues, flagged HIGH for premium clients."""
    out = out or sys.stdout
    _print(out, "=== Example 6: SLA Compliance Monitoring ===")
    _print(out)

    is_premium = IsPremiumOrEnterpriseSpecification()
    problems = sorted(
        where(data.shipments, HasDeliveryIssuesSpecification()),
        key=lambda shipment: _STATUS_ORDER[shipment.status],
    )

    _print(out, f"Shipments with delivery issues ({len(problems)}):")
    _print(out)
    flagged: list[tuple[Shipment, str]] = []
    for shipment in problems:
        client = data.client(shipment.client_id)
        priority = "HIGH" if client is not None and is_premium(client) else "NORMAL"
        flagged.append((shipment, priority))

        name = client.name if client is not None else shipment.client_id
        tier = client.tier.name.title() if client is not None else "Unknown"
        _print(out, f"  Shipment: {shipment.id} [Priority: {priority}]")
        _print(out, f"    Client: {name} ({tier})")
        _print(out, f"    Status: {shipment.status.name.title()}")
        _print(out, f"    Carrier: {shipment.carrier}")
        _print(out, f"    Tracking: {shipment.tracking_number}")
        _print(out, f"    Ship Date: {shipment.ship_date:%Y-%m-%d}")
        _print(out)
    return flagged


def cycle_count_priorities(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> list[Inventory]:
    """Available stock overdue for a count, ranked by tier, value and age."""
    out = out or sys.stdout
    _print(out, "=== Example 7: Cycle Count Prioritization ===")
    _print(out)
    clock = fixed_clock(data.as_of)

    due = where(
        data.inventory,
        NeedsCycleCountSpecification(settings.cycle_count_days, clock=clock)
        & IsAvailableSpecification(),
    ).to_list()
    _print(out, f"Inventory items requiring cycle count ({len(due)}):")
    _print(out)

    def priority(inv: Inventory) -> tuple[int, Decimal, int]:
        client = data.client(inv.client_id)
        product = data.product(inv.sku)
        return (
            _TIER_RANK[client.tier] if client is not None else 1,
            product.unit_cost if product is not None else Decimal(0),
            whole_days(data.as_of - inv.last_count_date),
        )

    ranked = sorted(due, key=priority, reverse=True)[: settings.cycle_count_top]

    _print(out, f"Top {settings.cycle_count_top} priority cycle counts:")
    _print(out)
    for rank, inv in enumerate(ranked, start=1):
        client = data.client(inv.client_id)
        product = data.product(inv.sku)
        name = client.name if client is not None else inv.client_id
        tier = client.tier.name.title() if client is not None else "Unknown"
        value = product.unit_cost if product is not None else Decimal(0)
        _print(out, f"  {rank}. SKU: {inv.sku}")
        _print(out, f"     Client: {name} ({tier})")
        _print(out, f"     Value: ${value:.2f}, Qty: {inv.quantity}")
        _print(
            out,
            f"     Days since count: {whole_days(data.as_of - inv.last_count_date)}",
        )
        _print(out, f"     Location: {inv.location_id}")
        _print(out)
    return ranked


def international_compliance(
    data: WarehouseSnapshot,
    settings: WarehouseSettings,
    out: TextIO | None = None,
) -> dict[str, list[str]]:
    """Compliance issues (hazmat, perishables) on international orders."""
    out = out or sys.stdout
    _print(out, "=== Example 8: International Shipment Compliance ===")
    _print(out)

    international = where(
        data.orders, IsInternationalSpecification(settings.domestic_country)
    ).to_list()
    _print(out, f"International orders ({len(international)}):")
    _print(out)

    issues: dict[str, list[str]] = {}
    for order in international:
        products = [
            product
            for product in (data.product(line.sku) for line in order.lines)
            if product is not None
        ]
        found: list[str] = []
        if any(p.is_hazmat for p in products):
            found.append("Contains HAZMAT items (special documentation required)")
        if any(p.expiration_date is not None for p in products):
            found.append("Contains perishable items (expedited shipping required)")
        issues[order.id] = found

        _print(out, f"  Order: {order.id}")
        _print(out, f"    Destination: {order.destination_country}")
        _print(out, f"    Status: {order.status.name.title()}")
        if found:
            _print(out, "    COMPLIANCE ISSUES:")
            for issue in found:
                _print(out, f"      - {issue}")
        else:
            _print(out, "    No compliance issues")
        _print(out)
    return issues


Scenario = Callable[[WarehouseSnapshot, WarehouseSettings, Any], Any]

SCENARIOS: tuple[tuple[str, Scenario], ...] = (
    ("Low Stock Alert for Premium Clients", low_stock_premium_clients),
    ("Expedited Order Processing", expedited_order_processing),
    ("Special Handling Location Assignment", special_handling_locations),
    ("Expiring Inventory Management", expiring_inventory),
    ("Order Batching Logic", order_batching),
    ("SLA Compliance Monitoring", sla_compliance),
    ("Cycle Count Prioritization", cycle_count_priorities),
    ("International Shipment Compliance", international_compliance),
)


def run_scenario(
    number: int,
    settings: WarehouseSettings,
    out: TextIO | None = None,
    data: WarehouseSnapshot | None = None,
) -> Any:
    """Run scenario *number* (1-based) and return its result."""
    if not 1 <= number <= len(SCENARIOS):
        raise ValueError(f"Scenario must be between 1 and {len(SCENARIOS)}")
    if data is None:
        data = build_snapshot(settings.clock())
    title, scenario = SCENARIOS[number - 1]
    logger.info("Running warehouse scenario %d: %s", number, title)
    return scenario(data, settings, out)


def run_all(settings: WarehouseSettings, out: TextIO | None = None) -> None:
    data = build_snapshot(settings.clock())
    for number in range(1, len(SCENARIOS) + 1):
        run_scenario(number, settings, out, data)
