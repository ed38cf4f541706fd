"""Tests for the inventory rules."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest

from custom_specifications import ValidationError, where
from custom_specifications_wms.models import InventoryStatus
from custom_specifications_wms.specifications import (
    BelongsToClientSpecification,
    CanReleaseFromQuarantineSpecification,
    HasStatusSpecification,
    IsAtLocationSpecification,
    IsAvailableSpecification,
    IsBelowReorderPointSpecification,
    IsInQuarantineSpecification,
    IsNearCapacitySpecification,
    IsOutOfStockSpecification,
    NeedsCycleCountSpecification,
    RequiresImmediateAttentionSpecification,
)


class TestStockLevels:
    def test_below_reorder_point_is_inclusive(self, make_inventory):
        spec = IsBelowReorderPointSpecification()
        assert spec.is_satisfied_by(make_inventory(quantity=20)) is True
        assert spec.is_satisfied_by(make_inventory(quantity=21)) is False

    def test_below_reorder_point_needs_available_stock(self, make_inventory):
        spec = IsBelowReorderPointSpecification()
        reserved = make_inventory(quantity=5, status=InventoryStatus.RESERVED)
        assert spec.is_satisfied_by(reserved) is False

    def test_out_of_stock(self, make_inventory):
        spec = IsOutOfStockSpecification()
        assert spec.is_satisfied_by(make_inventory(quantity=0)) is True
        assert spec.is_satisfied_by(make_inventory(quantity=1)) is False

    def test_available(self, make_inventory):
        spec = IsAvailableSpecification()
        assert spec.is_satisfied_by(make_inventory()) is True
        assert spec.is_satisfied_by(make_inventory(quantity=0)) is False
        damaged = make_inventory(status=InventoryStatus.DAMAGED)
        assert spec.is_satisfied_by(damaged) is False


class TestNearCapacity:
    def test_default_threshold(self, make_inventory):
        spec = IsNearCapacitySpecification()
        assert spec.is_satisfied_by(make_inventory(quantity=90)) is True
        assert spec.is_satisfied_by(make_inventory(quantity=89)) is False

    def test_float_threshold(self, make_inventory):
        spec = IsNearCapacitySpecification(0.5)
        assert spec.threshold == Decimal("0.5")
        assert spec.is_satisfied_by(make_inventory(quantity=50)) is True

    def test_zero_capacity_never_near(self, make_inventory):
        spec = IsNearCapacitySpecification(0)
        empty_slot = make_inventory(quantity=0, reorder_point=0, max_quantity=0)
        assert spec.is_satisfied_by(empty_slot) is False

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(ValidationError) as exc_info:
            IsNearCapacitySpecification(threshold)
        assert exc_info.value.path == "threshold"


class TestQuarantine:
    def test_in_quarantine_until_release_time(self, make_inventory, clock, now):
        held = make_inventory(
            status=InventoryStatus.QUARANTINE,
            quarantine_until=now + timedelta(days=1),
        )
        assert IsInQuarantineSpecification(clock=clock).is_satisfied_by(held)
        assert not CanReleaseFromQuarantineSpecification(clock=clock).is_satisfied_by(
            held
        )

    def test_release_at_or_after_release_time(self, make_inventory, clock, now):
        released = make_inventory(
            status=InventoryStatus.QUARANTINE, quarantine_until=now
        )
        assert not IsInQuarantineSpecification(clock=clock).is_satisfied_by(released)
        assert CanReleaseFromQuarantineSpecification(clock=clock).is_satisfied_by(
            released
        )

    def test_quarantine_without_release_time(self, make_inventory, clock):
        held = make_inventory(status=InventoryStatus.QUARANTINE)
        assert not IsInQuarantineSpecification(clock=clock).is_satisfied_by(held)
        assert not CanReleaseFromQuarantineSpecification(clock=clock).is_satisfied_by(
            held
        )

    def test_other_status_is_not_quarantined(self, make_inventory, clock, now):
        item = make_inventory(quarantine_until=now + timedelta(days=1))
        assert not IsInQuarantineSpecification(clock=clock).is_satisfied_by(item)


class TestCycleCount:
    @pytest.mark.parametrize(
        ("age", "expected"),
        [
            (timedelta(days=30), False),
            (timedelta(days=30, hours=23), False),
            (timedelta(days=31), True),
            (timedelta(days=60), True),
        ],
    )
    def test_needs_count_after_whole_days(
        self, make_inventory, clock, now, age, expected
    ):
        spec = NeedsCycleCountSpecification(30, clock=clock)
        item = make_inventory(last_count_date=now - age)
        assert spec.is_satisfied_by(item) is expected

    def test_to_dict(self):
        assert NeedsCycleCountSpecification(7).to_dict() == {
            "op": "needs_cycle_count",
            "days": 7,
        }


def test_at_location(make_inventory):
    spec = IsAtLocationSpecification("LOC-A1")
    assert spec.is_satisfied_by(make_inventory()) is True
    assert spec.is_satisfied_by(make_inventory(location_id="LOC-B1")) is False


def test_at_location_requires_id():
    with pytest.raises(ValidationError):
        IsAtLocationSpecification(" ")


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        ({"status": InventoryStatus.DAMAGED}, True),
        ({"status": InventoryStatus.EXPIRED}, True),
        ({"quantity": 0}, True),
        ({"quantity": 0, "status": InventoryStatus.RESERVED}, False),
        ({}, False),
    ],
)
def test_requires_immediate_attention(make_inventory, overrides, expected):
    spec = RequiresImmediateAttentionSpecification()
    assert spec.is_satisfied_by(make_inventory(**overrides)) is expected


def test_shared_client_and_status_rules(make_inventory):
    stock = [
        make_inventory(id="INV-1"),
        make_inventory(id="INV-2", client_id="CL002"),
        make_inventory(id="INV-3", status=InventoryStatus.RESERVED),
    ]
    spec = BelongsToClientSpecification("CL001") & HasStatusSpecification(
        InventoryStatus.AVAILABLE
    )
    assert [inv.id for inv in where(stock, spec)] == ["INV-1"]


def test_shared_rules_validate_arguments():
    with pytest.raises(ValidationError):
        BelongsToClientSpecification("")
    with pytest.raises(ValidationError):
        HasStatusSpecification(None)
