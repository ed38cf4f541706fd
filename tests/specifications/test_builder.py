"""Tests for the SpecificationBuilder fluent API."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from custom_specifications import (
    AndNotSpecification,
    AndSpecification,
    AttributeSpecification,
    LambdaSpecification,
    MissingOperandError,
    NotSpecification,
    OrNotSpecification,
    OrSpecification,
    SpecificationBuilder,
    SpecificationOperator,
)


@dataclass
class Order:
    id: str
    status: str
    priority: str
    shipping_method: str
    lines: int


@pytest.fixture
def builder(registry) -> SpecificationBuilder:
    return SpecificationBuilder(registry=registry)


@pytest.fixture
def rush() -> Order:
    return Order("ORD-001", "pending", "rush", "overnight", 1)


@pytest.fixture
def batch() -> Order:
    return Order("ORD-002", "pending", "normal", "ground", 2)


# -- Single condition -------------------------------------------------------


def test_single_where(builder: SpecificationBuilder, rush: Order):
    spec = builder.where("id", "=", "ORD-001").build()
    assert isinstance(spec, AttributeSpecification)
    assert spec.is_satisfied_by(rush) is True


def test_single_where_enum_op(builder: SpecificationBuilder, rush: Order):
    spec = builder.where("shipping_method", SpecificationOperator.ENDSWITH, "night")
    assert spec.build().is_satisfied_by(rush) is True


def test_default_registry_when_none_given(rush: Order):
    spec = SpecificationBuilder().where("lines", ">", 0).build()
    assert spec.is_satisfied_by(rush) is True


# -- Implicit AND ------------------------------------------------------------


def test_multiple_where_implicit_and(
    builder: SpecificationBuilder, rush: Order, batch: Order
):
    spec = (
        builder.where("status", "=", "pending")
        .where("priority", "in", ["rush", "same_day"])
        .build()
    )
    assert isinstance(spec, AndSpecification)
    assert spec.is_satisfied_by(rush) is True
    assert spec.is_satisfied_by(batch) is False


def test_implicit_and_folds_left(builder: SpecificationBuilder):
    spec = builder.where("a", "=", 1).where("b", "=", 2).where("c", "=", 3).build()
    assert isinstance(spec, AndSpecification)
    assert isinstance(spec.left, AndSpecification)
    assert spec.right.to_dict()["attr"] == "c"


# -- Groups ------------------------------------------------------------------


def test_or_group(builder: SpecificationBuilder, rush: Order, batch: Order):
    spec = (
        builder.or_group()
        .where("priority", "=", "rush")
        .where("lines", ">", 1)
        .end_group()
        .build()
    )
    assert isinstance(spec, OrSpecification)
    assert spec.is_satisfied_by(rush) is True
    assert spec.is_satisfied_by(batch) is True


def test_not_group(builder: SpecificationBuilder, rush: Order, batch: Order):
    spec = builder.not_group().where("priority", "=", "rush").end_group().build()
    assert isinstance(spec, NotSpecification)
    assert spec.is_satisfied_by(rush) is False
    assert spec.is_satisfied_by(batch) is True


def test_and_not_group(builder: SpecificationBuilder, rush: Order, batch: Order):
    spec = (
        builder.and_not_group()
        .where("status", "=", "pending")
        .where("shipping_method", "=", "overnight")
        .end_group()
        .build()
    )
    assert isinstance(spec, AndNotSpecification)
    assert spec.is_satisfied_by(rush) is False
    assert spec.is_satisfied_by(batch) is True


def test_or_not_group(builder: SpecificationBuilder, rush: Order, batch: Order):
    spec = (
        builder.or_not_group()
        .where("priority", "=", "rush")
        .where("status", "=", "pending")
        .end_group()
        .build()
    )
    assert isinstance(spec, OrNotSpecification)
    assert spec.is_satisfied_by(rush) is True
    assert spec.is_satisfied_by(batch) is False


def test_nested_groups(builder: SpecificationBuilder, rush: Order, batch: Order):
    spec = (
        builder.where("status", "=", "pending")
        .or_group()
        .where("priority", "=", "rush")
        .and_group()
        .where("shipping_method", "=", "ground")
        .where("lines", ">=", 2)
        .end_group()
        .end_group()
        .build()
    )
    assert spec.is_satisfied_by(rush) is True
    assert spec.is_satisfied_by(batch) is True
    assert spec.is_satisfied_by(Order("ORD-9", "pending", "low", "freight", 1)) is False


def test_add_existing_specification(builder: SpecificationBuilder, rush: Order):
    is_single_line = LambdaSpecification(lambda o: o.lines == 1)
    spec = builder.where("status", "=", "pending").add(is_single_line).build()
    assert spec.is_satisfied_by(rush) is True


# -- Errors ------------------------------------------------------------------


def test_build_without_conditions(builder: SpecificationBuilder):
    with pytest.raises(ValueError, match="No conditions"):
        builder.build()


def test_build_with_open_group(builder: SpecificationBuilder):
    builder.or_group().where("a", "=", 1)
    with pytest.raises(ValueError, match="still open"):
        builder.build()


def test_end_group_without_open_group(builder: SpecificationBuilder):
    with pytest.raises(ValueError, match="No open group"):
        builder.end_group()


def test_empty_group(builder: SpecificationBuilder):
    with pytest.raises(ValueError, match="empty group"):
        builder.and_group().end_group()


def test_not_group_needs_exactly_one(builder: SpecificationBuilder):
    builder.not_group().where("a", "=", 1).where("b", "=", 2)
    with pytest.raises(ValueError, match="exactly one"):
        builder.end_group()


@pytest.mark.parametrize("group", ["and_not_group", "or_not_group"])
def test_binary_groups_need_exactly_two(builder: SpecificationBuilder, group: str):
    getattr(builder, group)().where("a", "=", 1)
    with pytest.raises(ValueError, match="exactly two"):
        builder.end_group()


def test_add_none_rejected(builder: SpecificationBuilder):
    with pytest.raises(MissingOperandError) as exc_info:
        builder.add(None)
    assert exc_info.value.operand == "spec"


def test_reset(builder: SpecificationBuilder, rush: Order):
    builder.where("status", "=", "cancelled").or_group()
    spec = builder.reset().where("status", "=", "pending").build()
    assert spec.is_satisfied_by(rush) is True
