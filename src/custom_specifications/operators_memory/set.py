"""Membership and range operators: in, not_in, all, between, not_between.

The condition value is checked when the specification is built, so a
malformed range (``high < low``) or a non-collection member list never
reaches evaluation.  A field value of the wrong shape for its condition
(an unhashable value against a set, a string against numeric bounds)
never satisfies it.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from ..evaluator import MemoryOperator
from ..exceptions import ValidationError
from ..operators import SpecificationOperator


def _require_collection(op: SpecificationOperator, value: Any) -> None:
    if isinstance(value, str | bytes) or not isinstance(value, Collection):
        raise ValidationError(
            f"Operator '{op.value}' expects a collection of values, "
            f"got {type(value).__name__}",
            path="val",
        )


def _require_range(op: SpecificationOperator, value: Any) -> None:
    if isinstance(value, str | bytes) or not isinstance(value, Collection):
        raise ValidationError(
            f"Operator '{op.value}' expects a [low, high] pair", path="val"
        )
    if len(value) != 2:
        raise ValidationError(
            f"Operator '{op.value}' expects exactly two bounds, got {len(value)}",
            path="val",
        )
    low, high = value
    try:
        inverted = high < low
    except TypeError:
        raise ValidationError(
            f"Range bounds {low!r} and {high!r} cannot be compared", path="val"
        ) from None
    if inverted:
        raise ValidationError(
            f"Range upper bound {high!r} is below lower bound {low!r}", path="val"
        )


class InOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IN

    def validate(self, condition_value: Any) -> None:
        _require_collection(self.name, condition_value)

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        try:
            return field_value in condition_value
        except TypeError:
            return False


class NotInOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_IN

    def validate(self, condition_value: Any) -> None:
        _require_collection(self.name, condition_value)

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        try:
            return field_value not in condition_value
        except TypeError:
            return False


class AllOperator(MemoryOperator):
    """Check that *all* expected values are present in the field value."""

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.ALL

    def validate(self, condition_value: Any) -> None:
        _require_collection(self.name, condition_value)

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if not field_value:
            return False
        try:
            return set(condition_value).issubset(field_value)
        except TypeError:
            return False


class BetweenOperator(MemoryOperator):
    """Inclusive on both bounds."""

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.BETWEEN

    def validate(self, condition_value: Any) -> None:
        _require_range(self.name, condition_value)

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        low, high = condition_value
        try:
            return bool(low <= field_value <= high)
        except TypeError:
            return False


class NotBetweenOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NOT_BETWEEN

    def validate(self, condition_value: Any) -> None:
        _require_range(self.name, condition_value)

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        low, high = condition_value
        try:
            return not (low <= field_value <= high)
        except TypeError:
            return False
