"""Standard comparison operators: =, !=, >, <, >=, <=."""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator

if TYPE_CHECKING:
    from collections.abc import Callable


class _OrderingOperator(MemoryOperator):
    """Ordering comparison.

    A missing field, or one that cannot be ordered against the condition
    value (``[1, 2] > 0``), never satisfies it.
    """

    _name: SpecificationOperator
    _compare: Callable[[Any, Any], Any]

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None or condition_value is None:
            return False
        try:
            return bool(type(self)._compare(field_value, condition_value))
        except TypeError:
            return False


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.EQ

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return bool(field_value == condition_value)


class NotEqualOperator(MemoryOperator):
    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.NE

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return bool(field_value != condition_value)


class GreaterThanOperator(_OrderingOperator):
    _name = SpecificationOperator.GT
    _compare = operator.gt


class LessThanOperator(_OrderingOperator):
    _name = SpecificationOperator.LT
    _compare = operator.lt


class GreaterEqualOperator(_OrderingOperator):
    _name = SpecificationOperator.GE
    _compare = operator.ge


class LessEqualOperator(_OrderingOperator):
    _name = SpecificationOperator.LE
    _compare = operator.le
