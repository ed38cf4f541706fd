"""Presence checks: is_null, is_not_null, is_empty, is_not_empty.

The condition value is ignored.  "Empty" covers ``None``, blank strings
and zero-length collections; a number is never empty.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..evaluator import MemoryOperator
from ..operators import SpecificationOperator

if TYPE_CHECKING:
    from collections.abc import Callable


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return len(value) == 0
    except TypeError:
        return False


def _is_null(value: Any) -> bool:
    return value is None


class _PresenceOperator(MemoryOperator):
    _name: SpecificationOperator
    _test: Callable[[Any], bool]
    _negate: bool = False

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        return type(self)._test(field_value) is not self._negate


class IsNullOperator(_PresenceOperator):
    _name = SpecificationOperator.IS_NULL
    _test = _is_null


class IsNotNullOperator(_PresenceOperator):
    _name = SpecificationOperator.IS_NOT_NULL
    _test = _is_null
    _negate = True


class IsEmptyOperator(_PresenceOperator):
    _name = SpecificationOperator.IS_EMPTY
    _test = is_empty


class IsNotEmptyOperator(_PresenceOperator):
    _name = SpecificationOperator.IS_NOT_EMPTY
    _test = is_empty
    _negate = True
