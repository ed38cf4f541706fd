"""
Pluggable comparison strategies for attribute specifications.

An ``AttributeSpecification`` never compares values itself: it resolves the
candidate's field and hands both values to the ``MemoryOperator`` registered
for its operator.  Registries are plain objects passed in by the caller, so
two specifications can disagree on what ``"contains"`` means without any
global state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .exceptions import OperatorNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .operators import SpecificationOperator


class MemoryOperator(ABC):
    """
    Compares a resolved field value with a specification's condition value.

    ``evaluate`` is total: a missing (``None``) field answers ``False``,
    except for the null checks, which exist to detect it.
    """

    @property
    @abstractmethod
    def name(self) -> SpecificationOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        """Return whether *field_value* meets *condition_value*."""

    def validate(self, condition_value: Any) -> None:
        """
        Reject a condition value that could never be evaluated.

        Called once, when the owning specification is constructed.

        Raises:
            ValidationError: If *condition_value* is unusable.
        """


class MemoryOperatorRegistry:
    """
    Operator strategies keyed by ``SpecificationOperator``.

    Registering a strategy for an operator that already has one replaces
    it.  Logical operators (``and``, ``or``, ...) are composites, not
    comparisons, and cannot be registered.
    """

    def __init__(self, *operators: MemoryOperator) -> None:
        self._operators: dict[SpecificationOperator, MemoryOperator] = {}
        self.register_all(*operators)

    def register(self, operator: MemoryOperator) -> None:
        if operator.name.is_logical:
            raise ValueError(
                f"'{operator.name.value}' is a logical operator, not a comparison"
            )
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        for operator in operators:
            self.register(operator)

    def unregister(self, name: SpecificationOperator) -> None:
        self._operators.pop(name, None)

    def get(self, name: SpecificationOperator) -> MemoryOperator | None:
        return self._operators.get(name)

    def has(self, name: SpecificationOperator) -> bool:
        return name in self._operators

    def __contains__(self, name: object) -> bool:
        return name in self._operators

    def __len__(self) -> int:
        return len(self._operators)

    def __iter__(self) -> Iterator[MemoryOperator]:
        return iter(self._operators.values())

    @property
    def supported_operators(self) -> set[SpecificationOperator]:
        return set(self._operators)

    def require(self, name: SpecificationOperator) -> MemoryOperator:
        """
        Return the strategy for *name*.

        Raises:
            OperatorNotFoundError: If nothing is registered for *name*.
        """
        try:
            return self._operators[name]
        except KeyError:
            raise OperatorNotFoundError(
                name.value, sorted(op.value for op in self._operators)
            ) from None

    def evaluate(
        self, name: SpecificationOperator, field_value: Any, condition_value: Any
    ) -> bool:
        return self.require(name).evaluate(field_value, condition_value)
