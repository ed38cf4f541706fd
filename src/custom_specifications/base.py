"""
Base specification and the composite evaluators.

Composites hold shared references to already-built operands, so a
specification tree is acyclic and immutable by construction.  Operands
are evaluated left first and short-circuit the way Python's ``and`` /
``or`` do.  Composites never catch exceptions raised by their operands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import MissingOperandError

if TYPE_CHECKING:
    from collections.abc import Callable

    from .specification import ISpecification

T = TypeVar("T")


def _require(operand: ISpecification[T] | None, name: str) -> ISpecification[T]:
    if operand is None:
        raise MissingOperandError(name)
    return operand


class BaseSpecification(ABC, Generic[T]):
    """Base class for specifications with logic operator support.

    Subclass and implement ``is_satisfied_by``::

        class IsAdult(BaseSpecification[User]):
            def is_satisfied_by(self, candidate: User) -> bool:
                return candidate.age >= 18

        eligible = IsAdult() & IsActive()
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.__class__.__name__}

    # -- named combinators ---------------------------------------------------

    def and_(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def or_(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def not_(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def and_not(self, other: ISpecification[T]) -> AndNotSpecification[T]:
        return AndNotSpecification(self, other)

    def or_not(self, other: ISpecification[T]) -> OrNotSpecification[T]:
        return OrNotSpecification(self, other)

    def merge(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)

    # -- operator overloads --------------------------------------------------

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def __sub__(self, other: ISpecification[T]) -> AndNotSpecification[T]:
        return AndNotSpecification(self, other)

    # -- predicate protocol --------------------------------------------------

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"


class _BinarySpecification(BaseSpecification[T]):
    op: str

    def __init__(
        self, left: ISpecification[T] | None, right: ISpecification[T] | None
    ) -> None:
        self._left = _require(left, "left")
        self._right = _require(right, "right")

    @property
    def left(self) -> ISpecification[T]:
        return self._left

    @property
    def right(self) -> ISpecification[T]:
        return self._right

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "conditions": [self._left.to_dict(), self._right.to_dict()],
        }


class AndSpecification(_BinarySpecification[T]):
    """Logical AND composite specification."""

    op = "and"

    def is_satisfied_by(self, candidate: T) -> bool:
        return (
            self._left.is_satisfied_by(candidate)
            and self._right.is_satisfied_by(candidate)
        )


class OrSpecification(_BinarySpecification[T]):
    """Logical OR composite specification."""

    op = "or"

    def is_satisfied_by(self, candidate: T) -> bool:
        return (
            self._left.is_satisfied_by(candidate)
            or self._right.is_satisfied_by(candidate)
        )


class AndNotSpecification(_BinarySpecification[T]):
    """Satisfied when *left* is satisfied and *right* is not."""

    op = "and_not"

    def is_satisfied_by(self, candidate: T) -> bool:
        return (
            self._left.is_satisfied_by(candidate)
            and not self._right.is_satisfied_by(candidate)
        )


class OrNotSpecification(_BinarySpecification[T]):
    """Satisfied when *left* is satisfied or *right* is not."""

    op = "or_not"

    def is_satisfied_by(self, candidate: T) -> bool:
        return (
            self._left.is_satisfied_by(candidate)
            or not self._right.is_satisfied_by(candidate)
        )


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification[T] | None) -> None:
        self._inner = _require(specification, "specification")

    @property
    def inner(self) -> ISpecification[T]:
        return self._inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._inner.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [self._inner.to_dict()],
        }


class LambdaSpecification(BaseSpecification[T]):
    """Wraps a plain callable as a specification.

    Example::

        is_even = LambdaSpecification(lambda n: n % 2 == 0, name="is_even")
        assert is_even.is_satisfied_by(4)
    """

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        if predicate is None:
            raise MissingOperandError("predicate")
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def to_dict(self) -> dict[str, Any]:
        return {"op": "predicate", "name": self.name}
