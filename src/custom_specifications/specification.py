"""Specification pattern primitives."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.
    Used to encapsulate business rules for filtering and validating candidates.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether *candidate* satisfies the specification.
        Must be pure: no side effects, same answer for the same candidate.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary description of the specification.
        Used for logging and ``repr``; it is never parsed back.
        """
        ...
