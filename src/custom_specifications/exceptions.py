"""
Specification exception hierarchy.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for structured error reporting.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(SpecificationError, ValueError):
    """A constructor argument failed a validity check.

    ``path`` names the offending parameter (``"threshold"``,
    ``"left"``, ...).
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class MissingOperandError(ValidationError):
    """A required operand was ``None``."""

    def __init__(self, operand: str) -> None:
        self.operand = operand
        super().__init__(f"Operand '{operand}' must not be None", path=operand)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_OPERAND",
            "operand": self.operand,
            "message": self.message,
        }


class OperatorNotFoundError(SpecificationError):
    """
    An attribute specification named an operator nobody can evaluate.

    ``suggestions`` holds up to three close spellings from
    ``valid_operators`` (``"contians"`` suggests ``"contains"``).
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = sorted(valid_operators)
        self.suggestions = get_close_matches(
            operator, self.valid_operators, n=3, cutoff=0.6
        )
        hint = (
            f" Did you mean: {', '.join(self.suggestions)}?" if self.suggestions else ""
        )
        super().__init__(
            f"No in-memory operator '{operator}'.{hint}"
            f" Known operators: {', '.join(self.valid_operators) or '(none)'}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": self.valid_operators,
        }


class NoMatchError(SpecificationError, LookupError):
    """No element of a collection satisfied the specification."""

    def __init__(self, specification: Any) -> None:
        self.specification = specification
        super().__init__(f"No element satisfies {specification!r}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "NO_MATCH",
            "message": str(self),
        }


class MultipleMatchesError(SpecificationError, LookupError):
    """
    More than one element satisfied a single-match lookup.

    ``count`` is the number of matches seen before the lookup gave up,
    so it is a lower bound (the adapter stops at the second match).
    """

    def __init__(self, specification: Any, count: int) -> None:
        self.specification = specification
        self.count = count
        super().__init__(
            f"Expected exactly one element to satisfy {specification!r}, "
            f"found at least {count}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MULTIPLE_MATCHES",
            "count": self.count,
            "message": str(self),
        }
