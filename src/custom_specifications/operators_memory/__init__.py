"""
Built-in comparison strategies.

``build_default_registry()`` returns a new registry holding one instance of
each class in ``DEFAULT_OPERATORS``; extend or trim the returned registry
freely, it is not shared.
"""

from __future__ import annotations

from ..evaluator import MemoryOperator, MemoryOperatorRegistry
from .null import (
    IsEmptyOperator,
    IsNotEmptyOperator,
    IsNotNullOperator,
    IsNullOperator,
)
from .set import (
    AllOperator,
    BetweenOperator,
    InOperator,
    NotBetweenOperator,
    NotInOperator,
)
from .standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from .string import (
    ContainsOperator,
    EndsWithOperator,
    IContainsOperator,
    IEndsWithOperator,
    ILikeOperator,
    IRegexOperator,
    IStartsWithOperator,
    LikeOperator,
    NotLikeOperator,
    RegexOperator,
    StartsWithOperator,
)

DEFAULT_OPERATORS: tuple[type[MemoryOperator], ...] = (
    EqualOperator,
    NotEqualOperator,
    GreaterThanOperator,
    LessThanOperator,
    GreaterEqualOperator,
    LessEqualOperator,
    InOperator,
    NotInOperator,
    AllOperator,
    BetweenOperator,
    NotBetweenOperator,
    LikeOperator,
    NotLikeOperator,
    ILikeOperator,
    ContainsOperator,
    IContainsOperator,
    StartsWithOperator,
    IStartsWithOperator,
    EndsWithOperator,
    IEndsWithOperator,
    RegexOperator,
    IRegexOperator,
    IsNullOperator,
    IsNotNullOperator,
    IsEmptyOperator,
    IsNotEmptyOperator,
)


def build_default_registry() -> MemoryOperatorRegistry:
    return MemoryOperatorRegistry(*(cls() for cls in DEFAULT_OPERATORS))


__all__ = [
    "DEFAULT_OPERATORS",
    "build_default_registry",
]
