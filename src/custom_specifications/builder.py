"""
Fluent builder for constructing specification trees.

Example::

    spec = (
        SpecificationBuilder()
        .where("status", "=", "pending")
        .where("priority", "in", ["rush", "same_day"])
        .build()
    )
    # → AND(status == "pending", priority in [...])

    spec = (
        SpecificationBuilder()
        .and_not_group()
            .where("status", "=", "pending")
            .where("shipping_method", "=", "overnight")
        .end_group()
        .build()
    )
    # → AND_NOT(status == "pending", shipping_method == "overnight")
"""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, Any

from .attribute import AttributeSpecification
from .base import (
    AndNotSpecification,
    AndSpecification,
    NotSpecification,
    OrNotSpecification,
    OrSpecification,
)
from .exceptions import MissingOperandError
from .operators import SpecificationOperator
from .operators_memory import build_default_registry

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry
    from .specification import ISpecification


class SpecificationBuilder:
    """
    Fluent builder for composing specification trees.

    Conditions added at the same level are combined with AND by default,
    folding left: ``a, b, c`` becomes ``(a AND b) AND c``.  Use
    ``or_group()`` / ``and_group()`` / ``not_group()`` /
    ``and_not_group()`` / ``or_not_group()`` for explicit grouping, and
    ``end_group()`` to close the current group.
    """

    def __init__(
        self,
        registry: MemoryOperatorRegistry | None = None,
    ) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._specs: list[ISpecification[Any]] = []
        # stack items: (group_operator, specs_list)
        self._stack: list[tuple[SpecificationOperator, list[ISpecification[Any]]]] = []

    # -- leaf conditions -----------------------------------------------------

    def where(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
    ) -> SpecificationBuilder:
        """Add a single attribute condition to the current group."""
        self._current_list().append(
            AttributeSpecification(attr, op, val, registry=self._registry)
        )
        return self

    def add(self, spec: ISpecification[Any]) -> SpecificationBuilder:
        """Add an already-constructed specification to the current group."""
        if spec is None:
            raise MissingOperandError("spec")
        self._current_list().append(spec)
        return self

    # -- grouping ------------------------------------------------------------

    def and_group(self) -> SpecificationBuilder:
        """Open a new AND group.  Close with ``end_group()``."""
        return self._open(SpecificationOperator.AND)

    def or_group(self) -> SpecificationBuilder:
        """Open a new OR group.  Close with ``end_group()``."""
        return self._open(SpecificationOperator.OR)

    def not_group(self) -> SpecificationBuilder:
        """Open a new NOT group (single child).  Close with ``end_group()``."""
        return self._open(SpecificationOperator.NOT)

    def and_not_group(self) -> SpecificationBuilder:
        """Open an AND-NOT group (exactly two children: kept, excluded)."""
        return self._open(SpecificationOperator.AND_NOT)

    def or_not_group(self) -> SpecificationBuilder:
        """Open an OR-NOT group (exactly two children)."""
        return self._open(SpecificationOperator.OR_NOT)

    def end_group(self) -> SpecificationBuilder:
        """Close the current group and add it to the parent."""
        if not self._stack:
            raise ValueError("No open group to close")
        group_op, specs = self._stack.pop()
        composite = _combine(group_op, specs)
        self._current_list().append(composite)
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> ISpecification[Any]:
        """
        Finalise and return the composed specification.

        If there is a single condition, returns it directly.
        Multiple conditions at the top level are combined with AND.

        Raises:
            ValueError: If groups are still open or no conditions were added.
        """
        if self._stack:
            raise ValueError(
                f"{len(self._stack)} group(s) still open; "
                f"call end_group() before build()"
            )
        if not self._specs:
            raise ValueError("No conditions added to builder")
        return _combine(SpecificationOperator.AND, self._specs)

    def reset(self) -> SpecificationBuilder:
        """Clear all conditions and return ``self`` for reuse."""
        self._specs.clear()
        self._stack.clear()
        return self

    # -- internals -----------------------------------------------------------

    def _open(self, op: SpecificationOperator) -> SpecificationBuilder:
        self._stack.append((op, []))
        return self

    def _current_list(self) -> list[ISpecification[Any]]:
        """Return the list that new specs should be appended to."""
        if self._stack:
            return self._stack[-1][1]
        return self._specs


def _combine(
    op: SpecificationOperator, specs: list[ISpecification[Any]]
) -> ISpecification[Any]:
    """Combine a list of specs with the given logical operator."""
    if not specs:
        raise ValueError("Cannot create an empty group")
    if op == SpecificationOperator.AND:
        return reduce(AndSpecification, specs)
    if op == SpecificationOperator.OR:
        return reduce(OrSpecification, specs)
    if op == SpecificationOperator.NOT:
        if len(specs) != 1:
            raise ValueError("NOT group must contain exactly one condition")
        return NotSpecification(specs[0])
    if op in (SpecificationOperator.AND_NOT, SpecificationOperator.OR_NOT):
        if len(specs) != 2:
            raise ValueError(f"{op.name} group must contain exactly two conditions")
        left, right = specs
        if op == SpecificationOperator.AND_NOT:
            return AndNotSpecification(left, right)
        return OrNotSpecification(left, right)
    raise ValueError(f"Unknown group operator: {op}")
