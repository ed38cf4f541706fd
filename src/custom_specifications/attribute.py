"""
Attribute specification: a leaf that tests one field of the candidate.

This is the data-shaped alternative to hand-written leaf classes: the
rule is an ``(attr, op, val)`` triple whose ``to_dict()`` describes it,
while evaluation stays behind the ordinary ``is_satisfied_by`` contract.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from .base import BaseSpecification
from .exceptions import MissingOperandError, OperatorNotFoundError, ValidationError
from .operators import COMPARISON_OPERATORS, SpecificationOperator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .evaluator import MemoryOperatorRegistry

T = TypeVar("T")

logger = logging.getLogger(__name__)

_COMPARISON_NAMES: list[str] = sorted(op.value for op in COMPARISON_OPERATORS)


def parse_operator(op: SpecificationOperator | str) -> SpecificationOperator:
    """Coerce *op* to a comparison operator, suggesting close names on failure."""
    if isinstance(op, SpecificationOperator):
        parsed = op
    else:
        try:
            parsed = SpecificationOperator(str(op).lower())
        except ValueError:
            raise OperatorNotFoundError(str(op), _COMPARISON_NAMES) from None
    if parsed.is_logical:
        raise OperatorNotFoundError(parsed.value, _COMPARISON_NAMES)
    return parsed


class AttributeSpecification(BaseSpecification[T]):
    """
    Specification that checks a single attribute value.

    Delegates in-memory evaluation to a :class:`MemoryOperatorRegistry`
    (strategy pattern). A registry MUST be explicitly provided via
    dependency injection.  The operator and its value are validated
    here, so an invalid rule is never constructed.

    Example::

        registry = build_default_registry()
        heavy = AttributeSpecification("weight", ">", 150, registry=registry)
    """

    def __init__(
        self,
        attr: str,
        op: SpecificationOperator | str,
        val: Any = None,
        *,
        registry: MemoryOperatorRegistry,
    ) -> None:
        if registry is None:
            raise MissingOperandError("registry")
        if not isinstance(attr, str) or not attr.strip():
            raise ValidationError("Attribute path must be a non-empty string", "attr")
        self.attr = attr
        self.op = parse_operator(op)
        self.val = val
        self._parts: Sequence[str] = tuple(attr.split("."))
        self._registry = registry
        self._operator = registry.require(self.op)
        self._operator.validate(val)

    def is_satisfied_by(self, candidate: T) -> bool:
        actual_val = self._resolve_field(candidate, self._parts)
        return self._operator.evaluate(actual_val, self.val)

    # -- field resolution ----------------------------------------------------

    @classmethod
    def _resolve_field(cls, obj: Any, parts: Sequence[str]) -> Any:
        """
        Resolve a dot-separated attribute path on *obj*.

        Supports nested attribute access (``dimensions.length``), mapping
        keys, and implicit list traversal (``lines.sku`` where ``lines``
        is a list returns ``[line.sku for line in lines]``).  A missing
        attribute resolves to ``None``.
        """
        for index, part in enumerate(parts):
            if obj is None:
                logger.debug("Path %s stops at None before %r", ".".join(parts), part)
                return None
            if isinstance(obj, list | tuple):
                rest = parts[index:]
                return [cls._resolve_field(item, rest) for item in obj]
            if isinstance(obj, Mapping):
                obj = obj.get(part)
            else:
                obj = getattr(obj, part, None)
        return obj

    # -- description ---------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op.value,
            "attr": self.attr,
            "val": self.val,
        }
