"""Operator names understood by attribute specifications and the builder."""

from enum import Enum


class SpecificationOperator(str, Enum):
    """
    Comparison operators, each evaluated by a registered ``MemoryOperator``,
    followed by the logical operators the builder uses to name its groups.

    String values are what ``parse_operator`` accepts (case-insensitive).
    """

    # value comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # membership and ranges; the condition value is a collection
    IN = "in"
    NOT_IN = "not_in"
    ALL = "all"
    BETWEEN = "between"
    NOT_BETWEEN = "not_between"

    # text; "i" prefix ignores case
    LIKE = "like"
    NOT_LIKE = "not_like"
    ILIKE = "ilike"
    CONTAINS = "contains"
    ICONTAINS = "icontains"
    STARTSWITH = "startswith"
    ISTARTSWITH = "istartswith"
    ENDSWITH = "endswith"
    IENDSWITH = "iendswith"
    REGEX = "regex"
    IREGEX = "iregex"

    # presence; the condition value is ignored
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"

    # composites
    AND = "and"
    OR = "or"
    NOT = "not"
    AND_NOT = "and_not"
    OR_NOT = "or_not"

    @property
    def is_logical(self) -> bool:
        return self in LOGICAL_OPERATORS


LOGICAL_OPERATORS: frozenset[SpecificationOperator] = frozenset(
    {
        SpecificationOperator.AND,
        SpecificationOperator.OR,
        SpecificationOperator.NOT,
        SpecificationOperator.AND_NOT,
        SpecificationOperator.OR_NOT,
    }
)

COMPARISON_OPERATORS: frozenset[SpecificationOperator] = (
    frozenset(SpecificationOperator) - LOGICAL_OPERATORS
)
