from .attribute import AttributeSpecification, parse_operator
from .base import (
    AndNotSpecification,
    AndSpecification,
    BaseSpecification,
    LambdaSpecification,
    NotSpecification,
    OrNotSpecification,
    OrSpecification,
)
from .builder import SpecificationBuilder
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    MissingOperandError,
    MultipleMatchesError,
    NoMatchError,
    OperatorNotFoundError,
    SpecificationError,
    ValidationError,
)
from .filtering import (
    FilteredView,
    all_satisfy,
    any_satisfy,
    count_satisfying,
    first,
    first_or_default,
    single,
    single_or_default,
    where,
)
from .operators import SpecificationOperator
from .operators_memory import build_default_registry
from .specification import ISpecification

__all__ = [
    # Core types
    "ISpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "AndNotSpecification",
    "OrNotSpecification",
    "LambdaSpecification",
    # Attribute leaves
    "SpecificationOperator",
    "AttributeSpecification",
    "parse_operator",
    # Builder
    "SpecificationBuilder",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Filtering
    "FilteredView",
    "where",
    "any_satisfy",
    "all_satisfy",
    "count_satisfying",
    "first",
    "first_or_default",
    "single",
    "single_or_default",
    # Exceptions
    "SpecificationError",
    "ValidationError",
    "MissingOperandError",
    "OperatorNotFoundError",
    "NoMatchError",
    "MultipleMatchesError",
]
