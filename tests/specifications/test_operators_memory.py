"""Tests for the in-memory operator strategies."""

from __future__ import annotations

import pytest

from custom_specifications import (
    MemoryOperator,
    MemoryOperatorRegistry,
    OperatorNotFoundError,
    SpecificationOperator,
    ValidationError,
    build_default_registry,
)
from custom_specifications.operators import COMPARISON_OPERATORS, LOGICAL_OPERATORS
from custom_specifications.operators_memory.null import (
    IsEmptyOperator,
    IsNotEmptyOperator,
    IsNotNullOperator,
    IsNullOperator,
    is_empty,
)
from custom_specifications.operators_memory.set import (
    AllOperator,
    BetweenOperator,
    InOperator,
    NotBetweenOperator,
    NotInOperator,
)
from custom_specifications.operators_memory.standard import (
    EqualOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    LessEqualOperator,
    LessThanOperator,
    NotEqualOperator,
)
from custom_specifications.operators_memory.string import (
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
    like_to_regex,
)


class TestStandardOperators:
    """Tests for =, !=, >, <, >=, <=."""

    def test_equal_operator(self) -> None:
        op = EqualOperator()
        assert op.evaluate("active", "active") is True
        assert op.evaluate("active", "inactive") is False
        assert op.evaluate(None, None) is True

    def test_not_equal_operator(self) -> None:
        op = NotEqualOperator()
        assert op.evaluate(1, 2) is True
        assert op.evaluate(1, 1) is False

    @pytest.mark.parametrize(
        ("operator", "field", "expected"),
        [
            (GreaterThanOperator(), 11, True),
            (GreaterThanOperator(), 10, False),
            (LessThanOperator(), 9, True),
            (LessThanOperator(), 10, False),
            (GreaterEqualOperator(), 10, True),
            (GreaterEqualOperator(), 9, False),
            (LessEqualOperator(), 10, True),
            (LessEqualOperator(), 11, False),
        ],
    )
    def test_ordering_against_ten(self, operator, field, expected) -> None:
        assert operator.evaluate(field, 10) is expected

    @pytest.mark.parametrize(
        "operator",
        [
            GreaterThanOperator(),
            LessThanOperator(),
            GreaterEqualOperator(),
            LessEqualOperator(),
        ],
    )
    def test_ordering_is_total(self, operator) -> None:
        assert operator.evaluate(None, 10) is False
        assert operator.evaluate(10, None) is False
        assert operator.evaluate("text", 10) is False

    def test_operator_names(self) -> None:
        assert EqualOperator().name == SpecificationOperator.EQ
        assert NotEqualOperator().name == SpecificationOperator.NE
        assert GreaterThanOperator().name == SpecificationOperator.GT
        assert LessThanOperator().name == SpecificationOperator.LT
        assert GreaterEqualOperator().name == SpecificationOperator.GE
        assert LessEqualOperator().name == SpecificationOperator.LE


class TestSetOperators:
    """Tests for in, not_in, all, between, not_between."""

    def test_in_and_not_in(self) -> None:
        assert InOperator().evaluate("UPS", ["UPS", "FedEx"]) is True
        assert InOperator().evaluate("DHL", ["UPS", "FedEx"]) is False
        assert NotInOperator().evaluate("DHL", ["UPS", "FedEx"]) is True

    def test_all_operator(self) -> None:
        op = AllOperator()
        assert op.evaluate(["a", "b", "c"], ["a", "c"]) is True
        assert op.evaluate(["a"], ["a", "c"]) is False
        assert op.evaluate([], ["a"]) is False
        assert op.evaluate(None, ["a"]) is False

    def test_between_is_inclusive(self) -> None:
        op = BetweenOperator()
        assert op.evaluate(1, [1, 100]) is True
        assert op.evaluate(100, [1, 100]) is True
        assert op.evaluate(101, [1, 100]) is False
        assert op.evaluate(None, [1, 100]) is False

    def test_not_between(self) -> None:
        op = NotBetweenOperator()
        assert op.evaluate(0, [1, 100]) is True
        assert op.evaluate(50, [1, 100]) is False
        assert op.evaluate(None, [1, 100]) is False

    @pytest.mark.parametrize("value", [[5, 1], [1], [1, 2, 3], "ab", 7])
    def test_between_rejects_malformed_ranges(self, value) -> None:
        with pytest.raises(ValidationError):
            BetweenOperator().validate(value)

    def test_between_accepts_equal_bounds(self) -> None:
        BetweenOperator().validate([3, 3])

    @pytest.mark.parametrize("operator", [BetweenOperator(), NotBetweenOperator()])
    def test_range_rejects_incomparable_bounds(self, operator) -> None:
        with pytest.raises(ValidationError) as exc_info:
            operator.validate([1, "z"])
        assert exc_info.value.path == "val"

    @pytest.mark.parametrize(
        ("operator", "field", "condition"),
        [
            (InOperator(), ["a"], {"a", "b"}),
            (NotInOperator(), ["a"], {"a", "b"}),
            (AllOperator(), 5, ["a"]),
            (AllOperator(), [["a"]], ["a"]),
            (BetweenOperator(), "ABC", [1, 10]),
            (BetweenOperator(), ["ABC", "XYZ"], [1, 10]),
            (NotBetweenOperator(), "ABC", [1, 10]),
        ],
    )
    def test_mismatched_field_never_satisfies(
        self, operator, field, condition
    ) -> None:
        assert operator.evaluate(field, condition) is False

    @pytest.mark.parametrize("operator", [InOperator(), NotInOperator(), AllOperator()])
    def test_membership_rejects_scalars(self, operator) -> None:
        with pytest.raises(ValidationError):
            operator.validate("UPS")
        with pytest.raises(ValidationError):
            operator.validate(None)


class TestStringOperators:
    """Tests for LIKE, CONTAINS, STARTSWITH, ENDSWITH and REGEX variants."""

    def test_like_to_regex(self) -> None:
        assert like_to_regex("a%b_") == "^a.*b.$"
        assert like_to_regex("1.5") == r"^1\.5$"

    def test_like_operator_with_wildcards(self) -> None:
        op = LikeOperator()
        assert op.evaluate("ORD-001", "ORD-%") is True
        assert op.evaluate("ORD-001", "ORD-00_") is True
        assert op.evaluate("ord-001", "ORD-%") is False

    def test_ilike_operator_case_insensitive(self) -> None:
        assert ILikeOperator().evaluate("ord-001", "ORD-%") is True

    def test_not_like_operator(self) -> None:
        assert NotLikeOperator().evaluate("SHIP-1", "ORD-%") is True
        assert NotLikeOperator().evaluate("ORD-1", "ORD-%") is False

    def test_contains_variants(self) -> None:
        assert ContainsOperator().evaluate("Tire Rack", "Rack") is True
        assert ContainsOperator().evaluate("Tire Rack", "rack") is False
        assert IContainsOperator().evaluate("Tire Rack", "rack") is True

    def test_startswith_variants(self) -> None:
        assert StartsWithOperator().evaluate("FB-LIP-001", "FB-") is True
        assert IStartsWithOperator().evaluate("FB-LIP-001", "fb-") is True

    def test_endswith_variants(self) -> None:
        assert EndsWithOperator().evaluate("orders@small.com", ".com") is True
        assert IEndsWithOperator().evaluate("ORDERS@SMALL.COM", ".com") is True

    def test_regex_variants(self) -> None:
        assert RegexOperator().evaluate("1Z999AA10123456784", r"^1Z\d{3}") is True
        assert RegexOperator().evaluate("1z999", r"^1Z") is False
        assert IRegexOperator().evaluate("1z999", r"^1Z") is True

    @pytest.mark.parametrize(
        "operator",
        [
            LikeOperator(),
            NotLikeOperator(),
            ILikeOperator(),
            ContainsOperator(),
            IContainsOperator(),
            StartsWithOperator(),
            IStartsWithOperator(),
            EndsWithOperator(),
            IEndsWithOperator(),
            RegexOperator(),
            IRegexOperator(),
        ],
    )
    def test_missing_field_never_matches(self, operator) -> None:
        assert operator.evaluate(None, "x") is False

    def test_regex_validate_rejects_bad_pattern(self) -> None:
        with pytest.raises(ValidationError):
            RegexOperator().validate("[unclosed")


class TestNullOperators:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, True), ("", True), ("  ", True), ([], True), ("x", False), (0, False)],
    )
    def test_is_empty(self, value, expected) -> None:
        assert is_empty(value) is expected
        assert IsEmptyOperator().evaluate(value, None) is expected
        assert IsNotEmptyOperator().evaluate(value, None) is (not expected)

    def test_null_checks(self) -> None:
        assert IsNullOperator().evaluate(None, None) is True
        assert IsNullOperator().evaluate("", None) is False
        assert IsNotNullOperator().evaluate(0, None) is True


class TestRegistry:
    def test_default_registry_covers_every_comparison(self) -> None:
        registry = build_default_registry()
        expected = set(SpecificationOperator) - LOGICAL_OPERATORS
        assert registry.supported_operators == expected

    def test_default_registries_are_independent(self) -> None:
        first, second = build_default_registry(), build_default_registry()
        first.unregister(SpecificationOperator.EQ)
        assert not first.has(SpecificationOperator.EQ)
        assert second.has(SpecificationOperator.EQ)

    def test_evaluate_shortcut(self) -> None:
        registry = build_default_registry()
        assert registry.evaluate(SpecificationOperator.EQ, "a", "a") is True

    def test_require_unknown_operator(self) -> None:
        registry = MemoryOperatorRegistry()
        assert registry.get(SpecificationOperator.EQ) is None
        with pytest.raises(OperatorNotFoundError):
            registry.require(SpecificationOperator.EQ)

    def test_custom_operator(self) -> None:
        class AlwaysEqual(MemoryOperator):
            @property
            def name(self) -> SpecificationOperator:
                return SpecificationOperator.EQ

            def evaluate(self, field_value, condition_value) -> bool:
                return True

        registry = build_default_registry()
        registry.register(AlwaysEqual())
        assert registry.evaluate(SpecificationOperator.EQ, 1, 2) is True

    def test_logical_operators_cannot_be_registered(self) -> None:
        class Conjunction(MemoryOperator):
            @property
            def name(self) -> SpecificationOperator:
                return SpecificationOperator.AND

            def evaluate(self, field_value, condition_value) -> bool:
                return True

        with pytest.raises(ValueError, match="logical operator"):
            MemoryOperatorRegistry(Conjunction())

    def test_registry_container_protocol(self) -> None:
        registry = build_default_registry()
        assert len(registry) == len(COMPARISON_OPERATORS)
        assert SpecificationOperator.ILIKE in registry
        assert SpecificationOperator.OR not in registry
        assert {op.name for op in registry} == COMPARISON_OPERATORS
