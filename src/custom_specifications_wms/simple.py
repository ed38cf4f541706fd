"""
Introductory examples over plain values.

Each ``example_*`` function writes a short report to *out* (standard
output by default) and returns what it computed, so the examples double
as fixtures for the test-suite.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from custom_specifications import BaseSpecification, ValidationError, where

if TYPE_CHECKING:
    from typing import TextIO

SPAM_DOMAINS = frozenset({"spam.com", "junk.com", "trash.com"})


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    email: str
    age: int
    is_active: bool


# -- user rules --------------------------------------------------------------


class IsAdultSpecification(BaseSpecification[User]):
    def is_satisfied_by(self, candidate: User) -> bool:
        return candidate.age >= 18


class IsActiveUserSpecification(BaseSpecification[User]):
    def is_satisfied_by(self, candidate: User) -> bool:
        return candidate.is_active


# -- string rules ------------------------------------------------------------


class HasAtSymbolSpecification(BaseSpecification[str]):
    def is_satisfied_by(self, candidate: str) -> bool:
        return bool(candidate) and "@" in candidate


class HasDomainSpecification(BaseSpecification[str]):
    """``local@domain`` with a dotted domain that neither starts nor ends with '.'."""

    def is_satisfied_by(self, candidate: str) -> bool:
        if not candidate:
            return False
        parts = candidate.split("@")
        if len(parts) != 2:
            return False
        local, domain = parts
        return (
            bool(local)
            and "." in domain
            and not domain.startswith(".")
            and not domain.endswith(".")
        )


class NotSpamDomainSpecification(BaseSpecification[str]):
    """Domain is not a known spam domain.

    Inputs without an ``@`` have no domain and are accepted.
    """

    def __init__(self, spam_domains: frozenset[str] = SPAM_DOMAINS) -> None:
        self.spam_domains = frozenset(d.casefold() for d in spam_domains)

    def is_satisfied_by(self, candidate: str) -> bool:
        if not candidate or "@" not in candidate:
            return True
        domain = candidate.split("@")[1]
        return domain.casefold() not in self.spam_domains


class MinLengthSpecification(BaseSpecification[str]):
    def __init__(self, min_length: int) -> None:
        if min_length < 0:
            raise ValidationError(
                f"'min_length' must be non-negative, got {min_length}",
                path="min_length",
            )
        self.min_length = min_length

    def is_satisfied_by(self, candidate: str) -> bool:
        return bool(candidate) and len(candidate) >= self.min_length

    def to_dict(self) -> dict[str, object]:
        return {"op": "min_length", "min_length": self.min_length}


class HasSpecialCharacterSpecification(BaseSpecification[str]):
    def is_satisfied_by(self, candidate: str) -> bool:
        return bool(candidate) and any(not c.isalnum() for c in candidate)


class HasDigitSpecification(BaseSpecification[str]):
    def is_satisfied_by(self, candidate: str) -> bool:
        return bool(candidate) and any(c.isdigit() for c in candidate)


# -- number rules ------------------------------------------------------------


class IsPositiveSpecification(BaseSpecification[int]):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate > 0


class IsInRangeSpecification(BaseSpecification[int]):
    """Inclusive ``[minimum, maximum]`` range.

    Raises:
        ValidationError: If ``maximum < minimum``.
    """

    def __init__(self, minimum: int, maximum: int) -> None:
        if maximum < minimum:
            raise ValidationError(
                f"'maximum' ({maximum}) must not be less than 'minimum' ({minimum})",
                path="maximum",
            )
        self.minimum = minimum
        self.maximum = maximum

    def is_satisfied_by(self, candidate: int) -> bool:
        return self.minimum <= candidate <= self.maximum

    def to_dict(self) -> dict[str, object]:
        return {"op": "in_range", "min": self.minimum, "max": self.maximum}


class IsEvenSpecification(BaseSpecification[int]):
    def is_satisfied_by(self, candidate: int) -> bool:
        return candidate % 2 == 0


# -- examples ----------------------------------------------------------------


def _print(out: TextIO, text: str = "") -> None:
    out.write(text + "\n")


def _joined(values: list[int]) -> str:
    return ", ".join(str(v) for v in values)


def example_user_validation(out: TextIO | None = None) -> list[User]:
    """Active adults, via AND."""
    out = out or sys.stdout
    _print(out, "=== Example 1: Simple User Validation ===")
    _print(out)
    users = [
        User(username="user1", email="john@example.com", age=25, is_active=True),
        User(username="user2", email="jane@example.com", age=17, is_active=True),
        User(username="user3", email="bob@example.com", age=30, is_active=False),
        User(username="user4", email="alice@example.com", age=22, is_active=True),
    ]
    active_adults = where(
        users, IsAdultSpecification() & IsActiveUserSpecification()
    ).to_list()

    _print(out, "Active adult users:")
    for user in active_adults:
        _print(out, f"  - {user.username} ({user.email}), Age: {user.age}")
    _print(out)
    _print(out, f"Total: {len(active_adults)}")
    _print(out)
    return active_adults


def example_email_validation(out: TextIO | None = None) -> dict[str, bool]:
    """Well-formed, non-spam addresses, via chained AND."""
    out = out or sys.stdout
    _print(out, "=== Example 2: Email Validation ===")
    _print(out)
    emails = [
        "valid@example.com",
        "invalid-email",
        "test@spam.com",
        "admin@company.com",
        "",
    ]
    valid_non_spam = (
        HasAtSymbolSpecification()
        .and_(HasDomainSpecification())
        .and_(NotSpamDomainSpecification())
    )

    results = {email: valid_non_spam.is_satisfied_by(email) for email in emails}
    _print(out, "Valid non-spam emails:")
    for email, ok in results.items():
        _print(out, f"  [{'x' if ok else ' '}] {email or '<empty>'}")
    _print(out)
    return results


def example_number_ranges(out: TextIO | None = None) -> tuple[list[int], list[int]]:
    """Positive numbers within [1, 100], via AND and OR."""
    out = out or sys.stdout
    _print(out, "=== Example 3: Number Range Validation ===")
    _print(out)
    numbers = [-5, 0, 15, 25, 50, 75, 101]
    is_positive = IsPositiveSpecification()
    in_range = IsInRangeSpecification(1, 100)

    strict = where(numbers, is_positive & in_range).to_list()
    relaxed = where(numbers, is_positive | in_range).to_list()

    _print(out, "Numbers that are positive and in range [1, 100]:")
    _print(out, f"  {_joined(strict)}")
    _print(out)
    _print(out, "Numbers that are positive OR in range [1, 100]:")
    _print(out, f"  {_joined(relaxed)}")
    _print(out)
    return strict, relaxed


def example_password_strength(out: TextIO | None = None) -> dict[str, bool]:
    """Length, special character and digit rules combined."""
    out = out or sys.stdout
    _print(out, "=== Example 4: String Content Validation ===")
    _print(out)
    passwords = [
        "short",
        "longbutnosymbols",
        "Long@WithSymbol",
        "NoNum@Symbol",
        "ValidP@ssw0rd",
    ]
    strong_password = (
        MinLengthSpecification(8)
        & HasSpecialCharacterSpecification()
        & HasDigitSpecification()
    )

    results = {pw: strong_password.is_satisfied_by(pw) for pw in passwords}
    _print(out, "Password strength validation:")
    for password, strong in results.items():
        _print(out, f"  {password:<20} -> {'Strong' if strong else 'Weak'}")
    _print(out)
    return results


def example_not_operator(out: TextIO | None = None) -> tuple[list[int], list[int]]:
    """Odd numbers as the negation of even ones."""
    out = out or sys.stdout
    _print(out, "=== Example 5: NOT Operator ===")
    _print(out)
    numbers = list(range(1, 21))
    is_even = IsEvenSpecification()
    is_odd = ~is_even

    evens = where(numbers, is_even).to_list()
    odds = where(numbers, is_odd).to_list()

    _print(out, "Even numbers:")
    _print(out, f"  {_joined(evens)}")
    _print(out)
    _print(out, "Odd numbers (using NOT):")
    _print(out, f"  {_joined(odds)}")
    _print(out)
    return evens, odds


EXAMPLES = (
    ("Simple User Validation", example_user_validation),
    ("Email Validation", example_email_validation),
    ("Number Range Validation", example_number_ranges),
    ("String Content Validation", example_password_strength),
    ("NOT Operator", example_not_operator),
)


def run_all(out: TextIO | None = None) -> None:
    for _title, example in EXAMPLES:
        example(out)
