"""String operators: like, not_like, ilike, contains, icontains, etc.

Every string operator answers ``False`` for a missing field, including
the negated ``not_like``: an absent value satisfies no string condition.
"""

from __future__ import annotations

import re
from typing import Any

from ..evaluator import MemoryOperator
from ..exceptions import ValidationError
from ..operators import SpecificationOperator


def like_to_regex(pattern: str) -> str:
    """Convert a SQL LIKE pattern (``%``, ``_``) to an anchored Python regex."""
    parts = []
    for char in pattern:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return "^" + "".join(parts) + "$"


class _StringOperator(MemoryOperator):
    """Base for operators comparing ``str(field)`` against ``str(condition)``."""

    _name: SpecificationOperator
    ignore_case: bool = False

    @property
    def name(self) -> SpecificationOperator:
        return self._name

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        text, needle = str(field_value), str(condition_value)
        if self.ignore_case:
            text, needle = text.casefold(), needle.casefold()
        return self.match(text, needle)

    def match(self, text: str, needle: str) -> bool:
        raise NotImplementedError


class ContainsOperator(_StringOperator):
    _name = SpecificationOperator.CONTAINS

    def match(self, text: str, needle: str) -> bool:
        return needle in text


class IContainsOperator(ContainsOperator):
    _name = SpecificationOperator.ICONTAINS
    ignore_case = True


class StartsWithOperator(_StringOperator):
    _name = SpecificationOperator.STARTSWITH

    def match(self, text: str, needle: str) -> bool:
        return text.startswith(needle)


class IStartsWithOperator(StartsWithOperator):
    _name = SpecificationOperator.ISTARTSWITH
    ignore_case = True


class EndsWithOperator(_StringOperator):
    _name = SpecificationOperator.ENDSWITH

    def match(self, text: str, needle: str) -> bool:
        return text.endswith(needle)


class IEndsWithOperator(EndsWithOperator):
    _name = SpecificationOperator.IENDSWITH
    ignore_case = True


class LikeOperator(_StringOperator):
    _name = SpecificationOperator.LIKE

    def match(self, text: str, needle: str) -> bool:
        return re.match(like_to_regex(needle), text, re.DOTALL) is not None


class ILikeOperator(LikeOperator):
    _name = SpecificationOperator.ILIKE
    ignore_case = True


class NotLikeOperator(LikeOperator):
    _name = SpecificationOperator.NOT_LIKE

    def match(self, text: str, needle: str) -> bool:
        return not super().match(text, needle)


class RegexOperator(MemoryOperator):
    """``re.search`` semantics; the pattern is compiled at build time."""

    _flags = 0

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.REGEX

    def validate(self, condition_value: Any) -> None:
        try:
            re.compile(str(condition_value), self._flags)
        except re.error as exc:
            raise ValidationError(
                f"Invalid regular expression {condition_value!r}: {exc}", path="val"
            ) from exc

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        match = re.search(str(condition_value), str(field_value), self._flags)
        return match is not None


class IRegexOperator(RegexOperator):
    _flags = re.IGNORECASE

    @property
    def name(self) -> SpecificationOperator:
        return SpecificationOperator.IREGEX
