"""
Collection filtering over specifications.

Usage::

    # Lazy view: nothing is evaluated until iteration
    urgent = where(orders, is_urgent & is_pending)
    for order in urgent:
        ...

    # Eager helpers
    urgent.count()
    urgent.first_or_default()
    single(orders, has_id("ORD-001"))

``FilteredView`` is restartable: every iteration walks the source again
and re-applies the specification, so it reflects the source's current
contents and order.  Pass a re-iterable source (list, tuple, ...) if
the view is consumed more than once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar, overload

from .exceptions import MissingOperandError, MultipleMatchesError, NoMatchError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .specification import ISpecification

T = TypeVar("T")
D = TypeVar("D")

logger = logging.getLogger(__name__)

_MISSING = object()


class FilteredView(Generic[T]):
    """
    Lazy, restartable view of the elements of *source* satisfying *spec*.

    Parameters
    ----------
    source:
        Any iterable of candidates.  Iteration order is preserved.
    specification:
        The predicate applied to each element.
    """

    __slots__ = ("_source", "_spec")

    def __init__(
        self, source: Iterable[T] | None, specification: ISpecification[T] | None
    ) -> None:
        if source is None:
            raise MissingOperandError("source")
        if specification is None:
            raise MissingOperandError("specification")
        self._source = source
        self._spec = specification

    @property
    def specification(self) -> ISpecification[T]:
        return self._spec

    # -- iteration -----------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        spec = self._spec
        return (item for item in self._source if spec.is_satisfied_by(item))

    def to_list(self) -> list[T]:
        return list(self)

    # -- aggregates ----------------------------------------------------------

    def count(self) -> int:
        """Return the number of satisfying elements."""
        total = sum(1 for _ in self)
        logger.debug("%d element(s) satisfy %r", total, self._spec)
        return total

    def any(self) -> bool:
        """Return ``True`` if at least one element satisfies the specification."""
        return next(iter(self), _MISSING) is not _MISSING

    def all(self) -> bool:
        """Return ``True`` if every element of the source satisfies it.

        Vacuously ``True`` for an empty source.
        """
        return all(self._spec.is_satisfied_by(item) for item in self._source)

    # -- element retrieval ---------------------------------------------------

    def first(self) -> T:
        """
        Return the first satisfying element.

        Raises:
            NoMatchError: If no element satisfies the specification.
        """
        found = next(iter(self), _MISSING)
        if found is _MISSING:
            logger.debug("first(): no element satisfies %r", self._spec)
            raise NoMatchError(self._spec)
        return found  # type: ignore[return-value]

    @overload
    def first_or_default(self) -> T | None: ...

    @overload
    def first_or_default(self, default: D) -> T | D: ...

    def first_or_default(self, default: object = None) -> object:
        """Return the first satisfying element, or *default* if there is none."""
        return next(iter(self), default)

    def single(self) -> T:
        """
        Return the only satisfying element.

        Raises:
            NoMatchError: If no element satisfies the specification.
            MultipleMatchesError: If more than one element does.
        """
        found = self._single()
        if found is _MISSING:
            logger.debug("single(): no element satisfies %r", self._spec)
            raise NoMatchError(self._spec)
        return found  # type: ignore[return-value]

    @overload
    def single_or_default(self) -> T | None: ...

    @overload
    def single_or_default(self, default: D) -> T | D: ...

    def single_or_default(self, default: object = None) -> object:
        """
        Return the only satisfying element, or *default* if there is none.

        Raises:
            MultipleMatchesError: If more than one element satisfies it.
        """
        found = self._single()
        return default if found is _MISSING else found

    def _single(self) -> object:
        matches = iter(self)
        found = next(matches, _MISSING)
        if found is not _MISSING and next(matches, _MISSING) is not _MISSING:
            logger.debug("single(): several elements satisfy %r", self._spec)
            raise MultipleMatchesError(self._spec, count=2)
        return found

    def __repr__(self) -> str:
        return f"FilteredView({self._spec!r})"


# -- functional helpers ------------------------------------------------------


def where(
    source: Iterable[T] | None, specification: ISpecification[T] | None
) -> FilteredView[T]:
    """Filter *source* lazily by *specification*."""
    return FilteredView(source, specification)


def any_satisfy(
    source: Iterable[T] | None, specification: ISpecification[T] | None
) -> bool:
    return FilteredView(source, specification).any()


def all_satisfy(
    source: Iterable[T] | None, specification: ISpecification[T] | None
) -> bool:
    return FilteredView(source, specification).all()


def count_satisfying(
    source: Iterable[T] | None, specification: ISpecification[T] | None
) -> int:
    return FilteredView(source, specification).count()


def first(source: Iterable[T] | None, specification: ISpecification[T] | None) -> T:
    return FilteredView(source, specification).first()


def first_or_default(
    source: Iterable[T] | None,
    specification: ISpecification[T] | None,
    default: D | None = None,
) -> T | D | None:
    return FilteredView(source, specification).first_or_default(default)


def single(source: Iterable[T] | None, specification: ISpecification[T] | None) -> T:
    return FilteredView(source, specification).single()


def single_or_default(
    source: Iterable[T] | None,
    specification: ISpecification[T] | None,
    default: D | None = None,
) -> T | D | None:
    return FilteredView(source, specification).single_or_default(default)
