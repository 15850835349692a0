"""Axis-aligned hyper-rectangular domains and their iterators.

This module defines:
- HyperRectDomain: The box [lower_bound, upper_bound] of a digital space
- DomainIterator: A bidirectional cursor over the points of a box
- DomainRange: Iteration over a sub-domain in a chosen axis order
- DomainPredicate: Membership test bound to one domain

Iteration visits every point exactly once. In the default order axis 0
varies fastest; a custom order lists the axes from fastest to slowest.
Reverse iteration produces exactly the reverse sequence.
"""

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from digitopo.domain.point import Point, Space
from digitopo.exceptions import InvalidDomainError


class DomainIterator:
    """Bidirectional cursor over the points of a box.

    Only the axes listed in ``order`` move; the first one varies fastest.
    Stepping past the last point lands on the end position, where the
    slowest axis sits one past its upper bound. Incrementing the end
    position, or comparing cursors of different domains, is invalid usage.
    """

    __slots__ = ("_coords", "_lower", "_upper", "_order")

    def __init__(
        self,
        coords: Sequence[int],
        lower: Sequence[int],
        upper: Sequence[int],
        order: Sequence[int],
    ) -> None:
        self._coords = list(coords)
        self._lower = tuple(lower)
        self._upper = tuple(upper)
        self._order = tuple(order)

    @property
    def point(self) -> Point:
        """Point under the cursor."""
        return Point(tuple(self._coords))

    def increment(self) -> None:
        coords, order = self._coords, self._order
        last = len(order) - 1
        i = 0
        coords[order[0]] += 1
        while i < last and coords[order[i]] > self._upper[order[i]]:
            coords[order[i]] = self._lower[order[i]]
            i += 1
            coords[order[i]] += 1

    def decrement(self) -> None:
        coords, order = self._coords, self._order
        last = len(order) - 1
        i = 0
        coords[order[0]] -= 1
        while i < last and coords[order[i]] < self._lower[order[i]]:
            coords[order[i]] = self._upper[order[i]]
            i += 1
            coords[order[i]] -= 1

    def copy(self) -> "DomainIterator":
        return DomainIterator(self._coords, self._lower, self._upper, self._order)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainIterator):
            return NotImplemented
        return self._coords == other._coords

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DomainIterator({tuple(self._coords)}, order={self._order})"


@dataclass(frozen=True)
class HyperRectDomain:
    """The box [lower_bound, upper_bound] of a digital space.

    Immutable. A domain with ``lower_bound[i] > upper_bound[i]`` on some
    axis is empty; constructing one without bounds gives such a domain.

    Attributes:
        lower_bound: Lowest corner (inclusive)
        upper_bound: Highest corner (inclusive)
        space: The space the bounds live in (inferred from lower_bound)
    """

    lower_bound: Point | None = None
    upper_bound: Point | None = None
    space: Space | None = None

    def __post_init__(self) -> None:
        if self.lower_bound is None and self.upper_bound is None:
            if self.space is None:
                raise InvalidDomainError("a space is required to build an empty domain")
            object.__setattr__(self, "lower_bound", Point.zero(self.space.dimension))
            object.__setattr__(self, "upper_bound", Point.diagonal(self.space.dimension, -1))
        elif self.lower_bound is None or self.upper_bound is None:
            raise InvalidDomainError("both bounds must be given")
        if self.space is None:
            object.__setattr__(self, "space", Space(self.lower_bound.dimension))

    @classmethod
    def empty(cls, space: Space) -> "HyperRectDomain":
        """Empty domain of ``space``."""
        return cls(space=space)

    @property
    def dimension(self) -> int:
        return self.space.dimension  # type: ignore[union-attr]

    def is_valid(self) -> bool:
        """Check that both bounds have the dimension of the space."""
        return (
            self.lower_bound.dimension == self.dimension  # type: ignore[union-attr]
            and self.upper_bound.dimension == self.dimension  # type: ignore[union-attr]
        )

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise InvalidDomainError(
                f"bounds {self.lower_bound} and {self.upper_bound} do not match "
                f"dimension {self.dimension}"
            )

    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.lower_bound, self.upper_bound))  # type: ignore[arg-type]

    def extent(self) -> Point:
        """Number of points along each axis (``upper - lower + 1``)."""
        return Point(
            tuple(hi - lo + 1 for lo, hi in zip(self.lower_bound, self.upper_bound))  # type: ignore[arg-type]
        )

    def size(self) -> int:
        """Number of points in the domain."""
        if self.is_empty():
            return 0
        return math.prod(self.extent().coords)

    def __len__(self) -> int:
        return self.size()

    def contains(self, point: Point) -> bool:
        """Check if ``point`` lies inside the box."""
        if point.dimension != self.dimension:
            return False
        return all(
            lo <= c <= hi
            for lo, c, hi in zip(self.lower_bound, point, self.upper_bound)  # type: ignore[arg-type]
        )

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.contains(point)

    def predicate(self) -> "DomainPredicate":
        return DomainPredicate(self)

    def default_order(self) -> tuple[int, ...]:
        return tuple(range(self.dimension))

    def sub_domain(
        self, order: Sequence[int], start: Point | None = None
    ) -> "DomainRange":
        """Range over the axes in ``order``, the others held fixed at ``start``.

        Args:
            order: Axes to iterate, fastest first (may be a permutation of all axes)
            start: First point of the range (default: lower bound)

        Returns:
            DomainRange over the requested sub-domain

        Raises:
            InvalidDomainError: If the order or start point is unusable
        """
        return DomainRange(self, order, start)

    def begin(self, start: Point | None = None) -> DomainIterator:
        return DomainRange(self, self.default_order(), start).begin()

    def end(self) -> DomainIterator:
        return DomainRange(self, self.default_order()).end()

    def __iter__(self) -> Iterator[Point]:
        return iter(DomainRange(self, self.default_order()))

    def __reversed__(self) -> Iterator[Point]:
        return reversed(DomainRange(self, self.default_order()))

    def __str__(self) -> str:
        return f"[HyperRectDomain] = [{self.lower_bound}]x[{self.upper_bound}]"


class DomainRange:
    """Points of a domain reachable by iterating the axes in ``order``.

    Axes absent from ``order`` keep the coordinates of the start point.
    Iteration starts at the start point and runs to the end of the
    sub-domain; reverse iteration runs from the end back to the start.
    """

    def __init__(
        self,
        domain: HyperRectDomain,
        order: Sequence[int],
        start: Point | None = None,
    ) -> None:
        domain._require_valid()
        order = tuple(order)
        if not order:
            raise InvalidDomainError("iteration order must list at least one axis")
        if len(set(order)) != len(order):
            raise InvalidDomainError(f"iteration order {order} repeats an axis")
        if any(axis < 0 or axis >= domain.dimension for axis in order):
            raise InvalidDomainError(
                f"iteration order {order} is out of range for dimension {domain.dimension}"
            )
        self._domain = domain
        self._order = order
        self._empty = domain.is_empty()
        if start is None:
            start = domain.lower_bound
        elif not self._empty and not domain.contains(start):
            raise InvalidDomainError(f"start point {start} lies outside {domain}")
        self._start = start

    @property
    def order(self) -> tuple[int, ...]:
        return self._order

    @property
    def domain(self) -> HyperRectDomain:
        return self._domain

    def begin(self) -> DomainIterator:
        if self._empty:
            return self.end()
        return DomainIterator(
            self._start.coords,  # type: ignore[union-attr]
            self._domain.lower_bound.coords,  # type: ignore[union-attr]
            self._domain.upper_bound.coords,  # type: ignore[union-attr]
            self._order,
        )

    def end(self) -> DomainIterator:
        lower = self._domain.lower_bound.coords  # type: ignore[union-attr]
        upper = self._domain.upper_bound.coords  # type: ignore[union-attr]
        coords = list(self._start.coords)  # type: ignore[union-attr]
        for axis in self._order:
            coords[axis] = lower[axis]
        slowest = self._order[-1]
        coords[slowest] = upper[slowest] + 1
        return DomainIterator(coords, lower, upper, self._order)

    def __iter__(self) -> Iterator[Point]:
        it, end = self.begin(), self.end()
        while it != end:
            yield it.point
            it.increment()

    def __reversed__(self) -> Iterator[Point]:
        it, begin = self.end(), self.begin()
        while it != begin:
            it.decrement()
            yield it.point


@dataclass(frozen=True)
class DomainPredicate:
    """Membership test for one domain.

    The domain is referenced, not copied.
    """

    domain: HyperRectDomain

    def __call__(self, point: Point) -> bool:
        return self.domain.contains(point)

    def is_valid(self) -> bool:
        return self.domain.is_valid()
