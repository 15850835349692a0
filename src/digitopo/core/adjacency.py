"""Adjacency relations between points of a digital space.

An adjacency relation tells which points are neighbours, independently of
any domain. ``MetricAdjacency`` covers the classical relations: two
distinct points are adjacent when they differ by at most one on every axis
and by at most ``max_norm1`` in total. In 2D this gives the 4- and
8-adjacencies, in 3D the 6-, 18- and 26-adjacencies.
"""

import itertools
from collections.abc import Callable, MutableSequence
from typing import Protocol

from digitopo.domain import Point, Space
from digitopo.exceptions import AdjacencyError

PointPredicate = Callable[[Point], bool]


class Adjacency(Protocol):
    """Interface shared by all adjacency relations."""

    @property
    def space(self) -> Space: ...

    def is_adjacent_to(self, p1: Point, p2: Point) -> bool: ...

    def is_properly_adjacent_to(self, p1: Point, p2: Point) -> bool: ...

    def write_neighborhood(
        self,
        p: Point,
        out: MutableSequence[Point],
        predicate: PointPredicate | None = None,
    ) -> None: ...

    def write_proper_neighborhood(
        self,
        p: Point,
        out: MutableSequence[Point],
        predicate: PointPredicate | None = None,
    ) -> None: ...


class MetricAdjacency:
    """Adjacency defined by the l1 and l-infinity norms of the difference.

    The relation is symmetric and irreflexive. Neighbourhoods are always
    enumerated in the same order: offsets sorted lexicographically.

    Example:
        adj = MetricAdjacency(Z2, 1)   # 4-adjacency
        adj.neighborhood(Point.of(0, 0))
    """

    def __init__(self, space: Space, max_norm1: int) -> None:
        if not 1 <= max_norm1 <= space.dimension:
            raise AdjacencyError(
                f"max_norm1 must lie in [1, {space.dimension}], got {max_norm1}"
            )
        self._space = space
        self._max_norm1 = max_norm1
        self._offsets: tuple[Point, ...] = tuple(
            Point(delta)
            for delta in itertools.product((-1, 0, 1), repeat=space.dimension)
            if 0 < sum(abs(d) for d in delta) <= max_norm1
        )

    @property
    def space(self) -> Space:
        return self._space

    @property
    def max_norm1(self) -> int:
        return self._max_norm1

    @property
    def offsets(self) -> tuple[Point, ...]:
        return self._offsets

    @property
    def connectivity(self) -> int:
        """Number of neighbours of any point (e.g. 4, 8, 6, 18, 26)."""
        return len(self._offsets)

    def is_adjacent_to(self, p1: Point, p2: Point) -> bool:
        """Check if p1 and p2 are distinct neighbours."""
        diff = p2 - p1
        return 0 < diff.norm1() <= self._max_norm1 and diff.norm_inf() <= 1

    def is_properly_adjacent_to(self, p1: Point, p2: Point) -> bool:
        return p1 != p2 and self.is_adjacent_to(p1, p2)

    def write_neighborhood(
        self,
        p: Point,
        out: MutableSequence[Point],
        predicate: PointPredicate | None = None,
    ) -> None:
        """Append every neighbour of ``p`` satisfying ``predicate`` to ``out``."""
        self._space.check(p, "neighborhood")
        for offset in self._offsets:
            q = p + offset
            if predicate is None or predicate(q):
                out.append(q)

    def write_proper_neighborhood(
        self,
        p: Point,
        out: MutableSequence[Point],
        predicate: PointPredicate | None = None,
    ) -> None:
        """Same as ``write_neighborhood``; ``p`` itself is never written."""
        self.write_neighborhood(
            p, out, lambda q: q != p and (predicate is None or predicate(q))
        )

    def neighborhood(
        self, p: Point, predicate: PointPredicate | None = None
    ) -> list[Point]:
        out: list[Point] = []
        self.write_neighborhood(p, out, predicate)
        return out

    def neighbors(self, p: Point) -> list[Point]:
        return self.neighborhood(p)

    def is_valid(self) -> bool:
        return 1 <= self._max_norm1 <= self._space.dimension

    def __repr__(self) -> str:
        return f"MetricAdjacency(dimension={self._space.dimension}, max_norm1={self._max_norm1})"


def standard_adjacency(dimension: int, connectivity: int) -> MetricAdjacency:
    """Build the adjacency with the given number of neighbours.

    Args:
        dimension: Space dimension
        connectivity: Neighbour count, e.g. 4 or 8 in 2D, 6, 18 or 26 in 3D

    Returns:
        The matching MetricAdjacency

    Raises:
        AdjacencyError: If no metric adjacency has that many neighbours
    """
    space = Space(dimension)
    for max_norm1 in range(1, dimension + 1):
        count = sum(
            1
            for delta in itertools.product((-1, 0, 1), repeat=dimension)
            if 0 < sum(abs(d) for d in delta) <= max_norm1
        )
        if count == connectivity:
            return MetricAdjacency(space, max_norm1)
    raise AdjacencyError(f"no {connectivity}-adjacency exists in dimension {dimension}")
