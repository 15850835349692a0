"""Adjacency relations restricted to a bounded domain.

``DomainAdjacency`` wraps an adjacency defined on the whole space and
limits every adjacency and neighbourhood computation to one domain, so
neighbourhood queries never escape the box.

The wrapped adjacency and the domain are shared references: the
DomainAdjacency neither copies nor owns them, and they must not be mutated
while it is in use.
"""

from collections.abc import MutableSequence

from digitopo.core.adjacency import Adjacency, PointPredicate
from digitopo.domain import DomainPredicate, HyperRectDomain, Point, Space
from digitopo.exceptions import DimensionMismatchError


class DomainAdjacency:
    """An adjacency limited to the points of a domain.

    Only the domain restriction is applied implicitly. A caller wanting to
    restrict neighbourhoods further passes its own predicate, which is
    combined with the domain predicate by a logical AND.

    Example:
        adj = DomainAdjacency(domain, standard_adjacency(2, 8))
        adj.neighborhood(domain.lower_bound)
    """

    def __init__(self, domain: HyperRectDomain, adjacency: Adjacency) -> None:
        """Bind an adjacency to a domain.

        Args:
            domain: Domain neighbourhoods are restricted to
            adjacency: Unrestricted adjacency relation of the same space

        Raises:
            DimensionMismatchError: If the domain and adjacency spaces differ
        """
        if domain.space != adjacency.space:
            raise DimensionMismatchError(
                domain.dimension, adjacency.space.dimension, "DomainAdjacency"
            )
        self._predicate = DomainPredicate(domain)
        self._adjacency = adjacency

    @property
    def domain(self) -> HyperRectDomain:
        return self._predicate.domain

    @property
    def predicate(self) -> DomainPredicate:
        """Membership test of the domain, for callers combining predicates."""
        return self._predicate

    @property
    def adjacency(self) -> Adjacency:
        return self._adjacency

    @property
    def space(self) -> Space:
        return self._adjacency.space

    def is_adjacent_to(self, p1: Point, p2: Point) -> bool:
        """Check adjacency of two points of the domain."""
        return (
            self._predicate(p1)
            and self._predicate(p2)
            and self._adjacency.is_adjacent_to(p1, p2)
        )

    def is_properly_adjacent_to(self, p1: Point, p2: Point) -> bool:
        return p1 != p2 and self.is_adjacent_to(p1, p2)

    def write_neighborhood(
        self,
        p: Point,
        out: MutableSequence[Point],
        predicate: PointPredicate | None = None,
    ) -> None:
        """Append the neighbours of ``p`` inside the domain satisfying ``predicate``."""
        self._adjacency.write_neighborhood(p, out, self._restrict(predicate))

    def write_proper_neighborhood(
        self,
        p: Point,
        out: MutableSequence[Point],
        predicate: PointPredicate | None = None,
    ) -> None:
        self._adjacency.write_proper_neighborhood(p, out, self._restrict(predicate))

    def neighborhood(
        self, p: Point, predicate: PointPredicate | None = None
    ) -> list[Point]:
        out: list[Point] = []
        self.write_neighborhood(p, out, predicate)
        return out

    def neighbors(self, p: Point) -> list[Point]:
        """Graph interface: proper neighbours of ``p`` inside the domain."""
        out: list[Point] = []
        self.write_proper_neighborhood(p, out)
        return out

    def is_valid(self) -> bool:
        return self._predicate.is_valid()

    def _restrict(self, predicate: PointPredicate | None) -> PointPredicate:
        in_domain = self._predicate
        if predicate is None:
            return in_domain
        return lambda q: in_domain(q) and predicate(q)
