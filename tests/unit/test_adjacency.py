"""Unit tests for metric and domain-restricted adjacencies.

Tests cover:
- Standard 2D/3D connectivities
- Symmetry and irreflexivity
- Neighbourhood enumeration with predicates
- Domain restriction and dimension checks
"""

import pytest

from digitopo.core import DomainAdjacency, MetricAdjacency, standard_adjacency
from digitopo.domain import Z2, Z3, HyperRectDomain, Point
from digitopo.exceptions import AdjacencyError, DimensionMismatchError


class TestMetricAdjacency:
    """Tests for MetricAdjacency."""

    @pytest.mark.parametrize(
        ("dimension", "connectivity", "max_norm1"),
        [(2, 4, 1), (2, 8, 2), (3, 6, 1), (3, 18, 2), (3, 26, 3)],
    )
    def test_standard_connectivities(self, dimension, connectivity, max_norm1):
        adjacency = standard_adjacency(dimension, connectivity)
        assert adjacency.connectivity == connectivity
        assert adjacency.max_norm1 == max_norm1

    def test_unknown_connectivity(self):
        with pytest.raises(AdjacencyError):
            standard_adjacency(2, 6)

    @pytest.mark.parametrize("max_norm1", [0, 3])
    def test_invalid_norm(self, max_norm1):
        with pytest.raises(AdjacencyError):
            MetricAdjacency(Z2, max_norm1)

    def test_four_neighborhood_order(self):
        """Neighbours come in lexicographic offset order."""
        adjacency = MetricAdjacency(Z2, 1)
        assert adjacency.neighborhood(Point.of(0, 0)) == [
            Point.of(-1, 0),
            Point.of(0, -1),
            Point.of(0, 1),
            Point.of(1, 0),
        ]

    def test_adjacency_tests(self):
        four, eight = MetricAdjacency(Z2, 1), MetricAdjacency(Z2, 2)
        p = Point.of(0, 0)
        assert four.is_adjacent_to(p, Point.of(1, 0))
        assert not four.is_adjacent_to(p, Point.of(1, 1))
        assert eight.is_adjacent_to(p, Point.of(1, 1))
        assert not eight.is_adjacent_to(p, Point.of(2, 0))

    def test_irreflexive(self):
        """A point is never its own neighbour."""
        adjacency = MetricAdjacency(Z3, 3)
        p = Point.of(1, 2, 3)
        assert not adjacency.is_adjacent_to(p, p)
        assert not adjacency.is_properly_adjacent_to(p, p)
        assert p not in adjacency.neighborhood(p)

    def test_symmetric(self):
        adjacency = MetricAdjacency(Z2, 2)
        points = list(HyperRectDomain(Point.of(0, 0), Point.of(3, 3)))
        for p in points:
            for q in points:
                assert adjacency.is_adjacent_to(p, q) == adjacency.is_adjacent_to(q, p)

    def test_neighborhood_matches_relation(self):
        adjacency = MetricAdjacency(Z3, 2)
        p = Point.of(0, 0, 0)
        neighbors = adjacency.neighborhood(p)
        assert len(neighbors) == 18
        assert all(adjacency.is_adjacent_to(p, q) for q in neighbors)

    def test_write_neighborhood_appends(self):
        """Neighbours are appended after existing contents, filtered by the predicate."""
        adjacency = MetricAdjacency(Z2, 2)
        out = [Point.of(9, 9)]
        adjacency.write_neighborhood(Point.of(0, 0), out, lambda q: q[0] > 0)
        assert out == [Point.of(9, 9), Point.of(1, -1), Point.of(1, 0), Point.of(1, 1)]

    def test_wrong_dimension(self):
        with pytest.raises(DimensionMismatchError):
            MetricAdjacency(Z2, 1).neighborhood(Point.of(0, 0, 0))


class TestDomainAdjacency:
    """Tests for DomainAdjacency."""

    @pytest.fixture
    def domain(self):
        return HyperRectDomain(Point.of(0, 0), Point.of(2, 2))

    def test_corner_and_centre(self, domain):
        adjacency = DomainAdjacency(domain, standard_adjacency(2, 8))
        assert len(adjacency.neighborhood(Point.of(0, 0))) == 3
        assert len(adjacency.neighborhood(Point.of(1, 1))) == 8

    def test_neighbors_stay_in_domain(self, domain):
        """Every neighbour is in the domain and adjacent in the wrapped relation."""
        base = standard_adjacency(2, 8)
        adjacency = DomainAdjacency(domain, base)
        for p in domain:
            for q in adjacency.neighborhood(p):
                assert q in domain
                assert base.is_adjacent_to(p, q)

    def test_adjacent_requires_membership(self, domain):
        adjacency = DomainAdjacency(domain, standard_adjacency(2, 4))
        assert adjacency.is_adjacent_to(Point.of(0, 0), Point.of(1, 0))
        assert not adjacency.is_adjacent_to(Point.of(0, 0), Point.of(-1, 0))

    def test_predicate_combined_with_domain(self, domain):
        adjacency = DomainAdjacency(domain, standard_adjacency(2, 8))
        neighbors = adjacency.neighborhood(Point.of(0, 1), lambda q: q[1] == 2)
        assert neighbors == [Point.of(0, 2), Point.of(1, 2)]

    def test_proper_neighborhood(self, domain):
        adjacency = DomainAdjacency(domain, standard_adjacency(2, 4))
        out: list[Point] = []
        adjacency.write_proper_neighborhood(Point.of(1, 1), out)
        assert Point.of(1, 1) not in out
        assert adjacency.neighbors(Point.of(1, 1)) == out

    def test_dimension_mismatch(self):
        domain = HyperRectDomain(Point.of(0, 0, 0), Point.of(1, 1, 1))
        with pytest.raises(DimensionMismatchError):
            DomainAdjacency(domain, standard_adjacency(2, 4))

    def test_accessors(self, domain):
        base = standard_adjacency(2, 4)
        adjacency = DomainAdjacency(domain, base)
        assert adjacency.domain == domain
        assert adjacency.adjacency is base
        assert adjacency.space == Z2
        assert adjacency.is_valid()
        assert adjacency.predicate(Point.of(2, 2))
