"""Unit tests for hyper-rectangular domains and their iteration.

Tests cover:
- Forward, reverse and permuted iteration
- Sub-domain ranges with a starting point
- Empty and invalid domains
- Domain predicates
"""

import itertools
import math

import pytest

from digitopo.domain import Z2, DomainPredicate, HyperRectDomain, Point
from digitopo.exceptions import InvalidDomainError


class TestIteration:
    """Tests for full-domain iteration."""

    def test_two_dimensional_count(self):
        """A 5x5 box yields 25 distinct points, lower bound first."""
        domain = HyperRectDomain(Point.of(1, 1), Point.of(5, 5))
        points = list(domain)
        assert len(points) == 25
        assert len(set(points)) == 25
        assert points[0] == Point.of(1, 1)
        assert points[-1] == Point.of(5, 5)

    def test_axis_zero_fastest(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(2, 1))
        assert list(domain)[:4] == [
            Point.of(0, 0),
            Point.of(1, 0),
            Point.of(2, 0),
            Point.of(0, 1),
        ]

    def test_count_is_product_of_extents(self):
        domain = HyperRectDomain(Point.of(-1, 0, 2), Point.of(2, 3, 3))
        assert domain.extent() == Point.of(4, 4, 2)
        assert domain.size() == math.prod(domain.extent())
        assert len(list(domain)) == domain.size()
        assert len(domain) == 32

    def test_every_point_contained(self):
        domain = HyperRectDomain(Point.of(-1, 0, 2), Point.of(2, 3, 3))
        assert all(p in domain for p in domain)

    def test_reverse_is_reversed_forward(self):
        domain = HyperRectDomain(Point.of(0, 0, 0), Point.of(2, 3, 1))
        assert list(reversed(domain)) == list(domain)[::-1]

    def test_permuted_order_same_set(self):
        """Any axis permutation visits the same points."""
        domain = HyperRectDomain(Point.of(0, 0, 0), Point.of(2, 1, 3))
        reference = set(domain)
        for order in itertools.permutations(range(3)):
            points = list(domain.sub_domain(order))
            assert len(points) == domain.size()
            assert set(points) == reference

    def test_four_dimensional_reverse_order(self):
        """Order (3, 2, 1, 0) makes the last axis vary fastest."""
        domain = HyperRectDomain(Point.of(0, 0, 0, 0), Point.of(1, 1, 1, 1))
        points = list(domain.sub_domain((3, 2, 1, 0)))
        assert len(points) == 16
        assert points[:3] == [
            Point.of(0, 0, 0, 0),
            Point.of(0, 0, 0, 1),
            Point.of(0, 0, 1, 0),
        ]
        assert set(points) == set(domain)

    def test_iterator_cursor(self):
        """begin/end cursors step through the domain."""
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1))
        it = domain.begin()
        assert it.point == Point.of(0, 0)
        it.increment()
        assert it.point == Point.of(1, 0)
        it.increment()
        assert it.point == Point.of(0, 1)
        it.decrement()
        assert it.point == Point.of(1, 0)
        for _ in range(3):
            it.increment()
        assert it == domain.end()

    def test_iterator_copy_is_independent(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1))
        it = domain.begin()
        other = it.copy()
        it.increment()
        assert other.point == Point.of(0, 0)
        assert it != other

    def test_begin_at_start_point(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(2, 2))
        it = domain.begin(Point.of(1, 2))
        assert it.point == Point.of(1, 2)


class TestSubDomain:
    """Tests for sub-domain ranges."""

    def test_single_axis_from_lower_bound(self):
        domain = HyperRectDomain(Point.of(1, 1, 1), Point.of(5, 5, 5))
        points = list(domain.sub_domain((1,)))
        assert points == [Point.of(1, y, 1) for y in range(1, 6)]

    def test_single_axis_from_start(self):
        """Only the listed axis moves, starting from the start point."""
        domain = HyperRectDomain(Point.of(1, 1, 1), Point.of(5, 5, 5))
        points = list(domain.sub_domain((1,), Point.of(2, 3, 4)))
        assert points == [Point.of(2, 3, 4), Point.of(2, 4, 4), Point.of(2, 5, 4)]

    def test_reverse_sub_domain(self):
        domain = HyperRectDomain(Point.of(1, 1, 1), Point.of(5, 5, 5))
        sub = domain.sub_domain((1,), Point.of(2, 3, 4))
        assert list(reversed(sub)) == list(sub)[::-1]

    def test_plane_fixes_other_axes(self):
        """Iterating axes (0, 2) keeps y at the start point's value."""
        domain = HyperRectDomain(Point.of(1, 1, 1), Point.of(5, 5, 5))
        points = list(domain.sub_domain((0, 2), Point.of(1, 3, 1)))
        assert len(points) == 25
        assert all(p[1] == 3 for p in points)

    def test_range_exposes_order(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1))
        assert domain.sub_domain((1, 0)).order == (1, 0)

    @pytest.mark.parametrize("order", [(), (0, 0), (2,), (-1,)])
    def test_invalid_order(self, order):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1))
        with pytest.raises(InvalidDomainError):
            domain.sub_domain(order)

    def test_start_outside_domain(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1))
        with pytest.raises(InvalidDomainError):
            domain.sub_domain((0,), Point.of(3, 0))


class TestEmptyAndInvalid:
    """Tests for empty and invalid domains."""

    def test_default_domain_is_empty(self):
        domain = HyperRectDomain.empty(Z2)
        assert domain.is_empty()
        assert domain.is_valid()
        assert domain.size() == 0
        assert list(domain) == []
        assert list(reversed(domain)) == []

    def test_inverted_bounds_are_empty(self):
        domain = HyperRectDomain(Point.of(2, 2), Point.of(1, 1))
        assert domain.is_empty()
        assert domain.size() == 0
        assert list(domain) == []
        assert domain.begin() == domain.end()

    def test_empty_domain_requires_space(self):
        with pytest.raises(InvalidDomainError):
            HyperRectDomain()

    def test_single_bound_rejected(self):
        with pytest.raises(InvalidDomainError):
            HyperRectDomain(lower_bound=Point.of(0, 0))

    def test_mismatched_bounds_invalid(self):
        """Bounds of different dimensions make an invalid domain that refuses iteration."""
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1, 1))
        assert not domain.is_valid()
        with pytest.raises(InvalidDomainError):
            list(domain)

    def test_contains_wrong_dimension(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(1, 1))
        assert not domain.contains(Point.of(0, 0, 0))
        assert "not a point" not in domain


class TestDomainPredicate:
    """Tests for DomainPredicate."""

    def test_membership(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(2, 2))
        predicate = DomainPredicate(domain)
        assert predicate(Point.of(1, 2))
        assert not predicate(Point.of(3, 0))
        assert predicate.is_valid()

    def test_domain_shortcut(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(2, 2))
        assert domain.predicate() == DomainPredicate(domain)
