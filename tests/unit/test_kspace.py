"""Unit tests for the Khalimsky space and surfel adjacency.

Tests cover:
- Cell construction and bounds
- Bel orientation, interior and exterior spels
- Periodic wrapping
- Surfel adjacency flags and follower selection
"""

import pytest

from digitopo.core import KhalimskySpace, SurfelAdjacency, SurfelNeighborhood
from digitopo.domain import HyperRectDomain, Point, SCell
from digitopo.exceptions import CellError, DimensionMismatchError, InvalidDomainError


@pytest.fixture
def ks():
    return KhalimskySpace(Point.of(0, 0), Point.of(4, 4))


class TestKhalimskySpace:
    """Tests for KhalimskySpace."""

    def test_construction(self, ks):
        assert ks.dimension == 2
        assert ks.periodic == (False, False)
        assert ks.is_valid()
        assert ks.domain() == HyperRectDomain(Point.of(0, 0), Point.of(4, 4))
        assert ks.surfel_capacity() == 121

    def test_inverted_bounds(self):
        with pytest.raises(InvalidDomainError):
            KhalimskySpace(Point.of(2, 0), Point.of(1, 4))

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            KhalimskySpace(Point.of(0, 0), Point.of(1, 1, 1))
        with pytest.raises(DimensionMismatchError):
            KhalimskySpace(Point.of(0, 0), Point.of(1, 1), periodic=[True])

    def test_from_domain(self):
        domain = HyperRectDomain(Point.of(0, 0, 0), Point.of(2, 2, 2))
        ks = KhalimskySpace.from_domain(domain, periodic=True)
        assert ks.periodic == (True, True, True)
        assert ks.upper == Point.of(2, 2, 2)

    def test_from_empty_domain(self):
        with pytest.raises(InvalidDomainError):
            KhalimskySpace.from_domain(HyperRectDomain(Point.of(1, 1), Point.of(0, 0)))

    def test_spel_and_pointel(self, ks):
        p = Point.of(2, 3)
        assert ks.spel(p).kcoords == (5, 7)
        assert ks.pointel(p).kcoords == (4, 6)
        assert ks.coords(ks.spel(p)) == p
        assert ks.coords(ks.pointel(p)) == p

    def test_bel_orientation(self, ks):
        """Positive bels have their interior spel on the lower side."""
        up = ks.bel(Point.of(2, 2), axis=0, up=True)
        down = ks.bel(Point.of(2, 2), axis=0, up=False)
        assert up == SCell((6, 5), True)
        assert down == SCell((4, 5), False)
        for bel in (up, down):
            assert ks.inner_spel(bel) == Point.of(2, 2)
        assert ks.outer_spel(up) == Point.of(3, 2)
        assert ks.outer_spel(down) == Point.of(1, 2)

    def test_border_bels_exist(self, ks):
        """Bels on the closed border of the space are valid cells."""
        bel = ks.bel(Point.of(4, 0), axis=0, up=True)
        assert ks.contains(bel)
        assert not ks.in_bounds(ks.outer_spel(bel))

    def test_bel_outside_space(self, ks):
        with pytest.raises(CellError):
            ks.bel(Point.of(5, 0), axis=0, up=True)

    def test_orth_and_tangent_dirs(self):
        ks = KhalimskySpace(Point.of(0, 0, 0), Point.of(3, 3, 3))
        bel = ks.bel(Point.of(1, 1, 1), axis=1, up=False)
        assert ks.orth_dir(bel) == 1
        assert ks.tangent_dirs(bel) == [0, 2]

    def test_orth_dir_requires_surfel(self, ks):
        with pytest.raises(CellError):
            ks.orth_dir(SCell((1, 1)))

    def test_incident(self, ks):
        """Lower incident cells flip the sign, upper ones keep it."""
        bel = SCell((6, 5), True)
        assert ks.incident(bel, 1, True) == SCell((6, 6), True)
        assert ks.incident(bel, 1, False) == SCell((6, 4), False)

    def test_contains(self, ks):
        assert ks.contains(SCell((0, 0)))
        assert ks.contains(SCell((10, 10)))
        assert not ks.contains(SCell((11, 1)))
        assert not ks.contains(SCell((1, 1, 1)))

    def test_translate_closed(self, ks):
        assert ks.translate(Point.of(4, 0), 0, 1) == Point.of(5, 0)
        assert not ks.in_bounds(Point.of(5, 0))


class TestPeriodicSpace:
    """Tests for periodic axes."""

    def test_translate_wraps(self):
        ks = KhalimskySpace(Point.of(0, 0), Point.of(4, 4), periodic=True)
        assert ks.translate(Point.of(4, 0), 0, 1) == Point.of(0, 0)
        assert ks.translate(Point.of(0, 0), 1, -1) == Point.of(0, 4)

    def test_bel_wraps(self):
        """The bel past the last spel is the bel before the first one."""
        ks = KhalimskySpace(Point.of(0, 0), Point.of(4, 4), periodic=True)
        bel = ks.bel(Point.of(4, 0), axis=0, up=True)
        assert bel == SCell((0, 1), True)
        assert ks.inner_spel(bel) == Point.of(4, 0)
        assert ks.outer_spel(bel) == Point.of(0, 0)

    def test_mixed_periodicity(self):
        ks = KhalimskySpace(Point.of(0, 0), Point.of(4, 4), periodic=[True, False])
        assert ks.translate(Point.of(4, 4), 0, 1) == Point.of(0, 4)
        assert ks.translate(Point.of(4, 4), 1, 1) == Point.of(4, 5)


class TestSurfelAdjacency:
    """Tests for SurfelAdjacency flags."""

    def test_default_flags(self):
        adjacency = SurfelAdjacency(3)
        assert all(adjacency.get_adjacency(i, j) for i in range(3) for j in range(3))

    def test_set_is_symmetric(self):
        adjacency = SurfelAdjacency(3, interior_to_exterior=True)
        adjacency.set_adjacency(0, 2, False)
        assert not adjacency.get_adjacency(2, 0)
        assert adjacency.get_adjacency(0, 1)

    def test_reverse(self):
        adjacency = SurfelAdjacency(2, interior_to_exterior=True)
        reverse = adjacency.reverse()
        assert not reverse.get_adjacency(0, 1)
        assert adjacency.get_adjacency(0, 1)


class TestSurfelNeighborhood:
    """Tests for follower selection."""

    def test_dimension_mismatch(self, ks):
        bel = ks.bel(Point.of(2, 2), 0, True)
        with pytest.raises(DimensionMismatchError):
            SurfelNeighborhood(ks, SurfelAdjacency(3), bel)

    def test_spels(self, ks):
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        assert neighborhood.orth_dir == 0
        assert neighborhood.inner == Point.of(2, 2)
        assert neighborhood.outer == Point.of(3, 2)
        assert neighborhood.spels_ahead(1, True) == (Point.of(2, 3), Point.of(3, 3))

    def test_turn_around_interior(self, ks):
        """An isolated spel's boundary turns around it."""
        inside = {Point.of(2, 2)}.__contains__
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        assert neighborhood.adjacent_on_predicate(1, True, inside) == ks.bel(
            Point.of(2, 2), 1, True
        )

    def test_straight_on(self, ks):
        inside = {Point.of(2, 2), Point.of(2, 3)}.__contains__
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        assert neighborhood.adjacent_on_predicate(1, True, inside) == ks.bel(
            Point.of(2, 3), 0, True
        )

    def test_turn_around_exterior(self, ks):
        inside = {Point.of(2, 2), Point.of(2, 3), Point.of(3, 3)}.__contains__
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        assert neighborhood.adjacent_on_predicate(1, True, inside) == ks.bel(
            Point.of(3, 3), 1, False
        )

    @pytest.mark.parametrize(
        ("interior_to_exterior", "index"),
        [(True, 0), (False, 2)],
    )
    def test_diagonal_configuration(self, ks, interior_to_exterior, index):
        """The adjacency flag decides when the spels ahead are diagonal."""
        inside = {Point.of(2, 2), Point.of(3, 3)}.__contains__
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(
            ks, SurfelAdjacency(2, interior_to_exterior), bel
        )
        assert neighborhood.follower_index(1, True, inside) == index

    def test_followers_beyond_border(self, ks):
        """Followers whose interior spel leaves a closed space are None."""
        bel = ks.bel(Point.of(4, 4), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        first, second, third = neighborhood.followers(1, True)
        assert first == ks.bel(Point.of(4, 4), 1, True)
        assert second is None
        assert third is None

    def test_adjacent_on_surfels(self, ks):
        """Explicit surfel sets give the same follower as the predicate."""
        inside = {Point.of(2, 2), Point.of(2, 3)}.__contains__
        surfels = {
            ks.bel(Point.of(2, 2), 0, True),
            ks.bel(Point.of(2, 3), 0, True),
        }
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        assert neighborhood.adjacent_on_surfels(1, True, surfels) == (
            neighborhood.adjacent_on_predicate(1, True, inside)
        )

    def test_adjacent_on_surfels_missing(self, ks):
        bel = ks.bel(Point.of(2, 2), 0, True)
        neighborhood = SurfelNeighborhood(ks, SurfelAdjacency(2), bel)
        assert neighborhood.adjacent_on_surfels(1, True, {bel}) is None
