"""Integration tests: extracted boundaries enclose exactly the original regions."""

import pytest

from digitopo.core import (
    KhalimskySpace,
    SurfelAdjacency,
    extract_all_boundaries,
    extract_all_point_contours_4c,
)
from digitopo.domain import Contour, DigitalSet, HyperRectDomain, Point


def box_set(domain: HyperRectDomain, lower: Point, upper: Point) -> DigitalSet:
    region = HyperRectDomain(lower, upper)
    return DigitalSet(domain, region)


def enclosed_by_surfels(kspace: KhalimskySpace, surfels, p: Point) -> bool:
    """Parity of the surfels crossed by a ray from ``p`` towards +x."""
    spel = kspace.spel(p).kcoords
    crossings = sum(
        1
        for s in surfels
        if kspace.orth_dir(s) == 0
        and s.kcoords[1:] == spel[1:]
        and s.kcoords[0] > spel[0]
    )
    return crossings % 2 == 1


class TestBlockScenario:
    """A filled 3x3 block centred in a 7x7 domain."""

    @pytest.fixture
    def shape(self):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(6, 6))
        return box_set(domain, Point.of(2, 2), Point.of(4, 4))

    def test_single_closed_contour(self, shape):
        kspace = KhalimskySpace.from_domain(shape.domain)
        contours = extract_all_point_contours_4c(kspace, shape.predicate())
        assert len(contours) == 1

    def test_perimeter(self, shape):
        """The contour runs along the 8 perimeter pixels with 12 unit surfels."""
        kspace = KhalimskySpace.from_domain(shape.domain)
        (points,) = extract_all_point_contours_4c(kspace, shape.predicate())
        contour = Contour(points)
        assert len(contour) == 12
        perimeter = contour.inner_boundary_points()
        assert len(perimeter) == 8
        assert Point.of(3, 3) not in perimeter
        assert perimeter <= set(shape)

    def test_smaller_block(self):
        """A 2x2 block has 8 surfels, all four pixels on its perimeter."""
        domain = HyperRectDomain(Point.of(0, 0), Point.of(6, 6))
        shape = box_set(domain, Point.of(2, 2), Point.of(3, 3))
        kspace = KhalimskySpace.from_domain(domain)
        (points,) = extract_all_point_contours_4c(kspace, shape.predicate())
        assert len(points) == 8
        assert len(Contour(points).inner_boundary_points()) == 4


class TestContainmentRoundTrip:
    """Reconstructing a region from its boundary reproduces it."""

    @pytest.mark.parametrize(
        ("lower", "upper"),
        [((1, 1), (1, 1)), ((2, 1), (5, 3)), ((1, 1), (7, 7))],
    )
    def test_square(self, lower, upper):
        domain = HyperRectDomain(Point.of(0, 0), Point.of(8, 8))
        shape = box_set(domain, Point(lower), Point(upper))
        kspace = KhalimskySpace.from_domain(domain)
        contours = [Contour(c) for c in extract_all_point_contours_4c(kspace, shape.predicate())]
        assert len(contours) == 1
        assert contours[0].interior_points() == set(shape)
        assert all(contours[0].contains_spel(p) == (p in shape) for p in domain)

    @pytest.mark.parametrize(
        ("lower", "upper"),
        [((1, 1, 1), (1, 1, 1)), ((1, 2, 1), (3, 3, 4))],
    )
    def test_cube(self, lower, upper):
        domain = HyperRectDomain(Point.of(0, 0, 0), Point.of(5, 5, 5))
        shape = box_set(domain, Point(lower), Point(upper))
        kspace = KhalimskySpace.from_domain(domain)
        (surfels,) = extract_all_boundaries(kspace, SurfelAdjacency(3), shape.predicate())
        reconstructed = {p for p in domain if enclosed_by_surfels(kspace, surfels, p)}
        assert reconstructed == set(shape)

    def test_inner_spels_are_region_border(self):
        domain = HyperRectDomain(Point.of(0, 0, 0), Point.of(5, 5, 5))
        shape = box_set(domain, Point.of(1, 1, 1), Point.of(3, 3, 3))
        kspace = KhalimskySpace.from_domain(domain)
        (surfels,) = extract_all_boundaries(kspace, SurfelAdjacency(3), shape.predicate())
        inner = {kspace.inner_spel(s) for s in surfels}
        assert inner == set(shape) - {Point.of(2, 2, 2)}
        assert all(kspace.outer_spel(s) not in shape for s in surfels)
