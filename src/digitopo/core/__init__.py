"""Core digital topology algorithms for digitopo.

This module contains the adjacency relations, the Khalimsky space and the
boundary extraction and traversal machinery.

Key components:
- MetricAdjacency / DomainAdjacency: Point adjacency relations
- KhalimskySpace: Cells and bels around a domain
- SurfelAdjacency / SurfelNeighborhood: How bels link into boundaries
- surfaces: Bel search, contour and surface tracking
- DigitalSurface: Boundaries as graphs of surfels
- DepthFirstVisitor / BreadthFirstVisitor: Graph traversal
- GaussDigitizer: Digitization of Euclidean shapes
- BoundaryExtractor: Orchestrates extraction for digital sets
"""

from digitopo.core.adjacency import Adjacency, MetricAdjacency, standard_adjacency
from digitopo.core.digital_surface import (
    DigitalSurface,
    ImplicitBoundary,
    SurfelSetBoundary,
)
from digitopo.core.digitizer import GaussDigitizer
from digitopo.core.domain_adjacency import DomainAdjacency
from digitopo.core.extractor import BoundaryExtractor
from digitopo.core.kspace import KhalimskySpace
from digitopo.core.surfaces import (
    extract_all_boundaries,
    extract_all_contours,
    extract_all_point_contours_4c,
    find_a_bel,
    make_boundary,
    track_2d_boundary,
    track_2d_boundary_points,
    track_boundary,
)
from digitopo.core.surfel_adjacency import SurfelAdjacency, SurfelNeighborhood
from digitopo.core.visitors import (
    BreadthFirstVisitor,
    DepthFirstVisitor,
    VisitState,
    make_visitor,
)

__all__ = [
    "Adjacency",
    "BoundaryExtractor",
    "BreadthFirstVisitor",
    "DepthFirstVisitor",
    "DigitalSurface",
    "DomainAdjacency",
    "GaussDigitizer",
    "ImplicitBoundary",
    "KhalimskySpace",
    "MetricAdjacency",
    "SurfelAdjacency",
    "SurfelNeighborhood",
    "SurfelSetBoundary",
    "VisitState",
    "extract_all_boundaries",
    "extract_all_contours",
    "extract_all_point_contours_4c",
    "find_a_bel",
    "make_boundary",
    "make_visitor",
    "standard_adjacency",
    "track_2d_boundary",
    "track_2d_boundary_points",
    "track_boundary",
]
