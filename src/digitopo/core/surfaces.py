"""Boundary extraction and tracking in a Khalimsky space.

Functions in this module take a point-membership predicate (``Point ->
bool``) and return bels of the set it describes:

- find_a_bel: Locate one boundary surfel by a linear scan
- make_boundary: All bels of the set
- track_2d_boundary / track_2d_boundary_points: One closed 2D contour
- track_boundary: One connected nD boundary component
- extract_all_contours / extract_all_point_contours_4c: Every 2D contour
- extract_all_boundaries: Every nD boundary component

Points beyond a closed border of the space are exterior. Every scan and
traversal is deterministic: domain order, tangent axes in increasing order,
the positive direction before the negative one.
"""

from collections import deque
from collections.abc import Callable

import structlog

from digitopo.core.kspace import KhalimskySpace
from digitopo.core.surfel_adjacency import SurfelAdjacency, SurfelNeighborhood
from digitopo.domain import Point, SCell
from digitopo.exceptions import (
    BelNotFoundError,
    DegenerateShapeError,
    DimensionMismatchError,
    FailureKind,
)

logger = structlog.get_logger(__name__)

PointPredicate = Callable[[Point], bool]


def membership(kspace: KhalimskySpace, predicate: PointPredicate) -> PointPredicate:
    """Interior test used by the trackers: false beyond closed borders."""

    def inside(p: Point) -> bool:
        return kspace.in_bounds(p) and bool(predicate(p))

    return inside


def is_bel(kspace: KhalimskySpace, predicate: PointPredicate, surfel: SCell) -> bool:
    """Check that ``surfel`` separates an interior spel from an exterior one."""
    if not kspace.contains(surfel) or not surfel.is_surfel():
        return False
    inside = membership(kspace, predicate)
    return inside(kspace.inner_spel(surfel)) and not inside(kspace.outer_spel(surfel))


def _require_bel(kspace: KhalimskySpace, predicate: PointPredicate, bel: SCell) -> None:
    if not is_bel(kspace, predicate, bel):
        raise DegenerateShapeError(f"{bel} is not a boundary surfel of the set")


def _require_2d(kspace: KhalimskySpace, context: str) -> None:
    if kspace.dimension != 2:
        raise DimensionMismatchError(2, kspace.dimension, context)


def find_a_bel(
    kspace: KhalimskySpace,
    predicate: PointPredicate,
    budget: int | None = None,
) -> SCell:
    """Find one bel by scanning the domain of the space.

    Args:
        kspace: Space to scan
        predicate: Membership test of the set
        budget: Maximum number of points to examine (None for the whole domain)

    Returns:
        The first bel met in domain order

    Raises:
        BelNotFoundError: With kind SEARCH_EXHAUSTED when the budget runs out,
            DEGENERATE_SHAPE when the set has no boundary
    """
    inside = membership(kspace, predicate)
    examined = 0
    for p in kspace.domain():
        if budget is not None and examined >= budget:
            logger.debug("Bel search exhausted", examined=examined, budget=budget)
            raise BelNotFoundError(FailureKind.SEARCH_EXHAUSTED, examined)
        examined += 1
        p_in = inside(p)
        for axis in range(kspace.dimension):
            for up in (True, False):
                q = kspace.translate(p, axis, 1 if up else -1)
                if inside(q) == p_in:
                    continue
                bel = kspace.bel(p, axis, up) if p_in else kspace.bel(q, axis, not up)
                logger.debug("Bel found", bel=bel.kcoords, examined=examined)
                return bel
    raise BelNotFoundError(FailureKind.DEGENERATE_SHAPE, examined)


def make_boundary(kspace: KhalimskySpace, predicate: PointPredicate) -> list[SCell]:
    """Every bel of the set, each exactly once, in domain scan order."""
    inside = membership(kspace, predicate)
    bels: list[SCell] = []
    for p in kspace.domain():
        if not inside(p):
            continue
        for axis in range(kspace.dimension):
            for up in (True, False):
                if not inside(kspace.translate(p, axis, 1 if up else -1)):
                    bels.append(kspace.bel(p, axis, up))
    return bels


def track_direction_2d(kspace: KhalimskySpace, bel: SCell) -> tuple[int, bool]:
    """Tangent axis and direction keeping the interior on the left.

    With outward normal n the travel direction is (-n_y, n_x).
    """
    k = kspace.orth_dir(bel)
    return 1 - k, bel.positive if k == 0 else not bel.positive


def track_2d_boundary(
    kspace: KhalimskySpace,
    surfel_adjacency: SurfelAdjacency,
    predicate: PointPredicate,
    bel: SCell,
) -> list[SCell]:
    """Follow the closed contour through ``bel``.

    The contour keeps the interior on its left, so outer borders are
    counter-clockwise and borders of holes clockwise. It starts at ``bel``
    and stops right before coming back to it.

    Raises:
        DimensionMismatchError: If the space is not 2D
        DegenerateShapeError: If ``bel`` is not a bel of the set or the
            contour fails to close
    """
    _require_2d(kspace, "track_2d_boundary")
    _require_bel(kspace, predicate, bel)
    inside = membership(kspace, predicate)
    limit = kspace.surfel_capacity()
    contour = [bel]
    current = bel
    while True:
        track_dir, pos = track_direction_2d(kspace, current)
        current = SurfelNeighborhood(kspace, surfel_adjacency, current).adjacent_on_predicate(
            track_dir, pos, inside
        )
        if current == bel:
            break
        contour.append(current)
        if len(contour) > limit:
            raise DegenerateShapeError(f"contour through {bel} does not close")
    logger.debug("Contour tracked", seed=bel.kcoords, length=len(contour))
    return contour


def contour_points(kspace: KhalimskySpace, contour: list[SCell]) -> list[Point]:
    """Starting pointel of each surfel of a 2D contour, in travel order."""
    points = []
    for surfel in contour:
        track_dir, pos = track_direction_2d(kspace, surfel)
        points.append(kspace.coords(kspace.incident(surfel, track_dir, not pos)))
    return points


def track_2d_boundary_points(
    kspace: KhalimskySpace,
    surfel_adjacency: SurfelAdjacency,
    predicate: PointPredicate,
    bel: SCell,
) -> list[Point]:
    """Same contour as ``track_2d_boundary``, as a cyclic list of pointels."""
    return contour_points(
        kspace, track_2d_boundary(kspace, surfel_adjacency, predicate, bel)
    )


def track_boundary(
    kspace: KhalimskySpace,
    surfel_adjacency: SurfelAdjacency,
    predicate: PointPredicate,
    bel: SCell,
) -> list[SCell]:
    """Connected component of bels containing ``bel``, in breadth-first order.

    Raises:
        DegenerateShapeError: If ``bel`` is not a bel of the set
    """
    _require_bel(kspace, predicate, bel)
    inside = membership(kspace, predicate)
    visited = {bel}
    component = [bel]
    queue = deque([bel])
    while queue:
        surfel = queue.popleft()
        neighborhood = SurfelNeighborhood(kspace, surfel_adjacency, surfel)
        for track_dir in kspace.tangent_dirs(surfel):
            for pos in (True, False):
                follower = neighborhood.adjacent_on_predicate(track_dir, pos, inside)
                if follower not in visited:
                    visited.add(follower)
                    component.append(follower)
                    queue.append(follower)
    logger.debug("Boundary tracked", seed=bel.kcoords, size=len(component))
    return component


def extract_all_contours(
    kspace: KhalimskySpace,
    surfel_adjacency: SurfelAdjacency,
    predicate: PointPredicate,
) -> list[list[SCell]]:
    """Every closed 2D contour of the set; each bel lies on exactly one."""
    _require_2d(kspace, "extract_all_contours")
    seen: set[SCell] = set()
    contours = []
    for bel in make_boundary(kspace, predicate):
        if bel in seen:
            continue
        contour = track_2d_boundary(kspace, surfel_adjacency, predicate, bel)
        seen.update(contour)
        contours.append(contour)
    logger.debug("Contours extracted", count=len(contours))
    return contours


def extract_all_point_contours_4c(
    kspace: KhalimskySpace,
    predicate: PointPredicate,
    surfel_adjacency: SurfelAdjacency | None = None,
) -> list[list[Point]]:
    """Every closed 2D contour as pointels.

    Uses interior-to-exterior adjacency (4-connected interior) unless another
    surfel adjacency is given.
    """
    if surfel_adjacency is None:
        surfel_adjacency = SurfelAdjacency(2, interior_to_exterior=True)
    return [
        contour_points(kspace, contour)
        for contour in extract_all_contours(kspace, surfel_adjacency, predicate)
    ]


def extract_all_boundaries(
    kspace: KhalimskySpace,
    surfel_adjacency: SurfelAdjacency,
    predicate: PointPredicate,
) -> list[list[SCell]]:
    """Every connected boundary component of the set, in any dimension."""
    seen: set[SCell] = set()
    components = []
    for bel in make_boundary(kspace, predicate):
        if bel in seen:
            continue
        component = track_boundary(kspace, surfel_adjacency, predicate, bel)
        seen.update(component)
        components.append(component)
    logger.debug("Boundaries extracted", count=len(components))
    return components
