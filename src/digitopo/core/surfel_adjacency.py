"""Surfel adjacency: how boundary surfels are linked into contours.

Moving from a bel along one of its tangent axes, the boundary continues on
one of three "followers":

1. the surfel turning around the interior spel,
2. the translated surfel (the boundary goes straight on),
3. the surfel turning around the exterior spel.

Which one is chosen depends on the two spels ahead, except in the diagonal
configuration (interior spel ahead is exterior, exterior spel ahead is
interior) where the adjacency flag of the pair of axes decides: with
interior-to-exterior adjacency the follower turns around the interior spel,
so the interior is 4-connected across that pair of axes; otherwise it turns
around the exterior spel and the interior is 8-connected.
"""

from collections.abc import Callable, Container

from digitopo.core.kspace import KhalimskySpace
from digitopo.domain import Point, SCell
from digitopo.exceptions import DegenerateShapeError, DimensionMismatchError


class SurfelAdjacency:
    """Interior-to-exterior flags, one per pair of axes.

    Flags are kept symmetric so that the surfel adjacency graph is
    undirected.
    """

    def __init__(self, dimension: int, interior_to_exterior: bool = True) -> None:
        self._dimension = dimension
        self._flags = [[interior_to_exterior] * dimension for _ in range(dimension)]

    @property
    def dimension(self) -> int:
        return self._dimension

    def get_adjacency(self, i: int, j: int) -> bool:
        """True for interior-to-exterior adjacency between axes i and j."""
        return self._flags[i][j]

    def set_adjacency(self, i: int, j: int, interior_to_exterior: bool) -> None:
        self._flags[i][j] = interior_to_exterior
        self._flags[j][i] = interior_to_exterior

    def reverse(self) -> "SurfelAdjacency":
        """Adjacency with every flag flipped (swaps the roles of set and complement)."""
        result = SurfelAdjacency(self._dimension)
        result._flags = [[not flag for flag in row] for row in self._flags]
        return result

    def __repr__(self) -> str:
        return f"SurfelAdjacency(dimension={self._dimension}, flags={self._flags})"


class SurfelNeighborhood:
    """Followers of one bel along its tangent axes."""

    def __init__(
        self,
        kspace: KhalimskySpace,
        surfel_adjacency: SurfelAdjacency,
        surfel: SCell,
    ) -> None:
        if surfel_adjacency.dimension != kspace.dimension:
            raise DimensionMismatchError(
                kspace.dimension, surfel_adjacency.dimension, "SurfelNeighborhood"
            )
        self._kspace = kspace
        self._adjacency = surfel_adjacency
        self._surfel = surfel
        self._orth = kspace.orth_dir(surfel)
        self._inner = kspace.inner_spel(surfel)
        self._outer = kspace.outer_spel(surfel)

    @property
    def surfel(self) -> SCell:
        return self._surfel

    @property
    def orth_dir(self) -> int:
        return self._orth

    @property
    def inner(self) -> Point:
        return self._inner

    @property
    def outer(self) -> Point:
        return self._outer

    def spels_ahead(self, track_dir: int, pos: bool) -> tuple[Point, Point]:
        """Interior-side and exterior-side spels one step along ``track_dir``."""
        delta = 1 if pos else -1
        return (
            self._kspace.translate(self._inner, track_dir, delta),
            self._kspace.translate(self._outer, track_dir, delta),
        )

    def _bel_from(self, inner: Point, axis: int, up: bool) -> SCell | None:
        if not self._kspace.in_bounds(inner):
            return None
        return self._kspace.bel(inner, axis, up)

    def followers(
        self, track_dir: int, pos: bool
    ) -> tuple[SCell | None, SCell | None, SCell | None]:
        """The three candidate next surfels, in follower order 1, 2, 3.

        A follower is None when its interior spel lies beyond a closed border.
        """
        y_int, y_ext = self.spels_ahead(track_dir, pos)
        return (
            self._bel_from(self._inner, track_dir, pos),
            self._bel_from(y_int, self._orth, self._surfel.positive),
            self._bel_from(y_ext, track_dir, not pos),
        )

    def follower_index(
        self, track_dir: int, pos: bool, inside: Callable[[Point], bool]
    ) -> int:
        """Which follower (0, 1 or 2) continues the boundary of ``inside``."""
        y_int, y_ext = self.spels_ahead(track_dir, pos)
        if self._adjacency.get_adjacency(self._orth, track_dir):
            if inside(y_int):
                return 2 if inside(y_ext) else 1
            return 0
        if not inside(y_ext):
            return 1 if inside(y_int) else 0
        return 2

    def adjacent_on_predicate(
        self, track_dir: int, pos: bool, inside: Callable[[Point], bool]
    ) -> SCell:
        """Next bel of the set ``inside`` along ``track_dir``.

        Raises:
            DegenerateShapeError: If ``inside`` holds beyond a closed border
        """
        follower = self.followers(track_dir, pos)[self.follower_index(track_dir, pos, inside)]
        if follower is None:
            raise DegenerateShapeError(
                f"boundary of {self._surfel} leaves the space along axis {track_dir}"
            )
        return follower

    def adjacent_on_surfels(
        self, track_dir: int, pos: bool, surfels: Container[SCell]
    ) -> SCell | None:
        """Next bel along ``track_dir`` among an explicit set of surfels.

        Followers are tried in order 1, 2, 3 for interior-to-exterior
        adjacency, in order 3, 2, 1 otherwise.
        """
        candidates = self.followers(track_dir, pos)
        if not self._adjacency.get_adjacency(self._orth, track_dir):
            candidates = candidates[::-1]
        for candidate in candidates:
            if candidate is not None and candidate in surfels:
                return candidate
        return None
