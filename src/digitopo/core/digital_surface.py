"""Digital surfaces: boundaries seen as graphs of surfels.

A surface container knows its surfels and, for each one, the adjacent
surfels given by a surfel adjacency. ``DigitalSurface`` wraps a container
into the read-only graph the traversal visitors work on.
"""

from collections.abc import Callable, Iterable, Iterator, MutableSequence

from digitopo.core.kspace import KhalimskySpace
from digitopo.core.surfaces import membership, track_boundary
from digitopo.core.surfel_adjacency import SurfelAdjacency, SurfelNeighborhood
from digitopo.domain import Point, SCell
from digitopo.exceptions import CellError, DimensionMismatchError


def _unique(cells: Iterable[SCell | None]) -> list[SCell]:
    result: list[SCell] = []
    for cell in cells:
        if cell is not None and cell not in result:
            result.append(cell)
    return result


class ImplicitBoundary:
    """Connected boundary of a predicate, tracked from one of its bels.

    Example:
        boundary = ImplicitBoundary(ks, ball, SurfelAdjacency(3), find_a_bel(ks, ball))
        surface = DigitalSurface(boundary)
    """

    def __init__(
        self,
        kspace: KhalimskySpace,
        predicate: Callable[[Point], bool],
        surfel_adjacency: SurfelAdjacency,
        bel: SCell,
    ) -> None:
        self._kspace = kspace
        self._adjacency = surfel_adjacency
        self._inside = membership(kspace, predicate)
        self._surfels = tuple(track_boundary(kspace, surfel_adjacency, predicate, bel))
        self._index = frozenset(self._surfels)

    @property
    def kspace(self) -> KhalimskySpace:
        return self._kspace

    @property
    def surfel_adjacency(self) -> SurfelAdjacency:
        return self._adjacency

    def __iter__(self) -> Iterator[SCell]:
        return iter(self._surfels)

    def __len__(self) -> int:
        return len(self._surfels)

    def __contains__(self, surfel: object) -> bool:
        return surfel in self._index

    def neighbors(self, surfel: SCell) -> list[SCell]:
        neighborhood = SurfelNeighborhood(self._kspace, self._adjacency, surfel)
        return _unique(
            neighborhood.adjacent_on_predicate(track_dir, pos, self._inside)
            for track_dir in self._kspace.tangent_dirs(surfel)
            for pos in (True, False)
        )


class SurfelSetBoundary:
    """Surface given by an explicit collection of oriented surfels."""

    def __init__(
        self,
        kspace: KhalimskySpace,
        surfel_adjacency: SurfelAdjacency,
        surfels: Iterable[SCell],
    ) -> None:
        if surfel_adjacency.dimension != kspace.dimension:
            raise DimensionMismatchError(
                kspace.dimension, surfel_adjacency.dimension, "SurfelSetBoundary"
            )
        self._kspace = kspace
        self._adjacency = surfel_adjacency
        ordered = sorted(set(surfels))
        for surfel in ordered:
            if not kspace.contains(surfel) or not surfel.is_surfel():
                raise CellError(f"{surfel} is not a surfel of {kspace}")
        self._surfels = tuple(ordered)
        self._index = frozenset(ordered)

    @property
    def kspace(self) -> KhalimskySpace:
        return self._kspace

    @property
    def surfel_adjacency(self) -> SurfelAdjacency:
        return self._adjacency

    def __iter__(self) -> Iterator[SCell]:
        return iter(self._surfels)

    def __len__(self) -> int:
        return len(self._surfels)

    def __contains__(self, surfel: object) -> bool:
        return surfel in self._index

    def neighbors(self, surfel: SCell) -> list[SCell]:
        neighborhood = SurfelNeighborhood(self._kspace, self._adjacency, surfel)
        return _unique(
            neighborhood.adjacent_on_surfels(track_dir, pos, self._index)
            for track_dir in self._kspace.tangent_dirs(surfel)
            for pos in (True, False)
        )


SurfaceContainer = ImplicitBoundary | SurfelSetBoundary


class DigitalSurface:
    """Read-only graph whose vertices are the surfels of a container.

    Neighbour lists are computed once and cached, so repeated traversals
    see the same order.
    """

    def __init__(self, container: SurfaceContainer) -> None:
        self._container = container
        self._cache: dict[SCell, tuple[SCell, ...]] = {}

    @property
    def container(self) -> SurfaceContainer:
        return self._container

    @property
    def kspace(self) -> KhalimskySpace:
        return self._container.kspace

    def neighbors(self, v: SCell) -> list[SCell]:
        """Adjacent surfels of ``v`` in deterministic order.

        Raises:
            CellError: If ``v`` is not a vertex of the surface
        """
        cached = self._cache.get(v)
        if cached is None:
            if v not in self._container:
                raise CellError(f"{v} is not a vertex of this surface")
            cached = tuple(self._container.neighbors(v))
            self._cache[v] = cached
        return list(cached)

    def write_neighbors(self, out: MutableSequence[SCell], v: SCell) -> None:
        out.extend(self.neighbors(v))

    def degree(self, v: SCell) -> int:
        return len(self.neighbors(v))

    def size(self) -> int:
        return len(self._container)

    def __len__(self) -> int:
        return len(self._container)

    def __iter__(self) -> Iterator[SCell]:
        return iter(self._container)

    def __contains__(self, v: object) -> bool:
        return v in self._container

    def is_valid(self) -> bool:
        """Check that every neighbour is a vertex and adjacency is symmetric."""
        try:
            for v in self:
                for w in self.neighbors(v):
                    if w not in self or v not in self.neighbors(w):
                        return False
        except CellError:
            return False
        return True

    def __repr__(self) -> str:
        return f"DigitalSurface(size={self.size()}, container={type(self._container).__name__})"
