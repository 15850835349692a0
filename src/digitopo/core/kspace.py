"""Khalimsky space: the cellular grid used to represent boundaries.

A Khalimsky space doubles the resolution of a digital domain so that
cells of every dimension (pointels, linels, surfels, spels) get integer
coordinates. The boundary between a set and its complement is the set of
surfels ("bels") separating an interior spel from an exterior spel.

Each axis is either closed, so that cells on the outer border of the
domain exist and points beyond the border count as exterior, or periodic,
so that coordinates wrap around.
"""

import math
from collections.abc import Sequence

from digitopo.domain import HyperRectDomain, Point, SCell
from digitopo.exceptions import CellError, DimensionMismatchError, InvalidDomainError


class KhalimskySpace:
    """Cell complex over the box [lower, upper].

    Closed axis k holds K-coordinates in [2 * lower[k], 2 * upper[k] + 2];
    periodic axis k holds [2 * lower[k], 2 * upper[k] + 1] and wraps.

    Example:
        ks = KhalimskySpace(Point.of(0, 0), Point.of(9, 9))
        bel = ks.bel(Point.of(3, 3), axis=0, up=True)
    """

    def __init__(
        self,
        lower: Point,
        upper: Point,
        periodic: bool | Sequence[bool] = False,
    ) -> None:
        """Build the space.

        Args:
            lower: Lowest digital point
            upper: Highest digital point
            periodic: One flag for all axes or one flag per axis

        Raises:
            DimensionMismatchError: If bounds or flags disagree on dimension
            InvalidDomainError: If lower > upper on some axis
        """
        if lower.dimension != upper.dimension:
            raise DimensionMismatchError(lower.dimension, upper.dimension, "KhalimskySpace")
        if not lower.is_lower_or_equal(upper):
            raise InvalidDomainError(f"lower bound {lower} exceeds upper bound {upper}")
        dimension = lower.dimension
        if isinstance(periodic, bool):
            flags = (periodic,) * dimension
        else:
            flags = tuple(bool(f) for f in periodic)
            if len(flags) != dimension:
                raise DimensionMismatchError(dimension, len(flags), "periodicity flags")
        self._lower = lower
        self._upper = upper
        self._periodic = flags
        self._kmin = tuple(2 * lo for lo in lower)
        self._kmax = tuple(
            2 * hi + 1 if flag else 2 * hi + 2 for hi, flag in zip(upper, flags)
        )

    @classmethod
    def from_domain(
        cls, domain: HyperRectDomain, periodic: bool | Sequence[bool] = False
    ) -> "KhalimskySpace":
        if domain.is_empty():
            raise InvalidDomainError(f"cannot build a Khalimsky space over empty {domain}")
        return cls(domain.lower_bound, domain.upper_bound, periodic)  # type: ignore[arg-type]

    # ------------------------------------------------------------------ basics

    @property
    def dimension(self) -> int:
        return self._lower.dimension

    @property
    def lower(self) -> Point:
        return self._lower

    @property
    def upper(self) -> Point:
        return self._upper

    @property
    def periodic(self) -> tuple[bool, ...]:
        return self._periodic

    def domain(self) -> HyperRectDomain:
        """Digital domain whose spels this space holds."""
        return HyperRectDomain(self._lower, self._upper)

    def surfel_capacity(self) -> int:
        """Upper bound on the number of distinct cells of this space."""
        return math.prod(hi - lo + 1 for lo, hi in zip(self._kmin, self._kmax))

    def is_valid(self) -> bool:
        return self._lower.is_lower_or_equal(self._upper)

    def contains(self, cell: SCell) -> bool:
        """Check that the cell's K-coordinates lie in this space."""
        if len(cell.kcoords) != self.dimension:
            return False
        return all(
            lo <= c <= hi for lo, c, hi in zip(self._kmin, cell.kcoords, self._kmax)
        )

    # ---------------------------------------------------------- point helpers

    def _wrap(self, axis: int, value: int) -> int:
        lo = self._lower[axis]
        return lo + (value - lo) % (self._upper[axis] - lo + 1)

    def _kwrap(self, axis: int, kvalue: int) -> int:
        lo = self._kmin[axis]
        return lo + (kvalue - lo) % (self._kmax[axis] - lo + 1)

    def translate(self, p: Point, axis: int, delta: int) -> Point:
        """Move ``p`` along ``axis``, wrapping periodic axes."""
        q = p.translated(axis, delta)
        if self._periodic[axis]:
            coords = list(q.coords)
            coords[axis] = self._wrap(axis, coords[axis])
            q = Point(tuple(coords))
        return q

    def in_bounds(self, p: Point) -> bool:
        """Check that ``p`` is a spel of this space (not beyond a closed border)."""
        return all(lo <= c <= hi for lo, c, hi in zip(self._lower, p, self._upper))

    # ------------------------------------------------------------ cell makers

    def spel(self, p: Point, positive: bool = True) -> SCell:
        return SCell(tuple(2 * c + 1 for c in p), positive)

    def pointel(self, p: Point, positive: bool = True) -> SCell:
        return SCell(tuple(2 * c for c in p), positive)

    def coords(self, cell: SCell) -> Point:
        """Digital point of a cell (its spel, or the lower corner for pointels)."""
        return Point(tuple(c >> 1 for c in cell.kcoords))

    def bel(self, inner: Point, axis: int, up: bool) -> SCell:
        """Surfel between spel ``inner`` and its neighbour along ``axis``.

        Args:
            inner: The interior spel
            axis: Axis separating the two spels
            up: True if the exterior spel is ``inner + e_axis``

        Returns:
            The oriented bel, positive when the interior is on the lower side

        Raises:
            CellError: If the bel lies outside this space
        """
        kcoords = [2 * c + 1 for c in inner]
        kcoords[axis] = 2 * inner[axis] + (2 if up else 0)
        if self._periodic[axis]:
            kcoords[axis] = self._kwrap(axis, kcoords[axis])
        cell = SCell(tuple(kcoords), up)
        if not self.contains(cell):
            raise CellError(f"bel {cell} lies outside the space")
        return cell

    # ----------------------------------------------------------- cell queries

    def orth_dir(self, surfel: SCell) -> int:
        """Axis separated by a surfel (its unique closed coordinate)."""
        closed = [k for k, c in enumerate(surfel.kcoords) if not c & 1]
        if len(closed) != 1:
            raise CellError(f"{surfel} is not a surfel")
        return closed[0]

    def tangent_dirs(self, surfel: SCell) -> list[int]:
        """Axes along which a surfel extends."""
        orth = self.orth_dir(surfel)
        return [k for k in range(self.dimension) if k != orth]

    def incident(self, cell: SCell, axis: int, up: bool) -> SCell:
        """Cell one half-step away along ``axis`` (a face or coface of ``cell``).

        The upper incident cell keeps the orientation, the lower one flips it.
        """
        kcoords = list(cell.kcoords)
        kcoords[axis] += 1 if up else -1
        if self._periodic[axis]:
            kcoords[axis] = self._kwrap(axis, kcoords[axis])
        return SCell(tuple(kcoords), cell.positive if up else not cell.positive)

    def inner_spel(self, bel: SCell) -> Point:
        """Interior spel of an oriented bel."""
        k = self.orth_dir(bel)
        return self._spel_beside(bel, k, below=bel.positive)

    def outer_spel(self, bel: SCell) -> Point:
        """Exterior spel of an oriented bel."""
        k = self.orth_dir(bel)
        return self._spel_beside(bel, k, below=not bel.positive)

    def _spel_beside(self, surfel: SCell, axis: int, below: bool) -> Point:
        coords = [c >> 1 for c in surfel.kcoords]
        coords[axis] = (surfel.kcoords[axis] >> 1) - (1 if below else 0)
        if self._periodic[axis]:
            coords[axis] = self._wrap(axis, coords[axis])
        return Point(tuple(coords))

    def __repr__(self) -> str:
        return (
            f"KhalimskySpace(lower={self._lower}, upper={self._upper}, "
            f"periodic={self._periodic})"
        )
