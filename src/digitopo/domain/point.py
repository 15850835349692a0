"""Integer points and the spaces they live in.

This module defines the leaf value types used throughout digitopo:
- Point: An immutable integer coordinate tuple of fixed dimension
- Space: The digital space Z^d a point belongs to
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from digitopo.exceptions import DimensionMismatchError


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Point:
    """A point of the digital space Z^d.

    Immutable and hashable for use in sets/dicts. The natural ordering
    (``<``) is lexicographic on the coordinates; the componentwise partial
    order is available through ``is_lower_or_equal``.

    Attributes:
        coords: Integer coordinates, one per axis
    """

    coords: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(int(c) for c in self.coords))

    @classmethod
    def of(cls, *coords: int) -> "Point":
        """Build a point from its coordinates, e.g. ``Point.of(1, 2)``."""
        return cls(coords)

    @classmethod
    def zero(cls, dimension: int) -> "Point":
        """Origin of Z^dimension."""
        return cls((0,) * dimension)

    @classmethod
    def diagonal(cls, dimension: int, value: int) -> "Point":
        """Point with every coordinate equal to ``value``."""
        return cls((value,) * dimension)

    @property
    def dimension(self) -> int:
        return len(self.coords)

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[int]:
        return iter(self.coords)

    def __getitem__(self, axis: int) -> int:
        return self.coords[axis]

    def __repr__(self) -> str:
        return f"Point{self.coords}"

    def _check_same_dimension(self, other: "Point") -> None:
        if len(other.coords) != len(self.coords):
            raise DimensionMismatchError(len(self.coords), len(other.coords), "point arithmetic")

    def __add__(self, other: "Point") -> "Point":
        self._check_same_dimension(other)
        return Point(tuple(a + b for a, b in zip(self.coords, other.coords)))

    def __sub__(self, other: "Point") -> "Point":
        self._check_same_dimension(other)
        return Point(tuple(a - b for a, b in zip(self.coords, other.coords)))

    def __neg__(self) -> "Point":
        return Point(tuple(-a for a in self.coords))

    def translated(self, axis: int, delta: int) -> "Point":
        """Copy of this point moved by ``delta`` along ``axis``."""
        coords = list(self.coords)
        coords[axis] += delta
        return Point(tuple(coords))

    def is_lower_or_equal(self, other: "Point") -> bool:
        """Componentwise partial order: every coordinate <= the other's."""
        self._check_same_dimension(other)
        return all(a <= b for a, b in zip(self.coords, other.coords))

    def inf(self, other: "Point") -> "Point":
        """Componentwise minimum."""
        self._check_same_dimension(other)
        return Point(tuple(min(a, b) for a, b in zip(self.coords, other.coords)))

    def sup(self, other: "Point") -> "Point":
        """Componentwise maximum."""
        self._check_same_dimension(other)
        return Point(tuple(max(a, b) for a, b in zip(self.coords, other.coords)))

    def norm1(self) -> int:
        return sum(abs(a) for a in self.coords)

    def norm_inf(self) -> int:
        return max((abs(a) for a in self.coords), default=0)

    def to_tuple(self) -> tuple[int, ...]:
        """Convert to a plain coordinate tuple."""
        return self.coords

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the coordinate list
        """
        return {"coords": list(self.coords)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with a ``coords`` list

        Returns:
            Point instance
        """
        return cls(tuple(data["coords"]))


@dataclass(frozen=True, slots=True)
class Space:
    """The digital space Z^dimension.

    Attributes:
        dimension: Number of axes
    """

    dimension: int

    def point(self, *coords: int) -> Point:
        """Build a point of this space, checking its dimension."""
        return self.check(Point(coords))

    def zero(self) -> Point:
        return Point.zero(self.dimension)

    def check(self, point: Point, context: str = "space") -> Point:
        """Return ``point`` unchanged if it belongs to this space.

        Raises:
            DimensionMismatchError: If the point has another dimension
        """
        if point.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, point.dimension, context)
        return point


Z2 = Space(2)
Z3 = Space(3)
