"""Closed lattice contours extracted from 2D digital sets.

This module defines:
- Contour: A closed polygon of pointels bounding a 2D digital set
- WindingDirection: Enum for contour winding direction

Pointel (x, y) is the lower-left corner of the spel (x, y), so a spel
occupies the unit square [x, x + 1] x [y, y + 1]. Extracted contours keep
the interior on their left: outer contours wind counter-clockwise and
contours of holes clockwise.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from digitopo.domain.point import Point

# Spel on the left of a unit step, as an offset from the step's origin.
_LEFT_SPEL: dict[tuple[int, int], tuple[int, int]] = {
    (1, 0): (0, 0),
    (0, 1): (-1, 0),
    (-1, 0): (-1, -1),
    (0, -1): (0, -1),
}


class WindingDirection(Enum):
    """Contour winding direction.

    - Contours of a set's outer border wind counter-clockwise
    - Contours of holes wind clockwise
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass
class Contour:
    """A closed contour made of unit steps between pointels.

    The last point is implicitly joined to the first one.

    Attributes:
        points: Pointels in traversal order
    """

    points: list[Point]
    _cached_area: float | None = field(default=None, repr=False, init=False)
    _cached_bbox: tuple[int, int, int, int] | None = field(
        default=None, repr=False, init=False
    )

    def __len__(self) -> int:
        return len(self.points)

    def signed_area(self) -> float:
        """Calculate signed area using shoelace formula.

        Positive for counter-clockwise contours, negative for clockwise ones.
        Result is cached.

        Returns:
            Signed area of the contour
        """
        if self._cached_area is not None:
            return self._cached_area

        n = len(self.points)
        if n < 3:
            self._cached_area = 0.0
            return 0.0

        area = 0
        for i in range(n):
            j = (i + 1) % n
            area += self.points[i][0] * self.points[j][1]
            area -= self.points[j][0] * self.points[i][1]

        self._cached_area = area / 2.0
        return self._cached_area

    def winding(self) -> WindingDirection | None:
        """Winding direction, None for degenerate contours."""
        area = self.signed_area()
        if area > 0:
            return WindingDirection.COUNTER_CLOCKWISE
        if area < 0:
            return WindingDirection.CLOCKWISE
        return None

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Calculate bounding box of the contour.

        Result is cached.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        if self._cached_bbox is not None:
            return self._cached_bbox

        if not self.points:
            self._cached_bbox = (0, 0, 0, 0)
            return self._cached_bbox

        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]

        self._cached_bbox = (min(xs), min(ys), max(xs), max(ys))
        return self._cached_bbox

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point is inside contour using ray casting algorithm.

        Casts a ray from the point to the right and counts intersections
        with contour edges. Odd count means inside, even means outside.

        Args:
            x: X coordinate of point to test
            y: Y coordinate of point to test

        Returns:
            True if point is inside contour, False otherwise
        """
        n = len(self.points)
        if n < 3:
            return False

        inside = False
        j = n - 1

        for i in range(n):
            xi, yi = self.points[i][0], self.points[i][1]
            xj, yj = self.points[j][0], self.points[j][1]

            if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
                inside = not inside

            j = i

        return inside

    def contains_spel(self, spel: Point) -> bool:
        """Check if the unit square of ``spel`` is enclosed by the contour."""
        return self.contains_point(spel[0] + 0.5, spel[1] + 0.5)

    def interior_points(self) -> set[Point]:
        """All spels enclosed by the contour (ignoring its orientation)."""
        min_x, min_y, max_x, max_y = self.bounding_box()
        return {
            Point((x, y))
            for x in range(min_x, max_x)
            for y in range(min_y, max_y)
            if self.contains_point(x + 0.5, y + 0.5)
        }

    def inner_boundary_points(self) -> set[Point]:
        """Distinct interior spels touching the contour.

        Every unit step has its interior spel on the left; for a contour of
        a filled block this is the block's perimeter pixels.
        """
        result: set[Point] = set()
        n = len(self.points)
        for i in range(n):
            a, b = self.points[i], self.points[(i + 1) % n]
            step = (b[0] - a[0], b[1] - a[1])
            offset = _LEFT_SPEL.get(step)
            if offset is None:
                continue
            result.add(Point((a[0] + offset[0], a[1] + offset[1])))
        return result

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the contour
        """
        winding = self.winding()
        return {
            "points": [list(p.coords) for p in self.points],
            "direction": winding.name.lower() if winding else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a contour

        Returns:
            Contour instance
        """
        return cls(points=[Point(tuple(p)) for p in data["points"]])
