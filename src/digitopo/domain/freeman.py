"""Freeman chain codes of 4-connected lattice paths.

Codes follow the usual convention:
    0 east (+x), 1 north (+y), 2 west (-x), 3 south (-y)
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from digitopo.domain.point import Point
from digitopo.exceptions import DegenerateShapeError

NUM_DIRECTIONS: Final[int] = 4

DIRECTIONS_FREEMAN: Final[dict[int, tuple[int, int]]] = {
    0: (1, 0),
    1: (0, 1),
    2: (-1, 0),
    3: (0, -1),
}

DIRECTIONS_ARROW: Final[dict[int, str]] = {
    0: "→",
    1: "↑",
    2: "←",
    3: "↓",
}

_CODE_OF_STEP: Final[dict[tuple[int, int], int]] = {
    step: code for code, step in DIRECTIONS_FREEMAN.items()
}


def turn(code_from: int, code_to: int) -> int:
    """Signed quarter turns from one direction to the next (+1 left, -1 right)."""
    delta = (code_to - code_from) % NUM_DIRECTIONS
    return delta - NUM_DIRECTIONS if delta > 2 else delta


@dataclass(frozen=True)
class FreemanChain:
    """A starting point followed by a string of unit moves.

    Attributes:
        start: First point of the path
        codes: One character per move, each in "0123"
    """

    start: Point
    codes: str

    @classmethod
    def from_points(cls, points: Sequence[Point], closed: bool = True) -> "FreemanChain":
        """Encode a 4-connected sequence of 2D points.

        Args:
            points: Consecutive points, each one unit step from the previous
            closed: Also encode the step from the last point back to the first

        Raises:
            DegenerateShapeError: If two consecutive points are not 4-adjacent
        """
        if not points:
            raise DegenerateShapeError("cannot encode an empty path")
        pairs = list(zip(points, points[1:]))
        if closed and len(points) > 1:
            pairs.append((points[-1], points[0]))
        codes = []
        for a, b in pairs:
            code = _CODE_OF_STEP.get((b[0] - a[0], b[1] - a[1]))
            if code is None:
                raise DegenerateShapeError(f"{a} and {b} are not 4-adjacent")
            codes.append(str(code))
        return cls(points[0], "".join(codes))

    def __len__(self) -> int:
        return len(self.codes)

    def __str__(self) -> str:
        return f"{self.start[0]} {self.start[1]} {self.codes}"

    def points(self) -> list[Point]:
        """Decode the chain; the start point comes first."""
        x, y = self.start[0], self.start[1]
        result = [self.start]
        for code in self.codes:
            dx, dy = DIRECTIONS_FREEMAN[int(code)]
            x, y = x + dx, y + dy
            result.append(Point((x, y)))
        return result

    def is_closed(self) -> bool:
        """True when the path ends where it started."""
        return self.points()[-1] == self.start

    def winding_number(self) -> int:
        """Total turning of a closed chain in full turns (+1 counter-clockwise)."""
        if not self.codes:
            return 0
        quarter_turns = sum(
            turn(int(a), int(b))
            for a, b in zip(self.codes, self.codes[1:] + self.codes[0])
        )
        return quarter_turns // NUM_DIRECTIONS

    def arrows(self) -> str:
        return "".join(DIRECTIONS_ARROW[int(code)] for code in self.codes)
