"""Gauss digitization of Euclidean shapes.

The digitization of a shape at grid step ``h`` is the set of digital points
``p`` whose embedding ``p * h`` lies in the shape.
"""

import math
from collections.abc import Callable, Sequence

from digitopo.domain import HyperRectDomain, Point
from digitopo.exceptions import DimensionMismatchError, InvalidDomainError

RealPoint = tuple[float, ...]


class GaussDigitizer:
    """Point predicate digitizing ``shape`` inside the box [lower, upper].

    Example:
        ball = GaussDigitizer(lambda x: sum(c * c for c in x) <= 4.0,
                              (-3.0, -3.0, -3.0), (3.0, 3.0, 3.0), h=0.5)
        ball(Point.of(0, 0, 0))   # True
    """

    def __init__(
        self,
        shape: Callable[[RealPoint], bool],
        lower: Sequence[float],
        upper: Sequence[float],
        h: float = 1.0,
    ) -> None:
        if len(lower) != len(upper):
            raise DimensionMismatchError(len(lower), len(upper), "GaussDigitizer")
        if h <= 0:
            raise InvalidDomainError(f"grid step must be positive, got {h}")
        self._shape = shape
        self._h = h
        self._domain = HyperRectDomain(
            Point(tuple(math.floor(lo / h) for lo in lower)),
            Point(tuple(math.ceil(hi / h) for hi in upper)),
        )

    @property
    def h(self) -> float:
        return self._h

    @property
    def domain(self) -> HyperRectDomain:
        """Smallest digital box covering the Euclidean bounding box."""
        return self._domain

    def embed(self, p: Point) -> RealPoint:
        return tuple(c * self._h for c in p)

    def __call__(self, p: Point) -> bool:
        return bool(self._shape(self.embed(p)))
