"""Digital sets: finite point sets constrained to a domain."""

from collections.abc import Callable, Iterable, Iterator

from digitopo.domain.hyper_rect import HyperRectDomain
from digitopo.domain.point import Point
from digitopo.exceptions import InvalidDomainError


class DigitalSet:
    """A set of points of a domain.

    Example:
        shape = DigitalSet(domain, [Point.of(1, 1), Point.of(1, 2)])
        inside = shape.predicate()
    """

    def __init__(self, domain: HyperRectDomain, points: Iterable[Point] = ()) -> None:
        self._domain = domain
        self._points: set[Point] = set()
        for point in points:
            self.add(point)

    @classmethod
    def from_values(
        cls,
        domain: HyperRectDomain,
        value_of: Callable[[Point], float],
        min_value: float,
        max_value: float,
    ) -> "DigitalSet":
        """Threshold an image: keep points with ``min_value < value <= max_value``.

        Args:
            domain: Domain of the image
            value_of: Image accessor returning the value at a point
            min_value: Exclusive lower threshold
            max_value: Inclusive upper threshold

        Returns:
            DigitalSet of the selected points
        """
        return cls(domain, (p for p in domain if min_value < value_of(p) <= max_value))

    @property
    def domain(self) -> HyperRectDomain:
        return self._domain

    def add(self, point: Point) -> None:
        if not self._domain.contains(point):
            raise InvalidDomainError(f"point {point} lies outside {self._domain}")
        self._points.add(point)

    def discard(self, point: Point) -> None:
        self._points.discard(point)

    def __contains__(self, point: object) -> bool:
        return point in self._points

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(sorted(self._points))

    def predicate(self) -> Callable[[Point], bool]:
        """Membership test usable by the boundary trackers."""
        return self._points.__contains__

    def bounding_box(self) -> HyperRectDomain:
        """Tightest domain containing every point (empty if the set is)."""
        if not self._points:
            return HyperRectDomain.empty(self._domain.space)  # type: ignore[arg-type]
        points = iter(self._points)
        lower = upper = next(points)
        for point in points:
            lower = lower.inf(point)
            upper = upper.sup(point)
        return HyperRectDomain(lower, upper)
