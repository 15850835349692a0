"""Graph traversal visitors.

A graph is any object with a ``neighbors(v)`` method returning the
neighbours of ``v`` in a fixed order (``DigitalSurface``,
``DomainAdjacency``, ``MetricAdjacency``...). Visitors are pull-based:
iterating one yields each reachable vertex once, in depth-first or
breadth-first order. A visitor is consumable once; use it as a context
manager to release its bookkeeping when done.
"""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Hashable, Iterator
from enum import Enum
from typing import Any, Protocol

from digitopo.config import TraversalStrategy


class Graph(Protocol):
    def neighbors(self, v: Any) -> list[Any]: ...


class VisitState(Enum):
    UNVISITED = "unvisited"
    FRONTIER = "frontier"
    VISITED = "visited"


class _Visitor(ABC):
    """Shared state machine: vertices move UNVISITED -> FRONTIER -> VISITED."""

    def __init__(self, graph: Graph, seed: Hashable) -> None:
        self._graph = graph
        self._seed = seed
        self._state: dict[Hashable, VisitState] = {seed: VisitState.FRONTIER}
        self._visited_count = 0
        self._terminated = False

    @property
    def seed(self) -> Hashable:
        return self._seed

    @property
    def visited_count(self) -> int:
        return self._visited_count

    def state(self, v: Hashable) -> VisitState:
        return self._state.get(v, VisitState.UNVISITED)

    @property
    def finished(self) -> bool:
        return self._terminated or not self._has_frontier()

    def terminate(self) -> None:
        """Stop the traversal; the next pull raises StopIteration."""
        self._terminated = True
        self._clear_frontier()

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self._terminated:
            raise StopIteration
        if not self._has_frontier():
            raise StopIteration
        v = self._pop()
        self._state[v] = VisitState.VISITED
        self._visited_count += 1
        return v

    def __enter__(self) -> "_Visitor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()
        self._state.clear()

    def _expand(self, v: Hashable) -> list[Hashable]:
        """Mark the unvisited neighbours of ``v`` as frontier and return them."""
        fresh = []
        for w in self._graph.neighbors(v):
            if w not in self._state:
                self._state[w] = VisitState.FRONTIER
                fresh.append(w)
        return fresh

    @abstractmethod
    def _has_frontier(self) -> bool: ...

    @abstractmethod
    def _clear_frontier(self) -> None: ...

    @abstractmethod
    def _pop(self) -> Any:
        """Remove the next frontier vertex, expand it and return it."""


class DepthFirstVisitor(_Visitor):
    """Depth-first traversal.

    A vertex's neighbours are pushed in reverse so that the first neighbour
    is visited first. A vertex already on the stack is not pushed again.
    """

    def __init__(self, graph: Graph, seed: Hashable) -> None:
        super().__init__(graph, seed)
        self._stack: list[Hashable] = [seed]

    def _has_frontier(self) -> bool:
        return bool(self._stack)

    def _clear_frontier(self) -> None:
        self._stack.clear()

    def _pop(self) -> Any:
        v = self._stack.pop()
        self._stack.extend(reversed(self._expand(v)))
        return v


class BreadthFirstVisitor(_Visitor):
    """Breadth-first traversal; ``distance`` is the edge count from the seed
    to the last emitted vertex."""

    def __init__(self, graph: Graph, seed: Hashable) -> None:
        super().__init__(graph, seed)
        self._queue: deque[tuple[Hashable, int]] = deque([(seed, 0)])
        self._distance = 0

    @property
    def distance(self) -> int:
        return self._distance

    def _has_frontier(self) -> bool:
        return bool(self._queue)

    def _clear_frontier(self) -> None:
        self._queue.clear()

    def _pop(self) -> Any:
        v, distance = self._queue.popleft()
        self._distance = distance
        self._queue.extend((w, distance + 1) for w in self._expand(v))
        return v


def make_visitor(
    graph: Graph,
    seed: Hashable,
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST,
) -> DepthFirstVisitor | BreadthFirstVisitor:
    """Build the visitor matching ``strategy``."""
    if TraversalStrategy(strategy) is TraversalStrategy.DEPTH_FIRST:
        return DepthFirstVisitor(graph, seed)
    return BreadthFirstVisitor(graph, seed)
