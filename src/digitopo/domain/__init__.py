"""Domain models for digitopo.

This module contains the value types of the digital-topology core. All
models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Hashable, so they can be stored in sets and used as graph vertices
- Deterministically ordered, so every traversal is reproducible

Key classes:
- Point, Space: Integer points of Z^d
- HyperRectDomain: Axis-aligned boxes with configurable iteration order
- DomainPredicate: Domain membership test
- DigitalSet: Point set constrained to a domain
- SCell: Signed cell of a Khalimsky space
- Contour: Closed 2D lattice contour
- FreemanChain: Chain-code encoding of a 4-connected path
"""

from digitopo.domain.cells import SCell
from digitopo.domain.contour import Contour, WindingDirection
from digitopo.domain.digital_set import DigitalSet
from digitopo.domain.freeman import FreemanChain
from digitopo.domain.hyper_rect import (
    DomainIterator,
    DomainPredicate,
    DomainRange,
    HyperRectDomain,
)
from digitopo.domain.point import Z2, Z3, Point, Space

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Spaces and domains
    "Point",
    "Space",
    "Z2",
    "Z3",
    "HyperRectDomain",
    "DomainIterator",
    "DomainRange",
    "DomainPredicate",
    "DigitalSet",
    # Cells and contours
    "SCell",
    "Contour",
    "FreemanChain",
]
