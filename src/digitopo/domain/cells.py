"""Signed cells of a Khalimsky space.

Cells are stored in doubled ("Khalimsky") coordinates: an odd coordinate
is an open interval along that axis, an even one a closed point. A spel
(the cell of a digital point p) has every coordinate odd, ``2 * p + 1``;
a pointel has every coordinate even. A surfel has exactly one even
coordinate, the axis it separates.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True, order=True)
class SCell:
    """An oriented cell of a Khalimsky space.

    For a boundary surfel ("bel") a positive sign means the interior spel
    lies on the lower side of the separated axis.

    Attributes:
        kcoords: Khalimsky coordinates
        positive: Orientation sign
    """

    kcoords: tuple[int, ...]
    positive: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "kcoords", tuple(int(c) for c in self.kcoords))

    @property
    def dimension(self) -> int:
        """Topological dimension: the number of open (odd) axes."""
        return sum(c & 1 for c in self.kcoords)

    def is_surfel(self) -> bool:
        return self.dimension == len(self.kcoords) - 1

    def opposite(self) -> "SCell":
        """Same cell with the reverse orientation."""
        return SCell(self.kcoords, not self.positive)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"kcoords": list(self.kcoords), "positive": self.positive}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SCell":
        """Deserialize from dictionary."""
        return cls(tuple(data["kcoords"]), data["positive"])
