"""Conversion between text bitmaps and digital sets.

A text bitmap is a block of rows made of ``#`` (foreground) and ``.``
(background). The first row is the top of the image, so the row ``r`` of
an image of height ``H`` holds the points with ``y = H - 1 - r``. A text
volume is a sequence of such blocks separated by blank lines, the first
block being the slice ``z = 0``.
"""

from digitopo.domain import DigitalSet, HyperRectDomain, Point
from digitopo.exceptions import BitmapFormatError

FOREGROUND = "#"
BACKGROUND = "."


def split_slices(text: str, source: str = "<string>") -> list[list[str]]:
    """Split text into slices of non-empty, stripped rows.

    Raises:
        BitmapFormatError: If the text holds no rows, rows of a slice differ in
            width, slices differ in size, or a row holds another character
    """
    slices: list[list[str]] = []
    current: list[str] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        row = line.strip()
        if not row:
            if current:
                slices.append(current)
                current = []
            continue
        bad = set(row) - {FOREGROUND, BACKGROUND}
        if bad:
            raise BitmapFormatError(
                source, f"line {line_no}: unexpected characters {sorted(bad)}"
            )
        if current and len(row) != len(current[0]):
            raise BitmapFormatError(
                source,
                f"line {line_no}: row width {len(row)} differs from {len(current[0])}",
            )
        current.append(row)
    if current:
        slices.append(current)

    if not slices:
        raise BitmapFormatError(source, "no rows")
    shape = (len(slices[0]), len(slices[0][0]))
    for index, rows in enumerate(slices[1:], start=1):
        if (len(rows), len(rows[0])) != shape:
            raise BitmapFormatError(
                source, f"slice {index} is {len(rows[0])}x{len(rows)}, expected {shape[1]}x{shape[0]}"
            )
    return slices


def _foreground_xy(rows: list[str]) -> list[tuple[int, int]]:
    height = len(rows)
    return [
        (x, height - 1 - r)
        for r, row in enumerate(rows)
        for x, char in enumerate(row)
        if char == FOREGROUND
    ]


def slices_to_set(slices: list[list[str]], volume: bool = False) -> DigitalSet:
    """Digital set of one slice (2D) or of a stack of slices (3D)."""
    height = len(slices[0])
    width = len(slices[0][0])
    if not volume:
        domain = HyperRectDomain(Point.of(0, 0), Point.of(width - 1, height - 1))
        return DigitalSet(domain, (Point.of(x, y) for x, y in _foreground_xy(slices[0])))
    domain = HyperRectDomain(
        Point.of(0, 0, 0), Point.of(width - 1, height - 1, len(slices) - 1)
    )
    return DigitalSet(
        domain,
        (
            Point.of(x, y, z)
            for z, rows in enumerate(slices)
            for x, y in _foreground_xy(rows)
        ),
    )


def parse_bitmap(text: str, source: str = "<string>") -> DigitalSet:
    """Parse a single-slice text bitmap into a 2D digital set."""
    slices = split_slices(text, source)
    if len(slices) != 1:
        raise BitmapFormatError(source, f"expected one slice, found {len(slices)}")
    return slices_to_set(slices)


def parse_volume(text: str, source: str = "<string>") -> DigitalSet:
    """Parse a text volume into a 3D digital set (a single slice gives z = 0)."""
    return slices_to_set(split_slices(text, source), volume=True)


def format_bitmap(digital_set: DigitalSet) -> str:
    """Render a 2D digital set as a text bitmap over its domain."""
    domain = digital_set.domain
    lower, upper = domain.lower_bound, domain.upper_bound
    rows = []
    for y in range(upper[1], lower[1] - 1, -1):
        rows.append(
            "".join(
                FOREGROUND if Point.of(x, y) in digital_set else BACKGROUND
                for x in range(lower[0], upper[0] + 1)
            )
        )
    return "\n".join(rows) + "\n"
