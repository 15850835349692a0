"""Bitmap reader for loading text bitmaps and volumes.

This module provides the BitmapReader class for loading bitmap files
and converting them into digital sets.
"""

from pathlib import Path

from digitopo.domain import DigitalSet
from digitopo.exceptions import BitmapFormatError, BitmapLoadError
from digitopo.io.bitmap import slices_to_set, split_slices


class BitmapReader:
    """Loads text bitmaps (2D) and text volumes (3D).

    A file with a single block of rows is a 2D bitmap; a file with several
    blocks separated by blank lines is a volume.

    Example:
        with BitmapReader(Path("shape.txt")) as reader:
            shape = reader.read()
    """

    def __init__(self, bitmap_path: Path) -> None:
        """Initialize the bitmap reader.

        Args:
            bitmap_path: Path to the text bitmap file
        """
        self._bitmap_path = bitmap_path
        self._slices: list[list[str]] | None = None

    def load(self) -> None:
        """Load and validate the bitmap file.

        Raises:
            BitmapLoadError: If the file does not exist or cannot be read
            BitmapFormatError: If the contents are not a valid bitmap
        """
        if not self._bitmap_path.exists():
            raise BitmapLoadError(str(self._bitmap_path), "file not found")
        try:
            text = self._bitmap_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise BitmapLoadError(str(self._bitmap_path), str(e)) from e
        self._slices = split_slices(text, str(self._bitmap_path))

    def _require_loaded(self) -> list[list[str]]:
        if self._slices is None:
            raise RuntimeError("Bitmap not loaded. Call load() first.")
        return self._slices

    @property
    def dimension(self) -> int:
        """2 for a single-slice bitmap, 3 for a volume."""
        return 2 if len(self._require_loaded()) == 1 else 3

    @property
    def width(self) -> int:
        return len(self._require_loaded()[0][0])

    @property
    def height(self) -> int:
        return len(self._require_loaded()[0])

    @property
    def depth(self) -> int:
        return len(self._require_loaded())

    def read(self, volume: bool | None = None) -> DigitalSet:
        """Convert the loaded bitmap to a digital set.

        Args:
            volume: Force a 3D (True) or 2D (False) result; by default the
                dimension follows the number of slices

        Raises:
            RuntimeError: If the bitmap has not been loaded yet
            BitmapFormatError: If a 2D set is requested from a volume
        """
        slices = self._require_loaded()
        if volume is None:
            volume = len(slices) > 1
        if not volume and len(slices) > 1:
            raise BitmapFormatError(
                str(self._bitmap_path), f"expected one slice, found {len(slices)}"
            )
        return slices_to_set(slices, volume=volume)

    def close(self) -> None:
        """Release the loaded rows."""
        self._slices = None

    def __enter__(self) -> "BitmapReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
