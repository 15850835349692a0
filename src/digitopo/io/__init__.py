"""Bitmap I/O layer for digitopo.

This module reads text bitmaps and text volumes into digital sets and
renders 2D sets back as text.

Key responsibilities:
- Load bitmap files
- Convert rows of '#' and '.' to digital sets
- Format detection (2D bitmap vs 3D volume)

Key classes and functions:
- BitmapReader: Load bitmap files
- parse_bitmap / parse_volume: Parse bitmap text
- format_bitmap: Render a 2D set as text
"""

from digitopo.io.bitmap import format_bitmap, parse_bitmap, parse_volume
from digitopo.io.reader import BitmapReader

__all__ = [
    "BitmapReader",
    "format_bitmap",
    "parse_bitmap",
    "parse_volume",
]
