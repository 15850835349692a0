"""digitopo - Digital topology on integer grids.

digitopo provides the discrete-space core needed by digital geometry
estimators: hyper-rectangular domains with configurable iteration order,
adjacency relations (optionally restricted to a domain), Khalimsky-space
boundary tracking, and visitor-based traversal of digital surfaces.

Example:
    $ digitopo contours shape.txt

This prints every closed 4-connected contour of the foreground of a text
bitmap, together with its Freeman chain code.
"""

__version__ = "0.1.0"
__author__ = "digitopo developers"

__all__ = ["__author__", "__version__"]
