"""Exception hierarchy for digitopo."""

from enum import Enum


class FailureKind(str, Enum):
    """Named failure kinds reported by geometric computations."""

    DEGENERATE_SHAPE = "degenerate_shape"
    SEARCH_EXHAUSTED = "search_exhausted"
    INVALID_DOMAIN = "invalid_domain"


class DigitopoError(Exception):
    """Base exception for all digitopo errors."""

    kind: FailureKind = FailureKind.INVALID_DOMAIN


class DomainError(DigitopoError):
    """Errors related to spaces, domains and their composition."""

    pass


class InvalidDomainError(DomainError):
    """Domain bounds, iteration order or starting point are unusable."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid domain: {reason}")


class DimensionMismatchError(DomainError):
    """Two composed objects do not live in the same space."""

    def __init__(self, expected: int, actual: int, context: str) -> None:
        self.expected = expected
        self.actual = actual
        self.context = context
        super().__init__(
            f"Dimension mismatch in {context}: expected {expected}, got {actual}"
        )


class AdjacencyError(DomainError):
    """Unsupported adjacency relation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TopologyError(DigitopoError):
    """Errors in cell-complex computations and boundary tracking."""

    kind = FailureKind.DEGENERATE_SHAPE


class CellError(TopologyError):
    """A cell is malformed or lies outside its Khalimsky space."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class BelNotFoundError(TopologyError):
    """No boundary element could be located."""

    def __init__(self, kind: FailureKind, examined: int) -> None:
        self.kind = kind
        self.examined = examined
        if kind is FailureKind.SEARCH_EXHAUSTED:
            message = f"Bel search budget exhausted after {examined} points"
        else:
            message = f"No boundary found: point set is uniform over {examined} points"
        super().__init__(message)


class DegenerateShapeError(TopologyError):
    """The tracked boundary is not a valid contour or surface."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate shape: {reason}")


class BitmapError(DigitopoError):
    """Errors related to reading text bitmaps and volumes."""

    pass


class BitmapLoadError(BitmapError):
    """Error loading a bitmap file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load bitmap '{path}': {reason}")


class BitmapFormatError(BitmapError):
    """Malformed bitmap contents."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid bitmap format '{path}': {details}")
