"""Exceptions raised by the seam carving core."""


class CarvingError(Exception):
    """Base class for seam carving failures."""


class InvalidDimensions(CarvingError, ValueError):
    """Raised when the requested target size cannot be reached by seam removal."""


class DegenerateGrid(CarvingError, RuntimeError):
    """Raised when a grid with zero width or height reaches the core.

    The carving loop never produces such a grid, so this signals a logic
    error in the caller rather than a recoverable condition.
    """


class InvalidSeam(CarvingError, ValueError):
    """Raised when a seam does not fit the grid it is applied to."""


class CarvingCancelled(CarvingError):
    """Raised when a carving run is stopped between two seam removals."""
