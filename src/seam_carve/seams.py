"""Seam search and removal.

A vertical seam holds one column index per row and removes one column from
the image; a horizontal seam holds one row index per column and removes one
row. Both are found with the same dynamic program, the horizontal case
running over the transposed energy grid.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

import numpy as np

from seam_carve.errors import DegenerateGrid, InvalidSeam

# Predecessor offsets in tie-break priority: straight, then lower index,
# then higher index. np.argmin returns the first minimum, which enforces it.
_OFFSETS = np.array([0, -1, 1])


class Orientation(Enum):
    """Direction a seam runs across the image."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Seam:
    """A connected path of pixels spanning the image.

    Attributes:
        orientation: Whether the seam removes a row or a column
        energy: Cumulative energy along the path
        pixels: Perpendicular coordinate for each row (vertical seam) or
            column (horizontal seam), in scan order
    """

    orientation: Orientation
    energy: float
    pixels: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.pixels)


class SeamHistory:
    """Seams removed during a carving run, oldest first."""

    def __init__(self):
        self._seams: List[Seam] = []

    def append(self, seam: Seam) -> None:
        self._seams.append(seam)

    def count(self, orientation: Orientation) -> int:
        """Number of removed seams with the given orientation."""
        return sum(1 for seam in self._seams if seam.orientation is orientation)

    def __len__(self) -> int:
        return len(self._seams)

    def __iter__(self) -> Iterator[Seam]:
        return iter(self._seams)

    def __reversed__(self) -> Iterator[Seam]:
        return reversed(self._seams)

    def __getitem__(self, index: int) -> Seam:
        return self._seams[index]


def _min_path(energy: np.ndarray) -> Tuple[float, Tuple[int, ...]]:
    """Minimum-cost top-to-bottom path through an energy grid.

    Returns the path cost and one column index per row.
    """
    h, w = energy.shape
    if h == 0 or w == 0:
        raise DegenerateGrid(f"Cannot find a seam in a {w}x{h} energy grid")

    cost = np.empty((h, w), dtype=np.float64)
    backtrack = np.zeros((h, w), dtype=np.int64)
    cost[0] = energy[0]
    columns = np.arange(w)

    # Fill DP table one row at a time
    for i in range(1, h):
        prev = cost[i - 1]
        left = np.full(w, np.inf)
        left[1:] = prev[:-1]
        right = np.full(w, np.inf)
        right[:-1] = prev[1:]

        candidates = np.stack([prev, left, right])
        choice = np.argmin(candidates, axis=0)

        cost[i] = energy[i] + candidates[choice, columns]
        backtrack[i] = columns + _OFFSETS[choice]

    # Lowest index wins ties on the last row
    end = int(np.argmin(cost[-1]))
    total = float(cost[-1, end])

    path = [end]
    for i in range(h - 1, 0, -1):
        path.append(int(backtrack[i, path[-1]]))
    path.reverse()

    return total, tuple(path)


def find_vertical_seam(energy: np.ndarray) -> Seam:
    """Find the minimum-energy vertical seam.

    Args:
        energy: Energy grid (H, W)

    Returns:
        Seam with one column index per row
    """
    total, path = _min_path(energy)
    return Seam(Orientation.VERTICAL, total, path)


def find_horizontal_seam(energy: np.ndarray) -> Seam:
    """Find the minimum-energy horizontal seam (transpose and scan left to right)."""
    total, path = _min_path(energy.T)
    return Seam(Orientation.HORIZONTAL, total, path)


def find_seam(energy: np.ndarray, orientation: Orientation) -> Seam:
    """Find the minimum-energy seam with the given orientation."""
    if orientation is Orientation.VERTICAL:
        return find_vertical_seam(energy)
    return find_horizontal_seam(energy)


def _remove_vertical_seam(grid: np.ndarray, pixels: Tuple[int, ...]) -> np.ndarray:
    """Drop one column per row, at the index given for that row."""
    h, w = grid.shape[:2]
    keep = np.ones((h, w), dtype=bool)
    keep[np.arange(h), np.asarray(pixels, dtype=np.int64)] = False
    return grid[keep].reshape((h, w - 1) + grid.shape[2:])


def _check_seam(grid: np.ndarray, seam: Seam) -> None:
    h, w = grid.shape[:2]
    if h == 0 or w == 0:
        raise DegenerateGrid(f"Cannot remove a seam from a {w}x{h} grid")

    if seam.orientation is Orientation.VERTICAL:
        lines, limit = h, w
    else:
        lines, limit = w, h

    if len(seam) != lines:
        raise InvalidSeam(
            f"{seam.orientation.value} seam of length {len(seam)} "
            f"does not fit a {w}x{h} grid"
        )
    if min(seam.pixels) < 0 or max(seam.pixels) >= limit:
        raise InvalidSeam(
            f"{seam.orientation.value} seam leaves the {w}x{h} grid"
        )


def remove_seam(grid: np.ndarray, seam: Seam) -> np.ndarray:
    """Remove a seam from a grid.

    Args:
        grid: Pixel grid (H, W, C) or (H, W)
        seam: Seam found against a grid of the same size

    Returns:
        New grid with one column (vertical seam) or row (horizontal seam) fewer
    """
    _check_seam(grid, seam)

    if seam.orientation is Orientation.VERTICAL:
        return _remove_vertical_seam(grid, seam.pixels)

    # Transpose, remove vertical seam, transpose back
    grid_t = np.swapaxes(grid, 0, 1)
    result_t = _remove_vertical_seam(grid_t, seam.pixels)
    return np.ascontiguousarray(np.swapaxes(result_t, 0, 1))
