"""Energy functions for seam carving.

Energy measures how much a pixel differs from its neighbours. Seams are
chosen to minimise the summed energy along their path, so flat regions are
removed first and edges survive.

The only metric implemented is the dual-gradient energy: the squared colour
difference between a pixel's left and right neighbours plus the squared
colour difference between its upper and lower neighbours. Neighbours wrap
around the image borders, so an edge pixel is compared against the pixel on
the opposite edge.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Union

import numpy as np

from seam_carve.errors import DegenerateGrid

Pixel = Union[Sequence[float], np.ndarray]


def pixel_energy(before: Pixel, after: Pixel) -> float:
    """Sum of squared per-channel differences between two samples.

    Args:
        before: Colour of the neighbour preceding the pixel along one axis
        after: Colour of the neighbour following the pixel along the same axis

    Returns:
        Non-negative energy contribution for that axis
    """
    diff = np.asarray(before, dtype=np.float64) - np.asarray(after, dtype=np.float64)
    return float(np.sum(diff * diff))


def _axis_energy(grid: np.ndarray, axis: int) -> np.ndarray:
    """Dual-gradient energy along one axis, wrapping at the borders."""
    before = np.roll(grid, 1, axis=axis)
    after = np.roll(grid, -1, axis=axis)
    diff = before - after
    squared = diff * diff
    if squared.ndim == 3:
        return squared.sum(axis=2)
    return squared


def energy_table(grid: np.ndarray) -> np.ndarray:
    """Compute the energy of every pixel in a grid.

    Args:
        grid: Pixel grid (H, W, C) or grayscale (H, W)

    Returns:
        Energy grid (H, W) of float64 values
    """
    h, w = grid.shape[:2]
    if h == 0 or w == 0:
        raise DegenerateGrid(f"Cannot compute energy of a {w}x{h} grid")

    pixels = grid.astype(np.float64)
    # Axis 1 runs along a row (x), axis 0 along a column (y)
    return _axis_energy(pixels, axis=1) + _axis_energy(pixels, axis=0)


def energy_to_image(energy: np.ndarray) -> np.ndarray:
    """Render an energy grid as a grayscale image.

    Values are scaled linearly against the maximum energy (factor 256/max)
    and clipped to the 8-bit range. A grid with no energy renders black.
    """
    max_value = float(energy.max()) if energy.size else 0.0
    if max_value <= 0:
        return np.zeros(energy.shape, dtype=np.uint8)

    gray = np.floor(energy / max_value * 256)
    return np.clip(gray, 0, 255).astype(np.uint8)


class EnergyFunction(ABC):
    """Abstract base class for energy functions."""

    @abstractmethod
    def compute(self, image: np.ndarray) -> np.ndarray:
        """Compute energy map for the given image.

        Args:
            image: Input image as numpy array (H, W, C) or (H, W)

        Returns:
            Energy map as numpy array (H, W) with higher values indicating
            pixels that should be preserved
        """
        pass


class DualGradientEnergyFunction(EnergyFunction):
    """Dual-gradient energy with wraparound borders.

    Values are left unnormalised so that seam energies found on different
    iterations, and in different orientations, stay directly comparable.
    """

    def compute(self, image: np.ndarray) -> np.ndarray:
        """Compute dual-gradient energy map."""
        return energy_table(image)
