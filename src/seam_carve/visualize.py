"""Rebuild a picture of every seam removed during a carving run."""

from typing import Iterable, Tuple

import numpy as np

from seam_carve.seams import Orientation, Seam

SEAM_COLOR = (255, 0, 0)


def _insert_vertical_seam(grid: np.ndarray, seam: Seam, color: np.ndarray) -> np.ndarray:
    """Grow the grid by one column, painting the slot at each row's seam index."""
    h, w = grid.shape[:2]
    if len(seam) != h or min(seam.pixels) < 0 or max(seam.pixels) > w:
        raise ValueError(f"Seam does not fit a {w + 1}x{h} grid")

    result = np.empty((h, w + 1) + grid.shape[2:], dtype=grid.dtype)
    slots = np.zeros((h, w + 1), dtype=bool)
    slots[np.arange(h), np.asarray(seam.pixels, dtype=np.int64)] = True

    # Boolean assignment fills row by row, so every pixel at or past the
    # seam index lands one slot further out
    result[~slots] = grid.reshape((h * w,) + grid.shape[2:])
    result[slots] = color
    return result


def render_seam_history(
    original_size: Tuple[int, int],
    carved: np.ndarray,
    seams: Iterable[Seam],
    color: Tuple[int, int, int] = SEAM_COLOR,
) -> np.ndarray:
    """Paint every removed seam back into the carved image.

    Seams are replayed newest first. Each one grows the working image by a
    row or column at the seam's position and paints the new pixels, so the
    result has the original size with all removed seams highlighted.

    Args:
        original_size: (width, height) of the image before carving
        carved: Carved image (H, W, 3) or grayscale (H, W)
        seams: Removed seams in removal order
        color: RGB colour used to mark seam pixels

    Returns:
        RGB image (original height, original width, 3)
    """
    result = np.asarray(carved)
    if result.ndim == 2:
        result = np.repeat(result[:, :, np.newaxis], 3, axis=2)

    # Float images in [0, 1] get the colour on the same scale
    marker = np.asarray(color, dtype=np.float64)
    if result.dtype.kind == "f" and (result.size == 0 or result.max() <= 1.0):
        marker = marker / 255
    marker = marker.astype(result.dtype)

    for seam in reversed(list(seams)):
        if seam.orientation is Orientation.VERTICAL:
            result = _insert_vertical_seam(result, seam, marker)
        else:
            result_t = _insert_vertical_seam(np.swapaxes(result, 0, 1), seam, marker)
            result = np.ascontiguousarray(np.swapaxes(result_t, 0, 1))

    width, height = original_size
    if result.shape[:2] != (height, width):
        raise ValueError(
            f"Seams rebuild a {result.shape[1]}x{result.shape[0]} image, "
            f"expected {width}x{height}"
        )

    return result
