"""Reading and writing images as pixel grids."""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "JPEG"


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Load an image file as an RGB pixel grid.

    Args:
        path: Image file path

    Returns:
        uint8 array (H, W, 3)

    Raises:
        OSError: If the file cannot be opened or decoded
    """
    try:
        with Image.open(path) as img:
            grid = np.array(img.convert("RGB"), dtype=np.uint8)
    except OSError as ex:
        raise OSError(f"Input file could not be opened: {path}") from ex

    logger.info("Loaded %s (%dx%d)", path, grid.shape[1], grid.shape[0])
    return grid


def to_pil(grid: np.ndarray) -> Image.Image:
    """Convert a pixel grid to a PIL Image."""
    if grid.dtype != np.uint8:
        if grid.size and grid.max() <= 1.0:
            grid = grid * 255
        grid = np.clip(grid, 0, 255).astype(np.uint8)
    return Image.fromarray(grid)


def save_image(
    grid: np.ndarray,
    path: Union[str, Path],
    format: Optional[str] = None,
) -> None:
    """Save a pixel grid to disk.

    Args:
        grid: Pixel grid (H, W, 3) or grayscale (H, W)
        path: Output file path
        format: Image format name; inferred from the extension when omitted,
            JPEG when the path has no extension

    Raises:
        OSError: If the destination cannot be written or the format is unknown
    """
    path = Path(path)
    if format is None and not path.suffix:
        format = DEFAULT_FORMAT

    img = to_pil(grid)
    try:
        img.save(path, format=format)
    except (OSError, ValueError, KeyError) as ex:
        raise OSError(f"Cannot open output file: {path}") from ex

    logger.info("Wrote %s", path)
