"""Seam carving implementation for content-aware image resizing.

Based on "Seam Carving for Content-Aware Image Resizing" by Avidan & Shamir (2007).
Each step recomputes the energy of the current image, finds the cheapest
horizontal and vertical seams, and removes the cheaper of the two until the
target size is reached.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

import numpy as np
from PIL import Image
from tqdm import tqdm

from seam_carve.energy import DualGradientEnergyFunction, EnergyFunction, energy_to_image
from seam_carve.errors import CarvingCancelled, InvalidDimensions
from seam_carve.image_io import save_image, to_pil
from seam_carve.seams import (
    Orientation,
    Seam,
    SeamHistory,
    find_horizontal_seam,
    find_seam,
    find_vertical_seam,
    remove_seam,
)
from seam_carve.visualize import render_seam_history

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class TqdmProgress:
    """Progress callback that drives a tqdm bar.

    The bar is created on the first call, once the total is known, and
    closed when the last seam is reported or when close() is called.
    """

    def __init__(self, desc: str = "Removing seams"):
        self.desc = desc
        self.bar = None

    def __call__(self, completed: int, total: int) -> None:
        if self.bar is None:
            self.bar = tqdm(total=total, desc=self.desc)
        self.bar.update(completed - self.bar.n)
        if completed >= total:
            self.close()

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()


def tqdm_progress(desc: str = "Removing seams") -> TqdmProgress:
    """Build a progress callback that drives a tqdm bar."""
    return TqdmProgress(desc)


class CarveResult:
    """Result of a carving run."""

    def __init__(
        self,
        image: np.ndarray,
        seams: SeamHistory,
        original_size: Tuple[int, int],
    ):
        self.image = image
        self.seams = seams
        self.original_size = original_size

    @property
    def carved_size(self) -> Tuple[int, int]:
        """(width, height) of the carved image."""
        return (self.image.shape[1], self.image.shape[0])

    def seam_map(self) -> np.ndarray:
        """Original-size image with every removed seam painted red."""
        return render_seam_history(self.original_size, self.image, self.seams)

    def to_pil(self) -> Image.Image:
        """Convert to PIL Image."""
        return to_pil(self.image)

    def save(self, path: Union[str, Path], format: Optional[str] = None) -> None:
        """Save carved image."""
        save_image(self.image, path, format=format)


class SeamCarver:
    """Content-aware image downsizing using seam carving.

    Seam carving removes seams (connected paths of pixels) with the lowest
    energy, preserving important content while resizing.
    """

    def __init__(
        self,
        energy_function: Optional[EnergyFunction] = None,
        show_progress: bool = False,
        progress: Optional[ProgressCallback] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ):
        """Initialize seam carver.

        Args:
            energy_function: Energy function for pixel importance (default: dual gradient)
            show_progress: Show a progress bar when no progress callback is given
            progress: Called with (completed, total) after every seam removal
            should_stop: Checked before every seam removal; returning True
                aborts the run with CarvingCancelled
        """
        self.energy_function = energy_function or DualGradientEnergyFunction()
        self.show_progress = show_progress
        self.progress = progress
        self.should_stop = should_stop

    @staticmethod
    def check_dimensions(
        width: int, height: int, target_width: int, target_height: int
    ) -> Tuple[int, int]:
        """Validate a target size against the source size.

        Returns:
            (horizontal, vertical) number of seams to remove

        Raises:
            InvalidDimensions: If the target is larger than the source or
                would remove a whole dimension
        """
        num_horizontal = height - target_height
        num_vertical = width - target_width

        if num_horizontal < 0 or num_horizontal >= height or num_vertical < 0 or num_vertical >= width:
            raise InvalidDimensions(
                f"Target size {target_width}x{target_height} must be positive and "
                f"no larger than the original {width}x{height}"
            )

        return num_horizontal, num_vertical

    def carve(
        self,
        image: Union[np.ndarray, Image.Image],
        target_width: int,
        target_height: int,
    ) -> CarveResult:
        """Carve an image down to the target size.

        Args:
            image: Input image
            target_width: Target width in pixels
            target_height: Target height in pixels

        Returns:
            CarveResult with the carved image and the removed seams
        """
        img = self._to_numpy(image)
        h, w = img.shape[:2]
        num_horizontal, num_vertical = self.check_dimensions(w, h, target_width, target_height)

        total = num_horizontal + num_vertical
        progress = self._progress_callback()
        seams = SeamHistory()
        result = img

        logger.info(
            "Carving %dx%d to %dx%d: %d horizontal and %d vertical seams",
            w, h, target_width, target_height, num_horizontal, num_vertical,
        )

        try:
            while num_horizontal > 0 or num_vertical > 0:
                if self.should_stop is not None and self.should_stop():
                    raise CarvingCancelled(f"Carving stopped after {len(seams)} of {total} seams")

                energy = self.energy_function.compute(result)

                # If both orientations are still needed, remove the cheaper one
                if num_horizontal > 0 and num_vertical > 0:
                    seam = self._cheaper_seam(
                        find_horizontal_seam(energy), find_vertical_seam(energy)
                    )
                elif num_horizontal > 0:
                    seam = find_seam(energy, Orientation.HORIZONTAL)
                else:
                    seam = find_seam(energy, Orientation.VERTICAL)

                result = remove_seam(result, seam)
                seams.append(seam)

                if seam.orientation is Orientation.HORIZONTAL:
                    num_horizontal -= 1
                else:
                    num_vertical -= 1

                logger.debug("Removed %s seam with energy %.1f", seam.orientation.value, seam.energy)
                if progress is not None:
                    progress(len(seams), total)
        finally:
            close = getattr(progress, "close", None)
            if close is not None:
                close()

        return CarveResult(result, seams, (w, h))

    def resize(
        self,
        image: Union[np.ndarray, Image.Image],
        target_width: int,
        target_height: int,
    ) -> np.ndarray:
        """Resize image using seam carving.

        Returns:
            Resized image as numpy array
        """
        return self.carve(image, target_width, target_height).image

    def visualize_energy(self, image: Union[np.ndarray, Image.Image]) -> np.ndarray:
        """Grayscale rendering of the energy map."""
        img = self._to_numpy(image)
        return energy_to_image(self.energy_function.compute(img))

    def _cheaper_seam(self, horizontal: Seam, vertical: Seam) -> Seam:
        """Horizontal seam only when strictly cheaper; ties go vertical."""
        if horizontal.energy < vertical.energy:
            return horizontal
        return vertical

    def _progress_callback(self) -> Optional[ProgressCallback]:
        if self.progress is not None:
            return self.progress
        if self.show_progress:
            return tqdm_progress()
        return None

    def _to_numpy(self, image: Union[np.ndarray, Image.Image]) -> np.ndarray:
        """Convert image to numpy array."""
        if isinstance(image, Image.Image):
            return np.array(image.convert("RGB"))
        return np.asarray(image)
