"""Seam Carve: content-aware image downsizing by seam carving."""

from seam_carve.energy import (
    DualGradientEnergyFunction,
    EnergyFunction,
    energy_table,
    energy_to_image,
    pixel_energy,
)
from seam_carve.errors import (
    CarvingCancelled,
    CarvingError,
    DegenerateGrid,
    InvalidDimensions,
    InvalidSeam,
)
from seam_carve.image_io import load_image, save_image
from seam_carve.seam_carving import CarveResult, SeamCarver, TqdmProgress, tqdm_progress
from seam_carve.seams import (
    Orientation,
    Seam,
    SeamHistory,
    find_horizontal_seam,
    find_seam,
    find_vertical_seam,
    remove_seam,
)
from seam_carve.visualize import SEAM_COLOR, render_seam_history

__version__ = "0.1.0"
__all__ = [
    "CarveResult",
    "CarvingCancelled",
    "CarvingError",
    "DegenerateGrid",
    "DualGradientEnergyFunction",
    "EnergyFunction",
    "InvalidDimensions",
    "InvalidSeam",
    "Orientation",
    "SEAM_COLOR",
    "Seam",
    "SeamCarver",
    "SeamHistory",
    "TqdmProgress",
    "energy_table",
    "energy_to_image",
    "find_horizontal_seam",
    "find_seam",
    "find_vertical_seam",
    "load_image",
    "pixel_energy",
    "remove_seam",
    "render_seam_history",
    "save_image",
    "tqdm_progress",
]
