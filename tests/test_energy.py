"""Tests for energy functions."""

import numpy as np
import pytest

from seam_carve.energy import (
    DualGradientEnergyFunction,
    energy_table,
    energy_to_image,
    pixel_energy,
)
from seam_carve.errors import DegenerateGrid


class TestPixelEnergy:
    """Tests for the two-sample energy model."""

    def test_sum_of_squared_differences(self):
        """Test energy is the sum of squared channel differences."""
        assert pixel_energy((0, 0, 0), (1, 2, 3)) == 14.0

    def test_symmetric(self):
        """Test swapping the two neighbours does not change the energy."""
        a = (200, 13, 77)
        b = (5, 250, 90)
        assert pixel_energy(a, b) == pixel_energy(b, a)

    def test_identical_samples(self):
        """Test identical neighbours produce zero energy."""
        assert pixel_energy((40, 50, 60), (40, 50, 60)) == 0.0

    def test_no_uint8_overflow(self):
        """Test uint8 samples are widened before subtracting."""
        a = np.array([255, 255, 255], dtype=np.uint8)
        b = np.array([0, 0, 0], dtype=np.uint8)
        assert pixel_energy(a, b) == 3 * 255.0**2


class TestEnergyTable:
    """Tests for whole-grid energy computation."""

    def test_single_pixel_is_zero(self):
        """Test a 1x1 grid wraps onto itself and has no energy."""
        grid = np.array([[[12, 34, 56]]], dtype=np.uint8)
        energy = energy_table(grid)

        assert energy.shape == (1, 1)
        assert energy[0, 0] == 0.0

    def test_wraps_at_borders(self):
        """Test edge pixels compare against the opposite edge."""
        grid = np.array([[[10, 0, 0], [0, 0, 0], [0, 0, 30]]], dtype=np.uint8)
        energy = energy_table(grid)

        assert energy[0, 0] == 900.0
        assert energy[0, 1] == 1000.0
        assert energy[0, 2] == 100.0

    def test_matches_pixel_energy(self):
        """Test every entry equals the sum of both axis energies."""
        rng = np.random.default_rng(0)
        grid = rng.integers(0, 256, size=(5, 7, 3), dtype=np.uint8)
        energy = energy_table(grid)
        h, w = grid.shape[:2]

        for y in range(h):
            for x in range(w):
                expected = pixel_energy(
                    grid[y, (x - 1 + w) % w], grid[y, (x + 1 + w) % w]
                ) + pixel_energy(grid[(y - 1 + h) % h, x], grid[(y + 1 + h) % h, x])
                assert energy[y, x] == expected

    def test_idempotent(self):
        """Test measuring the same grid twice gives identical results."""
        rng = np.random.default_rng(1)
        grid = rng.integers(0, 256, size=(6, 4, 3), dtype=np.uint8)

        first = energy_table(grid)
        second = energy_table(grid)

        np.testing.assert_array_equal(first, second)

    def test_uniform_grid_has_no_energy(self):
        """Test a flat colour has zero energy everywhere."""
        grid = np.full((4, 4, 3), 128, dtype=np.uint8)
        assert not energy_table(grid).any()

    def test_non_negative(self):
        """Test energy values are never negative."""
        rng = np.random.default_rng(2)
        grid = rng.integers(0, 256, size=(10, 10, 3), dtype=np.uint8)
        assert energy_table(grid).min() >= 0

    def test_grayscale_grid(self):
        """Test grids without a channel axis are supported."""
        grid = np.array([[0.0, 2.0, 0.0]])
        energy = energy_table(grid)

        assert energy.shape == (1, 3)
        assert energy[0, 0] == 4.0

    def test_empty_grid_rejected(self):
        """Test a zero-size grid raises DegenerateGrid."""
        with pytest.raises(DegenerateGrid):
            energy_table(np.zeros((0, 3, 3)))


class TestDualGradientEnergy:
    """Tests for the pluggable energy function."""

    def test_compute_matches_table(self):
        """Test the energy function returns the unnormalised table."""
        rng = np.random.default_rng(3)
        grid = rng.integers(0, 256, size=(8, 9, 3), dtype=np.uint8)

        energy = DualGradientEnergyFunction().compute(grid)

        np.testing.assert_array_equal(energy, energy_table(grid))


class TestEnergyImage:
    """Tests for energy visualization."""

    def test_scales_against_maximum(self):
        """Test values are scaled by 256 / max and clipped to 255."""
        energy = np.array([[0.0, 50.0, 100.0]])
        img = energy_to_image(energy)

        assert img.dtype == np.uint8
        assert img.tolist() == [[0, 128, 255]]

    def test_zero_energy_is_black(self):
        """Test an all-zero table renders black instead of dividing by zero."""
        img = energy_to_image(np.zeros((3, 3)))
        assert not img.any()
