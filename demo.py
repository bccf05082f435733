#!/usr/bin/env python3
"""
Quick demo of the seam-carve library.
Generates a sample image, carves it, and writes the energy and seam maps.
"""

import numpy as np
from PIL import Image

from seam_carve import SeamCarver, energy_table, load_image, save_image


def create_sample_image(path: str = "sample.png") -> str:
    """Create a sample image with distinct regions for testing."""
    print("Creating sample image...")

    img = np.zeros((200, 300, 3), dtype=np.uint8)

    # Sky background (blue)
    img[:100, :] = [135, 206, 235]

    # Grass (green)
    img[100:, :] = [34, 139, 34]

    # Sun (yellow circle)
    center_x, center_y = 240, 40
    radius = 20
    y, x = np.ogrid[:200, :300]
    mask = (x - center_x)**2 + (y - center_y)**2 <= radius**2
    img[mask] = [255, 215, 0]

    # Tree (brown trunk + green leaves)
    img[120:170, 50:60] = [101, 67, 33]
    img[70:125, 30:80] = [0, 128, 0]

    # House (white walls)
    img[110:160, 150:200] = [255, 255, 255]

    Image.fromarray(img).save(path)
    print(f"Sample image saved to: {path}")
    return path


def demo_energy(image_path: str) -> None:
    """Demo the dual-gradient energy map."""
    print("\n" + "="*60)
    print("DEMO: Energy")
    print("="*60)

    img = load_image(image_path)
    energy = energy_table(img)
    print(f"  Shape: {energy.shape}")
    print(f"  Min: {energy.min():.1f}, Max: {energy.max():.1f}")
    print(f"  Zero-energy pixels: {(energy == 0).mean():.1%}")

    save_image(SeamCarver().visualize_energy(img), "energy.png")
    print("  Saved visualization: energy.png")


def demo_seam_carving(image_path: str) -> None:
    """Demo seam carving in both directions."""
    print("\n" + "="*60)
    print("DEMO: Seam Carving")
    print("="*60)

    img = load_image(image_path)
    h, w = img.shape[:2]
    print(f"Original size: {w}x{h}")

    target_w, target_h = int(w * 0.75), int(h * 0.85)
    print(f"\nRemoving {w - target_w} vertical and {h - target_h} horizontal seams...")
    carver = SeamCarver(show_progress=True)
    result = carver.carve(img, target_width=target_w, target_height=target_h)
    print(f"New size: {result.carved_size[0]}x{result.carved_size[1]}")

    result.save("carved.png")
    print("Saved: carved.png")

    save_image(result.seam_map(), "seams.png")
    print("Saved: seams.png")


def main():
    """Run all demos."""
    print("="*60)
    print("SEAM CARVE - Demo")
    print("="*60)

    sample_path = create_sample_image()

    demo_energy(sample_path)
    demo_seam_carving(sample_path)

    print("\n" + "="*60)
    print("Demo complete!")
    print("="*60)
    print("\nGenerated files:")
    print("  sample.png - Original test image")
    print("  energy.png - Energy map")
    print("  carved.png - Seam carving result")
    print("  seams.png - Removed seams overlay")


if __name__ == "__main__":
    main()
