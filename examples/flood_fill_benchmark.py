"""
Performance demonstration for the flood fill backends.

Times the vectorised "label" backend against the deque-based "queue"
backend on synthetic wall photos, then runs a full touch -> fill -> blend
-> re-tint cycle through a RecolorSession.
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import logging
import time

import numpy as np
from PIL import Image

from RR_Libs.ImageEditingLib.flood_fill_filter import FloodFillFilter, FloodFillOptions
from RR_Libs.ImageEditingLib.recolor_session import RecolorSession


def make_wall(size, seed=0):
    """Noisy light wall with a darker vertical band (a door) in the middle."""
    rng = np.random.default_rng(seed)
    pixels = np.full((size, size, 3), 210, dtype=np.int16)
    pixels[:, size // 3: size // 2] = 90
    pixels += rng.integers(-15, 16, size=pixels.shape, dtype=np.int16)
    return Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8), mode="RGB")


def time_backend(image, backend, iterations=3):
    fill_filter = FloodFillFilter()
    options = FloodFillOptions.symmetric(40, backend=backend)
    times = []
    for _ in range(iterations):
        start = time.time()
        result = fill_filter.apply_flood_fill(image, (5, 5), (255, 0, 0), options)
        times.append(time.time() - start)
    return sum(times) / len(times), result.pixel_count


def main():
    """Run performance benchmarks."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("Flood Fill Backend Benchmark")
    print("=" * 60)
    print("\nSize        Pixels    label     queue     Speedup")
    print("-" * 60)

    for size in (100, 250, 500, 1000):
        image = make_wall(size)
        label_time, label_count = time_backend(image, "label")
        queue_time, queue_count = time_backend(image, "queue", iterations=1)
        if label_count != queue_count:
            print(f"⚠ Backends disagree at {size}: {label_count} vs {queue_count}")
        speedup = queue_time / label_time if label_time > 0 else 1.0
        print(f"{size:4d}x{size:<4d}  {label_count:8d}  {label_time:6.3f}s  "
              f"{queue_time:6.3f}s  {speedup:6.1f}x")

    print("\n" + "=" * 60)
    print("Session cycle on a 1000x1000 wall")
    print("=" * 60)

    session = RecolorSession()
    session.load_image(make_wall(1000))
    view_size = (1080, 1920)

    start = time.time()
    touch = session.fill_at((540, 960), view_size, "Sage Green")
    print(f"Touch fill: {touch.status.value}, {touch.filled_pixels} pixels, "
          f"{time.time() - start:.3f}s")

    for color in ("Coral", "Powder Blue", "Cream"):
        start = time.time()
        result = session.recolor(color)
        print(f"Re-tint {color:12s}: {result.status.value}, {time.time() - start:.3f}s")

    padding = session.fill_at((540, 100), view_size, "Navy")
    print(f"Touch in letterbox: {padding.status.value}")


if __name__ == "__main__":
    main()
