"""
Pytest configuration and shared fixtures for Room Recolor tests.

This module provides shared test images used across multiple test modules.
"""

import numpy as np
import pytest
from PIL import Image

GRAY = (128, 128, 128)
RED = (255, 0, 0)
BLACK = (0, 0, 0)


def make_gray_image(size=(100, 100)):
    """Uniform mid-gray RGB image."""
    return Image.new("RGB", size, GRAY)


def make_black_square_image(size=(100, 100), square=10):
    """Gray RGB image with a black square in the top-left corner."""
    image = make_gray_image(size)
    image.paste(BLACK, (0, 0, square, square))
    return image


def make_blocky_image(size=(48, 48), block=4, levels=6, seed=0):
    """RGB image of random flat blocks; neighbouring blocks often share colors."""
    rng = np.random.default_rng(seed)
    rows = size[1] // block
    cols = size[0] // block
    palette = rng.integers(0, 256, size=(levels, 3), dtype=np.uint8)
    choice = rng.integers(0, levels, size=(rows, cols))
    blocks = palette[choice]
    pixels = np.repeat(np.repeat(blocks, block, axis=0), block, axis=1)
    return Image.fromarray(pixels, mode="RGB")


def make_noisy_wall_image(size=(60, 40), seed=1):
    """Left half a noisy light wall, right half a noisy dark object."""
    rng = np.random.default_rng(seed)
    width, height = size
    pixels = np.empty((height, width, 3), dtype=np.int16)
    pixels[:, : width // 2] = 200
    pixels[:, width // 2:] = 60
    pixels += rng.integers(-12, 13, size=pixels.shape, dtype=np.int16)
    return Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8), mode="RGB")


@pytest.fixture
def gray_image():
    return make_gray_image()


@pytest.fixture
def black_square_image():
    return make_black_square_image()


@pytest.fixture
def blocky_image():
    return make_blocky_image()


@pytest.fixture
def noisy_wall_image():
    return make_noisy_wall_image()
