"""
Core image helpers for Room Recolor.

This module provides the low-level conversions shared by the flood fill,
blend and session modules.

Functions:
    normalize_image: Ensure an image is in RGB or RGBA mode
    image_to_array: Copy a PIL image into a uint8 numpy array
    array_to_image: Build a PIL image from a uint8 numpy array
    calculate_in_sample_size: Power-of-two reduction factor for a requested size
    downsample_image: Bound an image's largest dimension
    parse_color: Turn a tuple, hex string or palette name into an RGB triple
"""

import logging
from typing import Any, Sequence, Union

import numpy as np
from PIL import Image, ImageColor

from RR_Libs.ImageEditingLib.image_models import RgbColor
from RR_Libs.constants import (
    DEFAULT_MAX_DIMENSION,
    FALLBACK_IMAGE_MODE,
    PAINT_PALETTE,
    SUPPORTED_IMAGE_MODES,
)

logger = logging.getLogger(__name__)


def _require_image(image: Any) -> None:
    if not hasattr(image, "mode") or not hasattr(image, "size"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")


def normalize_image(image: Any) -> 'Image.Image':
    """
    Return the image in a mode the engine works with.

    RGB and RGBA images are returned unchanged; every other mode
    (L, P, CMYK, ...) is converted to RGBA.

    Args:
        image: A PIL Image

    Returns:
        A PIL Image in RGB or RGBA mode

    Raises:
        TypeError: If image is not a PIL Image
    """
    _require_image(image)
    if image.mode in SUPPORTED_IMAGE_MODES:
        return image
    logger.debug(f"Converting image from {image.mode} to {FALLBACK_IMAGE_MODE}")
    return image.convert(FALLBACK_IMAGE_MODE)


def image_to_array(image: Any) -> np.ndarray:
    """Copy an image into an (height, width, channels) uint8 array."""
    image = normalize_image(image)
    return np.array(image, dtype=np.uint8)


def array_to_image(array: np.ndarray) -> 'Image.Image':
    """Build an RGB or RGBA image from an (height, width, 3|4) array."""
    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValueError(f"Expected (H, W, 3|4) array, got shape {array.shape}")
    mode = "RGBA" if array.shape[2] == 4 else "RGB"
    return Image.fromarray(np.ascontiguousarray(array, dtype=np.uint8), mode=mode)


def calculate_in_sample_size(
    width: int,
    height: int,
    req_width: int = DEFAULT_MAX_DIMENSION,
    req_height: int = DEFAULT_MAX_DIMENSION,
) -> int:
    """
    Calculate a power-of-two reduction factor for an image.

    The factor is the largest power of two that keeps both half-dimensions
    at or above the requested size, so the reduced image is never smaller
    than requested.

    Args:
        width: Source image width
        height: Source image height
        req_width: Requested width
        req_height: Requested height

    Returns:
        The sample size (1, 2, 4, ...)
    """
    in_sample_size = 1
    if height > req_height or width > req_width:
        half_height = height // 2
        half_width = width // 2
        while (
            half_height // in_sample_size >= req_height
            and half_width // in_sample_size >= req_width
        ):
            in_sample_size *= 2
    return in_sample_size


def downsample_image(image: Any, max_dimension: int = DEFAULT_MAX_DIMENSION) -> 'Image.Image':
    """
    Bound an image's largest dimension to max_dimension.

    The image is first reduced by the power-of-two sample size from
    calculate_in_sample_size. If it still exceeds max_dimension it is
    resized to fit, preserving the aspect ratio. Images already within
    bounds are returned as a copy.

    Args:
        image: PIL Image to downsample
        max_dimension: Largest allowed width or height (must be >= 1)

    Returns:
        A new PIL Image no larger than max_dimension on either side

    Raises:
        ValueError: If max_dimension < 1
        TypeError: If image is not a PIL Image
    """
    _require_image(image)
    if max_dimension < 1:
        raise ValueError(f"max_dimension must be >= 1, got {max_dimension}")

    width, height = image.size
    sample_size = calculate_in_sample_size(width, height, max_dimension, max_dimension)
    result = image.reduce(sample_size) if sample_size > 1 else image.copy()

    if max(result.size) > max_dimension:
        result.thumbnail((max_dimension, max_dimension), Image.Resampling.LANCZOS)

    if result.size != image.size:
        logger.debug(
            f"Downsampled image from {image.size} to {result.size} "
            f"(sample size {sample_size})"
        )
    return result


def _clamp_channel(value: Any) -> int:
    return int(max(0, min(255, int(round(float(value))))))


def parse_color(value: Union[str, Sequence[Any]]) -> RgbColor:
    """
    Convert a color description into an RGB triple.

    Accepts an RGB or RGBA sequence (alpha is dropped, channels clamped to
    0-255), a name from PAINT_PALETTE (case-insensitive), or any string
    Pillow's ImageColor understands such as "#RRGGBB".

    Args:
        value: The color description

    Returns:
        (r, g, b) tuple of ints

    Raises:
        ValueError: If the value cannot be interpreted as a color
    """
    if isinstance(value, str):
        text = value.strip()
        for name, rgb in PAINT_PALETTE.items():
            if name.lower() == text.lower():
                return rgb
        try:
            parsed = ImageColor.getrgb(text)
        except ValueError as e:
            raise ValueError(f"Unknown color: {value!r}") from e
        return parsed[0], parsed[1], parsed[2]

    if isinstance(value, Sequence) and len(value) in (3, 4):
        try:
            r, g, b = (_clamp_channel(channel) for channel in value[:3])
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid color channels: {value!r}") from e
        return r, g, b

    raise ValueError(f"Color must be a name, hex string or 3/4-channel sequence, got {value!r}")
