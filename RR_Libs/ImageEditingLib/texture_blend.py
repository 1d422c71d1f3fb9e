"""
Texture-preserving blend of a flat fill with its source image.

A flat flood fill erases shading and surface texture. Mixing the filled
image back with the original at a fixed ratio keeps part of the original
luminance variation while shifting the hue toward the fill color. Pixels
outside the filled region are identical in both inputs and come through
unchanged.
"""

from typing import Any

import numpy as np
from PIL import Image

from RR_Libs.ImageEditingLib.image_editing_ops import (
    array_to_image,
    image_to_array,
    normalize_image,
)
from RR_Libs.ImageEditingLib.image_models import DimensionMismatchError, FloodFillResult
from RR_Libs.constants import DEFAULT_BLEND_RATIO


def blend_images(original: Any, filled: Any, ratio: float = DEFAULT_BLEND_RATIO) -> 'Image.Image':
    """
    Blend a filled image over its original.

    Each channel becomes filled * ratio + original * (1 - ratio), rounded
    half-up to the nearest integer.

    Args:
        original: The pristine source image
        filled: The flood-filled image, same size as original. Converted to
                original's mode if the modes differ.
        ratio: Weight of the filled image (0.0 keeps the original,
               1.0 keeps the flat fill)

    Returns:
        New PIL Image in original's mode

    Raises:
        DimensionMismatchError: If the images differ in size
        ValueError: If ratio is outside [0, 1]
        TypeError: If inputs are not PIL Images
    """
    if not hasattr(original, "mode"):
        raise TypeError(f"Expected PIL Image for original, got {type(original)}")
    if not hasattr(filled, "mode"):
        raise TypeError(f"Expected PIL Image for filled, got {type(filled)}")

    if original.size != filled.size:
        raise DimensionMismatchError(
            f"Cannot blend images of different sizes: {original.size} vs {filled.size}"
        )

    ratio = float(ratio)
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"ratio must be between 0 and 1, got {ratio}")

    original = normalize_image(original)
    if filled.mode != original.mode:
        filled = filled.convert(original.mode)

    original_array = image_to_array(original).astype(np.float64)
    filled_array = image_to_array(filled).astype(np.float64)

    blended = filled_array * ratio + original_array * (1.0 - ratio)
    blended = np.clip(np.floor(blended + 0.5), 0, 255).astype(np.uint8)
    return array_to_image(blended)


def blend_region(
    original: Any,
    fill_result: FloodFillResult,
    ratio: float = DEFAULT_BLEND_RATIO,
) -> 'Image.Image':
    """Blend a FloodFillResult's image with the original it was computed from."""
    return blend_images(original, fill_result.image, ratio)
