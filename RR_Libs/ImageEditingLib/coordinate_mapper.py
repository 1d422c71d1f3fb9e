"""
Display-to-image coordinate mapping.

An image shown on a display surface is scaled uniformly to fit, leaving
symmetric padding (letterbox or pillarbox) along the non-limiting axis.
This module converts touch positions on the surface back into pixel
coordinates of the source image and reports touches that land in the
padding instead of clamping them to the border.

Example:
    >>> geometry = compute_display_geometry((1080, 1920), (1024, 768))
    >>> map_display_to_image((540, 960), (1080, 1920), (1024, 768))
    PixelCoordinate(x=512, y=384)
"""

import math
from typing import Optional, Sequence, Tuple

from RR_Libs.ImageEditingLib.image_models import DisplayGeometry, PixelCoordinate, Size


def _validate_size(size: Sequence[float], label: str) -> Tuple[float, float]:
    if len(size) != 2:
        raise ValueError(f"{label} must be (width, height), got {size!r}")
    width, height = float(size[0]), float(size[1])
    if width <= 0 or height <= 0:
        raise ValueError(f"{label} must be positive, got {size!r}")
    return width, height


def compute_display_geometry(display_size: Sequence[float], image_size: Size) -> DisplayGeometry:
    """
    Compute the scale and padding of an image fitted into a display surface.

    Args:
        display_size: (width, height) of the surface
        image_size: (width, height) of the image

    Returns:
        DisplayGeometry with scale and per-side offsets

    Raises:
        ValueError: If either size is not a positive (width, height) pair
    """
    display_w, display_h = _validate_size(display_size, "display_size")
    image_w, image_h = _validate_size(image_size, "image_size")

    scale = min(display_w / image_w, display_h / image_h)
    offset_x = (display_w - image_w * scale) / 2.0
    offset_y = (display_h - image_h * scale) / 2.0
    return DisplayGeometry(scale=scale, offset_x=offset_x, offset_y=offset_y)


def map_display_to_image(
    point: Sequence[float],
    display_size: Sequence[float],
    image_size: Size,
) -> Optional[PixelCoordinate]:
    """
    Map a display-surface point to an image pixel.

    Args:
        point: (x, y) position on the surface
        display_size: (width, height) of the surface
        image_size: (width, height) of the image

    Returns:
        The pixel under the point, or None if the point is in the padding
        or off the image
    """
    geometry = compute_display_geometry(display_size, image_size)
    x = math.floor((float(point[0]) - geometry.offset_x) / geometry.scale)
    y = math.floor((float(point[1]) - geometry.offset_y) / geometry.scale)

    coordinate = PixelCoordinate(int(x), int(y))
    if not coordinate.is_within((int(image_size[0]), int(image_size[1]))):
        return None
    return coordinate


def map_image_to_display(
    coordinate: Sequence[int],
    display_size: Sequence[float],
    image_size: Size,
) -> Tuple[float, float]:
    """Return the display position of a pixel's centre."""
    geometry = compute_display_geometry(display_size, image_size)
    x = geometry.offset_x + (coordinate[0] + 0.5) * geometry.scale
    y = geometry.offset_y + (coordinate[1] + 0.5) * geometry.scale
    return x, y
