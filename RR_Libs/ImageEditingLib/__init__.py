"""
ImageEditingLib - Core region recolor functionality

This module provides coordinate mapping, tolerant flood fill, texture
blending and the recolor session for the Room Recolor project.
"""

from RR_Libs.ImageEditingLib.image_models import (
    DimensionMismatchError,
    DisplayGeometry,
    FillState,
    FloodFillResult,
    PixelCoordinate,
    RecolorResult,
    RecolorStatus,
    RgbColor,
    RgbaColor,
)
from RR_Libs.ImageEditingLib.image_editing_ops import (
    calculate_in_sample_size,
    downsample_image,
    normalize_image,
    parse_color,
)
from RR_Libs.ImageEditingLib.coordinate_mapper import (
    compute_display_geometry,
    map_display_to_image,
    map_image_to_display,
)
from RR_Libs.ImageEditingLib.flood_fill_filter import FloodFillFilter, FloodFillOptions
from RR_Libs.ImageEditingLib.texture_blend import blend_images, blend_region
from RR_Libs.ImageEditingLib.recolor_session import RecolorConfig, RecolorSession
from RR_Libs.ImageEditingLib.recolor_worker import RecolorWorker

__all__ = [
    "DimensionMismatchError",
    "DisplayGeometry",
    "FillState",
    "FloodFillResult",
    "PixelCoordinate",
    "RecolorResult",
    "RecolorStatus",
    "RgbColor",
    "RgbaColor",
    "calculate_in_sample_size",
    "downsample_image",
    "normalize_image",
    "parse_color",
    "compute_display_geometry",
    "map_display_to_image",
    "map_image_to_display",
    "FloodFillFilter",
    "FloodFillOptions",
    "blend_images",
    "blend_region",
    "RecolorConfig",
    "RecolorSession",
    "RecolorWorker",
]
