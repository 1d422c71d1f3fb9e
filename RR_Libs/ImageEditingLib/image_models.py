"""
Image editing data models for Room Recolor.

This module defines core data structures used throughout the recolor engine.

Classes:
    PixelCoordinate: Integer (x, y) position in image space
    DisplayGeometry: Scale and letterbox offsets of an image fitted to a surface
    FloodFillResult: Output of a flood fill (image, region mask, pixel count)
    FillState: Last successful fill remembered for re-tinting
    RecolorStatus: Outcome of a session request
    RecolorResult: Status plus the produced image
    DimensionMismatchError: Raised when two images that must match in size do not

Type Aliases:
    RgbColor: A tuple of 3 integers representing RGB color values (0-255)
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
    ToleranceValue: A scalar or per-channel RGB triplet
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from PIL import Image

RgbColor = Tuple[int, int, int]
RgbaColor = Tuple[int, int, int, int]
ToleranceValue = Union[int, float, Tuple[float, float, float]]
Size = Tuple[int, int]


class PixelCoordinate(NamedTuple):
    x: int
    y: int

    def is_within(self, size: Size) -> bool:
        """Return True if the coordinate lies inside an image of (width, height)."""
        width, height = size
        return 0 <= self.x < width and 0 <= self.y < height


@dataclass(frozen=True)
class DisplayGeometry:
    """Uniform scale and centring offsets of an image drawn on a display surface.

    Attributes:
        scale: Display pixels per image pixel
        offset_x: Horizontal padding (pillarbox) on each side, in display pixels
        offset_y: Vertical padding (letterbox) on each side, in display pixels
    """
    scale: float
    offset_x: float
    offset_y: float


class DimensionMismatchError(ValueError):
    """Two images that must share dimensions do not."""


@dataclass
class FloodFillResult:
    image: 'Image.Image'
    mask: 'Image.Image'
    pixel_count: int

    @property
    def applied(self) -> bool:
        return self.pixel_count > 0


@dataclass(frozen=True)
class FillState:
    """The last committed fill. Replaced as a whole, never mutated."""
    seed: PixelCoordinate
    color: RgbColor
    tolerance: ToleranceValue
    image: 'Image.Image'
    pixel_count: int


class RecolorStatus(Enum):
    APPLIED = "applied"
    OUTSIDE_IMAGE = "outside_image"
    NO_PRIOR_FILL = "no_prior_fill"
    NO_IMAGE = "no_image"


@dataclass
class RecolorResult:
    status: RecolorStatus
    image: Optional['Image.Image'] = None
    seed: Optional[PixelCoordinate] = None
    filled_pixels: int = 0

    @property
    def ok(self) -> bool:
        return self.status is RecolorStatus.APPLIED
