"""
Tolerance-based flood fill.

Grows a connected region from a seed pixel. A pixel joins the region when
every RGB channel lies within [seed - lower_diff, seed + upper_diff] of the
seed's original color. The reference color never changes during the fill,
so large gradients cannot drift the selection. Alpha is ignored for matching
and preserved in the output.

Backends:
    - "label": Builds the in-tolerance mask with numpy and keeps the
      scipy.ndimage connected component containing the seed. Fast on large
      images.
    - "queue": Explicit breadth-first region growing with a deque and a
      visited mask. Each pixel is examined at most once.

Both backends select exactly the same pixels.

Example:
    >>> from PIL import Image
    >>> image = Image.new("RGB", (100, 100), (128, 128, 128))
    >>> result = FloodFillFilter().apply_flood_fill(
    ...     image, (50, 50), (255, 0, 0), FloodFillOptions.symmetric(40)
    ... )
    >>> result.pixel_count
    10000
"""

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

import numpy as np
from PIL import Image
from scipy import ndimage

from RR_Libs.ImageEditingLib.image_editing_ops import (
    array_to_image,
    image_to_array,
    normalize_image,
)
from RR_Libs.ImageEditingLib.image_models import (
    FloodFillResult,
    PixelCoordinate,
    RgbColor,
    ToleranceValue,
)
from RR_Libs.constants import (
    BACKEND_LABEL,
    DEFAULT_BACKEND,
    DEFAULT_CONNECTIVITY,
    DEFAULT_TOLERANCE,
    MASK_MODE,
    MASK_SELECTED,
    MASK_UNSELECTED,
    SUPPORTED_BACKENDS,
    SUPPORTED_CONNECTIVITIES,
)

logger = logging.getLogger(__name__)

_NEIGHBOUR_OFFSETS = {
    4: ((1, 0), (-1, 0), (0, 1), (0, -1)),
    8: ((1, 0), (-1, 0), (0, 1), (0, -1), (1, 1), (1, -1), (-1, 1), (-1, -1)),
}


@dataclass(frozen=True)
class FloodFillOptions:
    lower_diff: ToleranceValue = DEFAULT_TOLERANCE
    upper_diff: ToleranceValue = DEFAULT_TOLERANCE
    connectivity: int = DEFAULT_CONNECTIVITY
    backend: str = DEFAULT_BACKEND

    def __post_init__(self) -> None:
        if self.connectivity not in SUPPORTED_CONNECTIVITIES:
            raise ValueError(
                f"connectivity must be one of {SUPPORTED_CONNECTIVITIES}, got {self.connectivity}"
            )
        if self.backend not in SUPPORTED_BACKENDS:
            raise ValueError(f"backend must be one of {SUPPORTED_BACKENDS}, got {self.backend!r}")

    @classmethod
    def symmetric(cls, tolerance: ToleranceValue, **kwargs: Any) -> "FloodFillOptions":
        """Options with the same lower and upper tolerance."""
        return cls(lower_diff=tolerance, upper_diff=tolerance, **kwargs)


class FloodFillFilter:
    def __init__(self) -> None:
        pass

    def compute_region_mask(
        self,
        image: Any,
        seed: Sequence[int],
        options: FloodFillOptions,
    ) -> np.ndarray:
        """
        Find the connected region around a seed.

        Args:
            image: PIL Image (RGB/RGBA, other modes are converted)
            seed: (x, y) seed pixel in image space
            options: Tolerance, connectivity and backend

        Returns:
            Boolean array of shape (height, width), True inside the region.
            All False when the seed is outside the image.
        """
        rgb = image_to_array(image)[:, :, :3].astype(np.int16)
        height, width = rgb.shape[:2]
        seed = PixelCoordinate(int(seed[0]), int(seed[1]))

        if not seed.is_within((width, height)):
            logger.info(f"Flood fill seed {tuple(seed)} outside {width}x{height} image")
            return np.zeros((height, width), dtype=bool)

        within = self._within_tolerance(rgb, seed, options)

        if options.backend == BACKEND_LABEL:
            return self._grow_region_label(within, seed, options.connectivity)
        return self._grow_region_queue(within, seed, options.connectivity)

    def apply_flood_fill(
        self,
        image: Any,
        seed: Sequence[int],
        color: RgbColor,
        options: FloodFillOptions,
    ) -> FloodFillResult:
        """
        Flood fill an image with a flat color.

        Args:
            image: PIL Image to fill. Never modified.
            seed: (x, y) seed pixel in image space
            color: RGB fill color
            options: Tolerance, connectivity and backend

        Returns:
            FloodFillResult with:
            - image: new PIL Image, region RGB replaced by color, alpha kept
            - mask: "L" image, 255 inside the region
            - pixel_count: region size, 0 when the seed was out of bounds
        """
        source = normalize_image(image)
        pixels = image_to_array(source)
        region = self.compute_region_mask(source, seed, options)

        pixel_count = int(np.count_nonzero(region))
        pixels[region, :3] = np.asarray(color[:3], dtype=np.uint8)

        mask_values = np.where(region, MASK_SELECTED, MASK_UNSELECTED).astype(np.uint8)
        mask = Image.fromarray(mask_values, mode=MASK_MODE)
        filled = array_to_image(pixels)

        logger.debug(
            f"Flood fill at {tuple(seed)} with {tuple(color)}: {pixel_count} pixels "
            f"({options.backend}, {options.connectivity}-connected)"
        )
        return FloodFillResult(image=filled, mask=mask, pixel_count=pixel_count)

    def _within_tolerance(
        self,
        rgb: np.ndarray,
        seed: PixelCoordinate,
        options: FloodFillOptions,
    ) -> np.ndarray:
        reference = rgb[seed.y, seed.x].astype(np.float64)
        lower = np.asarray(self._triplet_tolerance(options.lower_diff))
        upper = np.asarray(self._triplet_tolerance(options.upper_diff))
        return np.all((rgb >= reference - lower) & (rgb <= reference + upper), axis=2)

    def _grow_region_label(
        self,
        within: np.ndarray,
        seed: PixelCoordinate,
        connectivity: int,
    ) -> np.ndarray:
        structure = ndimage.generate_binary_structure(2, 1 if connectivity == 4 else 2)
        labels, _ = ndimage.label(within, structure=structure)
        return labels == labels[seed.y, seed.x]

    def _grow_region_queue(
        self,
        within: np.ndarray,
        seed: PixelCoordinate,
        connectivity: int,
    ) -> np.ndarray:
        height, width = within.shape
        matches = within.tolist()
        region = np.zeros((height, width), dtype=bool)
        visited = [[False] * width for _ in range(height)]
        offsets = _NEIGHBOUR_OFFSETS[connectivity]

        queue = deque([(seed.x, seed.y)])
        visited[seed.y][seed.x] = True

        while queue:
            x, y = queue.popleft()
            if not matches[y][x]:
                continue
            region[y, x] = True
            for dx, dy in offsets:
                nx = x + dx
                ny = y + dy
                if 0 <= nx < width and 0 <= ny < height and not visited[ny][nx]:
                    visited[ny][nx] = True
                    queue.append((nx, ny))

        return region

    def _triplet_tolerance(self, tolerance: ToleranceValue) -> Tuple[float, float, float]:
        if isinstance(tolerance, Sequence) and not isinstance(tolerance, (str, bytes)):
            raw_values = [max(0.0, float(value)) for value in tolerance]
            if not raw_values:
                return 0.0, 0.0, 0.0
            if len(raw_values) == 1:
                value = raw_values[0]
                return value, value, value
            if len(raw_values) == 2:
                return raw_values[0], raw_values[1], raw_values[1]
            return raw_values[0], raw_values[1], raw_values[2]

        value = max(0.0, float(tolerance))
        return value, value, value
