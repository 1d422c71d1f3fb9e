"""
Recolor session: touch-to-fill and re-tint state for one open image.

A RecolorSession owns a pristine copy of the loaded image and the last
successful fill. Each request runs the same pipeline against the pristine
copy:

    display point -> coordinate mapper -> flood fill -> texture blend

Because every fill starts from the pristine image, changing the color any
number of times never compounds earlier blends.

Classes:
    RecolorConfig: Tunable parameters (tolerance, blend ratio, ...)
    RecolorSession: Owns the image and the remembered seed

Example:
    >>> session = RecolorSession()
    >>> session.load_image(photo)
    >>> result = session.fill_at((320, 480), view_size, (200, 160, 210))
    >>> if result.ok:
    ...     show(result.image)
    >>> show(session.recolor((140, 210, 170)).image)
"""

import logging
import threading
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Sequence

from PIL import Image

from RR_Libs.ImageEditingLib.coordinate_mapper import map_display_to_image
from RR_Libs.ImageEditingLib.flood_fill_filter import FloodFillFilter, FloodFillOptions
from RR_Libs.ImageEditingLib.image_editing_ops import (
    downsample_image,
    normalize_image,
    parse_color,
)
from RR_Libs.ImageEditingLib.image_models import (
    FillState,
    PixelCoordinate,
    RecolorResult,
    RecolorStatus,
    RgbColor,
    ToleranceValue,
)
from RR_Libs.ImageEditingLib.texture_blend import blend_region
from RR_Libs.constants import (
    DEFAULT_BACKEND,
    DEFAULT_BLEND_RATIO,
    DEFAULT_CONNECTIVITY,
    DEFAULT_FILL_COLOR,
    DEFAULT_MAX_DIMENSION,
    DEFAULT_TOLERANCE,
)

logger = logging.getLogger(__name__)


@dataclass
class RecolorConfig:
    """Configuration for a recolor session.

    Attributes:
        tolerance: Per-channel tolerance, scalar or RGB triplet, used for
                   both the lower and the upper bound
        blend_ratio: Weight of the flat fill in the final blend (0-1)
        connectivity: 4 or 8 neighbour region growing
        backend: Flood fill backend, 'label' or 'queue'
        max_dimension: Largest side of a loaded image; None disables
                       downsampling
        default_color: Fill color used when a request gives none
    """
    tolerance: ToleranceValue = DEFAULT_TOLERANCE
    blend_ratio: float = DEFAULT_BLEND_RATIO
    connectivity: int = DEFAULT_CONNECTIVITY
    backend: str = DEFAULT_BACKEND
    max_dimension: Optional[int] = DEFAULT_MAX_DIMENSION
    default_color: RgbColor = field(default=DEFAULT_FILL_COLOR)

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.blend_ratio) <= 1.0:
            raise ValueError(f"blend_ratio must be between 0 and 1, got {self.blend_ratio}")
        self.default_color = parse_color(self.default_color)
        if isinstance(self.tolerance, list):
            self.tolerance = tuple(self.tolerance[:3])
        self.fill_options()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RecolorConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def fill_options(self, tolerance: Optional[ToleranceValue] = None) -> FloodFillOptions:
        """Build flood fill options, optionally overriding the tolerance."""
        return FloodFillOptions.symmetric(
            self.tolerance if tolerance is None else tolerance,
            connectivity=self.connectivity,
            backend=self.backend,
        )


class RecolorSession:
    """
    Editing session for one image.

    The image/seed pair is committed as a single immutable FillState under
    a lock, so readers never see an image from one fill paired with the
    seed of another.
    """

    def __init__(
        self,
        config: Optional[RecolorConfig] = None,
        fill_filter: Optional[FloodFillFilter] = None,
    ):
        self.config = config or RecolorConfig()
        self._filter = fill_filter or FloodFillFilter()
        self._lock = threading.Lock()
        self._original: Optional['Image.Image'] = None
        self._fill_state: Optional[FillState] = None

    @property
    def original(self) -> Optional['Image.Image']:
        """The pristine loaded image every fill starts from."""
        return self._original

    @property
    def fill_state(self) -> Optional[FillState]:
        return self._fill_state

    @property
    def current_image(self) -> Optional['Image.Image']:
        """The image to display: the last fill result, else the original."""
        with self._lock:
            if self._fill_state is not None:
                return self._fill_state.image
            return self._original

    @property
    def has_image(self) -> bool:
        return self._original is not None

    @property
    def can_recolor(self) -> bool:
        return self._fill_state is not None

    def load_image(self, image: Any) -> 'Image.Image':
        """
        Start editing a new image.

        The caller's image is copied, normalised to RGB/RGBA and bounded to
        config.max_dimension. Any remembered fill is discarded.

        Returns:
            The stored pristine image
        """
        prepared = normalize_image(image).copy()
        if self.config.max_dimension:
            prepared = downsample_image(prepared, self.config.max_dimension)

        with self._lock:
            self._original = prepared
            self._fill_state = None

        logger.debug(f"Loaded {prepared.mode} image {prepared.size[0]}x{prepared.size[1]}")
        return prepared

    def reset(self) -> None:
        """Forget the last fill but keep the loaded image."""
        with self._lock:
            self._fill_state = None

    def fill_at(
        self,
        display_point: Sequence[float],
        display_size: Sequence[float],
        color: Optional[Any] = None,
        tolerance: Optional[ToleranceValue] = None,
    ) -> RecolorResult:
        """
        Fill the region under a display-surface touch.

        Args:
            display_point: (x, y) of the touch on the display surface
            display_size: (width, height) of the surface showing the image
            color: Fill color (tuple, hex or palette name), default from config
            tolerance: Tolerance override for this and later re-tints

        Returns:
            RecolorResult. OUTSIDE_IMAGE when the touch hits the padding,
            NO_IMAGE when nothing is loaded; neither changes the session.
        """
        original = self._original
        if original is None:
            logger.info("Fill requested with no image loaded")
            return RecolorResult(RecolorStatus.NO_IMAGE)

        seed = map_display_to_image(display_point, display_size, original.size)
        if seed is None:
            logger.info(f"Touch {tuple(display_point)} is outside the image, ignoring")
            return RecolorResult(RecolorStatus.OUTSIDE_IMAGE)

        return self._fill(original, seed, color, tolerance)

    def fill_at_pixel(
        self,
        seed: Sequence[int],
        color: Optional[Any] = None,
        tolerance: Optional[ToleranceValue] = None,
    ) -> RecolorResult:
        """Fill the region around an image-space seed."""
        original = self._original
        if original is None:
            logger.info("Fill requested with no image loaded")
            return RecolorResult(RecolorStatus.NO_IMAGE)

        seed = PixelCoordinate(int(seed[0]), int(seed[1]))
        if not seed.is_within(original.size):
            logger.info(f"Seed {tuple(seed)} is outside the image, ignoring")
            return RecolorResult(RecolorStatus.OUTSIDE_IMAGE)

        return self._fill(original, seed, color, tolerance)

    def recolor(self, color: Any) -> RecolorResult:
        """
        Re-tint the last filled region with a new color.

        The fill and blend are recomputed from the remembered seed against
        the pristine original, never against the previous result.

        Returns:
            RecolorResult, NO_PRIOR_FILL if no fill has happened since the
            image was loaded
        """
        with self._lock:
            original = self._original
            state = self._fill_state

        if original is None or state is None:
            logger.info("Recolor requested before any fill, ignoring")
            return RecolorResult(RecolorStatus.NO_PRIOR_FILL)

        return self._fill(original, state.seed, color, state.tolerance)

    def _fill(
        self,
        original: 'Image.Image',
        seed: PixelCoordinate,
        color: Optional[Any],
        tolerance: Optional[ToleranceValue],
    ) -> RecolorResult:
        rgb = parse_color(color) if color is not None else self.config.default_color
        effective_tolerance = self.config.tolerance if tolerance is None else tolerance
        if not isinstance(effective_tolerance, (int, float)):
            # FillState must not share a caller-owned list
            effective_tolerance = tuple(int(c) for c in effective_tolerance)
        options = self.config.fill_options(effective_tolerance)

        fill_result = self._filter.apply_flood_fill(original, seed, rgb, options)
        blended = blend_region(original, fill_result, self.config.blend_ratio)

        state = FillState(
            seed=seed,
            color=rgb,
            tolerance=effective_tolerance,
            image=blended,
            pixel_count=fill_result.pixel_count,
        )

        with self._lock:
            if self._original is not original:
                # A new image was loaded while this fill was computing
                logger.info(f"Discarding fill at {tuple(seed)} for a replaced image")
                return RecolorResult(RecolorStatus.NO_IMAGE)
            self._fill_state = state

        logger.debug(f"Committed fill at {tuple(seed)} with {rgb}: {fill_result.pixel_count} pixels")
        return RecolorResult(
            RecolorStatus.APPLIED,
            image=blended,
            seed=seed,
            filled_pixels=fill_result.pixel_count,
        )
