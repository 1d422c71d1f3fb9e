"""
Flood Fill Node for Room Recolor.

This node flood fills an image from a seed pixel with a flat color and
optionally returns the region mask alongside the filled image.

Classes:
    FloodFillNodeConfig: Configuration for flood fill node

Functions:
    execute_flood_fill_node: Pipeline executor for flood fill nodes
    create_flood_fill_node: Helper to build a flood fill node dict
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from RR_Libs.ImageEditingLib.flood_fill_filter import FloodFillFilter, FloodFillOptions
from RR_Libs.ImageEditingLib.image_editing_ops import parse_color
from RR_Libs.ImageEditingLib.image_models import RgbColor, ToleranceValue
from RR_Libs.constants import (
    DEFAULT_BACKEND,
    DEFAULT_CONNECTIVITY,
    DEFAULT_FILL_COLOR,
    DEFAULT_TOLERANCE,
    FIELD_NODE_ID,
    FIELD_NODE_TYPE,
    NODE_TYPE_FLOOD_FILL,
)


@dataclass
class FloodFillNodeConfig:
    """Configuration for flood fill node execution.

    Attributes:
        seed_x: Seed column in image space
        seed_y: Seed row in image space
        color: Fill color - RGB tuple, hex string or palette name
        tolerance: Symmetric per-channel tolerance (scalar or RGB triplet)
        connectivity: 4 or 8 neighbour region growing
        backend: 'label' or 'queue'
        output_mask: If True, return (image, mask) tuple; else just image
    """
    seed_x: int = 0
    seed_y: int = 0
    color: Any = DEFAULT_FILL_COLOR
    tolerance: ToleranceValue = DEFAULT_TOLERANCE
    connectivity: int = DEFAULT_CONNECTIVITY
    backend: str = DEFAULT_BACKEND
    output_mask: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FloodFillNodeConfig":
        """Create from dictionary."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        tolerance = normalized.get("tolerance")
        if isinstance(tolerance, list):
            normalized["tolerance"] = tuple(tolerance[:3])
        return cls(**normalized)

    def get_seed(self) -> tuple:
        return int(self.seed_x), int(self.seed_y)

    def get_color(self) -> RgbColor:
        return parse_color(self.color)

    def get_filter_options(self) -> FloodFillOptions:
        return FloodFillOptions.symmetric(
            self.tolerance,
            connectivity=int(self.connectivity),
            backend=self.backend,
        )


def execute_flood_fill_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for flood fill nodes.

    Args:
        node: Node dictionary containing FloodFillNodeConfig fields
        inputs: Should contain exactly one element: the input PIL Image

    Returns:
        - If output_mask=True: Tuple of (filled_image, region_mask)
        - If output_mask=False: Just filled_image

    Raises:
        ValueError: If inputs list is empty or parameters are invalid
        TypeError: If input is not a PIL Image
    """
    if not inputs:
        raise ValueError("Flood fill node requires 1 input image")

    image = inputs[0]

    if not hasattr(image, "size") or not hasattr(image, "mode"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    try:
        config = FloodFillNodeConfig.from_dict(node)
        result = FloodFillFilter().apply_flood_fill(
            image,
            config.get_seed(),
            config.get_color(),
            config.get_filter_options(),
        )
    except (ValueError, TypeError) as e:
        raise type(e)(f"Flood fill node error: {str(e)}")

    if config.output_mask:
        return (result.image, result.mask)
    return result.image


def create_flood_fill_node(
    node_id: str,
    seed: Sequence[int],
    color: Any = DEFAULT_FILL_COLOR,
    tolerance: ToleranceValue = DEFAULT_TOLERANCE,
    connectivity: int = DEFAULT_CONNECTIVITY,
    output_mask: bool = False,
) -> Dict[str, Any]:
    """
    Helper to create a flood fill node dictionary for graph building.

    Args:
        node_id: Unique node identifier
        seed: (x, y) seed pixel in image space
        color: Fill color
        tolerance: Symmetric per-channel tolerance
        connectivity: 4 or 8
        output_mask: Whether to output the region mask

    Returns:
        Node dictionary ready for graph serialization
    """
    return {
        FIELD_NODE_ID: node_id,
        FIELD_NODE_TYPE: NODE_TYPE_FLOOD_FILL,
        "output_ports": ["image", "mask"] if output_mask else ["image"],
        "seed_x": int(seed[0]),
        "seed_y": int(seed[1]),
        "color": color,
        "tolerance": tolerance,
        "connectivity": connectivity,
        "output_mask": output_mask,
    }
