"""
Downsample Node for Room Recolor.

Bounds the largest side of an incoming photo before it is edited, using
power-of-two reduction followed by an aspect-preserving resize.
"""

from typing import Any, Dict, List

from RR_Libs.ImageEditingLib.image_editing_ops import downsample_image
from RR_Libs.constants import DEFAULT_MAX_DIMENSION, FIELD_NODE_ID, FIELD_NODE_TYPE, NODE_TYPE_DOWNSAMPLE


def execute_downsample_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Execute downsample node in pipeline.

    Node dict may contain:
        - 'max_dimension': Largest allowed side in pixels (default 1024)

    Inputs:
        - [0]: Image to downsample (PIL Image)

    Returns:
        Downsampled PIL Image
    """
    if not inputs:
        raise ValueError("Downsample node requires 1 input image")

    max_dimension = int(node.get("max_dimension", DEFAULT_MAX_DIMENSION))

    try:
        return downsample_image(inputs[0], max_dimension)
    except (ValueError, TypeError) as e:
        raise type(e)(f"Downsample node error: {str(e)}")


def create_downsample_node(
    node_id: str,
    max_dimension: int = DEFAULT_MAX_DIMENSION,
) -> Dict[str, Any]:
    """Create downsample node for graph."""
    return {
        FIELD_NODE_ID: node_id,
        FIELD_NODE_TYPE: NODE_TYPE_DOWNSAMPLE,
        "max_dimension": max_dimension,
    }
