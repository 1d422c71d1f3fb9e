"""
Texture Blend Node for Room Recolor.

Mixes a flood-filled image back over its original so surface texture and
shading remain visible through the new color.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from RR_Libs.ImageEditingLib.texture_blend import blend_images
from RR_Libs.constants import (
    DEFAULT_BLEND_RATIO,
    FIELD_NODE_ID,
    FIELD_NODE_TYPE,
    NODE_TYPE_TEXTURE_BLEND,
)


@dataclass
class TextureBlendNodeConfig:
    """Configuration for texture blend node.

    Attributes:
        blend_ratio: Weight of the filled image (0.0-1.0)
    """
    blend_ratio: float = DEFAULT_BLEND_RATIO

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"blend_ratio": self.blend_ratio}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextureBlendNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items()
                   if k in cls.__dataclass_fields__}
        return cls(**filtered)


def execute_texture_blend_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Execute texture blend node in pipeline.

    Inputs:
        - [0]: Original image (PIL Image)
        - [1]: Filled image, same size (PIL Image)

    Returns:
        Blended PIL Image in the original's mode

    Raises:
        ValueError: If inputs are missing, sizes differ or ratio is invalid
        TypeError: If inputs not PIL Images
    """
    if not inputs or len(inputs) < 2:
        raise ValueError(
            "TextureBlendNode requires 2 inputs: original and filled"
        )

    config = TextureBlendNodeConfig.from_dict(node)

    try:
        return blend_images(inputs[0], inputs[1], float(config.blend_ratio))
    except (ValueError, TypeError) as e:
        raise type(e)(f"Texture blend node error: {str(e)}")


def create_texture_blend_node(
    node_id: str,
    blend_ratio: float = DEFAULT_BLEND_RATIO,
) -> Dict[str, Any]:
    """
    Create texture blend node for graph.

    Example:
        >>> node = create_texture_blend_node("blend-1", blend_ratio=0.6)
        >>> result = registry.execute("Texture Blend", node, [original, filled])
    """
    return {
        FIELD_NODE_ID: node_id,
        FIELD_NODE_TYPE: NODE_TYPE_TEXTURE_BLEND,
        "blend_ratio": blend_ratio,
    }
