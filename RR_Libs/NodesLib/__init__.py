"""
Room Recolor Nodes Library.

This module contains the node implementations that expose the recolor
operations to a node pipeline.

Modules:
    flood_fill_node: Tolerant flood fill with optional region mask
    texture_blend_node: Blend a filled image back over its original
    downsample_node: Bound the size of an input image
"""

from RR_Libs.NodesLib.flood_fill_node import (
    FloodFillNodeConfig,
    execute_flood_fill_node,
    create_flood_fill_node,
)
from RR_Libs.NodesLib.texture_blend_node import (
    TextureBlendNodeConfig,
    execute_texture_blend_node,
    create_texture_blend_node,
)
from RR_Libs.NodesLib.downsample_node import (
    execute_downsample_node,
    create_downsample_node,
)

__all__ = [
    "FloodFillNodeConfig",
    "execute_flood_fill_node",
    "create_flood_fill_node",
    "TextureBlendNodeConfig",
    "execute_texture_blend_node",
    "create_texture_blend_node",
    "execute_downsample_node",
    "create_downsample_node",
]
