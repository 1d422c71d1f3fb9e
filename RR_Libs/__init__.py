"""
RR_Libs - Room Recolor Library Modules

This package contains core functionality for the Room Recolor project,
organized into specialized sub-packages:

- ImageEditingLib: Coordinate mapping, tolerant flood fill, texture blending
  and the recolor session that ties them together
- NodesLib: Pipeline nodes wrapping the editing operations
- ProjStoreLib: Node executor registry
"""

__version__ = "0.1.0"
