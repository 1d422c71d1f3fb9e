"""
Constants and configuration values for Room Recolor.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the library.
"""

# Flood fill defaults
DEFAULT_TOLERANCE = 40
DEFAULT_CONNECTIVITY = 4
SUPPORTED_CONNECTIVITIES = (4, 8)
BACKEND_LABEL = "label"
BACKEND_QUEUE = "queue"
SUPPORTED_BACKENDS = (BACKEND_LABEL, BACKEND_QUEUE)
DEFAULT_BACKEND = BACKEND_LABEL

# Blend defaults (weight given to the flat fill color)
DEFAULT_BLEND_RATIO = 0.5

# Image loading
DEFAULT_MAX_DIMENSION = 1024
SUPPORTED_IMAGE_MODES = ("RGB", "RGBA")
FALLBACK_IMAGE_MODE = "RGBA"

# Mask values
MASK_MODE = "L"
MASK_SELECTED = 255
MASK_UNSELECTED = 0

# Default fill color (red)
DEFAULT_FILL_COLOR = (255, 0, 0)

# Wall paint swatches (RGB)
PAINT_PALETTE = {
    "Sky Blue": (100, 180, 210),
    "Mint Green": (140, 210, 170),
    "Lavender": (200, 160, 210),
    "Peach": (240, 190, 160),
    "Warm Yellow": (240, 220, 120),
    "Sage Green": (130, 175, 140),
    "Coral": (230, 140, 120),
    "Teal": (100, 160, 170),
    "Beige": (230, 210, 180),
    "Light Gray": (190, 190, 190),
    "Powder Blue": (170, 200, 220),
    "Blush Pink": (225, 180, 195),
    "Cream": (245, 230, 200),
    "Terracotta": (200, 120, 100),
    "Navy": (40, 60, 100),
    "White": (245, 245, 245),
    "Red": (255, 0, 0),
}

# Node type names
NODE_TYPE_FLOOD_FILL = "Flood Fill"
NODE_TYPE_TEXTURE_BLEND = "Texture Blend"
NODE_TYPE_DOWNSAMPLE = "Downsample"

# Node field names
FIELD_NODE_ID = "id"
FIELD_NODE_TYPE = "type"
