# Visual style module
# Colors and geometry shared by the renderer and the interaction layer

from archmirror.visual.visual_style import (
    KIND_COLORS,
    NODE_STYLE,
    EDGE_STYLE,
    LABEL_STYLE,
    color_for,
)

__all__ = [
    "KIND_COLORS",
    "NODE_STYLE",
    "EDGE_STYLE",
    "LABEL_STYLE",
    "color_for",
]
