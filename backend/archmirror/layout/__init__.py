from archmirror.layout.config import LayoutConfig, DEFAULT_LAYOUT
from archmirror.layout.engine import circle_layout, relax_layout, apply_layout

__all__ = [
    "LayoutConfig",
    "DEFAULT_LAYOUT",
    "circle_layout",
    "relax_layout",
    "apply_layout",
]
