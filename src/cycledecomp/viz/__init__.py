from .layouts import base_layout
from .draw import draw_decomposition

__all__ = [
    "base_layout",
    "draw_decomposition",
]
