"""Canvas package: in-memory RGB pixel grid."""

from .models import BLACK, Canvas, Color, PixelCountMismatch

__all__ = [
    "BLACK",
    "Canvas",
    "Color",
    "PixelCountMismatch",
]
