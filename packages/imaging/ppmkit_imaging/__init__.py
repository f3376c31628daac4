"""Pillow interop and test patterns for ppmkit canvases."""

from .interop import canvas_from_image, canvas_to_image
from .patterns import PATTERNS, build_test_pattern, list_patterns

__all__ = [
    "PATTERNS",
    "build_test_pattern",
    "canvas_from_image",
    "canvas_to_image",
    "list_patterns",
]
