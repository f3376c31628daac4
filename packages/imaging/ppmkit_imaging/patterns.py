"""Deterministic test patterns drawn with Pillow."""

from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw

from ppmkit_canvas.models import Canvas

from .interop import canvas_from_image


_SOLID: dict[str, tuple[int, int, int]] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
}

CHECKER_TILE = 8

PATTERNS = (*_SOLID, "quadrants", "h-gradient", "v-gradient", "checkerboard")


def list_patterns() -> list[str]:
    return list(PATTERNS)


def _box(draw: ImageDraw.ImageDraw, x0: int, y0: int, x1: int, y1: int, fill: tuple[int, int, int]) -> None:
    # half-open [x0, x1) x [y0, y1); empty boxes are skipped
    if x1 > x0 and y1 > y0:
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=fill)


def _gradient(width: int, height: int, horizontal: bool) -> Image.Image:
    span = max((width if horizontal else height) - 1, 1)
    ramp = (255 * np.arange(width if horizontal else height) / span).astype(np.uint8)
    if horizontal:
        grey = np.tile(ramp, (height, 1))
    else:
        grey = np.tile(ramp[:, None], (1, width))
    return Image.frombytes("L", (width, height), grey.tobytes()).convert("RGB")


def build_test_pattern(name: str, width: int, height: int) -> Canvas:
    if name not in PATTERNS:
        raise ValueError(f"Unknown pattern: {name}")
    if width == 0 or height == 0:
        return Canvas(width, height)

    if name in _SOLID:
        return canvas_from_image(Image.new("RGB", (width, height), _SOLID[name]))

    if name in ("h-gradient", "v-gradient"):
        return canvas_from_image(_gradient(width, height, horizontal=name == "h-gradient"))

    img = Image.new("RGB", (width, height), (0, 0, 0))
    draw = ImageDraw.Draw(img)
    if name == "quadrants":
        mid_x, mid_y = width // 2, height // 2
        _box(draw, 0, 0, mid_x, mid_y, (255, 0, 0))
        _box(draw, mid_x, 0, width, mid_y, (0, 255, 0))
        _box(draw, 0, mid_y, mid_x, height, (0, 0, 255))
        _box(draw, mid_x, mid_y, width, height, (255, 255, 255))
    else:
        for ty in range(0, height, CHECKER_TILE):
            for tx in range(0, width, CHECKER_TILE):
                if (tx // CHECKER_TILE + ty // CHECKER_TILE) % 2 == 0:
                    _box(draw, tx, ty, tx + CHECKER_TILE, ty + CHECKER_TILE, (255, 255, 255))
    return canvas_from_image(img)
