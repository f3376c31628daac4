"""Typed canvas models: colors and the row-major pixel grid."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


BLACK = Color(0.0, 0.0, 0.0)


class PixelCountMismatch(ValueError):
    """Raised when a pixel sequence does not cover width*height cells."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} pixels, got {actual}")
        self.expected = expected
        self.actual = actual


class Canvas:
    """Width x height grid of colors stored as one flat row-major list."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas dimensions must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[Color] = [BLACK] * (width * height)

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self.pixels == other.pixels

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def with_pixels(self, pixels: list[Color]) -> Canvas:
        """Replace the whole pixel sequence and return the canvas."""
        expected = self.width * self.height
        if len(pixels) != expected:
            raise PixelCountMismatch(expected, len(pixels))
        self.pixels = list(pixels)
        return self

    def pixel_at(self, x: int, y: int) -> Color | None:
        """Return the color at (x, y), or None when out of bounds.

        ``x == width`` is accepted and addresses the first cell of row
        ``y + 1``. On the last row that cell does not exist and the lookup
        raises ``IndexError``.
        """
        if not self._index_is_valid(x, y):
            return None
        return self.pixels[self.width * y + x]

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        self.pixels[self.width * y + x] = color

    def fill(self, color: Color) -> None:
        self.pixels = [color] * (self.width * self.height)

    def rows(self) -> Iterator[list[Color]]:
        for y in range(self.height):
            start = y * self.width
            yield self.pixels[start : start + self.width]

    def _index_is_valid(self, x: int, y: int) -> bool:
        return 0 <= x <= self.width and 0 <= y < self.height
