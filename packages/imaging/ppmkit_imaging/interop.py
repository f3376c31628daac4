"""Conversion between canvases and in-memory Pillow images."""

from __future__ import annotations

import numpy as np
from PIL import Image

from ppmkit_canvas.models import Canvas, Color
from ppmkit_codec.scaling import OUTPUT_SCALE, normalize_channels, quantize_channels


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """Quantize a canvas into an RGB image exactly as the P3 encoder would."""
    if canvas.width == 0 or canvas.height == 0:
        return Image.new("RGB", canvas.size)
    channels = quantize_channels([c.as_tuple() for c in canvas.pixels]).astype(np.uint8)
    return Image.frombytes("RGB", canvas.size, channels.tobytes())


def canvas_from_image(image: Image.Image) -> Canvas:
    """Build a canvas from any Pillow image, normalized like a decoded file."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    width, height = image.size
    raw = np.frombuffer(image.tobytes(), dtype=np.uint8)
    channels = normalize_channels(raw, OUTPUT_SCALE).reshape((-1, 3)).tolist()
    return Canvas(width, height).with_pixels([Color(r, g, b) for r, g, b in channels])
