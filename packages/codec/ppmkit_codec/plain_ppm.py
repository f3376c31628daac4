"""Plain-text PPM (P3) decode and encode.

File layout::

    P3                  <- format identifier, not validated on read
    <width> <height>
    <scale_max>
    r g b r g b ...     <- 3 * width * height tokens, wrapped freely

Decoded channels are normalized to ``value / scale_max`` rounded to two
decimals. Encoded output always uses scale 255.
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path

from ppmkit_canvas.models import Canvas, Color, PixelCountMismatch

from .errors import DecodeError, EncodeError, ErrorKind
from .scaling import OUTPUT_SCALE, normalize_channels, quantize_channels


FORMAT_ID = "P3"

# int()/float() also accept "1_000", "inf" and "nan"; tokens must be plain decimals
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

_log = logging.getLogger("ppmkit.codec")


def _parse_int(token: str, field: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise DecodeError(ErrorKind.INVALID_NUMBER, f"{field} is not an integer: {token!r}")
    value = int(token)
    if value < 0:
        raise DecodeError(ErrorKind.INVALID_NUMBER, f"{field} must be non-negative, got {value}")
    return value


def _parse_float(token: str, field: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise DecodeError(ErrorKind.INVALID_NUMBER, f"{field} is not a number: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise DecodeError(ErrorKind.INVALID_NUMBER, f"{field} is not finite: {token!r}")
    return value


def parse_header(lines: list[str]) -> tuple[int, int, float]:
    """Return ``(width, height, scale_max)`` from lines 1 and 2."""
    if len(lines) < 2:
        raise DecodeError(ErrorKind.MISSING_HEADER_LINE, "missing dimensions line")
    dimensions = lines[1].split()
    if len(dimensions) < 2:
        raise DecodeError(ErrorKind.MISSING_HEADER_LINE, f"dimensions line needs width and height: {lines[1]!r}")
    width = _parse_int(dimensions[0], "width")
    height = _parse_int(dimensions[1], "height")

    if len(lines) < 3 or not lines[2].strip():
        raise DecodeError(ErrorKind.MISSING_HEADER_LINE, "missing scale line")
    scale_max = _parse_float(lines[2].strip(), "scale")
    if scale_max <= 0:
        raise DecodeError(ErrorKind.INVALID_NUMBER, f"scale must be positive, got {scale_max}")
    return width, height, scale_max


def parse_body(lines: list[str], scale_max: float) -> list[Color]:
    """Decode every line after the header into normalized colors."""
    tokens = " ".join(lines[3:]).rstrip().split()
    values = [_parse_float(tok, "channel") for tok in tokens]
    if len(values) % 3 != 0:
        raise DecodeError(
            ErrorKind.BODY_LENGTH_MISMATCH,
            f"channel count {len(values)} is not a multiple of 3",
        )

    channels = normalize_channels(values, scale_max).reshape((-1, 3)).tolist()
    return [Color(r, g, b) for r, g, b in channels]


def decode_text(text: str) -> Canvas:
    lines = text.split("\n")
    width, height, scale_max = parse_header(lines)
    pixels = parse_body(lines, scale_max)
    try:
        return Canvas(width, height).with_pixels(pixels)
    except PixelCountMismatch as exc:
        raise DecodeError(
            ErrorKind.BODY_LENGTH_MISMATCH,
            f"{width}x{height} header needs {exc.expected} pixels, body has {exc.actual}",
        ) from exc


def load(path: str | Path) -> Canvas:
    """Read a P3 file into a Canvas. Raises DecodeError."""
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise DecodeError(ErrorKind.NOT_FOUND, "file not found", path) from None
    except (OSError, UnicodeDecodeError) as exc:
        raise DecodeError(ErrorKind.READ_ERROR, str(exc), path) from exc

    try:
        canvas = decode_text(content)
    except DecodeError as exc:
        exc.path = path
        raise

    _log.info(
        f"decoded {canvas.width}x{canvas.height} canvas from {path}",
        extra={"event": "ppm_decoded", "path": str(path), "width": canvas.width, "height": canvas.height},
    )
    return canvas


def try_load(path: str | Path) -> Canvas | None:
    """Like load, but report any decode failure as None."""
    try:
        return load(path)
    except DecodeError as exc:
        _log.warning(
            f"could not load {path}: {exc}",
            extra={"event": "ppm_decode_failed", "path": str(path), "kind": exc.kind.value},
        )
        return None


def generate_header(canvas: Canvas) -> str:
    return f"{FORMAT_ID}\n{canvas.width} {canvas.height}\n{OUTPUT_SCALE}"


def generate_body(canvas: Canvas) -> str:
    channels = quantize_channels([c.as_tuple() for c in canvas.pixels]).reshape((-1, 3))
    rows: list[str] = []
    for y in range(canvas.height):
        start = y * canvas.width
        row = channels[start : start + canvas.width]
        rows.append(" ".join(f"{r} {g} {b}" for r, g, b in row.tolist()))
    return "\n".join(rows)


def encode_text(canvas: Canvas) -> str:
    return f"{generate_header(canvas)}\n{generate_body(canvas)}\n"


def save(canvas: Canvas, path: str | Path) -> Path:
    """Write canvas as P3 at scale 255. Raises EncodeError on I/O failure."""
    path = Path(path)
    text = encode_text(canvas)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise EncodeError(ErrorKind.WRITE_ERROR, str(exc), path) from exc

    _log.info(
        f"encoded {canvas.width}x{canvas.height} canvas to {path}",
        extra={"event": "ppm_encoded", "path": str(path), "width": canvas.width, "height": canvas.height},
    )
    return path
