"""Codec package for plain-text PPM (P3) files."""

from .errors import DecodeError, EncodeError, ErrorKind, PpmError
from .plain_ppm import (
    FORMAT_ID,
    decode_text,
    encode_text,
    generate_body,
    generate_header,
    load,
    parse_body,
    parse_header,
    save,
    try_load,
)
from .scaling import OUTPUT_SCALE, clamp, normalize_channels, quantize_channels, round_decimal

__all__ = [
    "DecodeError",
    "EncodeError",
    "ErrorKind",
    "FORMAT_ID",
    "OUTPUT_SCALE",
    "PpmError",
    "clamp",
    "decode_text",
    "encode_text",
    "generate_body",
    "generate_header",
    "load",
    "normalize_channels",
    "parse_body",
    "parse_header",
    "quantize_channels",
    "round_decimal",
    "save",
    "try_load",
]
