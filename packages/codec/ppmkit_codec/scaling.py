"""Channel scaling between normalized floats and integer sample values.

Decoding divides by the file's ``scale_max`` and rounds to two decimals
with numpy's round-half-to-even. Encoding multiplies by ``OUTPUT_SCALE``,
clamps, and truncates toward zero; NaN channels are written as 0.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


OUTPUT_SCALE = 255


def clamp(value, lo: float, hi: float):
    """Clamp a scalar or array into ``[lo, hi]``."""
    if lo > hi:
        raise ValueError(f"clamp bounds out of order: {lo} > {hi}")
    if isinstance(value, np.ndarray):
        return np.clip(value, lo, hi)
    return max(lo, min(hi, value))


def round_decimal(values, digits: int = 2) -> np.ndarray:
    factor = 10.0**digits
    return np.round(np.asarray(values, dtype=np.float64) * factor) / factor


def normalize_channels(values: Sequence[float] | np.ndarray, scale_max: float) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    return round_decimal(arr / scale_max)


def quantize_channels(values: Sequence[float] | np.ndarray, scale: int = OUTPUT_SCALE) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    # NaN has no sample value; write it as 0
    scaled = np.nan_to_num(arr * scale, nan=0.0, posinf=float(scale), neginf=0.0)
    # astype truncates toward zero
    return clamp(scaled, 0, scale).astype(np.int64)
