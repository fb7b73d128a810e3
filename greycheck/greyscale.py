"""Reference RGBA to greyscale conversion."""

from __future__ import annotations

import numpy as np

_RED = np.float32(0.299)
_GREEN = np.float32(0.587)
_BLUE = np.float32(0.114)


def rgba_to_greyscale(rgba):
    """Convert an array of RGBA (or RGB) pixels to 8-bit luminance.

    The weighted sum is computed in single precision and truncated, so the
    result matches a float-to-unsigned-char conversion.
    """
    pixels = np.asarray(rgba)
    if pixels.ndim < 1 or pixels.shape[-1] < 3:
        raise ValueError("pixels must have at least three channels in the last axis")
    channels = pixels[..., :3].astype(np.float32)
    grey = _RED * channels[..., 0] + _GREEN * channels[..., 1]
    grey = grey + _BLUE * channels[..., 2]
    return np.clip(grey, 0, 255).astype(np.uint8)