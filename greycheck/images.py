"""Reading and writing the images the checker works on."""

from __future__ import annotations

import numpy as np
from PIL import Image


class ImageLoadError(OSError):
    """Raised when an image file cannot be opened or decoded."""


def _read(filename, mode):
    try:
        with Image.open(filename) as image:
            return np.array(image.convert(mode))
    except (OSError, ValueError) as exc:
        raise ImageLoadError(f"Couldn't open file: {filename}") from exc


def load_rgba(filename):
    """Load a colour image as an opaque RGBA uint8 array of shape (rows, cols, 4)."""
    rgb = _read(filename, "RGB")
    alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=np.uint8)
    return np.concatenate([rgb, alpha], axis=-1)


def save_grey(filename, grey):
    """Write a two-dimensional array as an 8-bit greyscale image."""
    pixels = np.asarray(grey)
    if pixels.ndim != 2:
        raise ValueError("greyscale data must be two-dimensional")
    Image.fromarray(pixels.astype(np.uint8)).save(filename)


def generate_reference_image(input_filename, output_filename):
    """Write a greyscale version of an image file."""
    save_grey(output_filename, _read(input_filename, "L"))