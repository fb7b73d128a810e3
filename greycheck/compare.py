"""Comparison of a computed image file against a reference image file."""

from __future__ import annotations

import numpy as np
from PIL import Image

from greycheck.checks import check_results_eps, check_results_exact
from greycheck.images import ImageLoadError

DIFFERENCE_FILENAME = "HW1_differenceImage.png"


def _read_unchanged(filename):
    try:
        with Image.open(filename) as image:
            return np.array(image)
    except (OSError, ValueError) as exc:
        raise ImageLoadError(f"Couldn't open file: {filename}") from exc


def difference_image(reference, test):
    """Return the saturated difference reference - test, stretched to 0..255.

    Integer subtraction saturates at the type's range, as image arithmetic
    does, so pixels where the test value is larger come out as zero.
    """
    ref = np.asarray(reference)
    tst = np.asarray(test)
    if ref.shape != tst.shape:
        raise ValueError(f"image shapes differ: {ref.shape} and {tst.shape}")

    raw = ref.astype(np.float64) - tst.astype(np.float64)
    integral = np.issubdtype(ref.dtype, np.integer)
    if integral:
        info = np.iinfo(ref.dtype)
        raw = np.clip(raw, info.min, info.max)
    diff = np.abs(raw)

    if diff.size == 0 or diff.max() == diff.min():
        return np.zeros_like(ref)

    low, high = diff.min(), diff.max()
    scaled = (diff - low) * (255.0 / (high - low))
    if integral:
        return np.clip(np.rint(scaled), info.min, info.max).astype(ref.dtype)
    return scaled.astype(ref.dtype)


def compare_images(
    reference_filename,
    test_filename,
    use_eps_check,
    per_pixel_error,
    global_error,
    difference_filename=DIFFERENCE_FILENAME,
):
    """Compare two image files, writing their difference image.

    Raises ResultMismatchError if they do not agree; returns the difference image.
    """
    reference = _read_unchanged(reference_filename)
    test = _read_unchanged(test_filename)

    diff = difference_image(reference, test)
    Image.fromarray(diff).save(difference_filename)

    if use_eps_check:
        check_results_eps(reference, test, per_pixel_error, global_error)
    else:
        check_results_exact(reference, test)
    return diff