"""Element-wise comparison of reference results against computed results."""

from __future__ import annotations

import numpy as np


class ResultMismatchError(Exception):
    """Raised when computed results do not match the reference closely enough."""

    def __init__(self, message, position=None, reference=None, actual=None):
        super().__init__(message)
        self.position = position
        self.reference = reference
        self.actual = actual


def _flatten_pair(ref, gpu):
    reference = np.asarray(ref).ravel()
    computed = np.asarray(gpu).ravel()
    if reference.size != computed.size:
        raise ValueError(
            f"element counts differ: {reference.size} reference, {computed.size} computed"
        )
    return reference, computed


def _abs_difference(reference, computed):
    # larger minus smaller keeps unsigned types from wrapping around
    return np.maximum(reference, computed) - np.minimum(reference, computed)


def _format(value):
    if isinstance(value, float):
        return f"{value:.17g}"
    return str(value)


def _mismatch(message, index, reference, computed):
    ref_value = reference[index].item()
    gpu_value = computed[index].item()
    return ResultMismatchError(
        f"{message}\nReference: {_format(ref_value)}\nGPU      : {_format(gpu_value)}",
        position=index,
        reference=ref_value,
        actual=gpu_value,
    )


def check_results_exact(ref, gpu):
    """Require every element to match exactly; return the number of elements checked."""
    reference, computed = _flatten_pair(ref, gpu)
    differing = np.flatnonzero(reference != computed)
    if differing.size:
        index = int(differing[0])
        raise _mismatch(f"Difference at pos {index}", index, reference, computed)
    return int(reference.size)


def check_results_eps(ref, gpu, eps1, eps2):
    """Allow per-element differences up to eps1 in at most a fraction eps2 of elements.

    Returns the fraction of elements that differ by a small, non-zero amount.
    """
    if eps1 < 0 or eps2 < 0:
        raise ValueError("tolerances must be non-negative")
    reference, computed = _flatten_pair(ref, gpu)
    diff = _abs_difference(reference, computed)

    too_large = np.flatnonzero(diff > eps1)
    if too_large.size:
        index = int(too_large[0])
        raise _mismatch(
            f"Difference at pos {index} exceeds tolerance of {eps1:g}",
            index,
            reference,
            computed,
        )

    small = int(np.count_nonzero((diff > 0) & (diff <= eps1)))
    fraction = small / reference.size if reference.size else 0.0
    if fraction > eps2:
        raise ResultMismatchError(
            "Total percentage of non-zero pixel difference between the two images "
            f"exceeds {100.0 * eps2:g}%\n"
            f"Percentage of non-zero pixel differences: {100.0 * fraction:g}%"
        )
    return fraction


def check_results_autodesk(ref, gpu, variance, tolerance):
    """Allow at most `tolerance` elements whose difference exceeds `variance`.

    The tolerance is a count of elements, not a fraction. Returns the number of
    elements that exceeded the variance.
    """
    reference, computed = _flatten_pair(ref, gpu)
    bad = int(np.count_nonzero(_abs_difference(reference, computed) > variance))
    if bad > tolerance:
        raise ResultMismatchError(f"Too many bad pixels in the image.{bad}/{tolerance}")
    return bad