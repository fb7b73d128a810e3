"""Greyscale conversion of images and comparison against a reference."""

__version__ = "0.1.0"
__all__ = ["__version__"]