# greycheck

Convert a colour image to greyscale and check the result against a
reference greyscale image, either exactly or within tolerances.

The greyscale value of each pixel is the weighted channel sum
`0.299 * R + 0.587 * G + 0.114 * B`, computed in single precision and
truncated to an 8-bit value.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
greycheck input_file [output_filename [reference_filename [perPixelError globalError]]]
```

The command takes one, two, three or five arguments:

- `input_file` – the colour image to convert.
- `output_filename` – where the greyscale image is written
  (default `HW1_output.png`).
- `reference_filename` – where the reference greyscale image is written
  (default `HW1_reference.png`).
- `perPixelError globalError` – give both to compare with tolerances
  instead of exactly. `perPixelError` is the largest allowed difference of
  a single pixel; `globalError` is the largest allowed fraction of pixels
  that differ by a small, non-zero amount. Each is read from its leading
  number; text with no leading number counts as 0.

Any other number of arguments prints the usage line on standard error and
exits with status 1.

The command prints how long the conversion took (`Your code ran in: ...
msecs.`), writes the output and reference images, writes a
contrast-stretched difference image `HW1_differenceImage.png` in the
current directory, and prints `PASS` when the images agree. If the input
cannot be opened, or the images do not agree, it prints the reason on
standard error (for a mismatch, the first offending position with both
values) and exits with status 1.

Example:

```
greycheck photo.jpg grey.png reference.png 1 0.001
```

## Library use

```python
from greycheck.images import load_rgba, save_grey
from greycheck.greyscale import rgba_to_greyscale
from greycheck.checks import check_results_eps, ResultMismatchError
from greycheck.timer import Timer

rgba = load_rgba("photo.jpg")
with Timer() as timer:
    grey = rgba_to_greyscale(rgba)
print(f"{timer.elapsed():.3f} ms")
save_grey("grey.png", grey)

reference = rgba_to_greyscale(rgba)
try:
    check_results_eps(reference, grey, 1, 0.001)
except ResultMismatchError as exc:
    print(exc, exc.position)
```

Modules:

- `greycheck.images` – `load_rgba` reads any image as an opaque RGBA
  array, `save_grey` writes a 2-D array as an 8-bit greyscale image,
  `generate_reference_image` writes a greyscale copy of an image file.
  Unreadable files raise `ImageLoadError`.
- `greycheck.greyscale` – `rgba_to_greyscale` converts RGB or RGBA pixels.
- `greycheck.checks` – `check_results_exact`, `check_results_eps` and
  `check_results_autodesk` (at most `tolerance` elements may differ by more
  than `variance`). They raise `ResultMismatchError`, which carries
  `position`, `reference` and `actual` for per-element failures.
- `greycheck.compare` – `compare_images` compares two image files and
  writes their difference image; `difference_image` returns that image as
  an array.
- `greycheck.timer` – `Timer`, a wall-clock timer in milliseconds, usable
  with `start()`/`stop()`/`elapsed()` or as a context manager.
- `greycheck.cli` – `parse_args`, `run` and `main` behind the command.

## What it does not do

The conversion runs on the CPU with NumPy; there is no GPU or accelerated
implementation to time or check. The command produces both the output and
the reference image with the same conversion, so it serves to exercise the
pipeline and the comparison rather than to check a separate implementation.