"""Command line: convert an image to greyscale and check it against the reference."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass

from greycheck.checks import ResultMismatchError
from greycheck.compare import DIFFERENCE_FILENAME, compare_images
from greycheck.greyscale import rgba_to_greyscale
from greycheck.images import ImageLoadError, load_rgba, save_grey
from greycheck.timer import Timer

USAGE = (
    "Usage: greycheck input_file [output_filename] [reference_filename] "
    "[perPixelError] [globalError]"
)

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Options:
    """What to read, where to write, and how strictly to compare."""

    input_file: str
    output_file: str = "HW1_output.png"
    reference_file: str = "HW1_reference.png"
    use_eps_check: bool = False
    per_pixel_error: float = 0.0
    global_error: float = 0.0
    difference_file: str = DIFFERENCE_FILENAME


def _leading_float(text):
    """Parse the longest numeric prefix of text; 0.0 when there is none."""
    match = _NUMBER_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def parse_args(argv):
    """Build Options from the arguments after the program name."""
    args = list(argv)
    if len(args) == 1:
        return Options(args[0])
    if len(args) == 2:
        return Options(args[0], args[1])
    if len(args) == 3:
        return Options(args[0], args[1], args[2])
    if len(args) == 5:
        return Options(
            args[0],
            args[1],
            args[2],
            use_eps_check=True,
            per_pixel_error=_leading_float(args[3]),
            global_error=_leading_float(args[4]),
        )
    raise ValueError(USAGE)


def run(options):
    """Convert, write output and reference images, and compare them."""
    rgba = load_rgba(options.input_file)

    with Timer() as timer:
        grey = rgba_to_greyscale(rgba)
    print(f"Your code ran in: {timer.elapsed():f} msecs.")

    save_grey(options.output_file, grey)
    save_grey(options.reference_file, rgba_to_greyscale(rgba))

    compare_images(
        options.reference_file,
        options.output_file,
        options.use_eps_check,
        options.per_pixel_error,
        options.global_error,
        options.difference_file,
    )
    print("PASS")


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        run(options)
    except (ImageLoadError, ResultMismatchError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())