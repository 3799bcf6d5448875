"""Command line entry point: render a data file as a heatmap BMP."""

from __future__ import annotations

import re
import sys

from .interpolation import render_bilinear, render_nearest

_PROG = "heatmapper"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the command with ``argv`` (defaults to the process arguments)."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        print(f"Usage: {_PROG} <datafile> <interpolation initial (n/b)> <xscaling> <yscaling>")
        return 1

    datafile = args[0]
    interpolation = args[1][:1]
    xscaling = _atoi(args[2])
    yscaling = _atoi(args[3])

    renderers = {"n": (render_nearest, 2), "b": (render_bilinear, 1)}
    if interpolation not in renderers:
        return 0
    render, open_error = renderers[interpolation]

    error = 0
    try:
        render(datafile, xscaling, yscaling)
    except OSError as exc:
        if exc.filename == datafile:
            print(f"Could not open file {datafile}")
            error = open_error
        else:
            print("Error: cannot open bmp-file", file=sys.stderr)
            return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if error:
        print(f"{interpolation}\nerror {error}", end="")
    return error


if __name__ == "__main__":
    sys.exit(main())