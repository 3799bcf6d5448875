"""Upscaling height grids and rendering them as heatmap images."""

from __future__ import annotations

import os

from .bmp import write_bmp
from .colors import color_for_height, hex_to_rgb
from .datafile import Grid, read_grid

# Bounds that the bilinear range search starts from.
FLT_MAX = 3.4028234663852886e38
FLT_MIN = 1.1754943508222875e-38


def _positions(scaling: int, length: int) -> list[float]:
    """Positions in the source grid that each output column or row samples."""
    if scaling < 2:
        raise ValueError(f"scaling must be at least 2, got {scaling}")
    return [i / (scaling - 1) * (length - 1) for i in range(scaling)]


def _nearest(position: float) -> int:
    index = int(position)
    return index + 1 if position - index >= 0.5 else index


def _bracket(position: float, length: int) -> tuple[int, int, float]:
    low = int(position)
    high = low + 1 if low < length - 1 else low
    return low, high, position - low


def nearest_neighbor(grid: Grid, xscaling: int, yscaling: int) -> list[list[float]]:
    """Upscale ``grid`` to ``xscaling`` by ``yscaling`` samples.

    The result is indexed ``[x][y]``.
    """
    columns = [_nearest(p) for p in _positions(xscaling, grid.xlength)]
    rows = [_nearest(p) for p in _positions(yscaling, grid.ylength)]
    return [[grid.at(x, y) for y in rows] for x in columns]


def bilinear(grid: Grid, xscaling: int, yscaling: int) -> list[list[float]]:
    """Bilinearly upscale ``grid`` to ``xscaling`` by ``yscaling`` samples.

    Samples are read with x as the fast axis of the file. The result is
    indexed ``[x][y]``.
    """
    xlength = grid.xlength
    samples = grid.samples
    columns = [_bracket(p, xlength) for p in _positions(xscaling, xlength)]
    rows = [_bracket(p, grid.ylength) for p in _positions(yscaling, grid.ylength)]

    def sample(x: int, y: int) -> float:
        return samples[x + y * xlength]

    result = []
    for x1, x2, x_frac in columns:
        column = []
        for y1, y2, y_frac in rows:
            low = sample(x1, y1) * (1 - x_frac) + sample(x2, y1) * x_frac
            high = sample(x1, y2) * (1 - x_frac) + sample(x2, y2) * x_frac
            column.append(low * (1 - y_frac) + high * y_frac)
        result.append(column)
    return result


def _print_header(grid: Grid) -> None:
    print(f"{grid.xmin:f}, {grid.xmax:f}, {grid.xstep:f}")
    print(f"{grid.ymin:f}, {grid.ymax:f}, {grid.ystep:f}")


def _color(height: float, low: float, high: float) -> int:
    return hex_to_rgb(color_for_height(height, low, high))


def render_nearest(
    datafile: str | os.PathLike[str],
    xscaling: int,
    yscaling: int,
    output: str | os.PathLike[str] = "heatmap_n.bmp",
) -> list[int]:
    """Render ``datafile`` with nearest-neighbour upscaling; return the pixels.

    Column ``x`` of the upscaled grid is laid out as image row ``x``, so only
    square outputs cover the image completely; pixels left uncovered stay
    black and samples falling outside the image are dropped.
    """
    grid = read_grid(datafile)
    _print_header(grid)
    columns = nearest_neighbor(grid, xscaling, yscaling)
    heights = [h for column in columns for h in column]
    low, high = min(heights), max(heights)

    pixels = [0] * (xscaling * yscaling)
    for x, column in enumerate(columns):
        for y, height in enumerate(column):
            index = y + x * xscaling
            if index < len(pixels):
                pixels[index] = _color(height, low, high)

    write_bmp(output, pixels, xscaling, yscaling)
    return pixels


def render_bilinear(
    datafile: str | os.PathLike[str],
    xscaling: int,
    yscaling: int,
    output: str | os.PathLike[str] = "heatmap_b.bmp",
) -> list[int]:
    """Render ``datafile`` with bilinear upscaling; return the pixels."""
    grid = read_grid(datafile)
    _print_header(grid)
    columns = bilinear(grid, xscaling, yscaling)
    heights = [h for row in zip(*columns) for h in row]
    low = min([FLT_MAX, *heights])
    high = max([FLT_MIN, *heights])

    pixels = [_color(h, low, high) for h in heights]
    write_bmp(output, pixels, xscaling, yscaling)
    return pixels