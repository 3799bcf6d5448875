"""Reading sampled height grids from comma separated data files.

A data file starts with two header triples ``min, max, step`` for the x and
y axes, followed by ``x, y, height`` triples sorted with x as the outer axis.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

_SEPARATORS = re.compile(r"[,\s]+")
_HEADER_VALUES = 6


def _axis_length(low: float, high: float, step: float) -> int:
    if step == 0:
        raise ValueError("axis step must not be zero")
    length = int(int(high - low + 1) / step)
    if length < 1:
        raise ValueError(f"axis {low}..{high} with step {step} holds no samples")
    return length


@dataclass(frozen=True)
class Grid:
    """A regular grid of height samples, kept in file order."""

    xmin: float
    xmax: float
    xstep: float
    ymin: float
    ymax: float
    ystep: float
    samples: tuple[float, ...]

    @property
    def xlength(self) -> int:
        return _axis_length(self.xmin, self.xmax, self.xstep)

    @property
    def ylength(self) -> int:
        return _axis_length(self.ymin, self.ymax, self.ystep)

    def at(self, x: int, y: int) -> float:
        """Height of the sample in column ``x`` and row ``y``."""
        xlength, ylength = self.xlength, self.ylength
        if not (0 <= x < xlength and 0 <= y < ylength):
            raise IndexError(f"sample ({x}, {y}) outside {xlength}x{ylength} grid")
        return self.samples[x * ylength + y]


def parse_grid(text: str) -> Grid:
    """Parse the contents of a data file."""
    try:
        values = [float(token) for token in _SEPARATORS.split(text.strip()) if token]
    except ValueError as exc:
        raise ValueError(f"malformed data file: {exc}") from None
    if len(values) < _HEADER_VALUES:
        raise ValueError("data file header needs two 'min, max, step' lines")

    xmin, xmax, xstep, ymin, ymax, ystep = values[:_HEADER_VALUES]
    count = _axis_length(xmin, xmax, xstep) * _axis_length(ymin, ymax, ystep)
    triples = values[_HEADER_VALUES:]
    if len(triples) < 3 * count:
        raise ValueError(f"expected {count} samples, found {len(triples) // 3}")

    heights = tuple(triples[2::3][:count])
    return Grid(xmin, xmax, xstep, ymin, ymax, ystep, heights)


def read_grid(path: str | os.PathLike[str]) -> Grid:
    """Read and parse the data file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_grid(handle.read())