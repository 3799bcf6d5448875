# heatmapper

Turn a regular grid of height samples into a colour heatmap image (uncompressed
32-bit BMP), resampled to a chosen output size with nearest-neighbour or bilinear
interpolation. No third-party libraries are needed.

## Installation

```
pip install .
```

## Input format

The data file is plain text. The first two lines give `xmin, xmax, xstep` and
`ymin, ymax, ystep`. After them comes one `x, y, height` sample per line. Values
may be separated by commas, whitespace or both:

```
0, 2, 1
0, 2, 1
0, 0, 1.5
0, 1, 2.0
0, 2, 2.5
1, 0, 1.0
...
```

Each axis holds `int(int(max - min + 1) / step)` samples. Only the height column
is kept. Samples are stored in file order. `Grid.at(x, y)` reads them with x as
the outer axis, and `bilinear` reads them with x as the fast axis. Parsing raises
`ValueError` in these cases:

- the header is missing;
- a step is zero;
- an axis holds no samples;
- the file has too few samples.

## Command line

```
heatmapper <datafile> <n|b> <xscaling> <yscaling>
```

- `n` selects nearest-neighbour interpolation and writes `heatmap_n.bmp` in the
  current directory.
- `b` selects bilinear interpolation and writes `heatmap_b.bmp`.
- `xscaling` and `yscaling` are the output width and height in pixels. Each must
  be at least 2.

Before the image is written, the two header lines of the data file are printed.
Each output height is placed on a ten-step colour scale. The scale runs from dark
blue for the lowest height to dark red for the highest.

With `n`, column `x` of the upscaled grid is laid out as image row `x`. Only a
square output is therefore covered completely. Pixels that no sample reaches stay
black.

Exit status:

| Status | Meaning |
| --- | --- |
| 0 | Success. Also returned, with nothing done, when the second argument starts with neither `n` nor `b`. |
| 1 | Wrong number of arguments, invalid data or scaling, an output file that cannot be written, or a data file that cannot be opened with `b`. |
| 2 | A data file that cannot be opened with `n`. |

When the data file cannot be opened, the command prints `Could not open file <datafile>`.

## Library use

```python
from heatmapper.datafile import read_grid, parse_grid
from heatmapper.interpolation import bilinear, nearest_neighbor, render_bilinear
from heatmapper.colors import colorize
from heatmapper.bmp import write_bmp, encode_bmp

grid = read_grid("samples.csv")
columns = bilinear(grid, 200, 100)  # indexed [x][y]

# Row-major pixels, as the BMP writer expects them:
heights = [h for row in zip(*columns) for h in row]
pixels = colorize(heights, min(heights), max(heights))
write_bmp("out.bmp", pixels, 200, 100)

# Or run the whole pipeline in one call; it returns the pixel values:
render_bilinear("samples.csv", 200, 100, "out.bmp")
```

- `heatmapper.datafile`: `parse_grid(text)` and `read_grid(path)` return a frozen
  `Grid`. The grid has `xlength` and `ylength` properties and an `at(x, y)`
  accessor.
- `heatmapper.interpolation`: `nearest_neighbor` and `bilinear` return nested
  lists indexed `[x][y]`. `render_nearest` and `render_bilinear` read a data file,
  print its header, colour the result, write the BMP and return the pixels. The
  default outputs are `heatmap_n.bmp` and `heatmap_b.bmp`.
- `heatmapper.colors`:
  - `COLOR_SCALE` holds the ten `#RRGGBB` colours.
  - `color_for_height` picks one of them and clamps heights that fall outside the
    range.
  - `hex_to_rgb` packs a colour into `0xRRGGBB`.
  - `colorize` maps a sequence of heights.
- `heatmapper.bmp`: `encode_bmp(pixels, width, height)` returns the bytes of a
  top-down 32 bpp image. `write_bmp` writes them to a file. Width and height must
  be between 1 and 65535.

## Running the tests

```
pip install .[test]
pytest
```