"""Read gridded height samples, upscale them and write colour heatmap BMP images."""

__version__ = "0.1.0"
__all__ = ["bmp", "colors", "datafile", "interpolation", "cli"]