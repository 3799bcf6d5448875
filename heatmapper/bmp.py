"""Writing uncompressed 32-bit BMP images."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PIXEL_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE
BITS_PER_PIXEL = 32

_MAX_DIMENSION = 0xFFFF
_U32 = 0xFFFFFFFF


def encode_bmp(pixels: Iterable[int], width: int, height: int) -> bytes:
    """Return a top-down 32 bpp BMP image holding ``pixels`` in row-major order.

    Pixel ``(x, y)`` is taken from ``pixels[y * width + x]``; values are
    0xRRGGBB integers.
    """
    if pixels is None or not 0 < width <= _MAX_DIMENSION or not 0 < height <= _MAX_DIMENSION:
        raise ValueError("invalid parameters for bmp-file")

    count = width * height
    values = list(pixels)
    if len(values) < count:
        raise ValueError(f"expected {count} pixels, got {len(values)}")

    image_size = (count * 4) & _U32
    file_header = b"BM" + struct.pack(
        "<III", (PIXEL_OFFSET + count * 4) & _U32, 0, PIXEL_OFFSET
    )
    info_header = struct.pack(
        "<IiiHHIIiiII",
        INFO_HEADER_SIZE,
        width,
        -height,  # negative height: rows stored top to bottom
        1,
        BITS_PER_PIXEL,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )
    body = struct.pack(f"<{count}I", *(value & _U32 for value in values[:count]))
    return file_header + info_header + body


def write_bmp(path: str | os.PathLike[str], pixels: Iterable[int], width: int, height: int) -> None:
    """Write ``pixels`` as a BMP image to ``path``."""
    data = encode_bmp(pixels, width, height)
    with open(path, "wb") as handle:
        handle.write(data)