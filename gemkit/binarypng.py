"""Reading, writing and framing monochrome PNG images.

A binary image is a two-dimensional numpy array of ``uint8`` indexed as
``image[y, x]`` whose values are members of :class:`Bw`.
"""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Union

import numpy as np
from PIL import Image

from .errors import GemError

PathLike = Union[str, "os.PathLike[str]"]


class Bw(IntEnum):
    """Pixel values of a binary image."""

    WHITE = 0
    BLACK = 1


def _is_png(filename: str) -> bool:
    return filename.lower().endswith(".png")


def _gray(red: int, green: int, blue: int) -> int:
    return (red * 11 + green * 16 + blue * 5) // 32


def _mono_indices(source: Image.Image) -> tuple[np.ndarray, bool]:
    """Return the 0/1 palette indices of a monochrome image and whether index 0 is black."""
    if source.mode == "1":
        return (np.asarray(source.convert("L")) != 0).astype(np.uint8), True
    if source.mode == "P":
        palette = source.getpalette() or []
        if 3 <= len(palette) <= 6:
            indices = np.asarray(source).astype(np.uint8)
            if indices.size == 0 or int(indices.max()) <= 1:
                return indices, _gray(*palette[:3]) == 0
    raise ValueError("not monochrome")


def add_border(image: np.ndarray, border_width: int, color: Bw = Bw.WHITE) -> np.ndarray:
    """Return a copy of a binary image surrounded by a frame of the given width and color."""
    pixels = np.asarray(image, dtype=np.uint8)
    if border_width == 0:
        return pixels.copy()
    height, width = pixels.shape
    result = np.full(
        (height + 2 * border_width, width + 2 * border_width), int(color), dtype=np.uint8
    )
    result[border_width:border_width + height, border_width:border_width + width] = pixels
    return result


def read(filename: PathLike, border_width: int = 0, color: Bw = Bw.WHITE) -> np.ndarray:
    """Read a monochrome PNG image and frame it with a border."""
    name = os.fspath(filename)
    if not _is_png(name):
        raise GemError(f"The given input ({name}) is not a *.png image.")
    if not os.path.exists(name):
        raise GemError(f"The given input ({name}) does not exist.")
    try:
        with Image.open(name) as source:
            source.load()
            indices, zero_is_black = _mono_indices(source)
    except (OSError, ValueError) as exc:
        raise GemError(f"The given input ({name}) is not a monochrome image.") from exc
    if zero_is_black:
        pixels = np.where(indices == 0, int(Bw.BLACK), int(Bw.WHITE))
    else:
        pixels = np.where(indices == 0, int(Bw.WHITE), int(Bw.BLACK))
    return add_border(pixels.astype(np.uint8), border_width, color)


def write(
    image: np.ndarray, filename: PathLike, border_width: int = 0, color: Bw = Bw.WHITE
) -> None:
    """Write a binary image, framed with a border, as a monochrome PNG."""
    name = os.fspath(filename)
    if not _is_png(name):
        raise GemError(f"The given output ({name}) is not a *.png image.")
    framed = add_border(image, border_width, color)
    levels = np.where(framed == Bw.BLACK, 0, 255).astype(np.uint8)
    Image.fromarray(levels).convert("1", dither=Image.Dither.NONE).save(name, format="PNG")