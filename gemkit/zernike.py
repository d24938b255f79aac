"""Zernike moments of binary shapes (fast recursive computation)."""

from __future__ import annotations

import math
import sys
from typing import List

import numpy as np

from .binarypng import Bw
from .errors import GemError
from .mathutils import PI

MAX_ORDER = 32


def _recurrence_tables() -> tuple[list[list[float]], list[list[float]], list[list[float]]]:
    h1 = [[0.0] * MAX_ORDER for _ in range(MAX_ORDER)]
    h2 = [[0.0] * MAX_ORDER for _ in range(MAX_ORDER)]
    h3 = [[0.0] * MAX_ORDER for _ in range(MAX_ORDER)]
    for n in range(MAX_ORDER):
        for m in range(n):
            c3 = -(4.0 * (m + 2.0) * (m + 1.0)) / ((n + m + 2.0) * (n - m))
            c2 = (c3 * (n + m + 4.0) * (n - m - 2.0)) / (4.0 * (m + 3.0)) + (m + 2.0)
            c1 = (
                ((m + 4.0) * (m + 3.0)) / 2.0
                - (m + 4.0) * c2
                + (c3 * (n + m + 6.0) * (n - m - 4.0)) / 8.0
            )
            h1[n][m], h2[n][m], h3[n][m] = c1, c2, c3
    return h1, h2, h3


_H1, _H2, _H3 = _recurrence_tables()


def _moment_count(order: int) -> int:
    return sum(n // 2 + 1 for n in range(order + 1))


def zernike2d(image: np.ndarray, order: int = 8, radius: float = 0.0) -> List[float]:
    """Return the Zernike moment magnitudes of the white shape of a binary image.

    The unit circle is centred on the shape's centroid; ``radius`` scales it and
    defaults to the smaller image dimension.  Magnitudes are listed by order n
    and, within an order, by increasing repetition m with n - m even.
    """
    pixels = np.asarray(image)
    if pixels.ndim != 2:
        raise GemError("A binary image must be two-dimensional.")
    if order >= MAX_ORDER:
        raise GemError(
            f"Zernike polynomial order (={order}) must be less than {MAX_ORDER - 1}"
        )
    rows, cols = pixels.shape
    if radius <= 0.0:
        radius = float(min(cols, rows))

    white = pixels == Bw.WHITE
    total = int(white.sum())
    if total == 0:
        return [math.nan] * _moment_count(order)

    ys_idx, xs_idx = np.nonzero(white)
    col_centre = float((xs_idx + 1).sum()) / total
    row_centre = float((ys_idx + 1).sum()) / total

    x = (xs_idx + 1 - col_centre) / radius
    y = (ys_idx + 1 - row_centre) / radius
    r2 = x * x + y * y
    r = np.sqrt(r2)
    keep = (r >= sys.float_info.epsilon) & (r <= 1.0)
    x, y, r, r2 = x[keep], y[keep], r[keep], r2[keep]

    weight = 1.0 / total
    powers = [np.ones_like(r)]
    for _ in range(order):
        powers.append(r * powers[-1])

    cos_a = x / r
    sin_b = y / r
    cosines = [cos_a]
    sines = [sin_b]
    for _ in range(order):
        prev_cos, prev_sin = cosines[-1], sines[-1]
        cosines.append(cos_a * prev_cos - sin_b * prev_sin)
        sines.append(cos_a * prev_sin + sin_b * prev_cos)

    real = np.zeros((order + 1, order + 1))
    imag = np.zeros((order + 1, order + 1))
    r_nm2 = np.zeros_like(r)
    r_nmp2 = np.zeros_like(r)
    r_nmp4 = np.zeros_like(r)
    for n in range(order + 1):
        factor = (n + 1) * weight / PI
        r_n = powers[n]
        if n >= 2:
            r_nm2 = powers[n - 2]
        for m in range(n, -1, -2):
            if m == n:
                r_nm = r_n
                r_nmp4 = r_n
            elif m == n - 2:
                r_nm = n * r_n - (n - 1) * r_nm2
                r_nmp2 = r_nm
            else:
                r_nm = _H1[n][m] * r_nmp4 + (_H2[n][m] + _H3[n][m] / r2) * r_nmp2
                r_nmp4 = r_nmp2
                r_nmp2 = r_nm
            real[n, m] += factor * float(np.sum(r_nm * cosines[m]))
            imag[n, m] -= factor * float(np.sum(r_nm * sines[m]))

    return [
        abs(math.sqrt(real[n, m] ** 2 + imag[n, m] ** 2))
        for n in range(order + 1)
        for m in range(n + 1)
        if (n - m) % 2 == 0
    ]