"""Numeric helpers and package-wide constants."""

from __future__ import annotations

import math

VERSION = "1.0.0-beta"
CONST_LABEL = "_const_"
AUTO = "_auto_"

IMG_FORMATS = "*.bmp *.jp2 *.jpg *.jpeg *.pbm *.pgm *.png *.ppm *.tif *.tiff"
MESSAGE_TIMEOUT = 3000
ORGANIZATION_NAME = "LITIS"
APPLICATION_NAME = "GEM++"

PRECISION_DIGITS = 6
PI = 3.14159265358979323846264338328

precision = 10.0 ** -PRECISION_DIGITS


def round_to_nearest_int(number: float) -> int:
    """Round to the nearest integer by adding one half and truncating toward zero."""
    return int(number + 0.5)


def round_at_precision(number: float) -> float:
    """Round a number to PRECISION_DIGITS decimals.

    Anything that is not below positive infinity (infinity itself or NaN)
    yields positive infinity.
    """
    if number < math.inf:
        whole = math.floor(number)
        return whole + round_to_nearest_int((number - whole) / precision) * precision
    return math.inf