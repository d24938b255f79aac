"""Homogeneous zone extraction: rectangle geometry, visibility and mean colors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np
from PIL import Image

from .errors import GemError
from .extractors import SingleExtractor


def _span(start: float, length: float) -> Tuple[float, float]:
    return (start + length, start) if length < 0 else (start, start + length)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and its size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def _overlap(self, other: "Rect") -> Optional[Tuple[float, float, float, float]]:
        l1, r1 = _span(self.x, self.width)
        l2, r2 = _span(other.x, other.width)
        if l1 == r1 or l2 == r2 or l1 >= r2 or l2 >= r1:
            return None
        t1, b1 = _span(self.y, self.height)
        t2, b2 = _span(other.y, other.height)
        if t1 == b1 or t2 == b2 or t1 >= b2 or t2 >= b1:
            return None
        return max(l1, l2), max(t1, t2), min(r1, r2), min(b1, b2)

    def intersects(self, other: "Rect") -> bool:
        """Tell whether the two rectangles share an area (touching edges do not count)."""
        return self._overlap(other) is not None

    def intersected(self, other: "Rect") -> "Rect":
        """Return the common area, or an empty rectangle."""
        box = self._overlap(other)
        if box is None:
            return Rect()
        left, top, right, bottom = box
        return Rect(left, top, right - left, bottom - top)

    def united(self, other: "Rect") -> "Rect":
        """Return the bounding rectangle of both."""
        if self.is_null:
            return other
        if other.is_null:
            return self
        l1, r1 = _span(self.x, self.width)
        l2, r2 = _span(other.x, other.width)
        t1, b1 = _span(self.y, self.height)
        t2, b2 = _span(other.y, other.height)
        left, right = min(l1, l2), max(r1, r2)
        top, bottom = min(t1, t2), max(b1, b2)
        return Rect(left, top, right - left, bottom - top)

    def __and__(self, other: "Rect") -> "Rect":
        return self.intersected(other)

    def __or__(self, other: "Rect") -> "Rect":
        return self.united(other)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator:
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return math.nan


def _by_distance(entries: List[Tuple[float, int]]) -> List[int]:
    # Equal distances: the most recently found rectangle comes first.
    return [index for _, index in sorted(entries, key=lambda e: (e[0], -e[1]))]


def _visible_along(
    order: Sequence[int],
    rects: Sequence[Rect],
    span: Rect,
    measure: Callable[[Rect], float],
    thresh: float,
) -> Set[int]:
    """Scan rectangles from nearest to farthest, subtracting what nearer ones hide."""
    visible: Set[int] = set()
    shadows: List[Rect] = []
    for index in order:
        projected = rects[index] & span
        amount = measure(projected)
        if not shadows:
            shadows.append(projected)
        else:
            hits = [j for j, shadow in enumerate(shadows) if projected.intersects(shadow)]
            for j in hits:
                amount -= measure(projected & shadows[j])
            if not hits:
                shadows.append(projected)
            else:
                first = hits[0]
                for j in reversed(hits[1:]):
                    shadows[first] = shadows[first] | shadows.pop(j)
                shadows[first] = shadows[first] | projected
        if _ratio(amount, min(measure(rects[index]), measure(span))) >= thresh:
            visible.add(index)
    return visible


def _height(rect: Rect) -> float:
    return rect.height


def _width(rect: Rect) -> float:
    return rect.width


def visibility(rectangles: Iterable[Rect], rect: Rect, thresh: float) -> Set[int]:
    """Return the indices of the rectangles visible from ``rect``.

    Rectangles that overlap ``rect`` are always included.  Others count when the
    unobstructed part of their facing side, divided by the shorter of the two
    facing sides, reaches ``thresh``.
    """
    rects = list(rectangles)
    result: Set[int] = set()
    right: List[Tuple[float, int]] = []
    left: List[Tuple[float, int]] = []
    top: List[Tuple[float, int]] = []
    bottom: List[Tuple[float, int]] = []

    for i, other in enumerate(rects):
        if rect.intersects(other):
            result.add(i)
            continue
        if (other.top <= rect.top and other.bottom >= rect.top) or (
            rect.top < other.top <= rect.bottom
        ):
            if other.left >= rect.right:
                right.append((other.left - rect.right, i))
            elif other.right <= rect.left:
                left.append((rect.left - other.right, i))
        if (other.left <= rect.left and other.right >= rect.left) or (
            rect.left < other.left <= rect.right
        ):
            if other.top >= rect.bottom:
                bottom.append((other.top - rect.bottom, i))
            elif other.bottom <= rect.top:
                top.append((rect.top - other.bottom, i))

    right_order, left_order = _by_distance(right), _by_distance(left)
    top_order, bottom_order = _by_distance(top), _by_distance(bottom)

    hrect = Rect(0.0, rect.y, 1.0, rect.height)
    for i in right_order + left_order:
        rects[i] = Rect(0.0, rects[i].y, 1.0, rects[i].height)
    result |= _visible_along(right_order, rects, hrect, _height, thresh)
    result |= _visible_along(left_order, rects, hrect, _height, thresh)

    vrect = Rect(rect.x, 0.0, rect.width, 1.0)
    for i in bottom_order + top_order:
        rects[i] = Rect(rects[i].x, 0.0, rects[i].width, 1.0)
    result |= _visible_along(bottom_order, rects, vrect, _width, thresh)
    result |= _visible_along(top_order, rects, vrect, _width, thresh)
    return result


def intersection(rectangles: Iterable[Rect], rect: Rect, thresh: float = 1.0) -> Set[int]:
    """Return the indices of the rectangles whose share of area inside ``rect`` reaches ``thresh``."""
    result: Set[int] = set()
    for i, other in enumerate(rectangles):
        common = other.intersected(rect)
        share = _ratio(common.width * common.height, other.width * other.height)
        if share >= thresh:
            result.add(i)
    return result


def _hue_degrees(red: int, green: int, blue: int) -> Optional[int]:
    r, g, b = red / 255.0, green / 255.0, blue / 255.0
    high, low = max(r, g, b), min(r, g, b)
    delta = high - low
    if abs(delta) <= 1e-5:
        return None
    if r == high:
        hue = (g - b) / delta
    elif g == high:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta
    hue *= 60.0
    if hue < 0.0:
        hue += 360.0
    return int(hue * 100 + 0.5) // 100


def _full_color(hue: Optional[int]) -> Tuple[int, int, int]:
    """Return the RGB color of a hue at full saturation and value."""
    if hue is None:
        return 255, 255, 255
    centi = hue * 100
    h = 0.0 if centi == 36000 else centi / 6000.0
    sector = int(h)
    fraction = h - sector
    v, p, q, t = 1.0, 0.0, 1.0 - fraction, fraction
    channels = {
        0: (v, t, p),
        1: (q, v, p),
        2: (p, v, t),
        3: (p, q, v),
        4: (t, p, v),
        5: (v, p, q),
    }.get(sector, (v, t, p))
    return tuple(int(c * 65535 + 0.5) >> 8 for c in channels)  # type: ignore[return-value]


def _load_rgb(filename: str) -> Optional[np.ndarray]:
    try:
        with Image.open(filename) as source:
            return np.asarray(source.convert("RGB"))
    except OSError:
        return None


class HomogeneousZoneExtractor(SingleExtractor):
    """Extraction of homogeneous colored zones on a document image."""

    def __init__(self, input=None, output=None, metadata=None, configuration=None) -> None:
        super().__init__(input, output, metadata, configuration)
        self.image: Optional[np.ndarray] = _load_rgb(self.input) if self.input else None

    def color(self, rect: Rect) -> Tuple[int, int, int]:
        """Return the fully saturated color of the mean hue inside an integer zone.

        Pixels of the zone that fall outside the image count as black.
        """
        if self.image is None:
            raise GemError(f"The image ({self.input}) could not be loaded.")
        x0, y0 = int(rect.x), int(rect.y)
        width, height = int(rect.width), int(rect.height)
        area = width * height
        if area <= 0:
            raise GemError("The zone is empty.")
        rows, cols = self.image.shape[:2]
        region = self.image[
            max(y0, 0):max(min(y0 + height, rows), 0),
            max(x0, 0):max(min(x0 + width, cols), 0),
        ]
        sums = region.reshape(-1, 3).astype(np.float64).sum(axis=0) / 255.0
        mean = sums / area
        red, green, blue = (int(c * 255) for c in mean)
        return _full_color(_hue_degrees(red, green, blue))

    def perform_extraction(self) -> None:
        if self.configuration is not None and self.configuration.verbose:
            print(" PERFORMING ")