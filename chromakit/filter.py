"""Rectangular Haar-like filters evaluated over an integral image."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from .utils import is_nan

Comparator = Callable[[float, float], float]


class IntegralImage(Protocol):
    """Anything able to sum a rectangle of an image."""

    def area(self, x1: int, y1: int, x2: int, y2: int) -> float:
        ...


def subtract(a: float, b: float) -> float:
    """Plain difference of two areas."""
    return a - b


def subtract_log(a: float, b: float) -> float:
    """Log-ratio of two areas, each offset by one."""
    result = math.log((1.0 + a) / (1.0 + b))
    if is_nan(result):
        raise ValueError("log-ratio of areas is not a number")
    return result


def _check_size(w: int, h: int) -> None:
    if w < 1 or h < 1:
        raise ValueError(f"filter width and height must be positive, got {w}x{h}")


def filter0(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Whole rectangle against nothing."""
    _check_size(w, h)
    a = image.area(x, y, x + w, y + h)
    return cmp(a, 0.0)


def filter1(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Upper half of the band range against the lower half."""
    _check_size(w, h)
    h_2 = h // 2
    a = image.area(x, y + h_2, x + w, y + h)
    b = image.area(x, y, x + w, y + h_2)
    return cmp(a, b)


def filter2(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Later half in time against the earlier half."""
    _check_size(w, h)
    w_2 = w // 2
    a = image.area(x + w_2, y, x + w, y + h)
    b = image.area(x, y, x + w_2, y + h)
    return cmp(a, b)


def filter3(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Checkerboard of four quadrants."""
    _check_size(w, h)
    w_2 = w // 2
    h_2 = h // 2
    a = image.area(x, y + h_2, x + w_2, y + h) + image.area(x + w_2, y, x + w, y + h_2)
    b = image.area(x, y, x + w_2, y + h_2) + image.area(x + w_2, y + h_2, x + w, y + h)
    return cmp(a, b)


def filter4(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Middle third of the band range against the outer thirds."""
    _check_size(w, h)
    h_3 = h // 3
    a = image.area(x, y + h_3, x + w, y + 2 * h_3)
    b = image.area(x, y, x + w, y + h_3) + image.area(x, y + 2 * h_3, x + w, y + h)
    return cmp(a, b)


def filter5(image: IntegralImage, x: int, y: int, w: int, h: int, cmp: Comparator) -> float:
    """Middle third in time against the outer thirds."""
    _check_size(w, h)
    w_3 = w // 3
    a = image.area(x + w_3, y, x + 2 * w_3, y + h)
    b = image.area(x, y, x + w_3, y + h) + image.area(x + 2 * w_3, y, x + w, y + h)
    return cmp(a, b)


_FILTERS = (filter0, filter1, filter2, filter3, filter4, filter5)


@dataclass
class Filter:
    """A filter of one of six shapes placed at band ``y`` with the given size."""

    type: int = 0
    y: int = 0
    height: int = 0
    width: int = 0

    def apply(self, image: IntegralImage, x: int) -> float:
        """Evaluate the filter at time offset ``x``; unknown types yield 0.0."""
        if not 0 <= self.type < len(_FILTERS):
            return 0.0
        func = _FILTERS[self.type]
        return func(image, x, self.y, self.width, self.height, subtract_log)

    def __str__(self) -> str:
        return f"Filter({self.type}, {self.y}, {self.height}, {self.width})"