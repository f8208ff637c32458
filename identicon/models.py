from dataclasses import dataclass
from typing import Tuple


Color = Tuple[int, int, int]
# (value, index) where index is the position in the 5x5 row-major layout.
Cell = Tuple[int, int]
Point = Tuple[int, int]
Rectangle = Tuple[Point, Point]


class IdenticonError(Exception):
    """Base class for errors raised by the identicon pipeline."""


class InsufficientDataError(IdenticonError, ValueError):
    """
    Raised when an upstream stage produced fewer elements than a downstream
    stage needs (e.g. fewer than 3 hash bytes when picking a color).
    """


@dataclass(frozen=True)
class HashedImage:
    hex: Tuple[int, ...]


@dataclass(frozen=True)
class ColoredImage(HashedImage):
    color: Color


@dataclass(frozen=True)
class GriddedImage(ColoredImage):
    grid: Tuple[Cell, ...]


@dataclass(frozen=True)
class MappedImage(GriddedImage):
    """
    Fully derived identicon: everything the rasterizer needs.

    `pixel_map` holds one (top_left, bottom_right) pair per cell in `grid`,
    in the same order.
    """

    pixel_map: Tuple[Rectangle, ...]
