from dataclasses import replace
from typing import List, Sequence

from .models import ColoredImage, GriddedImage, InsufficientDataError


ROW_SOURCE_LENGTH = 3


def mirror_row(row: Sequence[int]) -> List[int]:
    """
    Mirror the first two values of a row onto its end.

    [26, 121, 164] -> [26, 121, 164, 121, 26]
    """
    if len(row) < 2:
        raise InsufficientDataError(
            f"Mirroring a row needs at least 2 values, got {len(row)}."
        )

    first, second = row[0], row[1]
    return list(row) + [second, first]


def build_grid(image: ColoredImage) -> GriddedImage:
    """
    Build the horizontally symmetric 5x5 grid from the hash bytes.

    The hash is cut into complete groups of three (a trailing partial group
    is dropped, so MD5's 16th byte never reaches the grid). Each group is
    mirrored into a 5-wide row and every value is paired with its position
    in the flattened, row-major grid.
    """
    usable = len(image.hex) - len(image.hex) % ROW_SOURCE_LENGTH

    values: List[int] = []
    for start in range(0, usable, ROW_SOURCE_LENGTH):
        values.extend(mirror_row(image.hex[start:start + ROW_SOURCE_LENGTH]))

    grid = tuple((value, index) for index, value in enumerate(values))
    return GriddedImage(hex=image.hex, color=image.color, grid=grid)


def filter_odd_squares(image: GriddedImage) -> GriddedImage:
    """
    Keep only the cells with an even value. Indices are left untouched so
    they still point into the full 5x5 layout.
    """
    grid = tuple((value, index) for value, index in image.grid if value % 2 == 0)
    return replace(image, grid=grid)
