"""Fixed tile grid and the routine that draws it from the atlas.

The grid is indexed `grid[i][j]` with `i` along screen x and `j` along
screen y. Chip ids address the atlas left to right, top to bottom,
ATLAS_COLUMNS chips per row.
"""

from __future__ import annotations

import numpy as np

from config import ATLAS_COLUMNS, DISPLAY_SCALE
from core.area import Area
from core.canvas import Canvas

GROUND = 8
OBSTACLE = 9  # cactus
GROUND_ALT = 10
GROUND_DECOR = 11

_DEFAULT_ROWS = [
    [8, 8, 9, 8, 11, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8],
    [8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 10, 8, 8, 8, 8],
    [8, 10, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 10, 8, 8],
    [8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 10, 8, 8, 8],
    [8, 8, 8, 8, 8, 8, 10, 8, 8, 8, 8, 8, 8, 8, 8],
    [8, 8, 8, 8, 8, 9, 8, 8, 8, 8, 8, 8, 8, 8, 8],
    [10, 8, 8, 8, 8, 8, 8, 8, 8, 8, 10, 8, 8, 8, 8],
    [8, 8, 11, 8, 8, 8, 8, 8, 8, 8, 8, 8, 8, 10, 8],
]


def make_tilemap(rows) -> np.ndarray:
    """Return a read-only integer grid built from nested row lists.

    Rows must all be the same length; numpy rejects ragged input.
    `draw_map` itself takes any nested sequence, so pass ragged rows to it
    directly.
    """
    grid = np.asarray(rows, dtype=np.int32)
    grid.setflags(write=False)
    return grid


# The demo map is the 8-row block above repeated twice
DEFAULT_MAP = make_tilemap(_DEFAULT_ROWS + _DEFAULT_ROWS)


def chip_source_rect(chip: int, chip_size: int) -> Area:
    return Area(
        (chip % ATLAS_COLUMNS) * chip_size,
        (chip // ATLAS_COLUMNS) * chip_size,
        chip_size,
        chip_size,
    )


def chip_dest_rect(i: int, j: int, chip_size: int) -> Area:
    size = chip_size * DISPLAY_SCALE
    return Area(i * size, j * size, size, size)


def draw_map(texture, canvas: Canvas, grid, chip_size: int) -> list[Area]:
    """Copy every cell of `grid` from the atlas to the canvas.

    Returns the destination rectangles of OBSTACLE cells, in draw order.
    The grid is trusted as given; ids outside the atlas are not checked.
    """
    obstacles: list[Area] = []
    for i, column in enumerate(grid):
        for j, chip in enumerate(column):
            chip = int(chip)
            dst = chip_dest_rect(i, j, chip_size)
            if chip == OBSTACLE:
                obstacles.append(dst)
            canvas.copy(texture, chip_source_rect(chip, chip_size), dst)
    return obstacles
