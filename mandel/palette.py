"""
Escape time -> RGB.

Counts are mapped onto a fixed 16-color cycle, which gives the banded
iteration contours. 0 and max_iter are both drawn black.
"""

import numpy as np

from .errors import AllocationFailure

PALETTE = np.array(
    [
        [66, 30, 15],
        [25, 7, 26],
        [9, 1, 47],
        [4, 4, 73],
        [0, 7, 100],
        [12, 44, 138],
        [24, 82, 177],
        [57, 125, 209],
        [134, 181, 229],
        [211, 236, 248],
        [241, 233, 191],
        [248, 201, 95],
        [255, 170, 0],
        [204, 128, 0],
        [153, 87, 0],
        [106, 52, 3],
    ],
    dtype=np.uint8,
)
PALETTE.flags.writeable = False

N_COLORS = PALETTE.shape[0]
SENTINEL_COLOR = (0, 0, 0)


def palette_color(iteration: int, max_iter: int) -> tuple[int, int, int]:
    """Single-value reference for color_escape_grid; not used by render()."""
    if iteration == 0 or iteration == max_iter:
        return SENTINEL_COLOR
    r, g, b = PALETTE[iteration % N_COLORS]
    return int(r), int(g), int(b)


def color_escape_grid(grid: np.ndarray, max_iter: int) -> np.ndarray:
    """
    Color an escape-time array of any shape.

    Returns uint8 array of shape grid.shape + (3,).
    """
    try:
        rgb = PALETTE[grid % N_COLORS]
    except MemoryError as e:
        raise AllocationFailure(f"cannot allocate RGB grid for shape {grid.shape}") from e
    rgb[(grid == 0) | (grid == max_iter)] = 0
    return rgb
