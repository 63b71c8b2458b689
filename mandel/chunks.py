"""
Raster partitioning into rectangular chunks.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Chunk:
    x: int
    y: int
    width: int
    height: int

    @property
    def x_end(self) -> int:
        return self.x + self.width

    @property
    def y_end(self) -> int:
        return self.y + self.height


def partition(npix_x: int, npix_y: int, chunk_w: int, chunk_h: int) -> list[Chunk]:
    """
    Split an npix_x x npix_y raster into chunks of at most chunk_w x chunk_h.

    Order is column-major: every chunk of the first column top to bottom,
    then the next column. Chunks on the right and bottom edges are clipped
    to the image.
    """
    if npix_x <= 0 or npix_y <= 0 or chunk_w <= 0 or chunk_h <= 0:
        raise ValueError(
            f"partition needs positive sizes, got image {npix_x}x{npix_y} chunk {chunk_w}x{chunk_h}"
        )
    chunks = []
    for cx in range(0, npix_x, chunk_w):
        w = min(chunk_w, npix_x - cx)
        for cy in range(0, npix_y, chunk_h):
            h = min(chunk_h, npix_y - cy)
            chunks.append(Chunk(cx, cy, w, h))
    return chunks


def chunk_table(chunks: list[Chunk]) -> np.ndarray:
    """(n, 4) int64 table [x, y, w, h] for the compiled kernels."""
    table = np.empty((len(chunks), 4), dtype=np.int64)
    for k, c in enumerate(chunks):
        table[k] = (c.x, c.y, c.width, c.height)
    return table


def coverage(chunks: list[Chunk], npix_x: int, npix_y: int) -> np.ndarray:
    """
    How many chunks cover each pixel, (npix_y, npix_x). All ones for a partition.

    Checking helper, not used by render().
    """
    counts = np.zeros((npix_y, npix_x), dtype=np.int64)
    for c in chunks:
        counts[c.y:c.y_end, c.x:c.x_end] += 1
    return counts
