"""
Per-chunk grids -> one contiguous image.
"""

from __future__ import annotations

import numpy as np

from .chunks import Chunk
from .errors import AllocationFailure, AssemblyMismatch


def alloc(shape: tuple, dtype) -> np.ndarray:
    try:
        return np.zeros(shape, dtype=dtype)
    except (MemoryError, ValueError) as e:
        raise AllocationFailure(f"cannot allocate {shape} {np.dtype(dtype).name} array") from e


def assemble_chunks(
    chunks: list[Chunk],
    grids: list[np.ndarray],
    npix_x: int,
    npix_y: int,
) -> np.ndarray:
    """
    Copy each chunk's grid into a (npix_y, npix_x, ...) buffer at the
    chunk origin.

    Grids must have exactly the chunk's (clipped) height and width as their
    first two dimensions; trailing dimensions (e.g. RGB) are carried over.
    """
    if len(chunks) != len(grids):
        raise AssemblyMismatch(f"{len(chunks)} chunks but {len(grids)} grids")
    if not grids:
        raise AssemblyMismatch("nothing to assemble")

    tail = grids[0].shape[2:]
    pixels = alloc((npix_y, npix_x) + tail, grids[0].dtype)

    for chunk, grid in zip(chunks, grids):
        if chunk.x < 0 or chunk.y < 0 or chunk.x_end > npix_x or chunk.y_end > npix_y:
            raise AssemblyMismatch(f"{chunk} extends past a {npix_x}x{npix_y} image")
        if grid.shape != (chunk.height, chunk.width) + tail:
            raise AssemblyMismatch(
                f"grid shape {grid.shape} does not match {chunk}"
            )
        pixels[chunk.y:chunk.y_end, chunk.x:chunk.x_end] = grid

    return pixels
