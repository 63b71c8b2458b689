"""
Escape-time field computation kernels.

These evaluate the quadratic recurrence

    z_{n+1} = z_n^2 + c,   z_0 = 0

over rectangular chunks of an image raster. Pixels are addressed in
absolute image coordinates so the result never depends on how the raster
was chunked.

All kernels are compiled with fastmath=False: output must be reproducible
bit-for-bit.
"""

import numba
import numpy as np
from numba import njit, prange

from .defaults import ESCAPE_RADIUS2

# Renders may be launched from several Python threads at once; the
# workqueue layer aborts the process on concurrent parallel launches.
numba.config.THREADING_LAYER = "threadsafe"


@njit(cache=False, fastmath=False)
def pixel_to_complex(corner_re, corner_im, scale, px, py):
    """(px, py) measured from the image top-left -> (re, im)."""
    return corner_re + px * scale, corner_im + py * scale


@njit(cache=False, fastmath=False)
def escape_time(c_re, c_im, max_iter):
    """
    Number of iterations before the orbit of c leaves the radius-2 disk,
    or max_iter if it never does within budget.

    Points in the main cardioid and in the period-2 bulb are provably
    bounded and return max_iter without iterating.
    """
    # main cardioid
    xp = c_re - 0.25
    ci2 = c_im * c_im
    q = xp * xp + ci2
    if q * (q + xp) <= 0.25 * ci2:
        return max_iter

    # period-2 bulb
    xp = c_re + 1.0
    if xp * xp + ci2 <= 0.0625:
        return max_iter

    x = 0.0
    y = 0.0
    x2 = 0.0
    y2 = 0.0
    n = 0
    while n < max_iter and x2 + y2 < ESCAPE_RADIUS2:
        n += 1
        y = (x + x) * y + c_im
        x = x2 - y2 + c_re
        x2 = x * x
        y2 = y * y
    return n


@njit(cache=False, fastmath=False)
def escape_time_chunk_inplace(out, x0, y0, w, h, corner_re, corner_im, scale, max_iter):
    """Fill out[:h, :w] with escape times of the chunk at pixel (x0, y0)."""
    for i in range(h):
        for j in range(w):
            c_re, c_im = pixel_to_complex(corner_re, corner_im, scale, x0 + j, y0 + i)
            out[i, j] = escape_time(c_re, c_im, max_iter)


@njit(cache=False, fastmath=False, parallel=True)
def escape_time_chunks_inplace(
    out,        # (n_chunks, chunk_h, chunk_w) uint16
    table,      # (n_chunks, 4) int64: [x, y, w, h]
    corner_re,
    corner_im,
    scale,
    max_iter,
):
    """
    One task per chunk. Task k only writes out[k], so chunks run on the
    numba thread pool without locking. Returns once every chunk is done.
    """
    for k in prange(table.shape[0]):
        escape_time_chunk_inplace(
            out[k],
            table[k, 0],
            table[k, 1],
            table[k, 2],
            table[k, 3],
            corner_re,
            corner_im,
            scale,
            max_iter,
        )


@njit(cache=False, fastmath=False)
def escape_time_field(corner_re, corner_im, scale, npix_x, npix_y, max_iter):
    """
    Unchunked single-threaded reference field, (npix_y, npix_x) uint16.

    Not used by render(); kept as the reference the chunked path is
    checked against.
    """
    out = np.zeros((npix_y, npix_x), dtype=np.uint16)
    escape_time_chunk_inplace(out, 0, 0, npix_x, npix_y, corner_re, corner_im, scale, max_iter)
    return out
