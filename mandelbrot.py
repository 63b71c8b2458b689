"""
Mandelbrot set rasterization.

Provides render() which turns a ViewRequest into an RGB pixel buffer:

    partition -> escape times per chunk (parallel) -> palette -> assemble
"""

from __future__ import annotations

import numpy as np
import pyvips

import mandel
from mandel import Chunk
from config import ViewRequest
import raster


# ---------------------------------------------------------------------------
# request-based interfaces to numba functions
# ---------------------------------------------------------------------------

def pixel_to_point(request: ViewRequest, px: int, py: int) -> complex:
    """Plane point of absolute pixel (px, py)."""
    corner = request.corner
    re, im = mandel.pixel_to_complex(corner.real, corner.imag, request.scale, px, py)
    return complex(re, im)


def escape_time_point(c: complex, max_iter: int) -> int:
    return int(mandel.escape_time(float(c.real), float(c.imag), int(max_iter)))


def evaluate_chunks(request: ViewRequest, chunks: list[Chunk]) -> list[np.ndarray]:
    """
    Escape-time grid for every chunk, computed in parallel.

    Grid k has shape (chunks[k].height, chunks[k].width).
    """
    if not chunks:
        return []
    stack = mandel.alloc(
        (len(chunks), max(c.height for c in chunks), max(c.width for c in chunks)),
        np.uint16,
    )
    corner = request.corner
    mandel.escape_time_chunks_inplace(
        stack,
        mandel.chunk_table(chunks),
        float(corner.real),
        float(corner.imag),
        float(request.scale),
        int(request.max_iterations),
    )
    return [stack[k, :c.height, :c.width] for k, c in enumerate(chunks)]


def color_chunks(grids: list[np.ndarray], max_iter: int) -> list[np.ndarray]:
    return [mandel.color_escape_grid(g, max_iter) for g in grids]


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------

def render(request: ViewRequest) -> np.ndarray:
    """
    Render a view.

    Args:
        request: validated ViewRequest

    Returns:
        read-only RGB image as uint8 numpy array of shape
        (image_height_px, image_width_px, 3), row-major
    """
    chunks = mandel.partition(
        request.image_width_px,
        request.image_height_px,
        request.chunk_width_px,
        request.chunk_height_px,
    )
    grids = evaluate_chunks(request, chunks)
    rgb_grids = color_chunks(grids, request.max_iterations)
    pixels = mandel.assemble_chunks(
        chunks,
        rgb_grids,
        request.image_width_px,
        request.image_height_px,
    )
    pixels.flags.writeable = False
    return pixels


def render_view(
    center: complex,
    npix_x: int,
    npix_y: int,
    width_x: float,
    chunk_w: int = mandel.DEFAULT_CHUNK_W,
    chunk_h: int = mandel.DEFAULT_CHUNK_H,
    max_iter: int = mandel.DEFAULT_MAX_ITER,
) -> np.ndarray:
    request = ViewRequest(
        center=center,
        image_width_px=npix_x,
        image_height_px=npix_y,
        plane_width=width_x,
        chunk_width_px=chunk_w,
        chunk_height_px=chunk_h,
        max_iterations=max_iter,
    )
    return render(request)


def construct_mandelbrot_image(
    center: complex,
    npix_x: int,
    npix_y: int,
    width_x: float,
    chunk_w: int = mandel.DEFAULT_CHUNK_W,
    chunk_h: int = mandel.DEFAULT_CHUNK_H,
    max_iter: int = mandel.DEFAULT_MAX_ITER,
) -> pyvips.Image:
    rgb = render_view(center, npix_x, npix_y, width_x, chunk_w, chunk_h, max_iter)
    return raster.rgb_to_vips(rgb)
