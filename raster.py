"""
RGB numpy arrays <-> pyvips images, and file naming for saved views.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pyvips

import mandel


def format_sci(x: float) -> str:
    """
    3-decimal scientific notation with a compact exponent:

        -0.75 -> "-7.500e-1"    5.0 -> "5.000e0"    0.0 -> "0.000e0"
    """
    s = f"{x:.3e}"
    if "e" not in s:
        return s  # inf / nan
    mantissa, exp = s.split("e")
    return f"{mantissa}e{int(exp)}"


def export_filename(center: complex, width: float, ext: str = mandel.DEFAULT_EXT) -> str:
    return (
        f"mandelbrot_({format_sci(center.real)}, {format_sci(center.imag)})"
        f"_{format_sci(width)}.{ext.lstrip('.')}"
    )


def rgb_to_vips(rgb: np.ndarray) -> pyvips.Image:
    if rgb.ndim != 3 or rgb.shape[2] != 3:
        raise ValueError(f"Expected (h, w, 3) RGB array, got shape {rgb.shape}")
    if rgb.dtype != np.uint8:
        raise ValueError(f"Expected uint8 RGB array, got {rgb.dtype}")
    h, w, _ = rgb.shape
    return pyvips.Image.new_from_memory(rgb.tobytes(), w, h, 3, "uchar")


def vips_to_rgb(im: pyvips.Image) -> np.ndarray:
    """pyvips image -> (h, w, 3) uint8 array. Used to read saved views back; not on the render path."""
    if im.format != "uchar":
        im = im.cast("uchar")
    if im.bands > 3:
        im = im.extract_band(0, n=3)
    elif im.bands != 3:
        raise ValueError(f"Expected at least 3 bands (RGB). Got {im.bands}.")
    return np.frombuffer(im.write_to_memory(), dtype=np.uint8).reshape(im.height, im.width, 3)


def save_rgb(rgb: np.ndarray, out_path: str | Path) -> Path:
    """Write an RGB array; the format follows the file suffix."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    rgb_to_vips(rgb).write_to_file(str(out_path))
    return out_path
