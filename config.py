"""
View configuration: presets + overrides -> validated ViewRequest.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

import mandel
from mandel import InvalidRequest


# ---------------------------------------------------------------------------
# request
# ---------------------------------------------------------------------------

def _check_count(name: str, value, hi: int | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidRequest(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidRequest(f"{name} must be positive, got {value}")
    if hi is not None and value > hi:
        raise InvalidRequest(f"{name} must be <= {hi}, got {value}")


@dataclass(frozen=True)
class ViewRequest:
    """
    Everything one render needs.

    plane_width is the span of the real axis across the full image; pixels
    are square, so the imaginary span is plane_width * height / width.
    """
    center: complex
    image_width_px: int
    image_height_px: int
    plane_width: float
    chunk_width_px: int = mandel.DEFAULT_CHUNK_W
    chunk_height_px: int = mandel.DEFAULT_CHUNK_H
    max_iterations: int = mandel.DEFAULT_MAX_ITER

    def __post_init__(self):
        try:
            center = complex(self.center)
        except (TypeError, ValueError):
            raise InvalidRequest(f"center must be a complex number, got {self.center!r}")
        if not (math.isfinite(center.real) and math.isfinite(center.imag)):
            raise InvalidRequest(f"center must be finite, got {center}")
        object.__setattr__(self, "center", center)

        _check_count("image_width_px", self.image_width_px)
        _check_count("image_height_px", self.image_height_px)
        _check_count("chunk_width_px", self.chunk_width_px)
        _check_count("chunk_height_px", self.chunk_height_px)
        _check_count("max_iterations", self.max_iterations, mandel.MAX_ITER_LIMIT)

        try:
            width = float(self.plane_width)
        except (TypeError, ValueError):
            raise InvalidRequest(f"plane_width must be a number, got {self.plane_width!r}")
        if not (math.isfinite(width) and width > 0.0):
            raise InvalidRequest(f"plane_width must be positive and finite, got {self.plane_width}")
        object.__setattr__(self, "plane_width", width)

    @property
    def scale(self) -> float:
        """Plane units per pixel, both axes."""
        return self.plane_width / self.image_width_px

    @property
    def corner(self) -> complex:
        """Plane point of pixel (0, 0)."""
        scale = self.scale
        return self.center - complex(
            self.image_width_px / 2.0 * scale,
            self.image_height_px / 2.0 * scale,
        )


# ---------------------------------------------------------------------------
# presets
# ---------------------------------------------------------------------------

# Preset registry: ADD NEW PRESETS HERE ONLY
VIEW_PRESETS: dict[str, dict] = {

    # interactive window, re-rendered on every pan/zoom
    "preview": dict(
        defaults=dict(
            image_width_px=mandel.PREVIEW_PIX[0],
            image_height_px=mandel.PREVIEW_PIX[1],
            chunk_width_px=mandel.DEFAULT_CHUNK_W,
            chunk_height_px=mandel.DEFAULT_CHUNK_H,
            max_iterations=mandel.PREVIEW_MAX_ITER,
        ),
    ),

    # one-shot high resolution save
    "export": dict(
        defaults=dict(
            image_width_px=mandel.EXPORT_PIX[0],
            image_height_px=mandel.EXPORT_PIX[1],
            chunk_width_px=mandel.DEFAULT_CHUNK_W,
            chunk_height_px=mandel.DEFAULT_CHUNK_H,
            max_iterations=mandel.EXPORT_MAX_ITER,
        ),
    ),
}

DEFAULT_PRESET = "preview"


def get_preset(name: str) -> dict:
    if name not in VIEW_PRESETS:
        raise SystemExit(f"{name} not in VIEW_PRESETS")
    return VIEW_PRESETS[name]


def make_request(
    preset: str = DEFAULT_PRESET,
    center: complex = mandel.DEFAULT_CENTER,
    plane_width: float = mandel.DEFAULT_WIDTH,
    **overrides,
) -> ViewRequest:
    """
    Build a ViewRequest from a preset.

    Any ViewRequest field can be overridden by keyword; None means
    "keep the preset value".
    """
    params = dict(get_preset(preset)["defaults"])  # shallow copy
    for key, value in overrides.items():
        if key not in params:
            raise InvalidRequest(f"unknown request field '{key}'")
        if value is not None:
            params[key] = value
    return ViewRequest(center=center, plane_width=plane_width, **params)
