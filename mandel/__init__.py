"""
Mandel package - escape-time kernels and raster plumbing.

- defaults: view and render defaults
- escape_fields: numba kernels (coordinate mapping, escape time, chunk fields)
- chunks: raster partitioning
- palette: escape time -> RGB
- assemble: chunk grids -> contiguous image
- errors: engine exceptions
"""

from .defaults import (
    DEFAULT_CENTER,
    DEFAULT_WIDTH,
    DEFAULT_CHUNK_W,
    DEFAULT_CHUNK_H,
    DEFAULT_MAX_ITER,
    MAX_ITER_LIMIT,
    ESCAPE_RADIUS2,
    PREVIEW_PIX,
    PREVIEW_MAX_ITER,
    EXPORT_PIX,
    EXPORT_MAX_ITER,
    DEFAULT_EXT,
)

from .errors import (
    MandelbrotError,
    InvalidRequest,
    AllocationFailure,
    AssemblyMismatch,
)

from .escape_fields import (
    pixel_to_complex,
    escape_time,
    escape_time_chunk_inplace,
    escape_time_chunks_inplace,
    escape_time_field,
)

from .chunks import Chunk, partition, chunk_table, coverage
from .palette import PALETTE, N_COLORS, palette_color, color_escape_grid
from .assemble import alloc, assemble_chunks
