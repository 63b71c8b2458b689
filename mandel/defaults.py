"""
Default values for views and renders.
"""

DEFAULT_CENTER = complex(-0.75, 0.0)
DEFAULT_WIDTH = 5.0
DEFAULT_CHUNK_W = 32
DEFAULT_CHUNK_H = 32
DEFAULT_MAX_ITER = 1024
MAX_ITER_LIMIT = 65535  # escape counts are stored as uint16
ESCAPE_RADIUS2 = 4.0

PREVIEW_PIX = (1600, 1000)
PREVIEW_MAX_ITER = 1024

EXPORT_PIX = (5760, 3240)
EXPORT_MAX_ITER = 4096

DEFAULT_EXT = "png"
