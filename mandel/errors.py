"""
Exceptions raised by the rendering engine.
"""


class MandelbrotError(Exception):
    """Base class for engine errors."""


class InvalidRequest(MandelbrotError, ValueError):
    """A view request violates one of its invariants. Raised before any work."""


class AllocationFailure(MandelbrotError, MemoryError):
    """The output buffer or the chunk stack could not be allocated."""


class AssemblyMismatch(MandelbrotError, RuntimeError):
    """A computed grid does not fit the chunk it belongs to."""
