"""Exception types raised by the resampler and the RasterImage container."""
from __future__ import annotations


class ResampleError(ValueError):
    """Base class for resampling failures."""


class InvalidDimensions(ResampleError):
    """A source or target dimension is zero, negative or not an integer."""


class EmptySampleRegion(ResampleError):
    """A destination pixel maps to a source region with no pixels in it."""


__all__ = ["ResampleError", "InvalidDimensions", "EmptySampleRegion"]
