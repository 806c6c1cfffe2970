"""Area-averaging image resampler operating on RGBA rasters."""
from __future__ import annotations

from .errors import EmptySampleRegion, InvalidDimensions, ResampleError
from .raster import RasterImage
from .resample import resample, sample_spans

__version__ = "0.1.0"

__all__ = [
    "RasterImage",
    "resample",
    "sample_spans",
    "ResampleError",
    "InvalidDimensions",
    "EmptySampleRegion",
]
