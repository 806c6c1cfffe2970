from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from pixscale import RasterImage, resample, sample_spans  # noqa: F401
from pixscale.errors import ResampleError, InvalidDimensions, EmptySampleRegion  # noqa: F401
from pixscale.utils.loader import load_image, save_image  # noqa: F401
from pixscale.utils.resize import resample_scale, resample_to_fit  # noqa: F401

__all__ = [
    "RasterImage",
    "resample",
    "sample_spans",
    "ResampleError",
    "InvalidDimensions",
    "EmptySampleRegion",
    "load_image",
    "save_image",
    "resample_scale",
    "resample_to_fit",
]
