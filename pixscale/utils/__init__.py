"""Utility functions for AreaScale.

Modules:
- loader: Load/save Pillow <-> RasterImage conversion utilities.
- resize: Resample by scale factor or to fit a bounding box.
"""
from .loader import load_image, save_image, from_pil, to_pil
from .resize import resample_scale, resample_to_fit

__all__ = [
    "load_image",
    "save_image",
    "from_pil",
    "to_pil",
    "resample_scale",
    "resample_to_fit",
]
