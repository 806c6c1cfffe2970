"""Sizing helpers built on top of :func:`pixscale.resample.resample`.

Both helpers work out a target size and delegate; keyword arguments
(``method``, ``rounding``, ``strict``) are passed through unchanged.
"""
from __future__ import annotations

import math

from ..errors import InvalidDimensions
from ..raster import RasterImage, require_dimension
from ..resample import resample


def resample_scale(source: RasterImage, scale: float, **kwargs) -> RasterImage:
    """Resample an image by a float ``scale``.

    Parameters
    ----------
    source : RasterImage
        Input image.
    scale : float
        Scale factor (>0). Values >1 upscale, <1 downscale.

    Returns
    -------
    RasterImage
        Image of size ``max(1, round(W*scale)) x max(1, round(H*scale))``.
    """
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidDimensions(f"scale must be > 0, got {scale!r}")
    new_w = max(1, int(round(source.width * scale)))
    new_h = max(1, int(round(source.height * scale)))
    return resample(source, new_w, new_h, **kwargs)


def resample_to_fit(source: RasterImage, max_width: int, max_height: int, **kwargs) -> RasterImage:
    """Shrink ``source`` proportionally to fit within ``max_width x max_height``.

    Images that already fit are returned unchanged; this never upscales.
    """
    max_width = require_dimension("max_width", max_width)
    max_height = require_dimension("max_height", max_height)
    w, h = source.size
    if w <= max_width and h <= max_height:
        return source

    # The limiting axis is pinned to its bound; w * (m / w) can land just below m.
    if max_width * h <= max_height * w:
        new_w = max_width
        new_h = max(1, min(max_height, int(round(h * max_width / w))))
    else:
        new_h = max_height
        new_w = max(1, min(max_width, int(round(w * max_height / h))))
    return resample(source, new_w, new_h, **kwargs)
