"""Area-averaging (box filter) resampling and a unified entry-point.

Exported API
------------
- resample(source, target_width, target_height, method="table", rounding="floor", strict=False)
- sample_spans(src_len, dst_len, strict=False)

Supported methods
-----------------
- "table" : vectorised NumPy summed-area table
- "loop"  : Numba-compiled per-pixel accumulation

Both kernels share the same region mapping (see :mod:`.spans`) and return
identical output.

Rounding
--------
- "floor"   : mean truncated toward zero (sums are non-negative)
- "nearest" : mean rounded half-to-even
"""
from __future__ import annotations

import logging
from typing import Literal

from ..raster import RasterImage, require_dimension
from .loop import box_loop
from .spans import sample_spans
from .table import box_table

logger = logging.getLogger(__name__)

_KERNELS = {
    "table": box_table,
    "loop": box_loop,
}


def resample(
    source: RasterImage,
    target_width: int,
    target_height: int,
    method: Literal["table", "loop"] = "table",
    rounding: Literal["floor", "nearest"] = "floor",
    strict: bool = False,
) -> RasterImage:
    """Resample ``source`` to ``target_width x target_height`` by area averaging.

    Parameters
    ----------
    source : RasterImage
        Image to resample. It is never modified.
    target_width, target_height : int
        Destination size (> 0).
    method : str
        Kernel to run: "table" or "loop".
    rounding : str
        How a channel mean becomes a byte: "floor" or "nearest".
    strict : bool
        Raise :class:`EmptySampleRegion` when a destination pixel maps to an
        empty source region instead of falling back to the nearest pixel.

    Returns
    -------
    RasterImage
        Newly allocated image of the requested size.

    Raises
    ------
    InvalidDimensions
        If any source or target dimension is not a positive integer.
    EmptySampleRegion
        If a region is empty in strict mode, or the scale is degenerate.
    """
    if not isinstance(source, RasterImage):
        raise TypeError("source must be a RasterImage")
    w1 = require_dimension("source width", source.width)
    h1 = require_dimension("source height", source.height)
    w2 = require_dimension("target width", target_width)
    h2 = require_dimension("target height", target_height)

    kernel = _KERNELS.get(method) if isinstance(method, str) else None
    if kernel is None:
        raise ValueError(f"Unknown resampling method: {method}")
    if rounding not in ("floor", "nearest"):
        raise ValueError(f"Unknown rounding mode: {rounding}")

    rows = sample_spans(h1, h2, strict=strict, axis="row")
    cols = sample_spans(w1, w2, strict=strict, axis="column")
    logger.debug("Resampling %dx%d -> %dx%d with %s kernel", w1, h1, w2, h2, method)

    out = kernel(source.to_array(), rows, cols, rounding == "nearest")
    return RasterImage(w2, h2, out)


__all__ = ["resample", "sample_spans"]
