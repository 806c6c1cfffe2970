"""Vectorised box filter using a summed-area table.

Every destination pixel covers a rectangle of source pixels, so its channel
sums come from four lookups into a 2-D prefix sum of the source.
"""
from __future__ import annotations

import numpy as np

Array = np.ndarray


def _summed_area(src: Array) -> Array:
    """Return an int64 table ``S`` of shape (H+1, W+1, C) with a zero border.

    ``S[y, x]`` is the per-channel sum of ``src[:y, :x]``.
    """
    H, W, C = src.shape
    sat = np.zeros((H + 1, W + 1, C), dtype=np.int64)
    sat[1:, 1:] = np.cumsum(np.cumsum(src, axis=0, dtype=np.int64), axis=1)
    return sat


def box_table(src: Array, rows: tuple[Array, Array], cols: tuple[Array, Array], nearest: bool) -> Array:
    """Area-average ``src`` over the given row and column spans.

    Parameters
    ----------
    src : np.ndarray
        Source image (H, W, C), dtype=uint8.
    rows, cols : (np.ndarray, np.ndarray)
        Half-open spans from :func:`sample_spans`, all non-empty.
    nearest : bool
        Round means half-to-even instead of flooring them.

    Returns
    -------
    np.ndarray
        Resampled image (len(rows[0]), len(cols[0]), C), dtype=uint8.
    """
    r0, r1 = rows[0][:, None], rows[1][:, None]
    c0, c1 = cols[0][None, :], cols[1][None, :]
    sat = _summed_area(src)

    sums = sat[r1, c1] - sat[r0, c1] - sat[r1, c0] + sat[r0, c0]
    counts = ((r1 - r0) * (c1 - c0))[:, :, None]

    if nearest:
        means = np.rint(sums / counts)
    else:
        means = sums // counts
    return np.clip(means, 0, 255).astype(np.uint8)
