"""Mapping from destination rows/columns to half-open source index spans.

Destination index ``i`` on an axis of length ``dst_len`` averages over the
source indices ``i1`` with ``ceil(i * k) <= i1 < (i + 1) * k`` where
``k = src_len / dst_len``. The upper bound is real-valued, so the integer
stop is ``ceil((i + 1) * k)``. The mapping is separable, which lets both
kernels compute it once per axis instead of once per pixel.
"""
from __future__ import annotations

import math

import numpy as np

from ..errors import EmptySampleRegion

Array = np.ndarray


def sample_spans(src_len: int, dst_len: int, strict: bool = False, axis: str = "axis") -> tuple[Array, Array]:
    """Compute the source span of every destination index on one axis.

    Parameters
    ----------
    src_len : int
        Source extent along the axis (> 0).
    dst_len : int
        Destination extent along the axis (> 0).
    strict : bool
        If True, an empty span raises :class:`EmptySampleRegion`. If False,
        empty spans (non-integer upscaling) collapse to the single source
        index ``floor(i * k)``.
    axis : str
        Axis name used in error messages.

    Returns
    -------
    (np.ndarray, np.ndarray)
        ``starts`` and ``stops`` as int64 arrays of length ``dst_len``.
    """
    k = src_len / dst_len
    if not math.isfinite(k) or k <= 0:
        raise EmptySampleRegion(f"degenerate {axis} scale factor {k!r}")

    idx = np.arange(dst_len, dtype=np.float64)
    lower = idx * k
    starts = np.ceil(lower).astype(np.int64)
    stops = np.minimum(np.ceil((idx + 1.0) * k), src_len).astype(np.int64)

    empty = stops <= starts
    if np.any(empty):
        first = int(np.flatnonzero(empty)[0])
        if strict:
            raise EmptySampleRegion(
                f"destination {axis} {first} maps to an empty source span "
                f"[{starts[first]}, {(first + 1) * k!r})"
            )
        nearest = np.minimum(np.floor(lower[empty]), src_len - 1).astype(np.int64)
        starts[empty] = nearest
        stops[empty] = nearest + 1

    # Only reachable when floating point misbehaves; never divide by zero.
    if np.any(stops <= starts):
        first = int(np.flatnonzero(stops <= starts)[0])
        raise EmptySampleRegion(f"destination {axis} {first} has no source pixels")
    return starts, stops


__all__ = ["sample_spans"]
