"""Direct accumulation box filter compiled with Numba.

Walks every destination pixel and sums its source region one sample at a
time. Slower than the summed-area table for large images but needs no
auxiliary buffer beyond a four-slot accumulator.
"""
from __future__ import annotations

import numpy as np
from numba import njit

Array = np.ndarray


@njit(cache=True)
def _box_impl(
    src: np.ndarray,
    r0: np.ndarray,
    r1: np.ndarray,
    c0: np.ndarray,
    c1: np.ndarray,
    nearest: bool,
    out: np.ndarray,
) -> None:
    H2 = r0.shape[0]
    W2 = c0.shape[0]
    C = src.shape[2]
    acc = np.zeros(C, dtype=np.int64)
    for i2 in range(H2):
        for j2 in range(W2):
            acc[:] = 0
            n = 0
            for i1 in range(r0[i2], r1[i2]):
                for j1 in range(c0[j2], c1[j2]):
                    for k in range(C):
                        acc[k] += src[i1, j1, k]
                    n += 1
            for k in range(C):
                if nearest:
                    v = int(np.rint(acc[k] / n))
                else:
                    v = acc[k] // n
                if v < 0:
                    v = 0
                elif v > 255:
                    v = 255
                out[i2, j2, k] = v


def box_loop(src: Array, rows: tuple[Array, Array], cols: tuple[Array, Array], nearest: bool) -> Array:
    """Area-average ``src`` over the given spans with an explicit loop.

    Same contract and output as :func:`pixscale.resample.table.box_table`.
    """
    H2 = rows[0].shape[0]
    W2 = cols[0].shape[0]
    out = np.empty((H2, W2, src.shape[2]), dtype=np.uint8)
    _box_impl(
        np.ascontiguousarray(src),
        rows[0],
        rows[1],
        cols[0],
        cols[1],
        bool(nearest),
        out,
    )
    return out
