"""RGBA raster container used by every stage of the pipeline.

A :class:`RasterImage` holds a flat, row-major ``uint8`` buffer with four
interleaved channels per pixel (red, green, blue, alpha). The buffer is
marked read-only on construction so the resampler can borrow it without
copying.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

import numpy as np

from .errors import InvalidDimensions

Array = np.ndarray

CHANNELS = 4
OPAQUE = 255


def require_dimension(name: str, value: object) -> int:
    """Return ``value`` as an ``int`` if it is a positive integer.

    Raises
    ------
    InvalidDimensions
        If ``value`` is not an integer (bools included) or is ``<= 0``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidDimensions(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimensions(f"{name} must be > 0, got {value}")
    return int(value)


def _to_samples(values: Union[Array, Iterable[float]]) -> Array:
    """Flatten ``values`` into a fresh uint8 array, rounding and clamping."""
    arr = np.asarray(values)
    if arr.dtype == np.uint8:
        return arr.reshape(-1).copy()
    if arr.dtype.kind not in "biuf":
        raise TypeError(f"pixel samples must be numeric, got dtype={arr.dtype}")
    arrf = arr.astype(np.float64).reshape(-1)
    if not np.isfinite(arrf).all():
        raise ValueError("pixel samples must be finite")
    return np.clip(np.rint(arrf), 0, 255).astype(np.uint8)


@dataclass(frozen=True, eq=False)
class RasterImage:
    """Immutable RGBA image.

    Parameters
    ----------
    width : int
        Number of columns (> 0).
    height : int
        Number of rows (> 0).
    pixels : array-like
        ``width * height * 4`` samples, row-major RGBA. Non-uint8 input is
        rounded and clamped into [0, 255].
    """

    width: int
    height: int
    pixels: Array = field(repr=False)

    def __post_init__(self) -> None:
        width = require_dimension("width", self.width)
        height = require_dimension("height", self.height)
        samples = _to_samples(self.pixels)
        expected = width * height * CHANNELS
        if samples.size != expected:
            raise ValueError(
                f"pixel buffer has {samples.size} samples, expected {expected} "
                f"for a {width}x{height} RGBA image"
            )
        samples.setflags(write=False)
        object.__setattr__(self, "width", width)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "pixels", samples)

    @classmethod
    def from_array(cls, arr: Array) -> "RasterImage":
        """Build an image from an ``(H, W, 4)`` or ``(H, W, 3)`` array.

        Three-channel input is promoted to RGBA with an opaque alpha channel.
        """
        arr = np.asarray(arr)
        if arr.ndim != 3 or arr.shape[2] not in (3, CHANNELS):
            raise ValueError("arr must have shape (H, W, 3) or (H, W, 4)")
        H, W, C = arr.shape
        if C == 3:
            alpha = np.full((H, W, 1), OPAQUE, dtype=arr.dtype)
            arr = np.concatenate([arr, alpha], axis=2)
        return cls(W, H, arr)

    @classmethod
    def from_buffer(
        cls, data: Union[bytes, bytearray, Sequence[int], Array], width: int, channels: int = CHANNELS
    ) -> "RasterImage":
        """Build an image from a raw row-major buffer of known width.

        The height is derived from the buffer length. ``channels`` may be 3
        (RGB, alpha filled with 255) or 4 (RGBA).
        """
        width = require_dimension("width", width)
        if channels not in (3, CHANNELS):
            raise ValueError("channels must be 3 or 4")
        if isinstance(data, (bytes, bytearray, memoryview)):
            flat = np.frombuffer(data, dtype=np.uint8)
        else:
            flat = np.asarray(data).reshape(-1)
        row = width * channels
        if flat.size == 0 or flat.size % row != 0:
            raise ValueError(
                f"buffer length {flat.size} is not a whole number of "
                f"{width}-pixel rows with {channels} channels"
            )
        return cls.from_array(flat.reshape(flat.size // row, width, channels))

    @classmethod
    def filled(cls, width: int, height: int, color: Sequence[int]) -> "RasterImage":
        """Return a ``width x height`` image where every pixel is ``color``."""
        width = require_dimension("width", width)
        height = require_dimension("height", height)
        if len(color) == 3:
            color = (*color, OPAQUE)
        if len(color) != CHANNELS:
            raise ValueError("color must have 3 or 4 components")
        return cls(width, height, np.tile(np.asarray(color), width * height))

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def to_array(self) -> Array:
        """Return a read-only ``(H, W, 4)`` view of the pixels."""
        return self.pixels.reshape(self.height, self.width, CHANNELS)

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return the RGBA tuple at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        p = (y * self.width + x) * CHANNELS
        r, g, b, a = (int(v) for v in self.pixels[p : p + CHANNELS])
        return r, g, b, a

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RasterImage):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.pixels, other.pixels)

    __hash__ = None  # type: ignore[assignment]


__all__ = ["RasterImage", "require_dimension", "CHANNELS"]
