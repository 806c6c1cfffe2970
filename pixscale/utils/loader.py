"""Image loading and saving utilities using Pillow.

All processing in this project happens on :class:`RasterImage` values. These
helpers only convert between Pillow images and RGBA rasters for IO.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps

from ..raster import RasterImage

logger = logging.getLogger(__name__)

# Pillow formats that cannot store an alpha channel.
_RGB_ONLY_SUFFIXES = {".jpg", ".jpeg", ".bmp", ".ppm", ".pgm"}


def from_pil(im: Image.Image) -> RasterImage:
    """Convert a Pillow image of any mode into an RGBA raster."""
    if im.mode != "RGBA":
        im = im.convert("RGBA")
    return RasterImage.from_array(np.asarray(im, dtype=np.uint8))


def to_pil(raster: RasterImage) -> Image.Image:
    """Convert an RGBA raster into a Pillow ``RGBA`` image (copied)."""
    if not isinstance(raster, RasterImage):
        raise TypeError("raster must be a RasterImage")
    return Image.fromarray(np.array(raster.to_array()))


def load_image(path: Union[str, Path]) -> RasterImage:
    """Load an image file into an RGBA raster.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow. EXIF orientation is applied.

    Returns
    -------
    RasterImage
        Decoded image with four channels.
    """
    p = Path(path)
    with Image.open(p) as im:
        im = ImageOps.exif_transpose(im)
        raster = from_pil(im)
    logger.debug("Loaded %s (%dx%d)", p, raster.width, raster.height)
    return raster


def save_image(raster: RasterImage, path: Union[str, Path]) -> None:
    """Save an RGBA raster to an image file via Pillow.

    Parameters
    ----------
    raster : RasterImage
        Image to write.
    path : str | Path
        Output file path. The format is inferred from the extension; formats
        without alpha support get the RGB channels only.
    """
    im = to_pil(raster)
    p = Path(path)
    if p.suffix.lower() in _RGB_ONLY_SUFFIXES:
        im = im.convert("RGB")
    im.save(p)
    logger.debug("Saved %s (%dx%d)", p, raster.width, raster.height)
