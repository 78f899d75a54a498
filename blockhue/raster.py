# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Raster adapter: turns image files into pixel buffers for extraction.

Decoding is the only part of the engine that touches the filesystem, so it
lives here rather than in blockhue.color.extract. Pillow is an optional
dependency (``pip install blockhue[image]``).
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def load_raster(path: Union[str, Path]) -> NDArray[np.uint8]:
    """
    Decode an image file into an (H, W, 4) RGBA uint8 array.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile, so measured colors match what color pickers show.
    Alpha is preserved; images without alpha become fully opaque.

    Raises:
        ImportError: If Pillow is not installed
        FileNotFoundError: If the path does not exist
    """
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install blockhue[image]"
        ) from e

    with Image.open(path) as img:
        img.load()
        rgba = img.convert("RGBA")
        icc_profile = img.info.get("icc_profile")

    if icc_profile:
        rgba = _to_srgb(rgba, icc_profile, path)

    return as_pixel_buffer(np.array(rgba, dtype=np.uint8))


def _to_srgb(rgba, icc_profile: bytes, path: Union[str, Path]):
    """Convert the color channels of an RGBA image from its embedded profile to sRGB."""
    from PIL import ImageCms

    alpha = rgba.getchannel("A")
    try:
        embedded = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
        srgb = ImageCms.createProfile("sRGB")
        rgb = ImageCms.profileToProfile(rgba.convert("RGB"), embedded, srgb)
    except (ImageCms.PyCMSError, OSError) as e:
        logger.warning("Ignoring unreadable ICC profile in %s: %s", path, e)
        return rgba

    rgb.putalpha(alpha)
    return rgb


def as_pixel_buffer(array: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """
    Validate an in-memory pixel buffer.

    Returns the array unchanged if it has shape (H, W, 3) or (H, W, 4)
    and dtype uint8.

    Raises:
        TypeError: If the input is not a numpy array
        ValueError: If the shape or dtype is wrong
    """
    if not isinstance(array, np.ndarray):
        raise TypeError(f"Expected numpy array, got {type(array)}")

    if array.ndim != 3 or array.shape[2] not in (3, 4):
        raise ValueError(
            f"Expected (H, W, 3) or (H, W, 4) array, got shape {array.shape}"
        )

    if array.dtype != np.uint8:
        raise ValueError(f"Expected uint8 array, got {array.dtype}")

    return array
