# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Representative color extraction from a decoded texture.

Four methods, all pure functions of the pixel bytes:

1. Average: mean of all eligible pixels
2. Most frequent: coarse RGB histogram, centroid of the mode bucket
3. Clustering: seeded k-means, centroid of the largest cluster
4. Edge weighted: mean weighted by luma gradient magnitude

Fully transparent pixels (alpha == 0) never take part.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from blockhue.errors import EmptyInputError
from blockhue.schema.color import Color
from blockhue.color.colorspace import srgb_to_uint8
from blockhue.raster import as_pixel_buffer

logger = logging.getLogger(__name__)

# Rec. 709 luma weights, used only to find edges
_LUMA = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


class ExtractionMethod(Enum):
    """Supported representative-color strategies."""
    AVERAGE = "average"
    MOST_FREQUENT = "most_frequent"
    CLUSTERING = "clustering"
    EDGE_WEIGHTED = "edge_weighted"


@dataclass(frozen=True)
class ExtractionConfig:
    """Tuning knobs for the extraction methods."""

    # MOST_FREQUENT: equal-width buckets per channel over [0, 256)
    bins: int = 8

    # CLUSTERING: number of clusters (reduced to the number of unique colors)
    k: int = 4

    # CLUSTERING: seed for k-means++ initialization. Same seed, same result.
    seed: int = 42

    # CLUSTERING: hard iteration cap
    max_iter: int = 100

    # CLUSTERING: stop once no centroid moves more than this (0-255 units)
    tolerance: float = 1e-3

    # EDGE_WEIGHTED: weight = 1 + edge_gain * |∇luma| (luma in [0, 1])
    edge_gain: float = 4.0

    def __post_init__(self) -> None:
        if not 1 <= self.bins <= 256:
            raise ValueError(f"bins must be 1-256, got {self.bins}")
        if self.k < 1:
            raise ValueError(f"k must be >= 1, got {self.k}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")
        if self.tolerance < 0 or self.edge_gain < 0:
            raise ValueError("tolerance and edge_gain must be >= 0")


def extract_color(
    pixels: NDArray[np.uint8],
    method: ExtractionMethod = ExtractionMethod.AVERAGE,
    config: Optional[ExtractionConfig] = None,
) -> Color:
    """
    Extract one representative color from a pixel buffer.

    Args:
        pixels: Array of shape (H, W, 3) or (H, W, 4) with uint8 sRGB(A)
        method: Extraction strategy
        config: Method parameters (uses defaults if None)

    Returns:
        The representative Color

    Raises:
        EmptyInputError: Zero-area buffer, or every pixel fully transparent
        ValueError: Buffer of the wrong shape or dtype

    Example:
        >>> red = np.full((2, 2, 3), [255, 0, 0], dtype=np.uint8)
        >>> extract_color(red, ExtractionMethod.CLUSTERING).hex
        '#FF0000'
    """
    cfg = config or ExtractionConfig()
    rgb, mask = _prepare(pixels)
    eligible = rgb[mask]

    if method == ExtractionMethod.AVERAGE:
        mean = eligible.mean(axis=0)
    elif method == ExtractionMethod.MOST_FREQUENT:
        mean = _most_frequent(eligible, cfg.bins)
    elif method == ExtractionMethod.CLUSTERING:
        mean = _largest_cluster(eligible, cfg)
    elif method == ExtractionMethod.EDGE_WEIGHTED:
        mean = _edge_weighted(rgb, mask, cfg.edge_gain)
    else:
        raise ValueError(f"Unknown extraction method: {method!r}")

    return _to_color(mean)


def extract_variants(
    buffers: Iterable[NDArray[np.uint8]],
    method: ExtractionMethod = ExtractionMethod.AVERAGE,
    config: Optional[ExtractionConfig] = None,
) -> Color:
    """
    Combine several texture variants of one block into a single color.

    Each buffer is extracted with ``method`` and the resulting colors are
    averaged. Buffers without eligible pixels are skipped.

    Raises:
        EmptyInputError: If no buffer has eligible pixels
    """
    colors = []
    for index, buffer in enumerate(buffers):
        try:
            colors.append(extract_color(buffer, method, config))
        except EmptyInputError:
            logger.warning("Skipping texture variant %d: no opaque pixels", index)

    if not colors:
        raise EmptyInputError("No texture variant has eligible pixels")

    mean = np.array([c.rgb for c in colors], dtype=np.float64).mean(axis=0)
    return _to_color(mean)


def _prepare(
    pixels: NDArray[np.uint8],
) -> tuple[NDArray[np.float64], NDArray[np.bool_]]:
    """
    Validate a buffer and split it into RGB values and an eligibility mask.

    Returns:
        (rgb, mask) where rgb has shape (H, W, 3) as float64 in 0-255 and
        mask has shape (H, W)
    """
    pixels = as_pixel_buffer(pixels)

    height, width = pixels.shape[:2]
    if height == 0 or width == 0:
        raise EmptyInputError(f"Pixel buffer has zero area ({width}x{height})")

    rgb = pixels[..., :3].astype(np.float64)
    if pixels.shape[2] == 4:
        mask = pixels[..., 3] > 0
    else:
        mask = np.ones((height, width), dtype=bool)

    if not mask.any():
        raise EmptyInputError("Every pixel in the buffer is fully transparent")

    return rgb, mask


def _to_color(mean: NDArray[np.float64]) -> Color:
    r, g, b = srgb_to_uint8(np.asarray(mean, dtype=np.float64) / 255.0)
    return Color.from_rgb(int(r), int(g), int(b))


def _most_frequent(eligible: NDArray[np.float64], bins: int) -> NDArray[np.float64]:
    """
    Centroid of the most populated histogram bucket.

    Each channel is split into ``bins`` equal-width buckets over [0, 256).
    Ties go to the bucket with the lowest combined index
    (r_bin * bins + g_bin) * bins + b_bin.
    """
    idx = (eligible.astype(np.int64) * bins) // 256
    flat = (idx[:, 0] * bins + idx[:, 1]) * bins + idx[:, 2]

    # np.unique sorts, and argmax returns the first maximum
    buckets, counts = np.unique(flat, return_counts=True)
    mode = buckets[int(np.argmax(counts))]

    return eligible[flat == mode].mean(axis=0)


def _largest_cluster(
    eligible: NDArray[np.float64],
    cfg: ExtractionConfig,
) -> NDArray[np.float64]:
    """Centroid of the most populated k-means cluster (lowest index on ties)."""
    centroids, labels = _kmeans(
        eligible,
        k=cfg.k,
        max_iter=cfg.max_iter,
        tolerance=cfg.tolerance,
        seed=cfg.seed,
    )
    sizes = np.bincount(labels, minlength=len(centroids))
    return centroids[int(np.argmax(sizes))]


def _kmeans(
    data: NDArray[np.float64],
    k: int,
    max_iter: int = 100,
    tolerance: float = 1e-3,
    seed: Optional[int] = 42,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """
    Vectorized k-means with k-means++ initialization.

    Iterates until no centroid moves more than ``tolerance`` or
    ``max_iter`` is reached. All randomness comes from ``seed``.

    Args:
        data: Array of shape (N, D)
        k: Number of clusters (capped at the number of unique points)
        max_iter: Maximum iterations
        tolerance: Centroid movement threshold
        seed: Random seed

    Returns:
        (centroids, labels) where:
        - centroids: (k, D) array of cluster centers
        - labels: (N,) array of cluster assignments
    """
    rng = np.random.default_rng(seed)
    n, d = data.shape

    # Find unique points to avoid issues with duplicates
    unique_data = np.unique(data, axis=0)
    n_unique = len(unique_data)

    k = min(k, n_unique)
    if k == 0:
        raise EmptyInputError("No valid data points for clustering")

    # k-means++ initialization
    centroids = np.empty((k, d), dtype=np.float64)
    centroids[0] = unique_data[rng.integers(n_unique)]

    for i in range(1, k):
        # Distance to nearest existing centroid (vectorized)
        dists_to_centroids = np.sum(
            (unique_data[:, np.newaxis, :] - centroids[np.newaxis, :i, :]) ** 2,
            axis=2
        )
        dists = np.min(dists_to_centroids, axis=1)

        total = dists.sum()
        if total == 0:
            centroids[i] = unique_data[rng.integers(n_unique)]
        else:
            centroids[i] = unique_data[rng.choice(n_unique, p=dists / total)]

    labels = _assign(data, centroids)
    for iteration in range(max_iter):
        updated = centroids.copy()
        for j in range(k):
            members = labels == j
            if np.any(members):
                updated[j] = data[members].mean(axis=0)

        shift = float(np.max(np.sqrt(np.sum((updated - centroids) ** 2, axis=1))))
        centroids = updated
        labels = _assign(data, centroids)

        if shift <= tolerance:
            logger.debug("k-means converged after %d iterations (k=%d)", iteration + 1, k)
            break
    else:
        logger.debug("k-means stopped at max_iter=%d (k=%d)", max_iter, k)

    return centroids, labels


def _assign(data: NDArray[np.float64], centroids: NDArray[np.float64]) -> NDArray[np.int64]:
    """Label each point with its nearest centroid (lowest index on ties)."""
    dists = np.sum(
        (data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2,
        axis=2
    )
    return np.argmin(dists, axis=1)


def _edge_weighted(
    rgb: NDArray[np.float64],
    mask: NDArray[np.bool_],
    edge_gain: float,
) -> NDArray[np.float64]:
    """
    Mean color weighted towards edges.

    Weight per pixel is 1 + edge_gain * |∇luma|, with luma in [0, 1].
    Transparent pixels get weight 0 but still shape the gradient, so the
    silhouette of a cut-out texture counts as an edge.
    """
    luma = (rgb @ _LUMA) / 255.0

    magnitude = np.zeros_like(luma)
    for axis in (0, 1):
        # np.gradient needs at least 2 samples along an axis
        if luma.shape[axis] > 1:
            magnitude += np.gradient(luma, axis=axis) ** 2
    magnitude = np.sqrt(magnitude)

    weights = (1.0 + edge_gain * magnitude) * mask
    return np.sum(rgb * weights[..., np.newaxis], axis=(0, 1)) / np.sum(weights)
