# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Perceptual distance and catalog search.

Catalog search always ranks by Euclidean OKLab distance. The other metrics
in SimilarityMetric are auxiliary helpers for callers that want to compare
against legacy RGB/Lab tooling.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from typing import Optional

import numpy as np

from blockhue.color.colorspace import oklab_distance_batch
from blockhue.schema.catalog import Catalog, CatalogElement
from blockhue.schema.color import Color, distance_oklab


class SimilarityMetric(Enum):
    """Distance metric selector."""
    OKLAB = "oklab"  # Euclidean OKLab (engine default)
    RGB = "rgb"      # Euclidean over 8-bit channels
    LAB = "lab"      # CIE76 ΔE*ab
    HSL = "hsl"      # Cylindrical HSL, hue on the shortest arc


def color_distance(
    a: Color,
    b: Color,
    metric: SimilarityMetric = SimilarityMetric.OKLAB,
) -> float:
    """
    Distance between two colors under the given metric.

    All metrics are symmetric and return 0.0 for identical colors.
    """
    if metric == SimilarityMetric.OKLAB:
        return distance_oklab(a, b)
    if metric == SimilarityMetric.RGB:
        return math.dist(a.rgb, b.rgb)
    if metric == SimilarityMetric.LAB:
        return math.dist(a.lab, b.lab)
    if metric == SimilarityMetric.HSL:
        # Points on the HSL double cone: chroma radius s * (1 - |2l - 1|)
        def _point(c: Color) -> tuple[float, float, float]:
            h, s, l = c.hsl
            radius = s * (1.0 - abs(2.0 * l - 1.0))
            rad = math.radians(h)
            return radius * math.cos(rad), radius * math.sin(rad), l
        return math.dist(_point(a), _point(b))
    raise ValueError(f"Unknown similarity metric: {metric!r}")


def find_by_color_range(
    catalog: Catalog,
    target: Color,
    tolerance: float,
    limit: int,
) -> list[CatalogElement]:
    """
    Find catalog elements whose color lies within ``tolerance`` of ``target``.

    Tolerance is inclusive and measured in OKLab distance. Elements without a
    color are ignored.

    Args:
        catalog: The block catalog to search
        target: Color to compare against
        tolerance: Maximum OKLab distance (may be ``math.inf``)
        limit: Maximum number of results

    Returns:
        Elements sorted by ascending distance, ties broken by element id,
        truncated to ``limit``. Empty when nothing matches.
    """
    return [element for element, _ in rank_by_color_range(catalog, target, tolerance, limit)]


def rank_by_color_range(
    catalog: Catalog,
    target: Color,
    tolerance: float,
    limit: int,
) -> list[tuple[CatalogElement, float]]:
    """Same search as find_by_color_range, as (element, distance) pairs."""
    if limit <= 0:
        return []

    elements = list(catalog.colored())
    if not elements:
        return []

    oklab = np.array([e.color.oklab for e in elements], dtype=np.float64)
    distances = oklab_distance_batch(oklab, np.array(target.oklab, dtype=np.float64))

    matches = [
        (element, float(d))
        for element, d in zip(elements, distances)
        if d <= tolerance
    ]
    matches.sort(key=lambda pair: (pair[1], pair[0].id))
    return matches[:limit]


def find_closest(catalog: Catalog, target: Color) -> Optional[CatalogElement]:
    """
    Nearest colored catalog element to ``target``.

    Returns None if the catalog has no colored elements.
    """
    matches = find_by_color_range(catalog, target, math.inf, 1)
    return matches[0] if matches else None


def find_most_similar(
    target: Color,
    candidates: Sequence[Color],
    metric: SimilarityMetric = SimilarityMetric.OKLAB,
) -> Optional[tuple[int, float]]:
    """
    Index and distance of the candidate closest to ``target``.

    Ties go to the earliest candidate. Returns None for an empty sequence.
    """
    best: Optional[tuple[int, float]] = None
    for index, candidate in enumerate(candidates):
        d = color_distance(target, candidate, metric)
        if best is None or d < best[1]:
            best = (index, d)
    return best
