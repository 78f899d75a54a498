# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Multi-stop color gradients.

A gradient over N stops has N - 1 segments. Samples are spread across the
segments so that the first sample is always the first stop and the last
sample is always the last stop, for every method and every step count.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

import numpy as np

from blockhue.errors import InvalidStepCountError, InvalidStopsError
from blockhue.schema.color import Color


class GradientMethod(Enum):
    """Interpolation space / curve for gradients."""
    LINEAR_RGB = "linear_rgb"
    LINEAR_HSL = "linear_hsl"
    LINEAR_OKLAB = "linear_oklab"
    CUBIC_BEZIER = "cubic_bezier"


# Bezier control points sit this fraction of the way along the line from
# each endpoint, giving a slow-fast-slow curve.
_BEZIER_CONTROL = 0.1


def interpolate(
    stops: Sequence[Color],
    steps: int,
    method: GradientMethod = GradientMethod.LINEAR_OKLAB,
) -> list[Color]:
    """
    Sample ``steps`` colors along the gradient through ``stops``.

    Every segment gets ``steps // segments`` samples and the last segment
    also gets the remainder. A segment's end point belongs to the next
    segment, except for the last segment which includes both ends. When
    there are fewer steps than segments the first sample is pinned to the
    first stop.

    Args:
        stops: At least two colors
        steps: Number of output colors (>= 2)
        method: Interpolation method

    Returns:
        Exactly ``steps`` colors; the first is ``stops[0]`` and the last is
        ``stops[-1]``

    Raises:
        InvalidStopsError: Fewer than 2 stops
        InvalidStepCountError: steps < 2

    Example:
        >>> red, blue = Color.from_hex("#FF0000"), Color.from_hex("#0000FF")
        >>> [c.hex for c in interpolate([red, blue], 3, GradientMethod.LINEAR_RGB)]
        ['#FF0000', '#800080', '#0000FF']
    """
    stops = list(stops)
    if len(stops) < 2:
        raise InvalidStopsError(len(stops))
    if steps < 2:
        raise InvalidStepCountError(steps)

    segments = len(stops) - 1
    per_segment, remainder = divmod(steps, segments)

    colors: list[Color] = []
    for i in range(segments):
        start, end = stops[i], stops[i + 1]
        if i < segments - 1:
            n = per_segment
            ts = [j / n for j in range(n)]
        else:
            n = per_segment + remainder
            ts = [1.0] if n == 1 else [j / (n - 1) for j in range(n)]
        colors.extend(_sample(start, end, t, method) for t in ts)

    if steps < segments:
        colors[0] = stops[0]

    return colors


def _sample(start: Color, end: Color, t: float, method: GradientMethod) -> Color:
    """Color at parameter t in [0, 1] between two stops."""
    if t <= 0.0:
        return start
    if t >= 1.0:
        return end

    if method == GradientMethod.LINEAR_RGB:
        return _lerp_rgb(start, end, t)
    if method == GradientMethod.LINEAR_HSL:
        return _lerp_hsl(start, end, t)
    if method == GradientMethod.LINEAR_OKLAB:
        return _lerp_oklab(start, end, t)
    if method == GradientMethod.CUBIC_BEZIER:
        return _bezier_rgb(start, end, t)
    raise ValueError(f"Unknown gradient method: {method!r}")


def _lerp_rgb(start: Color, end: Color, t: float) -> Color:
    a = np.array(start.rgb, dtype=np.float64)
    b = np.array(end.rgb, dtype=np.float64)
    return Color._derive((a + (b - a) * t) / 255.0)


def _lerp_hsl(start: Color, end: Color, t: float) -> Color:
    h1, s1, l1 = start.hsl
    h2, s2, l2 = end.hsl

    # Grays have no meaningful hue; take the other end's
    if s1 == 0.0:
        h1 = h2
    if s2 == 0.0:
        h2 = h1

    # Shortest arc: 350 -> 10 is +20, not -340
    dh = (h2 - h1 + 180.0) % 360.0 - 180.0

    return Color.from_hsl(
        h1 + dh * t,
        s1 + (s2 - s1) * t,
        l1 + (l2 - l1) * t,
    )


def _lerp_oklab(start: Color, end: Color, t: float) -> Color:
    a = np.array(start.oklab, dtype=np.float64)
    b = np.array(end.oklab, dtype=np.float64)
    L, A, B = a + (b - a) * t
    return Color.from_oklab(float(L), float(A), float(B))


def _bezier_rgb(start: Color, end: Color, t: float) -> Color:
    """
    Per-channel cubic Bezier with controls at P0 + f*d and P3 - f*d.

    Expanding B(t) with those controls gives
    P0 + d * (3(1-t)^2 t f + 3(1-t) t^2 (1-f) + t^3).
    """
    f = _BEZIER_CONTROL
    a = np.array(start.rgb, dtype=np.float64)
    d = np.array(end.rgb, dtype=np.float64) - a
    u = 1.0 - t
    ease = 3.0 * u * u * t * f + 3.0 * u * t * t * (1.0 - f) + t ** 3
    return Color._derive((a + d * ease) / 255.0)
