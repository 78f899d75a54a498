# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Color value type.

A Color carries four synchronized representations of one sRGB color:

- rgb:   8-bit channels (r, g, b), each 0-255
- hsl:   (H, S, L) with H in [0, 360), S and L in [0, 1]
- oklab: (L, a, b), perceptually uniform, L in [0, 1]
- lab:   CIE L*a*b* under D65, L in [0, 100]

All four are computed once, on construction, from whichever representation
was supplied. The supplied representation is stored as given (after hue
wrapping and clamping); the others are derived from it through the sRGB /
linear-light hub in blockhue.color.colorspace.

The canonical "#RRGGBB" hex string is the identity: two Colors are equal
when their hex strings are equal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from blockhue.color.colorspace import (
    hex_to_rgb,
    hsl_to_srgb,
    lab_to_xyz,
    linear_rgb_to_oklab,
    linear_rgb_to_xyz,
    linear_to_srgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    rgb_to_hex,
    srgb_to_hsl,
    srgb_to_linear,
    srgb_to_uint8,
    xyz_to_lab,
    xyz_to_linear_rgb,
)


# Linear-light slack before an OKLab/Lab input counts as out of gamut.
# Round-tripping an in-gamut color through the matrices drifts by ~1e-9.
_GAMUT_EPSILON = 1e-6

Triple = tuple[float, float, float]


def _triple(values: NDArray[np.float64]) -> Triple:
    return float(values[0]), float(values[1]), float(values[2])


def _in_gamut(linear: NDArray[np.float64]) -> bool:
    return bool(np.all(linear >= -_GAMUT_EPSILON) and np.all(linear <= 1.0 + _GAMUT_EPSILON))


def _wrap_hue(h: float) -> float:
    h = float(h) % 360.0
    # -1e-20 % 360.0 == 360.0
    return 0.0 if h >= 360.0 else h


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Color:
    """
    An immutable color with RGB, HSL, OKLab and CIE Lab representations.

    Build instances with the ``from_*`` constructors; the raw dataclass
    constructor does not derive the other representations.

    Attributes:
        rgb: (r, g, b) 8-bit channels
        hsl: (H, S, L), H in degrees [0, 360); H is 0 for grays
        oklab: (L, a, b) OKLab coordinates
        lab: (L*, a*, b*) CIE Lab coordinates (D65)
    """
    rgb: tuple[int, int, int]
    hsl: Triple
    oklab: Triple
    lab: Triple

    def __post_init__(self) -> None:
        """Validate channel and HSL ranges."""
        if len(self.rgb) != 3 or any(not 0 <= c <= 255 for c in self.rgb):
            raise ValueError(f"RGB channels must be 0-255, got {self.rgb}")
        h, s, l = self.hsl
        if not 0.0 <= h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {h}")
        if not (0.0 <= s <= 1.0 and 0.0 <= l <= 1.0):
            raise ValueError(f"Saturation and lightness must be 0-1, got {s}, {l}")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def _derive(
        cls,
        srgb: NDArray[np.float64],
        *,
        rgb: Optional[tuple[int, int, int]] = None,
        hsl: Optional[Triple] = None,
        oklab: Optional[Triple] = None,
        lab: Optional[Triple] = None,
    ) -> Color:
        """Fill every representation that was not supplied from sRGB [0,1]."""
        srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
        linear = srgb_to_linear(srgb)

        if rgb is None:
            q = srgb_to_uint8(srgb)
            rgb = (int(q[0]), int(q[1]), int(q[2]))
        if hsl is None:
            hsl = _triple(srgb_to_hsl(srgb))
        if oklab is None:
            oklab = _triple(linear_rgb_to_oklab(linear))
        if lab is None:
            lab = _triple(xyz_to_lab(linear_rgb_to_xyz(linear)))

        return cls(rgb=rgb, hsl=hsl, oklab=oklab, lab=lab)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """
        Create a color from 8-bit channels.

        Raises:
            ValueError: If a channel is not an integer in 0-255
        """
        channels = []
        for c in (r, g, b):
            value = int(c)
            if value != c or not 0 <= value <= 255:
                raise ValueError(f"RGB channels must be integers 0-255, got {(r, g, b)}")
            channels.append(value)
        rgb = (channels[0], channels[1], channels[2])
        srgb = np.array(rgb, dtype=np.float64) / 255.0
        return cls._derive(srgb, rgb=rgb)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> Color:
        """
        Create a color from HSL.

        Hue is wrapped into [0, 360) (370 becomes 10). Saturation and
        lightness are clamped to [0, 1]. A zero-saturation color reports
        hue 0.
        """
        s = min(max(float(s), 0.0), 1.0)
        l = min(max(float(l), 0.0), 1.0)
        h = _wrap_hue(h) if s > 0.0 else 0.0
        srgb = hsl_to_srgb(np.array([h, s, l], dtype=np.float64))
        return cls._derive(srgb, hsl=(h, s, l))

    @classmethod
    def from_oklab(cls, L: float, a: float, b: float) -> Color:
        """
        Create a color from OKLab coordinates.

        Out-of-gamut input is clipped in linear light and every
        representation, OKLab included, is re-derived from the clipped color.
        """
        oklab = np.array([L, a, b], dtype=np.float64)
        linear = oklab_to_linear_rgb(oklab)
        srgb = linear_to_srgb(linear)
        if _in_gamut(linear):
            return cls._derive(srgb, oklab=_triple(oklab))
        return cls._derive(srgb)

    @classmethod
    def from_lab(cls, L: float, a: float, b: float) -> Color:
        """
        Create a color from CIE Lab (D65) coordinates.

        Out-of-gamut input is handled as in from_oklab.
        """
        lab = np.array([L, a, b], dtype=np.float64)
        linear = xyz_to_linear_rgb(lab_to_xyz(lab))
        srgb = linear_to_srgb(linear)
        if _in_gamut(linear):
            return cls._derive(srgb, lab=_triple(lab))
        return cls._derive(srgb)

    @classmethod
    def from_oklch(cls, L: float, C: float, H: float) -> Color:
        """Create a color from OKLCH (H in degrees)."""
        lab = oklch_to_oklab(np.array([L, C, H], dtype=np.float64))
        return cls.from_oklab(*_triple(lab))

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Create a color from "#RRGGBB", "RRGGBB" or "#RGB"."""
        return cls.from_rgb(*hex_to_rgb(hex_color))

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def hex(self) -> str:
        """Canonical upper-case hex string like "#8B7355"."""
        return rgb_to_hex(*self.rgb)

    @property
    def oklch(self) -> Triple:
        """(L, C, H) cylindrical form of the OKLab coordinates."""
        return _triple(oklab_to_oklch(np.array(self.oklab, dtype=np.float64)))

    @property
    def is_achromatic(self) -> bool:
        """True if the color has no perceptible hue (gray/white/black)."""
        return self.hsl[1] == 0.0 or self.oklch[1] < 0.02

    def distance_to(self, other: Color) -> float:
        """Euclidean OKLab distance to another color."""
        return distance_oklab(self, other)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": list(self.rgb),
            "hsl": list(self.hsl),
            "oklab": list(self.oklab),
            "lab": list(self.lab),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary (hex wins over rgb when both exist)."""
        if "hex" in data:
            return cls.from_hex(data["hex"])
        return cls.from_rgb(*data["rgb"])

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb

    def __hash__(self) -> int:
        return hash(self.rgb)

    def __repr__(self) -> str:
        return f"Color({self.hex})"

    def __str__(self) -> str:
        return self.hex


def distance_oklab(a: Color, b: Color) -> float:
    """
    Perceptual color difference: Euclidean distance in OKLab.

    This is the only distance the engine uses for its own decisions.
    OKLab is built for perceptual uniformity, so equal distances read as
    roughly equal visual differences, unlike Euclidean RGB.

    Symmetric, and exactly 0.0 for a color and itself.
    """
    dl = a.oklab[0] - b.oklab[0]
    da = a.oklab[1] - b.oklab[1]
    db = a.oklab[2] - b.oklab[2]
    return math.sqrt(dl * dl + da * da + db * db)
