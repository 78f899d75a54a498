# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Palette synthesis.

Every operation is a pure function of its inputs (plus the catalog, which is
always passed in) and returns a fresh Palette or raises. Two families:

Color palettes, built from raw colors:
- generate_themed_palette: named multi-stop gradients (sunset, fire, ...)
- generate_monochrome / generate_complementary / generate_triadic
- generate_distinct_palette: greedy max-min selection

Block palettes, built from catalog elements:
- generate_natural_palette / generate_architectural_palette: curated lists
- generate_block_gradient / generate_block_monochrome /
  generate_block_complementary: color palettes snapped to the nearest blocks

Palettes never repeat a color. When two steps land on the same hex, the
first one is kept and the later one is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from blockhue.color.colorspace import oklab_distance_batch
from blockhue.color.gradient import GradientMethod, interpolate
from blockhue.color.similarity import find_closest
from blockhue.errors import (
    InvalidStepCountError,
    MissingColorError,
    NoMatchingElementsError,
)
from blockhue.palettes.themes import (
    ARCHITECTURAL_STYLES,
    GRADIENT_THEMES,
    NATURAL_THEMES,
    BlockTheme,
    lookup_architectural,
    lookup_gradient,
    lookup_natural,
)
from blockhue.palettes.usage import usage_note
from blockhue.schema.catalog import BlockFilter, Catalog, CatalogElement
from blockhue.schema.color import Color
from blockhue.schema.palette import Palette, PaletteEntry, PaletteRole, PaletteTheme

logger = logging.getLogger(__name__)

Source = Union[Color, CatalogElement]
ElementRef = Union[str, CatalogElement]


@dataclass(frozen=True)
class PaletteConfig:
    """
    Tuning for the color-palette generators.

    All values are HSL lightness / saturation fractions in [0, 1].
    """

    # Monochrome: lightness range of the generated steps
    mono_low: float = 0.15
    mono_high: float = 0.85

    # Complementary: saturation of the two neutral supporting colors
    neutral_saturation: float = 0.08

    # Complementary: light neutral at l + (1 - l) * mix, dark at l * mix
    neutral_light_mix: float = 0.6
    neutral_dark_mix: float = 0.4

    def __post_init__(self) -> None:
        if not 0.0 <= self.mono_low < self.mono_high <= 1.0:
            raise ValueError(
                f"Need 0 <= mono_low < mono_high <= 1, "
                f"got {self.mono_low}, {self.mono_high}"
            )
        for name in ("neutral_saturation", "neutral_light_mix", "neutral_dark_mix"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be 0-1, got {value}")


# =============================================================================
# Helpers
# =============================================================================


def _source_color(source: Source) -> Color:
    return source.color if isinstance(source, CatalogElement) else source


def _entry(source: Source, role: PaletteRole) -> PaletteEntry:
    """Palette entry with a usage hint for catalog-backed sources."""
    if isinstance(source, CatalogElement):
        return PaletteEntry(source, role, usage_note(source, role))
    return PaletteEntry(source, role)


def _unique_entries(entries: Iterable[PaletteEntry], name: str) -> tuple[PaletteEntry, ...]:
    """Drop entries whose color is already present (first occurrence wins)."""
    kept: list[PaletteEntry] = []
    seen: set[str] = set()
    for entry in entries:
        if entry.hex in seen:
            logger.debug("Dropping duplicate %s from palette '%s'", entry.hex, name)
            continue
        seen.add(entry.hex)
        kept.append(entry)
    return tuple(kept)


def _build_palette(
    name: str,
    description: str,
    theme: PaletteTheme,
    entries: Iterable[PaletteEntry],
) -> Palette:
    return Palette(
        name=name,
        description=description,
        theme=theme,
        entries=_unique_entries(entries, name),
    )


def _positional_role(index: int, count: int) -> PaletteRole:
    """First third Primary, middle third Secondary, last third Accent."""
    if index * 3 < count:
        return PaletteRole.PRIMARY
    if index * 3 < 2 * count:
        return PaletteRole.SECONDARY
    return PaletteRole.ACCENT


def _require_element(catalog: Catalog, ref: ElementRef) -> CatalogElement:
    """Resolve an element reference that must carry a color."""
    if isinstance(ref, CatalogElement):
        element = ref
    else:
        element = catalog.resolve(ref)
        if element is None:
            raise NoMatchingElementsError(f"Block '{ref}' is not in the catalog")
    if element.color is None:
        raise MissingColorError(element.id)
    return element


def _snap_entries(
    entries: Iterable[PaletteEntry],
    catalog: Catalog,
    pinned: Sequence[CatalogElement] = (),
) -> list[PaletteEntry]:
    """
    Replace each entry's color with the nearest catalog element.

    Pinned elements win over a search when their color matches exactly.
    Entries stay raw colors when the catalog has no colored element.
    """
    by_hex = {element.color.hex: element for element in pinned}
    snapped = []
    for entry in entries:
        element = by_hex.get(entry.hex) or find_closest(catalog, entry.color)
        snapped.append(_entry(element if element is not None else entry.source, entry.role))
    return snapped


# =============================================================================
# Themed gradients
# =============================================================================


def gradient_themes() -> list[str]:
    """Names accepted by generate_themed_palette."""
    return list(GRADIENT_THEMES)


def generate_themed_palette(
    theme: str,
    count: int,
    method: Optional[GradientMethod] = None,
) -> Palette:
    """
    Gradient palette through a named theme's anchor colors.

    Args:
        theme: Theme name, e.g. "sunset" (case-insensitive)
        count: Number of colors (>= 2)
        method: Interpolation method (uses the theme's default if None)

    Raises:
        UnknownThemeError: Theme name not in the table
        InvalidStepCountError: count < 2
    """
    gradient = lookup_gradient(theme)
    colors = interpolate(gradient.stops(), count, method or gradient.method)
    entries = (
        _entry(color, _positional_role(i, len(colors)))
        for i, color in enumerate(colors)
    )
    return _build_palette(gradient.title, gradient.description, PaletteTheme.GRADIENT, entries)


# =============================================================================
# Curated block palettes
# =============================================================================


def natural_themes() -> list[str]:
    """Biome names accepted by generate_natural_palette (aliases excluded)."""
    return list(NATURAL_THEMES)


def architectural_styles() -> list[str]:
    """Style names accepted by generate_architectural_palette."""
    return list(ARCHITECTURAL_STYLES)


def _curated_palette(
    catalog: Catalog,
    theme: BlockTheme,
    palette_theme: PaletteTheme,
    block_filter: Optional[BlockFilter],
) -> Palette:
    entries = []
    for index, block_id in enumerate(theme.block_ids):
        element = catalog.resolve(block_id)
        if element is None:
            logger.debug("'%s': %s is not in the catalog", theme.title, block_id)
            continue
        if block_filter is not None and not block_filter.allows(element):
            logger.debug("'%s': %s rejected by filter", theme.title, block_id)
            continue
        if element.color is None:
            logger.debug("'%s': %s has no color", theme.title, block_id)
            continue
        entries.append(_entry(element, theme.role_at(index)))

    if not entries:
        raise NoMatchingElementsError(
            f"No colored catalog blocks match '{theme.title}'"
        )
    return _build_palette(theme.title, theme.description, palette_theme, entries)


def generate_natural_palette(
    catalog: Catalog,
    biome: str,
    block_filter: Optional[BlockFilter] = None,
) -> Palette:
    """
    Block palette for a biome (forest, desert, ocean, mountain, nether, end).

    Aliases woods/sand/water/stone are accepted. Blocks missing from the
    catalog, rejected by ``block_filter``, or without a color are skipped.

    Raises:
        UnknownThemeError: Biome not recognized
        NoMatchingElementsError: No listed block survived
    """
    return _curated_palette(catalog, lookup_natural(biome), PaletteTheme.NATURAL, block_filter)


def generate_architectural_palette(
    catalog: Catalog,
    style: str,
    block_filter: Optional[BlockFilter] = None,
) -> Palette:
    """
    Block palette for a building style (medieval, modern, rustic, industrial).

    Same skipping rules and failures as generate_natural_palette.
    """
    return _curated_palette(
        catalog, lookup_architectural(style), PaletteTheme.ARCHITECTURAL, block_filter
    )


# =============================================================================
# Color harmonies
# =============================================================================


# 1.5 8-bit levels: a lightness gap of one level already moves the max
# channel (l < 0.5) or the min channel (l > 0.5) by a full level
_MIN_LIGHTNESS_STEP = 1.5 / 255.0


def _monochrome_lightness(l: float, count: int, low: float, high: float) -> tuple[list[float], Optional[int]]:
    """
    Lightness steps for a monochrome ramp.

    Neighbouring steps are at least _MIN_LIGHTNESS_STEP apart so they never
    quantize to the same 8-bit color. For an odd count the base sits in the
    middle when there is room on both sides; near black or white it moves
    toward the end that has no room.

    Returns (lightness values, index of the base color or None).
    """
    step = _MIN_LIGHTNESS_STEP

    # Make room for the base when it sits on or outside the configured range
    if l <= low:
        low = l / 2.0
    if l >= high:
        high = (1.0 + l) / 2.0

    if count % 2 == 0:
        high = min(max(high, low + (count - 1) * step), 1.0)
        low = max(min(low, high - (count - 1) * step), 0.0)
        return [low + (high - low) * i / (count - 1) for i in range(count)], None

    max_below = int(l / step)
    max_above = int((1.0 - l) / step)
    below = min(count // 2, max_below)
    above = count - 1 - below
    if above > max_above:
        above = max_above
        below = count - 1 - above

    low = max(min(low, l - below * step), 0.0)
    high = min(max(high, l + above * step), 1.0)

    lights = [low + (l - low) * i / below for i in range(below)]
    lights.append(l)
    lights.extend(l + (high - l) * i / above for i in range(1, above + 1))
    return lights, below


def generate_monochrome(
    base: Color,
    count: int,
    config: Optional[PaletteConfig] = None,
) -> Palette:
    """
    Tonal ramp of one hue, dark to light.

    Hue and saturation stay those of ``base``; lightness increases strictly
    from ``mono_low`` to ``mono_high``. For an odd count one step is the
    base color itself, in the middle unless the base is too close to black
    or white. The bounds widen when the base lightness lies outside them or
    when the steps would be too close to tell apart, so every step has its
    own 8-bit color (up to 171 steps).

    Roles: the step nearest the base is Primary, the two ends are Accent,
    everything else Secondary.

    Raises:
        InvalidStepCountError: count < 2
    """
    if count < 2:
        raise InvalidStepCountError(count)
    cfg = config or PaletteConfig()

    h, s, l = base.hsl
    lights, base_index = _monochrome_lightness(l, count, cfg.mono_low, cfg.mono_high)

    colors = [
        base if i == base_index else Color.from_hsl(h, s, li)
        for i, li in enumerate(lights)
    ]

    nearest = int(np.argmin([abs(li - l) for li in lights]))
    entries = []
    for i, color in enumerate(colors):
        if i == nearest:
            role = PaletteRole.PRIMARY
        elif i in (0, count - 1):
            role = PaletteRole.ACCENT
        else:
            role = PaletteRole.SECONDARY
        entries.append(_entry(color, role))

    return _build_palette(
        f"{base.hex} Monochrome",
        f"A monochrome palette based on {base.hex} with tonal variations from dark to light",
        PaletteTheme.MONOCHROME,
        entries,
    )


def generate_complementary(
    base: Color,
    config: Optional[PaletteConfig] = None,
) -> Palette:
    """
    Base color, its complement, and two supporting neutrals.

    - base (Primary)
    - hue + 180 with the same saturation and lightness (Accent)
    - light neutral at l + (1 - l) * 0.6 (Secondary)
    - dark neutral at l * 0.4 (Secondary)

    Neutrals keep the base hue at a low saturation (0.08).
    """
    cfg = config or PaletteConfig()
    h, s, l = base.hsl

    complement = Color.from_hsl(h + 180.0, s, l)
    light = Color.from_hsl(h, cfg.neutral_saturation, l + (1.0 - l) * cfg.neutral_light_mix)
    dark = Color.from_hsl(h, cfg.neutral_saturation, l * cfg.neutral_dark_mix)

    return _build_palette(
        f"{base.hex} Complementary",
        f"A complementary color scheme based on {base.hex} with high contrast",
        PaletteTheme.COMPLEMENTARY,
        [
            _entry(base, PaletteRole.PRIMARY),
            _entry(complement, PaletteRole.ACCENT),
            _entry(light, PaletteRole.SECONDARY),
            _entry(dark, PaletteRole.SECONDARY),
        ],
    )


def generate_triadic(base: Color) -> Palette:
    """Base color plus the two hues 120 degrees away on either side."""
    h, s, l = base.hsl
    return _build_palette(
        f"{base.hex} Triadic",
        f"A triadic color scheme based on {base.hex}",
        PaletteTheme.TRIADIC,
        [
            _entry(base, PaletteRole.PRIMARY),
            _entry(Color.from_hsl(h + 120.0, s, l), PaletteRole.SECONDARY),
            _entry(Color.from_hsl(h + 240.0, s, l), PaletteRole.ACCENT),
        ],
    )


# =============================================================================
# Distinct selection
# =============================================================================


def _select_distinct_indices(colors: Sequence[Color], k: int) -> list[int]:
    """
    Greedy max-min selection in OKLab.

    Starts from the darkest color (lowest OKLab L), then repeatedly adds the
    color whose nearest selected color is farthest away. np.argmin/argmax
    return the first extreme, so ties go to the earliest candidate.
    """
    oklab = np.array([c.oklab for c in colors], dtype=np.float64)

    first = int(np.argmin(oklab[:, 0]))
    selected = [first]
    nearest = oklab_distance_batch(oklab, oklab[first])

    while len(selected) < k:
        nearest[selected] = -1.0
        chosen = int(np.argmax(nearest))
        selected.append(chosen)
        nearest = np.minimum(nearest, oklab_distance_batch(oklab, oklab[chosen]))

    return selected


def _unique_sources(candidates: Iterable[Source]) -> list[Source]:
    """First occurrence of each hex; colorless catalog elements are skipped."""
    unique: list[Source] = []
    seen: set[str] = set()
    for source in candidates:
        if isinstance(source, CatalogElement) and source.color is None:
            continue
        hex_value = _source_color(source).hex
        if hex_value not in seen:
            seen.add(hex_value)
            unique.append(source)
    return unique


def select_distinct(candidates: Iterable[Color], k: int) -> list[Color]:
    """
    Choose up to ``k`` mutually distinct colors.

    Duplicates (same hex) are collapsed first. The result is in selection
    order, darkest first.

    Raises:
        ValueError: k < 1
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    unique = _unique_sources(candidates)
    if not unique:
        return []
    indices = _select_distinct_indices(unique, min(k, len(unique)))
    return [unique[i] for i in indices]


def generate_distinct_palette(
    candidates: Iterable[Source],
    k: int,
) -> Palette:
    """
    Palette of up to ``k`` maximally distinct colors or blocks.

    Candidates may mix raw colors and catalog elements; elements without a
    color are ignored.

    Raises:
        ValueError: k < 1
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    unique = _unique_sources(candidates)
    chosen: list[Source] = []
    if unique:
        indices = _select_distinct_indices(
            [_source_color(s) for s in unique], min(k, len(unique))
        )
        chosen = [unique[i] for i in indices]

    return _build_palette(
        "Distinct Colors",
        f"{len(chosen)} maximally distinct colors",
        PaletteTheme.DISTINCT,
        (_entry(source, _positional_role(i, len(chosen))) for i, source in enumerate(chosen)),
    )


# =============================================================================
# Block palettes derived from colors
# =============================================================================


def generate_block_gradient(
    catalog: Catalog,
    start: ElementRef,
    end: ElementRef,
    steps: int,
    method: GradientMethod = GradientMethod.LINEAR_OKLAB,
) -> Palette:
    """
    Gradient between two blocks, with interior steps snapped to real blocks.

    Each interior color is replaced with its nearest colored catalog
    element, or kept as a raw color when the catalog has no colored
    element. Steps that snap to an already used block are dropped, so the
    palette may hold fewer than ``steps`` entries.

    Args:
        catalog: The block catalog
        start: Start block (element or id)
        end: End block (element or id)
        steps: Number of gradient samples (>= 2)
        method: Interpolation method

    Raises:
        NoMatchingElementsError: An id does not resolve
        MissingColorError: An endpoint has no color
        InvalidStepCountError: steps < 2
    """
    first = _require_element(catalog, start)
    last = _require_element(catalog, end)
    colors = interpolate([first.color, last.color], steps, method)

    entries = [_entry(first, PaletteRole.PRIMARY)]
    for color in colors[1:-1]:
        element = find_closest(catalog, color)
        if element is None:
            entries.append(_entry(color, PaletteRole.SECONDARY))
            continue
        # Endpoints keep their own slots and roles
        if element.id in (first.id, last.id):
            continue
        entries.append(_entry(element, PaletteRole.SECONDARY))
    entries.append(_entry(last, PaletteRole.ACCENT))

    name = f"{first.name} to {last.name} Gradient"
    kept = _unique_entries(entries, name)
    return Palette(
        name=name,
        description=(
            f"A smooth gradient from {first.name} to {last.name} "
            f"using {len(kept)} blocks for natural color flow"
        ),
        theme=PaletteTheme.GRADIENT,
        entries=kept,
    )


def snap_to_catalog(palette: Palette, catalog: Catalog) -> Palette:
    """
    Replace every entry with its nearest colored catalog block.

    Roles are kept; usage hints are recomputed. Entries that snap onto a
    block already in the palette are dropped.
    """
    pinned = [entry.element for entry in palette.entries if entry.element is not None]
    return _build_palette(
        palette.name,
        palette.description,
        palette.theme,
        _snap_entries(palette.entries, catalog, pinned),
    )


def generate_block_monochrome(
    catalog: Catalog,
    base: ElementRef,
    count: int,
    config: Optional[PaletteConfig] = None,
) -> Palette:
    """Monochrome ramp around a block, snapped to catalog blocks."""
    element = _require_element(catalog, base)
    ramp = generate_monochrome(element.color, count, config)
    entries = _snap_entries(ramp.entries, catalog, [element])
    return _build_palette(
        f"{element.name} Monochrome",
        f"A monochrome palette based on {element.name} with tonal variations from dark to light",
        PaletteTheme.MONOCHROME,
        entries,
    )


def generate_block_complementary(
    catalog: Catalog,
    base: ElementRef,
    config: Optional[PaletteConfig] = None,
) -> Palette:
    """Complementary scheme around a block, snapped to catalog blocks."""
    element = _require_element(catalog, base)
    scheme = generate_complementary(element.color, config)
    entries = _snap_entries(scheme.entries, catalog, [element])
    return _build_palette(
        f"{element.name} Complementary",
        f"A complementary color scheme based on {element.name} with high contrast blocks",
        PaletteTheme.COMPLEMENTARY,
        entries,
    )


# =============================================================================
# Ordering
# =============================================================================


def sort_by_hue(colors: Iterable[Color]) -> list[Color]:
    """Colors ordered by HSL hue (stable for equal hues)."""
    return sorted(colors, key=lambda c: c.hsl[0])


def sort_by_lightness(colors: Iterable[Color]) -> list[Color]:
    """Colors ordered by HSL lightness, darkest first (stable)."""
    return sorted(colors, key=lambda c: c.hsl[2])
