# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Palette synthesis for Blockhue.

Turns colors, named themes and catalog blocks into Palettes.
All operations are deterministic and never touch global state.
"""

from blockhue.palettes.generator import (
    PaletteConfig,
    architectural_styles,
    generate_architectural_palette,
    generate_block_complementary,
    generate_block_gradient,
    generate_block_monochrome,
    generate_complementary,
    generate_distinct_palette,
    generate_monochrome,
    generate_natural_palette,
    generate_themed_palette,
    generate_triadic,
    gradient_themes,
    natural_themes,
    select_distinct,
    snap_to_catalog,
    sort_by_hue,
    sort_by_lightness,
)

__all__ = [
    "PaletteConfig",
    "generate_themed_palette",
    "generate_natural_palette",
    "generate_architectural_palette",
    "generate_monochrome",
    "generate_complementary",
    "generate_triadic",
    "generate_distinct_palette",
    "select_distinct",
    "generate_block_gradient",
    "generate_block_monochrome",
    "generate_block_complementary",
    "snap_to_catalog",
    "sort_by_hue",
    "sort_by_lightness",
    "gradient_themes",
    "natural_themes",
    "architectural_styles",
]
