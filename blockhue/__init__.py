# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Blockhue -- Color and palette engine for block-game catalogs.

Represents colors in RGB, HSL, OKLab and CIE Lab, extracts representative
colors from textures, searches a block catalog by perceptual distance, and
synthesizes palettes that export to text, JSON, CSS, GIMP and Adobe formats.

Quick start::

    from blockhue import Catalog, Color, generate_natural_palette

    catalog = Catalog.from_json(open("blocks.json").read())
    palette = generate_natural_palette(catalog, "forest")
    palette.to_text()   # Human-readable list
    palette.to_css()    # :root { --color-1: ...; }
    palette.to_aco()    # Adobe swatch bytes
"""

from __future__ import annotations

__version__ = "1.0.0"

from blockhue.color.extract import ExtractionConfig, ExtractionMethod, extract_color
from blockhue.color.gradient import GradientMethod, interpolate
from blockhue.color.similarity import find_by_color_range, find_closest, rank_by_color_range
from blockhue.errors import (
    BlockhueError,
    EmptyInputError,
    InvalidStepCountError,
    InvalidStopsError,
    MissingColorError,
    NoMatchingElementsError,
    UnknownThemeError,
)
from blockhue.export import ExportFormat, export_palette
from blockhue.palettes import (
    generate_architectural_palette,
    generate_block_gradient,
    generate_complementary,
    generate_distinct_palette,
    generate_monochrome,
    generate_natural_palette,
    generate_themed_palette,
    select_distinct,
)
from blockhue.schema import (
    BlockFilter,
    Catalog,
    CatalogElement,
    Color,
    Palette,
    PaletteEntry,
    PaletteRole,
    PaletteTheme,
    distance_oklab,
)

__all__ = [
    # Core types
    "Color",
    "Catalog",
    "CatalogElement",
    "BlockFilter",
    "Palette",
    "PaletteEntry",
    "PaletteRole",
    "PaletteTheme",
    # Color operations
    "distance_oklab",
    "extract_color",
    "ExtractionMethod",
    "ExtractionConfig",
    "interpolate",
    "GradientMethod",
    "find_by_color_range",
    "find_closest",
    "rank_by_color_range",
    # Palette synthesis
    "generate_themed_palette",
    "generate_natural_palette",
    "generate_architectural_palette",
    "generate_monochrome",
    "generate_complementary",
    "generate_distinct_palette",
    "select_distinct",
    "generate_block_gradient",
    # Export
    "ExportFormat",
    "export_palette",
    # Errors
    "BlockhueError",
    "InvalidStepCountError",
    "InvalidStopsError",
    "EmptyInputError",
    "UnknownThemeError",
    "NoMatchingElementsError",
    "MissingColorError",
    # Version
    "__version__",
]
