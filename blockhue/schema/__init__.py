# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Value types for the palette engine.

All types in this module are immutable. Colors, catalog elements and
palettes are created fresh per call and never mutated afterwards.
"""

from blockhue.schema.color import Color, distance_oklab
from blockhue.schema.catalog import (
    BlockFilter,
    Catalog,
    CatalogElement,
    display_name,
)
from blockhue.schema.palette import (
    Palette,
    PaletteEntry,
    PaletteRole,
    PaletteTheme,
)

__all__ = [
    # Color model
    "Color",
    "distance_oklab",
    # Catalog (read-only, external data)
    "Catalog",
    "CatalogElement",
    "BlockFilter",
    "display_name",
    # Palettes
    "Palette",
    "PaletteEntry",
    "PaletteRole",
    "PaletteTheme",
]
