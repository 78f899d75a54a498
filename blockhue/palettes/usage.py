# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""Usage hints for catalog-backed palette entries."""

from __future__ import annotations

from enum import Enum

from blockhue.schema.catalog import CatalogElement
from blockhue.schema.palette import PaletteRole


class Material(Enum):
    """Coarse material category, guessed from the block id."""
    STONE = "stone"
    WOOD = "wood"
    CONCRETE = "concrete"
    FABRIC = "fabric"
    GLASS = "glass"
    METAL = "metal"
    OTHER = "other"


# First match wins
_MATERIAL_KEYWORDS: tuple[tuple[Material, tuple[str, ...]], ...] = (
    (Material.STONE, ("stone", "cobblestone", "brick")),
    (Material.WOOD, ("wood", "plank", "log")),
    (Material.CONCRETE, ("concrete", "terracotta")),
    (Material.FABRIC, ("wool", "carpet")),
    (Material.GLASS, ("glass",)),
    (Material.METAL, ("metal", "iron", "gold")),
)

_NOTES: dict[tuple[PaletteRole, Material], str] = {
    (PaletteRole.PRIMARY, Material.STONE):
        "Excellent for foundations, walls, and main structures",
    (PaletteRole.PRIMARY, Material.WOOD):
        "Great for frames, floors, and warm architectural elements",
    (PaletteRole.PRIMARY, Material.CONCRETE):
        "Perfect for modern builds and large surfaces",
    (PaletteRole.SECONDARY, Material.STONE):
        "Use for detailing, trim, and structural accents",
    (PaletteRole.SECONDARY, Material.WOOD):
        "Ideal for stairs, slabs, and secondary features",
}

_SECONDARY_NOTE = "Good for supporting elements and medium-scale features"
_ACCENT_NOTE = "Use sparingly for highlights, borders, and eye-catching details"
_DEFAULT_NOTE = "Versatile block suitable for various building applications"


def categorize(element: CatalogElement) -> Material:
    """Material category of a block, by id keywords."""
    block_id = element.id.lower()
    for material, keywords in _MATERIAL_KEYWORDS:
        if any(keyword in block_id for keyword in keywords):
            return material
    return Material.OTHER


def usage_note(element: CatalogElement, role: PaletteRole) -> str:
    """One-line building hint for a block in the given role."""
    if role == PaletteRole.ACCENT:
        return _ACCENT_NOTE

    note = _NOTES.get((role, categorize(element)))
    if note is not None:
        return note
    if role == PaletteRole.SECONDARY:
        return _SECONDARY_NOTE
    return _DEFAULT_NOTE
