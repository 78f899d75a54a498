# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Palette value types.

A Palette is an ordered, immutable list of entries. Order is meaningful:
the first entries are the dominant, foundation colors of a build. Each entry
points either at a raw Color or at a catalog block, and carries a role and a
free-text usage hint.

Palettes are transient values: generated per call, handed to an exporter or
to the caller, never persisted by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from blockhue.schema.catalog import CatalogElement
from blockhue.schema.color import Color


class PaletteRole(Enum):
    """Suggested usage proportion of an entry in a composition."""
    PRIMARY = "Primary"      # Main building material
    SECONDARY = "Secondary"  # Supporting elements
    ACCENT = "Accent"        # Detail and contrast


class PaletteTheme(Enum):
    """How a palette was derived."""
    MONOCHROME = "Monochrome"
    GRADIENT = "Gradient"
    COMPLEMENTARY = "Complementary"
    TRIADIC = "Triadic"
    NATURAL = "Natural"
    ARCHITECTURAL = "Architectural"
    DISTINCT = "Distinct"


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    """
    One palette slot.

    Attributes:
        source: A raw Color, or a catalog element whose color is used
        role: Primary / Secondary / Accent
        usage: Free-text usage hint
    """
    source: Union[Color, CatalogElement]
    role: PaletteRole = PaletteRole.PRIMARY
    usage: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.source, CatalogElement):
            if self.source.color is None:
                raise ValueError(
                    f"Catalog element '{self.source.id}' has no color and "
                    f"cannot be a palette entry"
                )
        elif not isinstance(self.source, Color):
            raise TypeError(
                f"Palette entry source must be Color or CatalogElement, "
                f"got {type(self.source).__name__}"
            )

    @property
    def color(self) -> Color:
        """The resolved color of this entry."""
        if isinstance(self.source, CatalogElement):
            return self.source.color
        return self.source

    @property
    def element(self) -> Optional[CatalogElement]:
        """The catalog element behind this entry, if any."""
        return self.source if isinstance(self.source, CatalogElement) else None

    @property
    def id(self) -> Optional[str]:
        return self.source.id if isinstance(self.source, CatalogElement) else None

    @property
    def name(self) -> str:
        """Block display name, or the hex string for raw colors."""
        if isinstance(self.source, CatalogElement):
            return self.source.name
        return self.source.hex

    @property
    def hex(self) -> str:
        return self.color.hex

    def to_dict(self) -> dict:
        """Serialize to dictionary (the JSON export entry shape)."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.hex,
            "role": self.role.value,
            "usage": self.usage,
        }


@dataclass(frozen=True, slots=True)
class Palette:
    """
    A named, ordered collection of palette entries.

    Invariant: no two entries resolve to the same hex color.

    Attributes:
        name: Short title, e.g. "Forest Biome"
        description: One-sentence description
        theme: How the palette was derived
        entries: Ordered entries, most dominant first
    """
    name: str
    description: str
    theme: PaletteTheme
    entries: tuple[PaletteEntry, ...] = ()

    def __post_init__(self) -> None:
        """Validate that entries are unique by resolved color."""
        seen: set[str] = set()
        for entry in self.entries:
            if entry.hex in seen:
                raise ValueError(
                    f"Palette '{self.name}' contains {entry.hex} more than once"
                )
            seen.add(entry.hex)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def colors(self) -> tuple[Color, ...]:
        """Resolved colors in entry order."""
        return tuple(entry.color for entry in self.entries)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "theme": self.theme.value,
            "blocks": [entry.to_dict() for entry in self.entries],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        # Import here to avoid circular imports
        from blockhue.export.structured import to_json
        return to_json(self, indent=indent)

    def to_text(self) -> str:
        """Human-readable listing, one line per entry."""
        from blockhue.export.text import to_text
        return to_text(self)

    def to_css(self) -> str:
        """CSS custom-property block."""
        from blockhue.export.stylesheet import to_css
        return to_css(self)

    def to_gpl(self) -> str:
        """GIMP palette document."""
        from blockhue.export.gimp import to_gpl
        return to_gpl(self)

    def to_aco(self) -> bytes:
        """Adobe color swatch bytes."""
        from blockhue.export.adobe import to_aco
        return to_aco(self)
