# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Read-only view of the block catalog.

The catalog itself (block ids, names, measured colors) is produced by an
external build step. The engine only reads it: a Catalog is constructed once
and passed explicitly into every engine call that needs to map colors back
to blocks. Nothing in the engine mutates it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from blockhue.schema.color import Color

logger = logging.getLogger(__name__)

NAMESPACE = "minecraft:"


def display_name(element_id: str) -> str:
    """
    Human-friendly name for a block id.

    "minecraft:dark_oak_planks" -> "Dark Oak Planks"
    """
    bare = element_id[len(NAMESPACE):] if element_id.startswith(NAMESPACE) else element_id
    return " ".join(word[:1].upper() + word[1:] for word in bare.replace("_", " ").split())


@dataclass(frozen=True, slots=True)
class CatalogElement:
    """
    One block in the catalog.

    Attributes:
        id: Block identifier, e.g. "minecraft:oak_log"
        name: Display name (derived from the id when omitted)
        color: Measured surface color, or None if the block was never measured
    """
    id: str
    name: str = ""
    color: Optional[Color] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Catalog element id cannot be empty")
        if not self.name:
            object.__setattr__(self, "name", display_name(self.id))

    @property
    def has_color(self) -> bool:
        return self.color is not None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color.hex if self.color is not None else None,
        }


class Catalog(Mapping):
    """
    Immutable mapping from block id to CatalogElement.

    Iteration order is insertion order, which makes every scan (search,
    nearest-block snapping) deterministic for a given catalog.
    """

    __slots__ = ("_elements",)

    def __init__(self, elements: Iterable[CatalogElement] = ()) -> None:
        table: dict[str, CatalogElement] = {}
        for element in elements:
            if element.id in table:
                raise ValueError(f"Duplicate catalog element id '{element.id}'")
            table[element.id] = element
        self._elements = MappingProxyType(table)

    def __getitem__(self, element_id: str) -> CatalogElement:
        return self._elements[element_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"Catalog({len(self)} elements)"

    def resolve(self, element_id: str) -> Optional[CatalogElement]:
        """
        Look up an element, tolerating a missing or extra "minecraft:" prefix.

        Returns None when no variant of the id is present.
        """
        element = self._elements.get(element_id)
        if element is not None:
            return element
        if element_id.startswith(NAMESPACE):
            return self._elements.get(element_id[len(NAMESPACE):])
        if ":" not in element_id:
            return self._elements.get(NAMESPACE + element_id)
        return None

    def colored(self) -> Iterator[CatalogElement]:
        """Iterate over elements that carry a measured color."""
        return (element for element in self._elements.values() if element.color is not None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping]) -> Catalog:
        """
        Build a catalog from ``{id: {"name": ..., "color": "#RRGGBB" | None}}``.

        Colors may also be given as ``[r, g, b]`` lists.
        """
        elements = []
        for element_id, record in data.items():
            raw = record.get("color")
            if raw is None:
                color = None
            elif isinstance(raw, str):
                color = Color.from_hex(raw)
            else:
                color = Color.from_rgb(*raw)
            elements.append(CatalogElement(id=element_id, name=record.get("name", ""), color=color))
        catalog = cls(elements)
        logger.debug("Loaded catalog with %d elements (%d colored)",
                     len(catalog), sum(1 for _ in catalog.colored()))
        return catalog

    @classmethod
    def from_json(cls, json_str: str) -> Catalog:
        """Build a catalog from the JSON form accepted by from_dict."""
        return cls.from_dict(json.loads(json_str))


# =============================================================================
# Block filtering
# =============================================================================

_FALLING = ("sand", "gravel", "anvil", "concrete_powder")

_TILE_ENTITIES = (
    "chest", "furnace", "dispenser", "dropper", "hopper", "beacon",
    "brewing_stand", "enchanting_table", "shulker_box", "barrel", "smoker",
    "campfire", "lectern", "jukebox",
)

_PARTIAL = (
    "slab", "stairs", "fence", "gate", "wall", "door", "button",
    "pressure_plate", "carpet", "torch", "lantern", "chain", "rod", "bars",
)

_NEEDS_SUPPORT = (
    "torch", "flower", "fern", "sapling", "wheat", "carrot", "potato",
    "beetroot", "sugar_cane", "cactus", "bamboo", "vine", "lily_pad",
    "seagrass", "kelp", "button", "lever", "sign", "banner", "painting",
)

_TRANSPARENT = (
    "glass", "water", "lava", "air", "ice", "slime_block", "honey_block",
    "barrier", "structure_void",
)

_LIGHT_SOURCES = (
    "torch", "lantern", "glowstone", "beacon", "campfire", "fire", "lava",
    "magma_block", "redstone_lamp", "shroomlight", "crying_obsidian",
    "respawn_anchor", "candle", "glow_lichen", "amethyst_cluster",
)

_CREATIVE_ONLY = (
    "barrier", "structure_void", "structure_block", "command_block",
    "jigsaw", "debug_stick", "knowledge_book", "spawn_egg",
)

_SHAPE_PATTERNS = (
    "_slab", "_stairs", "_fence", "_gate", "_wall", "_button",
    "_pressure_plate", "_door", "_trapdoor",
)


def _contains_any(block_id: str, needles: tuple[str, ...]) -> bool:
    return any(needle in block_id for needle in needles)


def _needs_support(block_id: str) -> bool:
    if _contains_any(block_id, _NEEDS_SUPPORT):
        return True
    # grass/mushroom/coral plants, but not their full-block forms
    if "grass" in block_id and "grass_block" not in block_id:
        return True
    if "mushroom" in block_id and "mushroom_block" not in block_id:
        return True
    return "coral" in block_id and "coral_block" not in block_id


@dataclass(frozen=True)
class BlockFilter:
    """
    Id-based block selection rules.

    The rules work on block ids only, so they apply to any catalog. The
    default filter allows everything.

    include_patterns, when non-empty, restricts the selection to ids that
    contain at least one pattern; exclude_patterns then removes matches.
    """
    exclude_falling: bool = False
    exclude_tile_entities: bool = False
    full_blocks_only: bool = False
    exclude_needs_support: bool = False
    exclude_transparent: bool = False
    exclude_light_sources: bool = False
    survival_obtainable_only: bool = False
    exclude_patterns: tuple[str, ...] = field(default_factory=tuple)
    include_patterns: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def solid_blocks_only(cls) -> BlockFilter:
        """Full, solid, survival-obtainable building blocks."""
        return cls(
            exclude_falling=True,
            exclude_tile_entities=True,
            full_blocks_only=True,
            exclude_needs_support=True,
            exclude_transparent=True,
            survival_obtainable_only=True,
            exclude_patterns=_SHAPE_PATTERNS,
        )

    @classmethod
    def decorative_blocks(cls) -> BlockFilter:
        """Looser selection that keeps partial and transparent blocks."""
        return cls(
            exclude_falling=True,
            exclude_tile_entities=True,
            survival_obtainable_only=True,
        )

    @classmethod
    def structural_blocks_only(cls) -> BlockFilter:
        """Very conservative: solid, opaque, non-emissive blocks."""
        return cls(
            exclude_falling=True,
            exclude_tile_entities=True,
            full_blocks_only=True,
            exclude_needs_support=True,
            exclude_transparent=True,
            exclude_light_sources=True,
            survival_obtainable_only=True,
            exclude_patterns=_SHAPE_PATTERNS + ("glass", "water", "lava", "air"),
        )

    def allows(self, element: CatalogElement) -> bool:
        """True if the element passes every enabled rule."""
        block_id = element.id.lower()

        if self.include_patterns and not any(
            p.lower() in block_id for p in self.include_patterns
        ):
            return False
        if any(p.lower() in block_id for p in self.exclude_patterns):
            return False

        checks = (
            (self.exclude_falling, _contains_any(block_id, _FALLING)),
            (self.exclude_tile_entities, _contains_any(block_id, _TILE_ENTITIES)),
            (self.full_blocks_only, _contains_any(block_id, _PARTIAL)),
            (self.exclude_needs_support, _needs_support(block_id)),
            (self.exclude_transparent, _contains_any(block_id, _TRANSPARENT)),
            (self.exclude_light_sources, _contains_any(block_id, _LIGHT_SOURCES)),
            (self.survival_obtainable_only, _contains_any(block_id, _CREATIVE_ONLY)),
        )
        return not any(enabled and hit for enabled, hit in checks)
