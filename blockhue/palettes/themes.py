# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Static theme tables.

Three kinds of named themes:

- Gradient themes: a list of anchor colors run through interpolate()
- Natural themes (biomes): a list of block ids typical of that biome
- Architectural styles: a list of block ids typical of that style

Tables are read-only module constants. Lookups are case-insensitive and
go through the lookup_* helpers, which raise UnknownThemeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from blockhue.color.gradient import GradientMethod
from blockhue.errors import UnknownThemeError
from blockhue.schema.color import Color
from blockhue.schema.palette import PaletteRole


@dataclass(frozen=True)
class GradientTheme:
    """Anchor colors for a named multi-stop gradient."""
    title: str
    description: str
    anchors: tuple[tuple[int, int, int], ...]
    method: GradientMethod = GradientMethod.LINEAR_OKLAB

    def stops(self) -> list[Color]:
        return [Color.from_rgb(*rgb) for rgb in self.anchors]


@dataclass(frozen=True)
class BlockTheme:
    """
    A curated list of block ids.

    Roles follow list position: the first block is Primary, the last is
    Accent, everything in between is Secondary.
    """
    title: str
    description: str
    block_ids: tuple[str, ...]

    def role_at(self, index: int) -> PaletteRole:
        if index == 0:
            return PaletteRole.PRIMARY
        if index == len(self.block_ids) - 1:
            return PaletteRole.ACCENT
        return PaletteRole.SECONDARY


# =============================================================================
# Gradient themes
# =============================================================================

GRADIENT_THEMES: Mapping[str, GradientTheme] = MappingProxyType({
    "sunset": GradientTheme(
        title="Sunset Gradient",
        description="Warm evening sky from coral red through gold to midnight blue",
        anchors=(
            (255, 94, 77),    # Red
            (255, 154, 0),    # Orange
            (255, 206, 84),   # Yellow
            (163, 94, 195),   # Purple
            (25, 25, 112),    # Midnight blue
        ),
    ),
    "ocean": GradientTheme(
        title="Ocean Gradient",
        description="Ocean depths from sunlit shallows down to the abyss",
        anchors=(
            (135, 206, 235),  # Light blue
            (0, 119, 190),    # Medium blue
            (0, 82, 164),     # Dark blue
            (0, 39, 77),      # Deep blue
            (0, 20, 40),      # Abyss
        ),
    ),
    "forest": GradientTheme(
        title="Forest Gradient",
        description="Canopy greens fading into the forest floor",
        anchors=(
            (173, 255, 47),   # Light green
            (50, 205, 50),    # Lime green
            (34, 139, 34),    # Forest green
            (0, 100, 0),      # Dark green
            (25, 25, 25),     # Almost black
        ),
    ),
    "fire": GradientTheme(
        title="Fire Gradient",
        description="Flame colors from bright yellow to deep ember red",
        anchors=(
            (255, 255, 0),    # Yellow
            (255, 165, 0),    # Orange
            (255, 69, 0),     # Red-orange
            (220, 20, 60),    # Crimson
            (139, 0, 0),      # Dark red
        ),
        method=GradientMethod.LINEAR_RGB,
    ),
})


# =============================================================================
# Natural themes (biomes)
# =============================================================================

NATURAL_THEMES: Mapping[str, BlockTheme] = MappingProxyType({
    "forest": BlockTheme(
        title="Forest Biome",
        description="Natural forest colors with browns, greens, and earth tones",
        block_ids=(
            "minecraft:oak_log",
            "minecraft:oak_leaves",
            "minecraft:grass_block",
            "minecraft:coarse_dirt",
            "minecraft:moss_block",
            "minecraft:fern",
        ),
    ),
    "desert": BlockTheme(
        title="Desert Biome",
        description="Warm sandy colors and sun-baked earth tones",
        block_ids=(
            "minecraft:sand",
            "minecraft:sandstone",
            "minecraft:smooth_sandstone",
            "minecraft:cut_sandstone",
            "minecraft:red_sand",
            "minecraft:terracotta",
        ),
    ),
    "ocean": BlockTheme(
        title="Ocean Biome",
        description="Cool blues and aquatic colors for underwater builds",
        block_ids=(
            "minecraft:water",
            "minecraft:prismarine",
            "minecraft:dark_prismarine",
            "minecraft:sea_lantern",
            "minecraft:kelp",
            "minecraft:sand",
        ),
    ),
    "mountain": BlockTheme(
        title="Mountain Biome",
        description="Rocky grays and mineral tones for mountainous terrain",
        block_ids=(
            "minecraft:stone",
            "minecraft:cobblestone",
            "minecraft:andesite",
            "minecraft:granite",
            "minecraft:diorite",
            "minecraft:gravel",
        ),
    ),
    "nether": BlockTheme(
        title="Nether Dimension",
        description="Dark reds, blacks, and otherworldly colors",
        block_ids=(
            "minecraft:netherrack",
            "minecraft:nether_bricks",
            "minecraft:blackstone",
            "minecraft:crimson_planks",
            "minecraft:warped_planks",
            "minecraft:soul_sand",
        ),
    ),
    "end": BlockTheme(
        title="End Dimension",
        description="Pale yellows, purples, and ethereal tones",
        block_ids=(
            "minecraft:end_stone",
            "minecraft:purpur_block",
            "minecraft:end_stone_bricks",
            "minecraft:obsidian",
            "minecraft:chorus_flower",
            "minecraft:chorus_plant",
        ),
    ),
})

NATURAL_ALIASES: Mapping[str, str] = MappingProxyType({
    "woods": "forest",
    "sand": "desert",
    "water": "ocean",
    "stone": "mountain",
})


# =============================================================================
# Architectural styles
# =============================================================================

ARCHITECTURAL_STYLES: Mapping[str, BlockTheme] = MappingProxyType({
    "medieval": BlockTheme(
        title="Medieval Architecture",
        description="Traditional building materials for castles and medieval structures",
        block_ids=(
            "minecraft:cobblestone",
            "minecraft:oak_planks",
            "minecraft:stone_bricks",
            "minecraft:dark_oak_planks",
            "minecraft:mossy_cobblestone",
            "minecraft:oak_log",
        ),
    ),
    "modern": BlockTheme(
        title="Modern Architecture",
        description="Clean lines and contemporary materials for modern builds",
        block_ids=(
            "minecraft:white_concrete",
            "minecraft:light_gray_concrete",
            "minecraft:glass",
            "minecraft:iron_block",
            "minecraft:quartz_block",
            "minecraft:black_concrete",
        ),
    ),
    "rustic": BlockTheme(
        title="Rustic Style",
        description="Natural materials for farmhouses and country builds",
        block_ids=(
            "minecraft:stripped_oak_log",
            "minecraft:cobblestone",
            "minecraft:coarse_dirt",
            "minecraft:hay_bale",
            "minecraft:oak_fence",
            "minecraft:stone",
        ),
    ),
    "industrial": BlockTheme(
        title="Industrial Style",
        description="Metallic and mechanical blocks for factories and tech builds",
        block_ids=(
            "minecraft:iron_block",
            "minecraft:gray_concrete",
            "minecraft:observer",
            "minecraft:anvil",
            "minecraft:cauldron",
            "minecraft:redstone_block",
        ),
    ),
})


# =============================================================================
# Lookup
# =============================================================================


def lookup_gradient(name: str) -> GradientTheme:
    """Gradient theme by name (case-insensitive)."""
    theme = GRADIENT_THEMES.get(name.strip().lower())
    if theme is None:
        raise UnknownThemeError(name, tuple(GRADIENT_THEMES))
    return theme


def lookup_natural(name: str) -> BlockTheme:
    """Biome by name or alias (case-insensitive)."""
    key = name.strip().lower()
    theme = NATURAL_THEMES.get(NATURAL_ALIASES.get(key, key))
    if theme is None:
        raise UnknownThemeError(name, tuple(NATURAL_THEMES))
    return theme


def lookup_architectural(name: str) -> BlockTheme:
    """Building style by name (case-insensitive)."""
    theme = ARCHITECTURAL_STYLES.get(name.strip().lower())
    if theme is None:
        raise UnknownThemeError(name, tuple(ARCHITECTURAL_STYLES))
    return theme
