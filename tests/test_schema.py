# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""Tests for palette value types."""

import pytest

from blockhue.schema.catalog import CatalogElement
from blockhue.schema.color import Color
from blockhue.schema.palette import Palette, PaletteEntry, PaletteRole, PaletteTheme


RED = Color.from_hex("#FF0000")
OAK = CatalogElement(id="minecraft:oak_log", color=Color.from_hex("#8B7355"))


class TestPaletteEntry:

    def test_raw_color(self):
        entry = PaletteEntry(RED, PaletteRole.ACCENT)
        assert entry.color == RED
        assert entry.element is None
        assert entry.id is None
        assert entry.name == "#FF0000"
        assert entry.usage == ""

    def test_catalog_element(self):
        entry = PaletteEntry(OAK, PaletteRole.PRIMARY, "Frames")
        assert entry.color.hex == "#8B7355"
        assert entry.element is OAK
        assert entry.id == "minecraft:oak_log"
        assert entry.name == "Oak Log"

    def test_default_role(self):
        assert PaletteEntry(RED).role == PaletteRole.PRIMARY

    def test_colorless_element_rejected(self):
        with pytest.raises(ValueError, match="no color"):
            PaletteEntry(CatalogElement(id="minecraft:air"))

    def test_wrong_source_type(self):
        with pytest.raises(TypeError):
            PaletteEntry("#FF0000")

    def test_to_dict(self):
        entry = PaletteEntry(OAK, PaletteRole.SECONDARY, "Stairs")
        assert entry.to_dict() == {
            "id": "minecraft:oak_log",
            "name": "Oak Log",
            "color": "#8B7355",
            "role": "Secondary",
            "usage": "Stairs",
        }

    def test_frozen(self):
        entry = PaletteEntry(RED)
        with pytest.raises(AttributeError):
            entry.role = PaletteRole.ACCENT


class TestPalette:

    def _palette(self, *entries):
        return Palette(
            name="Test",
            description="A test palette",
            theme=PaletteTheme.GRADIENT,
            entries=tuple(entries),
        )

    def test_empty(self):
        palette = self._palette()
        assert len(palette) == 0
        assert palette.colors == ()

    def test_colors_in_order(self):
        palette = self._palette(PaletteEntry(OAK), PaletteEntry(RED))
        assert [c.hex for c in palette.colors] == ["#8B7355", "#FF0000"]

    def test_duplicate_hex_rejected(self):
        same_as_red = CatalogElement(id="minecraft:red_wool", color=Color.from_rgb(255, 0, 0))
        with pytest.raises(ValueError, match="more than once"):
            self._palette(PaletteEntry(RED), PaletteEntry(same_as_red))

    def test_to_dict(self):
        palette = self._palette(PaletteEntry(RED, PaletteRole.ACCENT))
        assert palette.to_dict() == {
            "name": "Test",
            "description": "A test palette",
            "theme": "Gradient",
            "blocks": [
                {"id": None, "name": "#FF0000", "color": "#FF0000", "role": "Accent", "usage": ""},
            ],
        }

    def test_frozen(self):
        palette = self._palette()
        with pytest.raises(AttributeError):
            palette.name = "Other"

    def test_role_values(self):
        assert [r.value for r in PaletteRole] == ["Primary", "Secondary", "Accent"]
