# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""Tests for palette exporters."""

import json
import struct

import pytest

from blockhue.export import ExportFormat, export_palette, to_aco, to_css, to_gpl, to_json, to_text
from blockhue.schema.catalog import CatalogElement
from blockhue.schema.color import Color
from blockhue.schema.palette import Palette, PaletteEntry, PaletteRole, PaletteTheme


RED = Color.from_hex("#FF0000")
BLUE = Color.from_hex("#0000FF")


def _palette(*entries, name="Test"):
    return Palette(
        name=name,
        description="A test palette",
        theme=PaletteTheme.GRADIENT,
        entries=tuple(entries),
    )


@pytest.fixture
def red_blue():
    return _palette(
        PaletteEntry(RED, PaletteRole.PRIMARY),
        PaletteEntry(BLUE, PaletteRole.SECONDARY),
    )


@pytest.fixture
def forest():
    oak = CatalogElement(id="minecraft:oak_log", color=Color.from_hex("#8B7355"))
    grass = CatalogElement(id="minecraft:grass_block", color=Color.from_hex("#7CFC00"))
    return Palette(
        name="Forest Biome",
        description="Natural forest colors with browns, greens, and earth tones",
        theme=PaletteTheme.NATURAL,
        entries=(
            PaletteEntry(oak, PaletteRole.PRIMARY, "Frames"),
            PaletteEntry(grass, PaletteRole.SECONDARY, "Ground cover"),
        ),
    )


class TestCSS:

    def test_two_entries(self, red_blue):
        assert to_css(red_blue) == ":root {\n  --color-1: #FF0000;\n  --color-2: #0000FF;\n}\n"

    def test_empty(self):
        assert to_css(_palette()) == ":root {\n}\n"


class TestGPL:

    def test_document(self, forest):
        assert to_gpl(forest) == (
            "GIMP Palette\n"
            "Name: Forest Biome\n"
            "Columns: 0\n"
            "#\n"
            "139 115  85 Oak Log\n"
            "124 252   0 Grass Block\n"
        )

    def test_empty(self):
        assert to_gpl(_palette(name="Empty")) == "GIMP Palette\nName: Empty\nColumns: 0\n#\n"


class TestText:

    def test_listing(self, forest):
        assert to_text(forest) == (
            "# Forest Biome\n"
            "Natural forest colors with browns, greens, and earth tones\n"
            "\n"
            "- Oak Log (#8B7355): Frames\n"
            "- Grass Block (#7CFC00): Ground cover\n"
        )

    def test_empty(self):
        assert to_text(_palette()) == "# Test\nA test palette\n\n"


class TestJSON:

    def test_document(self, forest):
        data = json.loads(to_json(forest))
        assert data["name"] == "Forest Biome"
        assert data["theme"] == "Natural"
        assert data["blocks"][0] == {
            "id": "minecraft:oak_log",
            "name": "Oak Log",
            "color": "#8B7355",
            "role": "Primary",
            "usage": "Frames",
        }

    def test_raw_color_has_null_id(self, red_blue):
        data = json.loads(to_json(red_blue))
        assert data["blocks"][1]["id"] is None
        assert data["blocks"][1]["color"] == "#0000FF"

    def test_palette_method(self, forest):
        assert forest.to_json() == to_json(forest)

    def test_compact(self, red_blue):
        assert "\n" not in to_json(red_blue, indent=None)


class TestACO:

    def test_layout(self, red_blue):
        data = to_aco(red_blue)
        assert len(data) == 88

        version, count = struct.unpack_from(">2H", data, 0)
        assert (version, count) == (1, 2)
        assert struct.unpack_from(">5H", data, 4) == (0, 0xFFFF, 0, 0, 0)
        assert struct.unpack_from(">5H", data, 14) == (0, 0, 0, 0xFFFF, 0)

        version, count = struct.unpack_from(">2H", data, 24)
        assert (version, count) == (2, 2)
        assert struct.unpack_from(">5H", data, 28) == (0, 0xFFFF, 0, 0, 0)
        (units,) = struct.unpack_from(">I", data, 38)
        assert units == 8
        assert data[42:56].decode("utf-16-be") == "#FF0000"
        assert data[56:58] == b"\x00\x00"

    def test_channel_widening(self):
        data = to_aco(_palette(PaletteEntry(Color.from_rgb(1, 128, 254))))
        assert struct.unpack_from(">5H", data, 4) == (0, 257, 128 * 257, 254 * 257, 0)

    def test_empty(self):
        assert to_aco(_palette()) == b"\x00\x01\x00\x00\x00\x02\x00\x00"


class TestDispatch:

    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_every_format_total(self, fmt, forest):
        result = export_palette(forest, fmt)
        assert isinstance(result, bytes if fmt.is_binary else str)
        assert export_palette(_palette(), fmt)

    def test_matches_direct_call(self, red_blue):
        assert export_palette(red_blue, ExportFormat.CSS) == to_css(red_blue)

    def test_unknown_format(self, red_blue):
        with pytest.raises(ValueError):
            export_palette(red_blue, "css")

    def test_extensions(self):
        assert ExportFormat.TEXT.extension == "txt"
        assert ExportFormat.GPL.extension == "gpl"
        assert ExportFormat.ACO.is_binary
        assert not ExportFormat.JSON.is_binary
