# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Adobe Color Swatch (.aco) export.

Layout (all integers big-endian):

    version 1 section
        u16 version = 1
        u16 count
        count x (u16 space = 0 (RGB), u16 r, u16 g, u16 b, u16 0)
    version 2 section
        u16 version = 2
        u16 count
        count x (same 10-byte color record,
                 u32 name length in UTF-16 code units including the NUL,
                 UTF-16BE name, u16 NUL)

8-bit channels are widened to 16 bits by multiplying with 257, so 0xFF
becomes 0xFFFF.
"""

from __future__ import annotations

import struct

from blockhue.schema.palette import Palette

_RGB_SPACE = 0


def _color_record(rgb: tuple[int, int, int]) -> bytes:
    r, g, b = rgb
    return struct.pack(">5H", _RGB_SPACE, r * 257, g * 257, b * 257, 0)


def _name_record(name: str) -> bytes:
    encoded = name.encode("utf-16-be")
    units = len(encoded) // 2 + 1
    return struct.pack(">I", units) + encoded + b"\x00\x00"


def to_aco(palette: Palette) -> bytes:
    """Serialize a palette as ACO bytes (version 1 and version 2 sections)."""
    count = len(palette.entries)
    parts = [struct.pack(">2H", 1, count)]
    parts.extend(_color_record(entry.color.rgb) for entry in palette.entries)

    parts.append(struct.pack(">2H", 2, count))
    for entry in palette.entries:
        parts.append(_color_record(entry.color.rgb))
        parts.append(_name_record(entry.name))

    return b"".join(parts)
