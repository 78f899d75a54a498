# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""GIMP palette (.gpl) export."""

from __future__ import annotations

from blockhue.schema.palette import Palette


def to_gpl(palette: Palette) -> str:
    """Serialize a palette as a GIMP palette document.

    Rows are ``RRR GGG BBB name`` with channels right-aligned to width 3.
    """
    lines = [
        "GIMP Palette",
        f"Name: {palette.name}",
        "Columns: 0",
        "#",
    ]
    for entry in palette.entries:
        r, g, b = entry.color.rgb
        lines.append(f"{r:3d} {g:3d} {b:3d} {entry.name}")
    return "\n".join(lines) + "\n"
