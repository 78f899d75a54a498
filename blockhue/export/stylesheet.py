# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""CSS custom-property export."""

from __future__ import annotations

from blockhue.schema.palette import Palette


def to_css(palette: Palette) -> str:
    """Serialize a palette as a ``:root`` block of ``--color-N`` properties.

    Numbering starts at 1 and follows entry order.
    """
    lines = [":root {"]
    for index, entry in enumerate(palette.entries, start=1):
        lines.append(f"  --color-{index}: {entry.hex};")
    lines.append("}")
    return "\n".join(lines) + "\n"
