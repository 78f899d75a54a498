# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Plain-text palette listing for copying into notes or chat.

Example::

    # Forest Biome
    Natural forest colors with browns, greens, and earth tones

    - Oak Log (#8B7355): Great for frames, floors, and warm architectural elements
    - Grass Block (#7CFC00): Good for supporting elements and medium-scale features
"""

from __future__ import annotations

from blockhue.schema.palette import Palette


def to_text(palette: Palette) -> str:
    """Serialize a palette as a Markdown-ish text list."""
    lines = [f"# {palette.name}", palette.description, ""]
    for entry in palette.entries:
        lines.append(f"- {entry.name} ({entry.hex}): {entry.usage}")
    return "\n".join(lines) + "\n"
