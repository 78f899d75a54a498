# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""JSON palette document for programmatic consumers."""

from __future__ import annotations

import json
from typing import Optional

from blockhue.schema.palette import Palette


def to_json(palette: Palette, *, indent: Optional[int] = 2) -> str:
    """Serialize a palette as JSON.

    Shape::

        {
          "name": "Forest Biome",
          "description": "...",
          "theme": "Natural",
          "blocks": [
            {"id": "minecraft:oak_log", "name": "Oak Log", "color": "#8B7355",
             "role": "Primary", "usage": "..."}
          ]
        }

    ``id`` is null for entries that are raw colors rather than blocks.
    """
    return json.dumps(palette.to_dict(), indent=indent)
