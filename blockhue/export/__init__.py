# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Palette exporters.

Each exporter is total: any valid Palette, including an empty one, yields a
valid document. Text formats return ``str``; ACO returns ``bytes``.
"""

from __future__ import annotations

from typing import Union

from blockhue.export.adobe import to_aco
from blockhue.export.base import ExportFormat
from blockhue.export.gimp import to_gpl
from blockhue.export.structured import to_json
from blockhue.export.stylesheet import to_css
from blockhue.export.text import to_text
from blockhue.schema.palette import Palette

_EXPORTERS = {
    ExportFormat.TEXT: to_text,
    ExportFormat.JSON: to_json,
    ExportFormat.CSS: to_css,
    ExportFormat.GPL: to_gpl,
    ExportFormat.ACO: to_aco,
}


def export_palette(palette: Palette, format: ExportFormat) -> Union[str, bytes]:
    """Serialize ``palette`` in the requested format."""
    try:
        exporter = _EXPORTERS[format]
    except KeyError:
        raise ValueError(f"Unknown export format: {format!r}") from None
    return exporter(palette)


__all__ = [
    "ExportFormat",
    "export_palette",
    "to_text",
    "to_json",
    "to_css",
    "to_gpl",
    "to_aco",
]
