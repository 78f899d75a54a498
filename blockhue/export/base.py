# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""Base types for palette exporters."""

from enum import Enum


class ExportFormat(Enum):
    """Output format for exporters."""

    TEXT = "text"
    JSON = "json"
    CSS = "css"
    GPL = "gpl"
    ACO = "aco"

    @property
    def is_binary(self) -> bool:
        return self is ExportFormat.ACO

    @property
    def extension(self) -> str:
        """Conventional file extension, without the dot."""
        return "txt" if self is ExportFormat.TEXT else self.value
