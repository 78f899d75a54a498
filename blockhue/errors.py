# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Error kinds raised by the palette engine.

Every error is recoverable. Callers decide whether to retry with different
parameters, fall back to another theme, or surface the failure.

Each error also derives from the builtin the engine would otherwise raise
(``ValueError`` / ``KeyError``), so ``except ValueError`` keeps working.
"""

from __future__ import annotations


class BlockhueError(Exception):
    """Base class for all engine errors."""


class InvalidStepCountError(BlockhueError, ValueError):
    """A gradient or palette was requested with fewer than 2 steps."""

    def __init__(self, steps: int) -> None:
        super().__init__(f"Gradient needs at least 2 steps, got {steps}")
        self.steps = steps


class InvalidStopsError(BlockhueError, ValueError):
    """A gradient was requested with fewer than 2 color stops."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Gradient needs at least 2 stops, got {count}")
        self.count = count


class EmptyInputError(BlockhueError, ValueError):
    """Color extraction found no eligible pixels."""


class UnknownThemeError(BlockhueError, KeyError):
    """A theme, biome or style name is not in the internal tables."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        if self.known:
            return f"Unknown theme '{self.name}' (known: {', '.join(self.known)})"
        return f"Unknown theme '{self.name}'"


class NoMatchingElementsError(BlockhueError, ValueError):
    """A recognised theme resolved to zero colored catalog elements."""


class MissingColorError(BlockhueError, ValueError):
    """A catalog element needed as a color source carries no color."""

    def __init__(self, element_id: str) -> None:
        super().__init__(f"Catalog element '{element_id}' has no color")
        self.element_id = element_id
