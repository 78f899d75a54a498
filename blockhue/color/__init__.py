# Copyright (c) 2026 Blockhue
# SPDX-License-Identifier: MIT

"""
Color primitives: conversions, extraction, search and gradients.

Import submodules directly, e.g. ``from blockhue.color.gradient import interpolate``.
"""
