"""
Layout Module - Layered slot geometry for tile-match levels.

Provides the blocking rule as a selectable-positions collaborator for
the solver.

Usage:
    from tilematch.layout import create_layout
    from tilematch.solver import is_solvable

    layout = create_layout("level1")
    result = is_solvable(board, layout.selectable_positions)
"""

from .slots import TILE_SIZE, Slot, SlotLayout
from .levels import (
    LEVELS,
    build_flat_slots,
    build_level1_slots,
    build_stacked_slots,
    create_layout,
)

__all__ = [
    "TILE_SIZE",
    "Slot",
    "SlotLayout",
    "LEVELS",
    "build_flat_slots",
    "build_level1_slots",
    "build_stacked_slots",
    "create_layout",
]
