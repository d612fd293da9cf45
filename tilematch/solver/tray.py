"""
Tray Module - Staging-area rule that auto-clears triples of a piece type.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

# Maximum pieces the tray may hold once resolution has run
TRAY_CAPACITY = 7

# Pieces of one type removed together by a clear
MATCH_SIZE = 3


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of resolving a tray.

    Attributes:
        tray: Tray left after every qualifying triple was removed
        cleared_count: Number of pieces removed (multiple of 3)
        cleared_types: Piece type removed on each pass, in pass order
    """
    tray: Tuple[int, ...]
    cleared_count: int
    cleared_types: Tuple[int, ...]


def resolve_tray(tray: Sequence[int]) -> ResolutionResult:
    """
    Repeatedly clear the earliest three occurrences of a qualifying type.

    A type qualifies when it occurs at least three times anywhere in the
    tray; adjacency does not matter. When several types qualify on the
    same pass, the smallest piece-type id is cleared first, then counts
    are taken again.

    Args:
        tray: Piece types in insertion order

    Returns:
        ResolutionResult with the remaining tray and what was cleared
    """
    remaining: List[int] = list(tray)
    cleared_types: List[int] = []

    while True:
        positions: Dict[int, List[int]] = {}
        for index, piece in enumerate(remaining):
            positions.setdefault(piece, []).append(index)

        qualifying = [piece for piece in sorted(positions)
                      if len(positions[piece]) >= MATCH_SIZE]
        if not qualifying:
            break

        piece = qualifying[0]
        drop = set(positions[piece][:MATCH_SIZE])
        remaining = [p for i, p in enumerate(remaining) if i not in drop]
        cleared_types.append(piece)

    return ResolutionResult(
        tray=tuple(remaining),
        cleared_count=MATCH_SIZE * len(cleared_types),
        cleared_types=tuple(cleared_types),
    )


def is_overflowing(tray: Sequence[int]) -> bool:
    """True when a resolved tray holds more pieces than the tray capacity."""
    return len(tray) > TRAY_CAPACITY
