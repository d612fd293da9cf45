"""
Board State Module - Immutable slot-board representation for the tile-match puzzle.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

# Slot value for a position whose piece has been picked (or never held one)
EMPTY = -1


@dataclass(frozen=True)
class BoardState:
    """
    Immutable board state representation.

    Uses a flat tuple for hashability and immutability. Each slot holds a
    piece-type identifier (small non-negative int) or EMPTY. A slot's
    identity is its index; layering between slots is owned by the
    selectable-positions collaborator, not by the board.

    Attributes:
        slots: Tuple of slot values, one per board position
    """
    slots: Tuple[int, ...]

    @classmethod
    def from_list(cls, values: Sequence[int]) -> 'BoardState':
        """
        Create BoardState from any sequence of slot values.

        Args:
            values: Piece-type ids or EMPTY, one per position

        Returns:
            BoardState instance with an immutable slot tuple
        """
        return cls(slots=tuple(int(v) for v in values))

    def apply_pick(self, position: int) -> Tuple['BoardState', int]:
        """
        Remove the piece at a position.

        Original board is unchanged.

        Args:
            position: Board index to pick

        Returns:
            (new board with the slot emptied, piece type that was picked)
        """
        piece = self.slots[position]
        new_slots = list(self.slots)
        new_slots[position] = EMPTY
        return BoardState(slots=tuple(new_slots)), piece

    def get_slot(self, position: int) -> int:
        """
        Get value at a board position.

        Args:
            position: Board index

        Returns:
            Piece type, or EMPTY if empty or out of range
        """
        if 0 <= position < len(self.slots):
            return self.slots[position]
        return EMPTY

    def remaining_count(self) -> int:
        """Count slots that still hold a piece."""
        return sum(1 for value in self.slots if value != EMPTY)

    def is_cleared(self) -> bool:
        """True when no slot holds a piece."""
        return all(value == EMPTY for value in self.slots)

    def diff(self, other: 'BoardState') -> List[int]:
        """
        Find positions that differ between this board and another.

        Args:
            other: Another BoardState to compare against

        Returns:
            List of positions where slot values differ
        """
        if not isinstance(other, BoardState):
            raise TypeError("Can only diff against another BoardState")

        return [
            index
            for index, (mine, theirs) in enumerate(zip(self.slots, other.slots))
            if mine != theirs
        ]

    def to_list(self) -> List[int]:
        """Convert to a mutable list of slot values."""
        return list(self.slots)

    def __len__(self) -> int:
        return len(self.slots)
