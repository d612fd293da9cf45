"""
Search Node Module - Immutable beam search node and its transposition signature.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .board import BoardState


def make_signature(board: Sequence[int], tray: Sequence[int]) -> bytes:
    """
    Encode board and tray content as a transposition lookup key.

    Order-preserving on both parts: two trays holding the same pieces in
    a different order get different signatures, since insertion order
    decides which occurrences a later clear removes.

    Args:
        board: Slot values in board order
        tray: Resolved tray in insertion order

    Returns:
        ASCII bytes of the form b"<board csv>|<tray csv>"
    """
    board_part = ",".join(str(value) for value in board)
    tray_part = ",".join(str(piece) for piece in tray)
    return f"{board_part}|{tray_part}".encode("ascii")


@dataclass(frozen=True)
class SearchNode:
    """
    Board/tray state reached by a sequence of picks.

    Nodes are never mutated; expanding a node creates new ones. The tray
    is always stored after resolution.

    Attributes:
        board: Board after the picks in path
        tray: Resolved tray after the picks in path
        score: Cumulative heuristic score along path
        path: Board positions picked so far, in order
        remaining: Pieces left on the board
        signature: make_signature(board, tray)
    """
    board: BoardState
    tray: Tuple[int, ...]
    score: int
    path: Tuple[int, ...]
    remaining: int
    signature: bytes

    @classmethod
    def initial(cls, board: BoardState) -> 'SearchNode':
        """Create the root node: empty tray, empty path, zero score."""
        return cls(
            board=board,
            tray=(),
            score=0,
            path=(),
            remaining=board.remaining_count(),
            signature=make_signature(board.slots, ()),
        )

    @property
    def depth(self) -> int:
        """Number of picks taken to reach this node."""
        return len(self.path)

    @property
    def is_solved(self) -> bool:
        """True when both the board and the tray are empty."""
        return self.remaining == 0 and not self.tray
