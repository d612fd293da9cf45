"""
Move Module - A single pick of a selectable board position.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """
    Represents picking one currently-selectable board position.

    Applying a move removes the piece from the board, appends its type
    to the tray and then resolves the tray.

    Attributes:
        position: Board index that was picked
        piece: Piece type that sat at the position
    """
    position: int
    piece: int

    def __str__(self) -> str:
        return f"pick {self.position} (type {self.piece})"
