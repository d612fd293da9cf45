"""
Replay Module - Re-applies a pick sequence to check that it really clears a board.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .board import EMPTY, BoardState
from .context import SelectablePositions
from .tray import is_overflowing, resolve_tray

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReplayStep:
    """
    State after one replayed pick.

    Attributes:
        position: Board index picked
        piece: Piece type picked
        board: Board after the pick
        tray: Tray after the pick and resolution
        cleared_types: Types cleared by this pick's resolution
    """
    position: int
    piece: int
    board: BoardState
    tray: Tuple[int, ...]
    cleared_types: Tuple[int, ...]


@dataclass
class ReplayResult:
    """
    Outcome of replaying a pick sequence.

    Attributes:
        initial_board: Board before the first pick
        steps: One entry per pick that was applied
        error: Why replay stopped early, or None
    """
    initial_board: BoardState
    steps: List[ReplayStep] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def valid(self) -> bool:
        """True when every pick was legal and the tray never overflowed."""
        return self.error is None

    @property
    def final_board(self) -> BoardState:
        return self.steps[-1].board if self.steps else self.initial_board

    @property
    def final_tray(self) -> Tuple[int, ...]:
        return self.steps[-1].tray if self.steps else ()

    @property
    def is_cleared(self) -> bool:
        """True when the sequence was legal and left board and tray empty."""
        return self.valid and self.final_board.is_cleared() and not self.final_tray


def replay_moves(
    initial_board: Sequence[int],
    moves: Sequence[int],
    selectable_positions: SelectablePositions
) -> ReplayResult:
    """
    Apply picks in order, checking each one against the layering rules.

    Stops at the first pick that is not selectable, targets an empty
    slot or overflows the tray.

    Args:
        initial_board: Slot values before the first pick
        moves: Board positions to pick, in order
        selectable_positions: Layering collaborator

    Returns:
        ReplayResult with the applied steps and any error
    """
    board = BoardState.from_list(initial_board)
    result = ReplayResult(initial_board=board)
    tray: Tuple[int, ...] = ()

    for number, position in enumerate(moves, start=1):
        if position not in set(selectable_positions(board.slots)):
            result.error = f"move {number}: position {position} is not selectable"
            break
        if board.get_slot(position) == EMPTY:
            result.error = f"move {number}: position {position} is empty"
            break

        board, piece = board.apply_pick(position)
        resolution = resolve_tray(tray + (piece,))
        tray = resolution.tray
        result.steps.append(ReplayStep(
            position=position,
            piece=piece,
            board=board,
            tray=tray,
            cleared_types=resolution.cleared_types,
        ))

        if is_overflowing(tray):
            result.error = f"move {number}: tray overflow ({len(tray)} pieces)"
            break

    if result.error:
        logger.debug(f"Replay stopped: {result.error}")
    return result


def verify_winning_moves(
    initial_board: Sequence[int],
    moves: Sequence[int],
    selectable_positions: SelectablePositions
) -> bool:
    """True when replaying moves legally clears the board and the tray."""
    return replay_moves(initial_board, moves, selectable_positions).is_cleared
