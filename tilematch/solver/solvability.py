"""
Solvability Module - Single entry point used by level-authoring code.
"""

from typing import Any, List, Mapping, Sequence, Union

from .board import EMPTY, BoardState
from .context import SelectablePositions, SolveContext, SolverConfig
from .factory import DEFAULT_STRATEGY, create_strategy
from .solution import SolveResult


def is_solvable(
    initial_board: Sequence[int],
    selectable_positions: SelectablePositions,
    config: Union[SolverConfig, Mapping[str, Any], None] = None,
    strategy: str = DEFAULT_STRATEGY
) -> SolveResult:
    """
    Check whether a board assignment can be fully cleared.

    Each call owns its own frontier and transposition index; nothing is
    shared between calls.

    Args:
        initial_board: Piece-type id or -1 for every board position
        selectable_positions: Pure function from slot values to the
            positions that can currently be picked
        config: SolverConfig, a dict of budget options, or None for defaults
        strategy: Registered strategy name

    Returns:
        Solvable with winning_moves and stats, or Unsolvable with stats
    """
    context = SolveContext(
        board=BoardState.from_list(initial_board),
        selectable_positions=selectable_positions,
        config=SolverConfig.coerce(config),
    )
    return create_strategy(strategy).solve(context)


def all_selectable(board: Sequence[int]) -> List[int]:
    """Collaborator for boards without layering: every occupied slot is free."""
    return [index for index, value in enumerate(board) if value != EMPTY]
