"""
Heuristic Module - Scores a single pick for beam retention.

The score is a hand-tuned proxy, not an admissible estimate. It only
biases which nodes survive beam truncation.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from .board import BoardState
from .tray import MATCH_SIZE


@dataclass(frozen=True)
class HeuristicWeights:
    """
    Weights for each additive term of score_transition().

    Attributes:
        triple_cleared: Reward per full triple cleared this step
        pair_in_tray: Reward per piece type with exactly two tray pieces
        new_type_in_tray: Penalty per type newly introduced into the tray
        tray_slot_used: Penalty per piece in the resulting tray
        board_progress: Reward per piece removed from the board
    """
    triple_cleared: int = 100
    pair_in_tray: int = 12
    new_type_in_tray: int = 8
    tray_slot_used: int = 3
    board_progress: int = 5


DEFAULT_WEIGHTS = HeuristicWeights()


def score_transition(
    board: BoardState,
    tray: Sequence[int],
    prev_tray: Sequence[int],
    prev_remaining: int,
    new_remaining: int,
    weights: HeuristicWeights = DEFAULT_WEIGHTS
) -> int:
    """
    Score increment for moving from one node to the next.

    Args:
        board: Board after the pick (unused by the default terms)
        tray: Tray after the pick and resolution
        prev_tray: Tray before the pick
        prev_remaining: Pieces on the board before the pick
        new_remaining: Pieces on the board after the pick

    Returns:
        Signed integer to add to the node's cumulative score
    """
    picked = prev_remaining - new_remaining
    cleared = len(prev_tray) + picked - len(tray)

    score = weights.triple_cleared * (cleared // MATCH_SIZE)

    counts = Counter(tray)
    score += weights.pair_in_tray * sum(1 for n in counts.values() if n == 2)

    prev_types = set(prev_tray)
    new_types = {piece for piece in counts if piece not in prev_types}
    score -= weights.new_type_in_tray * len(new_types)

    score -= weights.tray_slot_used * len(tray)
    score += weights.board_progress * picked
    return score
