"""
Solution Module - Tagged result of a solvability check.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class SolveStats:
    """
    Search statistics reported with every result.

    Attributes:
        expansions_used: Move expansions performed (never above max_expansions)
        best_score: Winning node's score, or best retained score on failure
        time_ms: Wall-clock time of the solve call in milliseconds
        beam_width: Effective beam width used
        depth: Depth of the winning node (None unless solvable)
        pruned_overflow: Candidates dropped because the tray overflowed
        pruned_dominated: Candidates dropped by the transposition index
        states_recorded: Distinct signatures in the transposition index
    """
    expansions_used: int = 0
    best_score: float = float("-inf")
    time_ms: float = 0.0
    beam_width: int = 0
    depth: Optional[int] = None
    pruned_overflow: int = 0
    pruned_dominated: int = 0
    states_recorded: int = 0


@dataclass
class Solvable:
    """
    A winning pick sequence was found.

    Attributes:
        winning_moves: Board positions to pick, in order
        stats: Search statistics
    """
    winning_moves: List[int] = field(default_factory=list)
    stats: SolveStats = field(default_factory=SolveStats)

    solvable = True

    @property
    def move_count(self) -> int:
        """Number of picks in the winning sequence."""
        return len(self.winning_moves)


@dataclass
class Unsolvable:
    """
    No winning sequence was found within the search budget.

    This is not a proof that the board cannot be cleared.

    Attributes:
        stats: Search statistics
    """
    stats: SolveStats = field(default_factory=SolveStats)

    solvable = False


SolveResult = Union[Solvable, Unsolvable]
