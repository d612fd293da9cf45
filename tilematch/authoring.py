"""
Level Authoring Module - Randomized piece assignment with solvability checking.

Shuffles a bag of pieces onto a layout and keeps retrying until the
solver finds a winning sequence or the retry budget runs out.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .layout import SlotLayout
from .solver import DEFAULT_STRATEGY, SolverConfig, SolveResult, is_solvable

logger = logging.getLogger(__name__)

# Retries before the last assignment is used as a fallback
MAX_TRIES = 50

# Budget used while authoring; tighter than the solver defaults
AUTHORING_CONFIG = SolverConfig(beam_width=100, max_expansions=3000, max_depth=150)


@dataclass
class AuthoringResult:
    """
    Outcome of a level authoring run.

    Attributes:
        assignment: Piece type per slot (the solvable one, or the last tried)
        solvable: True if the solver verified the assignment
        tries: Number of assignments checked
        result: Solver result for the returned assignment
    """
    assignment: List[int]
    solvable: bool
    tries: int
    result: SolveResult


def build_piece_bag(piece_types: Sequence[int], copies_per_type: int) -> List[int]:
    """Bag with copies_per_type pieces of every type, grouped by type."""
    return [piece for piece in piece_types for _ in range(copies_per_type)]


def find_solvable_assignment(
    layout: SlotLayout,
    piece_types: Sequence[int],
    copies_per_type: int,
    max_tries: int = MAX_TRIES,
    config: Optional[SolverConfig] = None,
    rng: Optional[random.Random] = None,
    label: str = "Level",
    strategy: str = DEFAULT_STRATEGY
) -> AuthoringResult:
    """
    Search for a piece assignment the solver can clear.

    Args:
        layout: Slot geometry; also used as the selectable-positions collaborator
        piece_types: Piece-type ids to place
        copies_per_type: Pieces of each type (normally a multiple of 3)
        max_tries: Assignments to check before giving up
        config: Solver budget (AUTHORING_CONFIG if None)
        rng: Random source; pass a seeded Random for reproducible levels
        label: Name used in log messages
        strategy: Registered solver strategy name

    Returns:
        AuthoringResult for the first solvable assignment, or the last one tried

    Raises:
        ValueError: If the bag size does not match the slot count, or
            max_tries is not positive
    """
    bag = build_piece_bag(piece_types, copies_per_type)
    if len(bag) != len(layout):
        raise ValueError(
            f"{label}: {len(bag)} pieces for {len(layout)} slots "
            f"({len(piece_types)} types x {copies_per_type})"
        )
    if max_tries <= 0:
        raise ValueError(f"max_tries must be positive, got {max_tries}")

    config = config or AUTHORING_CONFIG
    rng = rng or random.Random()

    result: Optional[SolveResult] = None
    for try_num in range(1, max_tries + 1):
        rng.shuffle(bag)
        result = is_solvable(bag, layout.selectable_positions, config, strategy)

        if result.solvable:
            logger.info(f"{label}: Found solvable assignment on try {try_num} ({result.stats})")
            return AuthoringResult(assignment=list(bag), solvable=True,
                                   tries=try_num, result=result)

        logger.debug(f"{label}: try {try_num} unsolved ({result.stats.expansions_used} expansions)")

    logger.warning(
        f"{label}: Could not find solvable assignment after {max_tries} tries. "
        f"Using last assignment."
    )
    return AuthoringResult(assignment=list(bag), solvable=False,
                           tries=max_tries, result=result)
