"""
Solver Package - Solvability checking for layered tile-match boards.

This package decides, before a level is shown to a player, whether a
board assignment can be fully cleared: every piece picked into the
7-slot tray and every tray piece removed in triples.

Public API:
    - BoardState: Immutable board representation
    - Move: Single pick of a board position
    - SearchNode: Immutable beam search node
    - resolve_tray(): Tray triple-clearing rule
    - score_transition(): Heuristic used for beam retention
    - TranspositionIndex: Dominance pruning map
    - SolverConfig / SolveContext: Budget and per-call context
    - Solvable / Unsolvable / SolveStats: Tagged result
    - is_solvable(): Facade used by level-authoring code
    - replay_moves() / verify_winning_moves(): Check a pick sequence
    - create_strategy(): Factory function

Usage:
    from tilematch.solver import is_solvable

    result = is_solvable([0, 0, 0], lambda board: [0, 1, 2])

    if result.solvable:
        print(f"Pick order: {result.winning_moves}")
    print(f"{result.stats.expansions_used} expansions")
"""

# Core data structures
from .board import BoardState, EMPTY
from .move import Move
from .node import SearchNode, make_signature
from .tray import ResolutionResult, TRAY_CAPACITY, resolve_tray
from .heuristic import DEFAULT_WEIGHTS, HeuristicWeights, score_transition
from .transposition import TranspositionEntry, TranspositionIndex
from .context import SelectablePositions, SolveContext, SolverConfig
from .solution import Solvable, SolveResult, SolveStats, Unsolvable

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    DEFAULT_STRATEGY,
    describe_strategies,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .solvability import all_selectable, is_solvable
from .replay import ReplayResult, ReplayStep, replay_moves, verify_winning_moves

__all__ = [
    # Data structures
    "BoardState",
    "EMPTY",
    "Move",
    "SearchNode",
    "make_signature",
    "ResolutionResult",
    "TRAY_CAPACITY",
    "resolve_tray",
    "DEFAULT_WEIGHTS",
    "HeuristicWeights",
    "score_transition",
    "TranspositionEntry",
    "TranspositionIndex",
    "SelectablePositions",
    "SolveContext",
    "SolverConfig",
    "Solvable",
    "SolveResult",
    "SolveStats",
    "Unsolvable",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "DEFAULT_STRATEGY",
    "describe_strategies",
    "register_strategy",
    # Entry points
    "all_selectable",
    "is_solvable",
    "ReplayResult",
    "ReplayStep",
    "replay_moves",
    "verify_winning_moves",
]
