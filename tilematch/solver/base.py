"""
Base Strategy Module - Abstract base class for solvability strategies.
"""

from abc import ABC, abstractmethod
from typing import List

from .board import EMPTY, BoardState
from .move import Move
from .node import SearchNode, make_signature
from .context import SolveContext
from .heuristic import DEFAULT_WEIGHTS, HeuristicWeights, score_transition
from .solution import SolveResult
from .tray import resolve_tray


class SolverStrategy(ABC):
    """
    Abstract base class for all solvability strategies.

    Subclasses must implement the solve() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        weights: Heuristic weights used when scoring picks
    """
    name: str = "base"
    description: str = "Base strategy"

    def __init__(self, weights: HeuristicWeights = DEFAULT_WEIGHTS):
        self.weights = weights

    @abstractmethod
    def solve(self, context: SolveContext) -> SolveResult:
        """
        Decide whether the context's board can be cleared.

        Must stay within context.config budgets and must not mutate
        the context board.

        Args:
            context: Solve context with board, collaborator and budget

        Returns:
            Solvable with the winning picks, or Unsolvable
        """
        pass

    def find_legal_moves(self, context: SolveContext, board: BoardState) -> List[Move]:
        """
        Ask the layering collaborator which positions can be picked.

        Out-of-range and already-empty positions are skipped. Order
        follows the collaborator's iteration order.

        Args:
            context: Solve context holding the collaborator
            board: Current board state

        Returns:
            List of Move objects
        """
        moves = []
        for position in context.selectable_positions(board.slots):
            piece = board.get_slot(position)
            if piece == EMPTY:
                continue
            moves.append(Move(position=position, piece=piece))
        return moves

    def apply_move(self, node: SearchNode, move: Move) -> SearchNode:
        """
        Create the child node reached by one pick.

        The piece goes to the end of the tray, the tray is resolved and
        the transition is scored. Tray capacity is not checked here.

        Args:
            node: Parent node
            move: Pick to apply

        Returns:
            New SearchNode
        """
        board, piece = node.board.apply_pick(move.position)
        resolution = resolve_tray(node.tray + (piece,))
        remaining = node.remaining - 1

        score = node.score + score_transition(
            board,
            resolution.tray,
            node.tray,
            node.remaining,
            remaining,
            self.weights,
        )

        return SearchNode(
            board=board,
            tray=resolution.tray,
            score=score,
            path=node.path + (move.position,),
            remaining=remaining,
            signature=make_signature(board.slots, resolution.tray),
        )
