"""
Beam Search Strategy - Bounded search for a pick sequence that clears the board.

Explores pick sequences depth by depth, keeping only the beam_width
highest-scoring nodes per depth. Transpositions are pruned by dominance
and the whole search is capped by a global expansion budget, so a
negative answer means "not found within budget", not "impossible".
"""

import time
import logging
from typing import List, Optional

from ..base import SolverStrategy
from ..node import SearchNode
from ..context import SolveContext
from ..solution import Solvable, SolveResult, SolveStats, Unsolvable
from ..transposition import TranspositionIndex
from ..tray import is_overflowing
from ..factory import register_strategy

logger = logging.getLogger(__name__)


@register_strategy
class BeamSearchStrategy(SolverStrategy):
    """
    Beam search solvability checker.

    Algorithm:
        1. Start with the initial board and an empty tray as the frontier
        2. For each depth level:
           - A solved frontier node ends the search with its path
           - Expand every other node by each selectable pick
           - Drop children whose resolved tray overflows
           - Drop children dominated in the transposition index
           - Keep the top beam_width children by cumulative score
        3. Fail when depth, expansions or the frontier run out

    Ties in score keep generation order (frontier order, then the order
    in which the collaborator lists positions), since list.sort is stable.
    """
    name = "beam"
    description = "Beam Search - bounded solvability check with transposition pruning"

    def solve(self, context: SolveContext) -> SolveResult:
        """
        Search for a winning pick sequence.

        Args:
            context: Solve context with board, collaborator and budget

        Returns:
            Solvable with the winning picks, or Unsolvable
        """
        start_time = time.perf_counter()
        config = context.config

        stats = SolveStats(beam_width=config.beam_width)
        index = TranspositionIndex()

        root = SearchNode.initial(context.board)
        index.record(root.signature, root.score, len(root.tray))
        initial_remaining = root.remaining

        frontier: List[SearchNode] = [root]
        depth = 0

        while frontier and depth < config.max_depth:
            candidates: List[SearchNode] = []

            for node in frontier:
                if node.is_solved:
                    return self._build_solvable(node, stats, index, start_time)

                if stats.expansions_used >= config.max_expansions:
                    continue

                candidates.extend(self._expand_node(node, context, index, stats))

            candidates.sort(key=lambda n: n.score, reverse=True)
            frontier = candidates[:config.beam_width]
            depth += 1

            if frontier:
                best = frontier[0]
                stats.best_score = max(stats.best_score, best.score)
                if initial_remaining > 0:
                    context.report_progress(
                        min(0.99, 1.0 - best.remaining / initial_remaining),
                        f"depth {depth}, {len(frontier)} nodes, best score {best.score}"
                    )

            logger.debug(
                f"[BeamSearch] Depth {depth}: {len(candidates)} candidates, "
                f"kept {len(frontier)}, expansions {stats.expansions_used}/"
                f"{config.max_expansions}"
            )

        # Nodes produced by the last permitted depth are still within budget
        solved = self._find_solved(frontier)
        if solved is not None:
            return self._build_solvable(solved, stats, index, start_time)

        stats.states_recorded = len(index)
        stats.time_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"[BeamSearch] No solution: depth {depth}, "
            f"{stats.expansions_used} expansions, best score {stats.best_score}, "
            f"{stats.time_ms:.1f}ms"
        )
        return Unsolvable(stats=stats)

    def _expand_node(
        self,
        node: SearchNode,
        context: SolveContext,
        index: TranspositionIndex,
        stats: SolveStats
    ) -> List[SearchNode]:
        """
        Generate surviving children of one frontier node.

        Consumes one unit of expansion budget per pick applied and stops
        as soon as the budget is spent.

        Args:
            node: Frontier node to expand
            context: Solve context for the collaborator and budget
            index: Transposition index for this solve call
            stats: Counters updated in place

        Returns:
            Children that passed the overflow and dominance checks
        """
        children: List[SearchNode] = []
        max_expansions = context.config.max_expansions

        for move in self.find_legal_moves(context, node.board):
            if stats.expansions_used >= max_expansions:
                break
            stats.expansions_used += 1

            child = self.apply_move(node, move)

            if is_overflowing(child.tray):
                stats.pruned_overflow += 1
                continue

            if not index.admit(child.signature, child.score, len(child.tray)):
                stats.pruned_dominated += 1
                continue

            children.append(child)

        return children

    @staticmethod
    def _find_solved(frontier: List[SearchNode]) -> Optional[SearchNode]:
        """First solved node in frontier order, if any."""
        for node in frontier:
            if node.is_solved:
                return node
        return None

    def _build_solvable(
        self,
        node: SearchNode,
        stats: SolveStats,
        index: TranspositionIndex,
        start_time: float
    ) -> Solvable:
        """Build Solvable result from the winning node."""
        stats.best_score = node.score
        stats.depth = node.depth
        stats.states_recorded = len(index)
        stats.time_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"[BeamSearch] Solution found: {node.depth} picks, "
            f"{stats.expansions_used} expansions, score {node.score}, "
            f"{stats.time_ms:.1f}ms"
        )
        return Solvable(winning_moves=list(node.path), stats=stats)
