"""
Tile-Match Solvability Checker - Entry Point

Checks an explicit board, or authors a level by retrying random piece
assignments until the solver finds a winning pick sequence.

Example:
    python main.py --board 0,0,0
    python main.py --level level1 --types 3 --seed 7
    python main.py --level stacked --types 6 --beam-width 50 --debug
"""

import sys
import logging
import argparse
import random
from typing import Dict, Any, List, Optional

from tilematch.authoring import find_solvable_assignment
from tilematch.layout import LEVELS, SlotLayout, build_flat_slots, create_layout
from tilematch.settings import load_settings, solver_config_from_settings
from tilematch.solver import (
    DEFAULT_STRATEGY,
    SolveResult,
    SolverConfig,
    describe_strategies,
    get_strategy_names,
    is_solvable,
    replay_moves,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure console logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler()]
    )


def parse_board(text: str) -> List[int]:
    """Parse a comma-separated board such as "0,1,-1,2"."""
    try:
        return [int(value) for value in text.split(",") if value.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid board: {text!r}")


def build_config(settings: Dict[str, Any], args: argparse.Namespace) -> SolverConfig:
    """Settings file budget with command line overrides applied."""
    merged = dict(settings)
    for key in ("beam_width", "max_expansions", "max_depth"):
        value = getattr(args, key)
        if value:
            merged[key] = value
    return solver_config_from_settings(merged)


def print_result(result: SolveResult) -> None:
    """Print outcome and stats."""
    stats = result.stats
    if result.solvable:
        print(f"SOLVABLE in {result.move_count} picks")
        print(f"  Pick order: {result.winning_moves}")
        print(f"  Depth: {stats.depth}")
    else:
        print("UNSOLVED within budget")
    print(f"  Expansions: {stats.expansions_used}")
    print(f"  Best score: {stats.best_score}")
    print(f"  Beam width: {stats.beam_width}")
    print(f"  Pruned (overflow/dominated): {stats.pruned_overflow}/{stats.pruned_dominated}")
    print(f"  Time: {stats.time_ms:.1f}ms")


def solve_board(board: List[int], layout: SlotLayout, config: SolverConfig,
                strategy: str = DEFAULT_STRATEGY) -> bool:
    """Check one explicit board and print the result."""
    if len(board) != len(layout):
        logger.warning(f"Board has {len(board)} values for {len(layout)} slots")

    result = is_solvable(board, layout.selectable_positions, config, strategy)
    print_result(result)

    if result.solvable:
        replay = replay_moves(board, result.winning_moves, layout.selectable_positions)
        if not replay.is_cleared:
            logger.error(f"Winning moves failed replay: {replay.error}")
            return False
    return result.solvable


def author_level(args: argparse.Namespace, layout: SlotLayout,
                 config: SolverConfig, max_tries: int) -> bool:
    """Author a level on the layout and print the result."""
    if args.types <= 0:
        logger.error(f"--types must be positive, got {args.types}")
        return False
    if len(layout) % args.types != 0:
        logger.error(f"{len(layout)} slots cannot be split evenly across {args.types} types")
        return False

    copies = args.copies or len(layout) // args.types
    rng = random.Random(args.seed) if args.seed is not None else None

    authoring = find_solvable_assignment(
        layout,
        piece_types=list(range(args.types)),
        copies_per_type=copies,
        max_tries=max_tries,
        config=config,
        rng=rng,
        label=args.level,
        strategy=args.strategy,
    )

    print(f"Assignment after {authoring.tries} tries: {authoring.assignment}")
    print_result(authoring.result)
    return authoring.solvable


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tile-Match Solvability Checker - beam search over layered boards",
        epilog="Strategies:\n" + describe_strategies(),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--strategy", "-s",
        default=DEFAULT_STRATEGY,
        choices=get_strategy_names(),
        help=f"Solver strategy (default: {DEFAULT_STRATEGY})"
    )
    parser.add_argument(
        "--board", "-b",
        type=parse_board,
        help="Comma-separated piece types (-1 for empty) to check directly"
    )
    parser.add_argument(
        "--layout-file",
        help="JSON slot layout (default: flat layout for --board, --level otherwise)"
    )
    parser.add_argument(
        "--level", "-l",
        default="level1",
        choices=sorted(LEVELS.keys()),
        help="Built-in layout to author (default: level1)"
    )
    parser.add_argument("--types", "-t", type=int, default=3,
                        help="Number of piece types when authoring (default: 3)")
    parser.add_argument("--copies", type=int, default=0,
                        help="Pieces per type (default: slots / types)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible authoring")
    parser.add_argument("--tries", type=int, default=0,
                        help="Authoring retries (default from settings)")
    parser.add_argument("--beam-width", dest="beam_width", type=int, default=0)
    parser.add_argument("--max-expansions", dest="max_expansions", type=int, default=0)
    parser.add_argument("--max-depth", dest="max_depth", type=int, default=0)
    parser.add_argument("--config", "-c", default=None,
                        help="Settings JSON file (default: config.json)")
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the checker; exit code 0 when solvable."""
    args = parse_args(argv)

    settings = load_settings(args.config)
    configure_logging("DEBUG" if args.debug else settings.get("log_level", "INFO"))

    try:
        config = build_config(settings, args)
        if args.layout_file:
            layout = SlotLayout.from_json(args.layout_file)
        elif args.board is not None:
            layout = SlotLayout(build_flat_slots(len(args.board)))
        else:
            layout = create_layout(args.level)
    except ValueError as e:
        logger.error(str(e))
        return 2

    logger.info(f"Solver: {args.strategy}, budget: {config}")

    if args.board is not None:
        ok = solve_board(args.board, layout, config, args.strategy)
    else:
        max_tries = args.tries or int(settings.get("max_tries", 50))
        try:
            ok = author_level(args, layout, config, max_tries)
        except ValueError as e:
            logger.error(str(e))
            return 2

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
