"""
Tests for the solvability engine.

Covers:
1. BoardState and node signatures
2. Heuristic scoring
3. Transposition dominance
4. Beam search driver and is_solvable facade
5. Replay of winning sequences
"""

import pytest

from tilematch.layout import SlotLayout, build_level1_slots, build_stacked_slots
from tilematch.solver import (
    DEFAULT_STRATEGY,
    EMPTY,
    BoardState,
    SearchNode,
    Solvable,
    SolveContext,
    SolverConfig,
    TranspositionIndex,
    Unsolvable,
    all_selectable,
    create_strategy,
    describe_strategies,
    get_strategy_names,
    is_solvable,
    make_signature,
    replay_moves,
    score_transition,
    verify_winning_moves,
)


# ========== Fixtures ==========

def two_layer_selectable(board):
    """Positions 3..5 sit under positions 0..2."""
    free = [i for i in range(3) if board[i] != EMPTY]
    free += [i for i in range(3, 6) if board[i] != EMPTY and board[i - 3] == EMPTY]
    return free


@pytest.fixture
def level1_layout():
    return SlotLayout(build_level1_slots())


@pytest.fixture
def level1_board():
    # Bottom layer (0-8) mirrors the top layer (9-17)
    layer = [0, 0, 0, 1, 1, 1, 2, 2, 2]
    return layer + layer


# ========== BoardState ==========

def test_board_state_basics():
    board = BoardState.from_list([0, EMPTY, 2])

    assert board.remaining_count() == 2
    assert not board.is_cleared()
    assert board.get_slot(1) == EMPTY
    assert board.get_slot(99) == EMPTY
    assert board == BoardState.from_list([0, -1, 2])
    assert hash(board) == hash(BoardState.from_list([0, -1, 2]))


def test_apply_pick_returns_new_board():
    board = BoardState.from_list([4, 5])
    picked, piece = board.apply_pick(1)

    assert piece == 5
    assert picked.to_list() == [4, EMPTY]
    assert board.to_list() == [4, 5]
    assert board.diff(picked) == [1]


def test_diff_rejects_other_types():
    with pytest.raises(TypeError):
        BoardState.from_list([1]).diff([1])


# ========== Signatures and nodes ==========

def test_signature_is_order_sensitive_for_tray():
    board = (EMPTY, 1)
    assert make_signature(board, (0, 1)) != make_signature(board, (1, 0))
    assert make_signature(board, (0, 1)) == make_signature(list(board), [0, 1])


def test_signature_keeps_board_and_tray_apart():
    assert make_signature((1,), (2, 3)) != make_signature((1, 2), (3,))


def test_initial_node():
    node = SearchNode.initial(BoardState.from_list([0, 0, EMPTY]))

    assert node.path == ()
    assert node.depth == 0
    assert node.score == 0
    assert node.remaining == 2
    assert not node.is_solved


# ========== Heuristic ==========

def test_score_first_pick():
    # New type (-8), one tray piece (-3), one piece off the board (+5)
    assert score_transition(None, (0,), (), 3, 2) == -6


def test_score_building_pair():
    # Pair (+12), two tray pieces (-6), board progress (+5)
    assert score_transition(None, (0, 0), (0,), 2, 1) == 11


def test_score_clearing_triple():
    # Triple (+100), empty tray, board progress (+5)
    assert score_transition(None, (), (0, 0), 1, 0) == 105


def test_score_new_type_penalty():
    # New type 2 (-8), two tray pieces (-6), board progress (+5)
    assert score_transition(None, (1, 2), (1,), 5, 4) == -9


def test_score_counts_cleared_from_tray_delta():
    # Clear with one leftover: (0,0,1) + 0 -> (1,)
    assert score_transition(None, (1,), (0, 0, 1), 4, 3) == 100 - 3 + 5


# ========== Transposition index ==========

def test_transposition_admits_first_visit():
    index = TranspositionIndex()

    assert index.lookup(b"x") is None
    assert index.admit(b"x", 10, 2)
    assert b"x" in index
    assert index.lookup(b"x").score == 10
    assert index.lookup(b"x").tray_len == 2


def test_transposition_prunes_weakly_dominated():
    index = TranspositionIndex()
    index.record(b"x", 10, 2)

    assert not index.admit(b"x", 10, 2)
    assert not index.admit(b"x", 9, 3)
    assert len(index) == 1


def test_transposition_overwrites_on_better_or_incomparable():
    index = TranspositionIndex()
    index.record(b"x", 10, 2)

    assert index.admit(b"x", 11, 2)
    assert index.lookup(b"x").score == 11

    # Lower score but shorter tray is incomparable, so it survives
    assert index.admit(b"x", 5, 1)
    assert index.lookup(b"x").score == 5
    assert index.lookup(b"x").tray_len == 1


# ========== Config ==========

def test_config_defaults_and_falsy_values():
    assert SolverConfig.coerce(None) == SolverConfig(100, 5000, 200)

    config = SolverConfig.coerce({"beamWidth": 0, "maxExpansions": None, "maxDepth": 7})
    assert config.beam_width == 100
    assert config.max_expansions == 5000
    assert config.max_depth == 7

    assert SolverConfig.coerce({"beam_width": 3}).beam_width == 3


def test_config_rejects_non_positive_values():
    with pytest.raises(ValueError):
        SolverConfig(beam_width=0)
    with pytest.raises(ValueError):
        SolverConfig(max_depth=-1)


def test_unknown_strategy_raises():
    assert "beam" in get_strategy_names()
    with pytest.raises(ValueError):
        create_strategy("nope")
    with pytest.raises(ValueError):
        is_solvable([0, 0, 0], all_selectable, strategy="nope")


def test_strategy_descriptions():
    assert get_strategy_names() == sorted(get_strategy_names())
    assert DEFAULT_STRATEGY in get_strategy_names()
    assert "  beam: Beam Search" in describe_strategies()


# ========== Beam search: end-to-end ==========

def test_three_of_a_kind_is_solvable():
    result = is_solvable([0, 0, 0], lambda board: [0, 1, 2])

    assert isinstance(result, Solvable)
    assert result.solvable
    assert sorted(result.winning_moves) == [0, 1, 2]
    assert result.winning_moves == [0, 1, 2]
    assert result.move_count == 3
    assert result.stats.best_score >= 100
    assert result.stats.best_score == 110
    assert result.stats.depth == 3
    assert result.stats.beam_width == 100
    assert result.stats.expansions_used == 12
    assert result.stats.time_ms >= 0.0


def test_distinct_pieces_are_unsolvable():
    board = [0, 1, 2, 3, 4, 5, 6, 7]
    result = is_solvable(board, all_selectable)

    assert isinstance(result, Unsolvable)
    assert not result.solvable
    assert result.stats.depth is None
    assert result.stats.pruned_overflow > 0
    assert result.stats.expansions_used <= 5000


def test_empty_board_is_solved_immediately():
    result = is_solvable([EMPTY, EMPTY], all_selectable)

    assert result.solvable
    assert result.winning_moves == []
    assert result.stats.depth == 0
    assert result.stats.expansions_used == 0
    assert result.stats.best_score == 0


def test_solution_at_exactly_max_depth_is_found():
    result = is_solvable([0, 0, 0], all_selectable, {"maxDepth": 3})

    assert result.solvable
    assert result.stats.depth == 3


def test_depth_below_solution_length_fails():
    result = is_solvable([0, 0, 0], all_selectable, {"maxDepth": 2})

    assert not result.solvable


def test_expansion_budget_is_respected():
    result = is_solvable([0, 0, 0], all_selectable, {"maxExpansions": 2})

    assert not result.solvable
    assert result.stats.expansions_used == 2


def test_out_of_range_and_empty_positions_are_skipped():
    result = is_solvable([0, EMPTY, 0, 0], lambda board: [99, 1, 0, 2, 3, -5])

    assert result.solvable
    assert 1 not in result.winning_moves
    assert 99 not in result.winning_moves


def test_blocked_pieces_follow_layering(level1_layout, level1_board):
    result = is_solvable(level1_board, level1_layout.selectable_positions, {"beamWidth": 10})

    assert result.solvable
    assert len(result.winning_moves) == 18
    assert verify_winning_moves(level1_board, result.winning_moves,
                                level1_layout.selectable_positions)


def test_two_layer_collaborator():
    # Top row 0,0,1 over bottom row 0,1,1
    board = [0, 0, 1, 0, 1, 1]
    result = is_solvable(board, two_layer_selectable)

    assert result.solvable
    assert verify_winning_moves(board, result.winning_moves, two_layer_selectable)
    # Each bottom piece is picked only after the piece above it
    for bottom in (3, 4, 5):
        assert result.winning_moves.index(bottom - 3) < result.winning_moves.index(bottom)


def test_two_layer_board_without_triples_is_unsolvable():
    result = is_solvable([0, 1, 2, 0, 1, 2], two_layer_selectable)

    assert not result.solvable


def test_search_is_deterministic(level1_layout, level1_board):
    first = is_solvable(level1_board, level1_layout, {"beamWidth": 10})
    second = is_solvable(level1_board, level1_layout, {"beamWidth": 10})

    assert first.solvable and second.solvable
    assert first.winning_moves == second.winning_moves
    assert first.stats.expansions_used == second.stats.expansions_used


def test_context_progress_callback_is_called():
    reports = []
    context = SolveContext(
        board=BoardState.from_list([0, 0, 0, 1, 1, 1]),
        selectable_positions=all_selectable,
        progress_callback=lambda percent, message: reports.append(percent),
    )
    result = create_strategy("beam").solve(context)

    assert result.solvable
    assert reports
    assert all(0.0 <= p <= 0.99 for p in reports)


# ========== Beam search: properties ==========

def test_monotonic_in_expansion_budget():
    outcomes = [
        is_solvable([0, 0, 0], all_selectable, {"maxExpansions": budget}).solvable
        for budget in range(1, 31)
    ]

    assert outcomes[-1]
    assert outcomes == sorted(outcomes)


def test_monotonic_in_beam_width(level1_layout, level1_board):
    # Budget large enough that only the beam width varies the outcome
    outcomes = [
        is_solvable(level1_board, level1_layout,
                    {"beamWidth": width, "maxExpansions": 100000}).solvable
        for width in (1, 2, 5, 20, 100)
    ]

    assert outcomes == sorted(outcomes)
    assert outcomes[-1]


def test_monotonic_in_depth():
    outcomes = [
        is_solvable([0, 0, 0, 1, 1, 1], all_selectable, {"maxDepth": depth}).solvable
        for depth in range(1, 10)
    ]

    assert outcomes == sorted(outcomes)
    assert outcomes.index(True) == 5


@pytest.mark.parametrize("budget", [1, 10, 57, 300, 1000])
def test_budget_conservation(budget):
    import random

    slots = build_stacked_slots(4, 6, 2)
    layout = SlotLayout(slots)
    bag = [piece for piece in range(13) for _ in range(3)]
    random.Random(budget).shuffle(bag)

    result = is_solvable(bag, layout, {"maxExpansions": budget})

    assert result.stats.expansions_used <= budget


# ========== Replay ==========

def test_replay_records_each_step():
    replay = replay_moves([0, 0, 0], [2, 0, 1], all_selectable)

    assert replay.valid
    assert replay.is_cleared
    assert [step.position for step in replay.steps] == [2, 0, 1]
    assert replay.steps[1].tray == (0, 0)
    assert replay.steps[2].cleared_types == (0,)


def test_replay_rejects_blocked_move():
    replay = replay_moves([0, 1, 2, 0, 1, 2], [3], two_layer_selectable)

    assert not replay.valid
    assert "not selectable" in replay.error
    assert not replay.is_cleared


def test_replay_rejects_empty_position():
    replay = replay_moves([0, 0, 0], [0, 0], lambda board: [0, 1, 2])

    assert not replay.valid
    assert "empty" in replay.error


def test_replay_detects_overflow():
    board = list(range(8))
    replay = replay_moves(board, board, all_selectable)

    assert not replay.valid
    assert "overflow" in replay.error
    assert len(replay.steps) == 8


def test_replay_incomplete_sequence_is_not_cleared():
    replay = replay_moves([0, 0, 0], [0, 1], all_selectable)

    assert replay.valid
    assert not replay.is_cleared
    assert replay.final_tray == (0, 0)
