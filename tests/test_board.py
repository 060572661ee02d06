"""
Tests for the board engine.
"""

import random

import pytest

from reversi_negamax.board import Board
from reversi_negamax.common import (
    POSITION_WEIGHTS,
    Move,
    Position,
    Side,
    square_position,
)

EMPTY = "-" * 64


def make_board(black=(), white=()) -> Board:
    """Build a board holding exactly the given pieces."""
    board = Board.from_string(EMPTY)
    for x, y in black:
        board.set(Side.BLACK, x, y)
    for x, y in white:
        board.set(Side.WHITE, x, y)
    return board


def random_positions(seed: int, plies: int = 60):
    """Yield (board, side) pairs along a seeded random game."""
    rng = random.Random(seed)
    board = Board()
    side = Side.BLACK
    for _ in range(plies):
        yield board, side
        moves = board.legal_moves(side)
        if moves:
            board.apply_move(rng.choice(moves), side)
        elif not board.has_moves(side.opposite()):
            return
        side = side.opposite()


@pytest.fixture
def opening():
    return Board()


def test_initial_position(opening):
    """Test the standard opening layout."""
    assert opening.get(Side.WHITE, 3, 3)
    assert opening.get(Side.WHITE, 4, 4)
    assert opening.get(Side.BLACK, 3, 4)
    assert opening.get(Side.BLACK, 4, 3)
    assert opening.count_black() == 2
    assert opening.count_white() == 2
    assert opening.count_total() == 4
    assert not opening.is_occupied(0, 0)


def test_on_board():
    """Test the coordinate range check."""
    assert Board.on_board(0, 0)
    assert Board.on_board(7, 7)
    assert not Board.on_board(-1, 0)
    assert not Board.on_board(0, 8)
    assert not Board.on_board(8, 3)


def test_opening_legal_moves_for_black(opening):
    """Test that black has exactly the four textbook opening moves."""
    moves = opening.legal_moves(Side.BLACK)
    assert set(moves) == {Move(2, 3), Move(3, 2), Move(4, 5), Move(5, 4)}
    # Square index order
    assert moves == [Move(3, 2), Move(2, 3), Move(5, 4), Move(4, 5)]


def test_occupied_square_is_illegal(opening):
    """Test that an occupied square is never a legal placement."""
    assert not opening.is_legal_move(Move(3, 3), Side.BLACK)
    assert not opening.is_legal_move(Move(4, 3), Side.WHITE)


def test_pass_legal_only_without_moves(opening):
    """Test that passing is legal only when no placement exists."""
    assert not opening.is_legal_move(None, Side.BLACK)

    lone = make_board(black=[(0, 0)])
    assert not lone.has_moves(Side.WHITE)
    assert lone.is_legal_move(None, Side.WHITE)


def test_bracket_must_end_on_board():
    """Test that a run of opposing pieces running off the board does not count."""
    board = make_board(black=[(5, 5)], white=[(0, 0), (1, 0)])
    assert not board.is_legal_move(Move(2, 0), Side.BLACK)
    assert not board.has_moves(Side.BLACK)

    # an empty square after the run is not a bracket either
    board = make_board(black=[(3, 1)], white=[(1, 0), (2, 0)])
    assert not board.is_legal_move(Move(0, 0), Side.BLACK)
    assert not board.is_legal_move(Move(3, 0), Side.BLACK)


def test_apply_move_flips_single_direction(opening):
    """Test a simple opening move."""
    opening.apply_move(Move(3, 2), Side.BLACK)
    assert opening.get(Side.BLACK, 3, 2)
    assert opening.get(Side.BLACK, 3, 3)
    assert opening.count_black() == 4
    assert opening.count_white() == 1


def test_apply_move_flips_every_direction():
    """Test that all bracketing directions flip, not just the first."""
    board = make_board(
        black=[(5, 3), (3, 5), (5, 5)],
        white=[(4, 3), (3, 4), (4, 4)],
    )
    board.apply_move(Move(3, 3), Side.BLACK)

    for x, y in [(3, 3), (4, 3), (3, 4), (4, 4)]:
        assert board.get(Side.BLACK, x, y)
    assert board.count_black() == 7
    assert board.count_white() == 0


def test_apply_move_flips_long_run():
    """Test that every piece of a multi-piece run flips."""
    board = make_board(black=[(0, 0)], white=[(1, 0), (2, 0), (3, 0), (4, 0)])
    board.apply_move(Move(5, 0), Side.BLACK)
    assert board.count_black() == 6
    assert board.count_white() == 0


def test_apply_illegal_move_is_noop(opening):
    """Test that illegal moves and passes leave the board untouched."""
    before = opening.copy()
    opening.apply_move(Move(0, 0), Side.BLACK)
    opening.apply_move(Move(3, 3), Side.BLACK)
    opening.apply_move(None, Side.BLACK)
    assert opening == before


def test_copy_is_independent(opening):
    """Test that mutating a copy never affects the original."""
    clone = opening.copy()
    clone.apply_move(Move(3, 2), Side.BLACK)
    clone.set(Side.WHITE, 0, 0)

    assert opening.count_black() == 2
    assert opening.count_white() == 2
    assert clone.count_black() == 4
    assert clone != opening


def test_is_done():
    """Test game-over detection."""
    assert not Board().is_done()
    assert make_board(black=[(0, 0), (7, 7)]).is_done()

    full = Board.from_string("X" * 32 + "O" * 32)
    assert full.is_done()


def test_simple_score_is_piece_difference(opening):
    """Test simple evaluation against piece counts."""
    opening.apply_move(Move(3, 2), Side.BLACK)
    assert opening.score(Side.BLACK, simple=True) == 3
    assert opening.score(Side.WHITE, simple=True) == -3


def test_positional_score_opening(opening):
    """Test that the symmetric opening scores zero for both sides."""
    assert opening.score(Side.BLACK) == 0
    assert opening.score(Side.WHITE) == 0


def test_corner_contributes_three():
    """Test that a black corner is +3 for black and -3 for white."""
    lone = make_board(black=[(0, 0)])
    assert lone.score(Side.BLACK) == 3
    assert lone.score(Side.WHITE) == -3


def test_corner_taken_by_legal_move():
    """Test the positional score after black legally captures a corner."""
    board = make_board(black=[(2, 0)], white=[(1, 0)])
    assert board.legal_moves(Side.BLACK) == [Move(0, 0)]

    board.apply_move(Move(0, 0), Side.BLACK)

    expected = (
        POSITION_WEIGHTS[Position.CORNER]
        + POSITION_WEIGHTS[Position.NEXT_TO_CORNER]
        + POSITION_WEIGHTS[Position.EDGE]
    )
    assert board.get(Side.BLACK, 0, 0)
    assert board.score(Side.BLACK) == expected == 3
    assert board.score(Side.WHITE) == -3


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, Position.CORNER),
        (7, 0, Position.CORNER),
        (0, 7, Position.CORNER),
        (7, 7, Position.CORNER),
        (1, 1, Position.DIAGONAL_TO_CORNER),
        (6, 1, Position.DIAGONAL_TO_CORNER),
        (1, 6, Position.DIAGONAL_TO_CORNER),
        (6, 6, Position.DIAGONAL_TO_CORNER),
        (1, 0, Position.NEXT_TO_CORNER),
        (0, 1, Position.NEXT_TO_CORNER),
        (6, 7, Position.NEXT_TO_CORNER),
        (7, 6, Position.NEXT_TO_CORNER),
        (3, 0, Position.EDGE),
        (0, 4, Position.EDGE),
        (7, 2, Position.EDGE),
        (5, 7, Position.EDGE),
        (3, 3, Position.OTHER),
        (1, 2, Position.OTHER),
        (2, 1, Position.OTHER),
    ],
)
def test_square_position(x, y, expected):
    """Test square classification."""
    assert square_position(x, y) is expected


def test_square_position_counts():
    """Test how many squares fall into each class."""
    counts = {position: 0 for position in Position}
    for y in range(8):
        for x in range(8):
            counts[square_position(x, y)] += 1
    assert counts[Position.CORNER] == 4
    assert counts[Position.DIAGONAL_TO_CORNER] == 4
    assert counts[Position.NEXT_TO_CORNER] == 8
    assert counts[Position.EDGE] == 16
    assert counts[Position.OTHER] == 32


def test_board_string_round_trip(opening):
    """Test loading and rendering board strings."""
    text = opening.to_string()
    assert len(text) == 64
    assert text[3 + 8 * 3] == "O"
    assert text[4 + 8 * 3] == "X"
    assert Board.from_string(text) == opening

    # lowercase b/w spelling
    assert Board.from_string(text.replace("X", "b").replace("O", "w")) == opening


def test_board_string_rejects_bad_input():
    """Test that malformed board strings raise ValueError."""
    with pytest.raises(ValueError, match="64 characters"):
        Board.from_string("-" * 63)
    with pytest.raises(ValueError, match="Unknown board character"):
        Board.from_string("?" + "-" * 63)


def test_str_renders_rows(opening):
    """Test the human-readable rendering."""
    lines = str(opening).splitlines()
    assert len(lines) == 9
    assert lines[4] == "3 - - - O X - - -"


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_properties_along_random_games(seed):
    """Test board invariants at every position of random games."""
    for board, side in random_positions(seed):
        other = side.opposite()
        legal = [
            Move(x, y)
            for y in range(8)
            for x in range(8)
            if board.is_legal_move(Move(x, y), side)
        ]

        assert board.has_moves(side) == bool(legal)
        assert board.legal_moves(side) == legal
        assert board.black & ~board.taken == 0
        assert board.score(side) == -board.score(other)
        assert board.score(side, simple=True) == board.count(side) - board.count(other)

        for move in legal:
            child = board.copy()
            child.apply_move(move, side)
            assert child.count_total() == board.count_total() + 1
            assert child.count(side) > board.count(side)
            assert child.count(other) <= board.count(other)
            # the original is untouched
            assert board.count_total() == child.count_total() - 1

        occupied = next(
            Move(x, y) for y in range(8) for x in range(8) if board.is_occupied(x, y)
        )
        child = board.copy()
        child.apply_move(occupied, side)
        assert child == board
