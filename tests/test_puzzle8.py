"""Board helpers: geometry, successor generation, replay, validation, parity."""

from __future__ import annotations

import pytest

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    GOAL_ROWS,
    MOVES,
    IllegalMoveError,
    InvalidBoardError,
    apply_moves,
    find_blank,
    flatten,
    is_solvable,
    make_unsolvable_variant,
    scramble,
    slide,
    successors,
    to_rows,
    validate,
)


def test_goal_constants_agree() -> None:
    assert flatten(GOAL_ROWS) == GOAL
    assert to_rows(GOAL) == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    assert MOVES == ((0, 1), (1, 0), (0, -1), (-1, 0))


def test_flatten_accepts_flat_sequence() -> None:
    assert flatten([1, 2, 3, 4, 5, 6, 7, 8, 0]) == GOAL


@pytest.mark.parametrize(
    "board, expected",
    [
        (GOAL, 2),                          # corner
        ((1, 0, 3, 4, 2, 6, 7, 5, 8), 3),   # edge
        ((1, 2, 3, 4, 0, 6, 7, 5, 8), 4),   # centre
    ],
    ids=["corner", "edge", "centre"],
)
def test_successor_count_depends_on_blank(board, expected) -> None:
    assert len(successors(board)) == expected


def test_successors_follow_move_order() -> None:
    out = successors(GOAL)
    assert out == [
        ((0, -1), (1, 2, 3, 4, 5, 6, 7, 0, 8)),
        ((-1, 0), (1, 2, 3, 4, 5, 0, 7, 8, 6)),
    ]


def test_slide_off_grid_returns_none() -> None:
    assert slide(GOAL, (0, 1)) is None
    assert slide(GOAL, (1, 0)) is None


def test_slide_leaves_input_untouched() -> None:
    before = tuple(GOAL)
    slide(GOAL, (0, -1))
    assert GOAL == before
    assert find_blank(GOAL) == (2, 2)


def test_apply_moves_returns_every_board() -> None:
    start = (1, 2, 3, 4, 5, 0, 7, 8, 6)
    boards = apply_moves(start, [(1, 0)])
    assert boards == [start, GOAL]


def test_apply_moves_accepts_lists() -> None:
    assert apply_moves((1, 2, 3, 4, 5, 0, 7, 8, 6), [[1, 0]])[-1] == GOAL


@pytest.mark.parametrize("move", [(0, 1), (1, 1), (2, 0)])
def test_apply_moves_rejects_illegal(move) -> None:
    with pytest.raises(IllegalMoveError):
        apply_moves(GOAL, [move])


@pytest.mark.parametrize(
    "board",
    [
        [[1, 2, 3], [4, 5, 6]],                 # too few rows
        [[1, 2, 3, 4], [5, 6, 7, 8], [0]],      # ragged
        [[1, 1, 3], [4, 5, 6], [7, 8, 0]],      # duplicate
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],      # no blank
        [[1, 2, 3], [4, 5, 6], [7, 8, "0"]],    # not an int
        [[True, 2, 3], [4, 5, 6], [7, 8, 0]],   # bool is not a tile
        "123456780",
    ],
)
def test_validate_rejects_malformed(board) -> None:
    with pytest.raises(InvalidBoardError):
        validate(board)


def test_validate_returns_flat_board() -> None:
    assert validate([[1, 2, 3], [4, 5, 6], [7, 8, 0]]) == GOAL


def test_invalid_board_is_value_error() -> None:
    assert issubclass(InvalidBoardError, ValueError)
    assert issubclass(IllegalMoveError, ValueError)


def test_parity() -> None:
    assert is_solvable(GOAL)
    swapped = make_unsolvable_variant(GOAL)
    assert swapped == (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert not is_solvable(swapped)


def test_unsolvable_variant_skips_blank() -> None:
    assert make_unsolvable_variant((0, 1, 2, 3, 4, 5, 6, 7, 8)) == (0, 2, 1, 3, 4, 5, 6, 7, 8)


@pytest.mark.parametrize("seed", range(5))
def test_scramble_is_seeded_and_solvable(seed) -> None:
    a = scramble(20, seed)
    assert a == scramble(20, seed)
    assert sorted(a) == list(range(9))
    assert is_solvable(a)


def test_scramble_zero_depth_is_goal() -> None:
    assert scramble(0, 123) == GOAL
