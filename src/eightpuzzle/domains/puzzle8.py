from __future__ import annotations
from typing import Tuple, List, Optional, Sequence, Iterable
import random

Board = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank
Move = Tuple[int, int]   # (row delta, col delta) of the blank

SIZE = 3
GOAL: Board = (1, 2, 3, 4, 5, 6, 7, 8, 0)
GOAL_ROWS: Tuple[Tuple[int, ...], ...] = ((1, 2, 3), (4, 5, 6), (7, 8, 0))

# Order matters: successors are generated (and ties broken) in this order.
MOVES: Tuple[Move, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class InvalidBoardError(ValueError):
    """Board is not a 3x3 permutation of 0..8."""


class IllegalMoveError(ValueError):
    """Move is not one of MOVES or slides the blank off the grid."""


def flatten(board: Sequence) -> Board:
    """Accept a 3x3 grid (list of rows) or an already flat sequence."""
    if len(board) == SIZE and all(isinstance(row, (list, tuple)) for row in board):
        return tuple(v for row in board for v in row)
    return tuple(board)


def to_rows(board: Board) -> List[List[int]]:
    return [list(board[r * SIZE:(r + 1) * SIZE]) for r in range(SIZE)]


def validate(board: Sequence) -> Board:
    """Return the flat board, or raise InvalidBoardError."""
    if not isinstance(board, (list, tuple)) or len(board) != SIZE:
        raise InvalidBoardError(f"Expected {SIZE} rows, got {board!r}")
    for row in board:
        if not isinstance(row, (list, tuple)) or len(row) != SIZE:
            raise InvalidBoardError(f"Expected rows of {SIZE} tiles, got {row!r}")
        for v in row:
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidBoardError(f"Tiles must be integers, got {v!r}")
    flat = flatten(board)
    if sorted(flat) != list(range(SIZE * SIZE)):
        raise InvalidBoardError(
            f"Tiles must be 0..{SIZE * SIZE - 1} each exactly once, got {list(flat)}"
        )
    return flat


def find_blank(board: Board) -> Tuple[int, int]:
    return divmod(board.index(0), SIZE)


def slide(board: Board, move: Move) -> Optional[Board]:
    """Swap the blank with the tile at blank + move; None if off the grid."""
    r, c = find_blank(board)
    nr, nc = r + move[0], c + move[1]
    if not (0 <= nr < SIZE and 0 <= nc < SIZE):
        return None
    i, j = r * SIZE + c, nr * SIZE + nc
    lst = list(board)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)


def successors(board: Board) -> List[Tuple[Move, Board]]:
    """Return (move, next_board) pairs in MOVES order."""
    out: List[Tuple[Move, Board]] = []
    for m in MOVES:
        nxt = slide(board, m)
        if nxt is not None:
            out.append((m, nxt))
    return out


def apply_moves(board: Board, moves: Iterable[Sequence[int]]) -> List[Board]:
    """Replay moves from board; returns every board along the way (start first)."""
    boards = [board]
    for k, m in enumerate(moves):
        m = tuple(m)
        if m not in MOVES:
            raise IllegalMoveError(f"Move {k} {m!r} is not a unit blank slide")
        nxt = slide(boards[-1], m)
        if nxt is None:
            raise IllegalMoveError(f"Move {k} {m!r} leaves the grid at blank {find_blank(boards[-1])}")
        boards.append(nxt)
    return boards


def is_solvable(s: Board) -> bool:
    """8-puzzle solvability: parity of inversions must be even."""
    arr = [x for x in s if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return (inv % 2) == 0


def scramble(depth: int, seed: int) -> Board:
    """Scramble GOAL by performing 'depth' random legal blank moves (no immediate backtracks)."""
    rng = random.Random(seed)
    s = GOAL
    last: Optional[Move] = None
    for _ in range(depth):
        cand = [(m, nxt) for m, nxt in successors(s)]
        if last is not None and len(cand) > 1:
            undo = (-last[0], -last[1])
            cand = [(m, nxt) for m, nxt in cand if m != undo]
        last, s = rng.choice(cand)
    return s


def make_unsolvable_variant(s: Board) -> Board:
    """Swap the first two non-blank tiles, flipping the parity class."""
    lst = list(s)
    i = next(k for k, v in enumerate(lst) if v != 0)
    j = next(k for k, v in enumerate(lst[i + 1:], start=i + 1) if v != 0)
    lst[i], lst[j] = lst[j], lst[i]
    return tuple(lst)
