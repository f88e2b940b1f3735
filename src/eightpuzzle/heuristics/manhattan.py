from typing import Dict, Tuple

from eightpuzzle.domains.puzzle8 import Board, GOAL, SIZE

_goal_pos: Dict[int, Tuple[int, int]] = {GOAL[i]: divmod(i, SIZE) for i in range(SIZE * SIZE)}

def manhattan(s: Board) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored)."""
    dist = 0
    for idx, tile in enumerate(s):
        if tile == 0:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = _goal_pos[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist
