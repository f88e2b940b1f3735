from typing import Callable

from eightpuzzle.domains.puzzle8 import Board
from eightpuzzle.search.engine import Strategy, search

def best_first(start: Board, hfun: Callable[[Board], int], heuristic: str = ""):
    """
    Greedy best-first: frontier ordered by h alone, ties in insertion order.
    Successors are marked explored only when expanded. No optimality guarantee.
    """
    strategy = Strategy(algorithm="Best-First", priority="h", hfun=hfun,
                        heuristic=heuristic or getattr(hfun, "__name__", ""))
    return search(start, strategy)
