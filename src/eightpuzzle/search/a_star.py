from typing import Callable

from eightpuzzle.domains.puzzle8 import Board
from eightpuzzle.search.engine import Strategy, search

def a_star(start: Board, hfun: Callable[[Board], int], heuristic: str = ""):
    """
    A*: frontier ordered by f = g + h, ties in insertion order.
    Optimal with an admissible, consistent heuristic (manhattan, hamming).
    """
    strategy = Strategy(algorithm="A*", priority="f", hfun=hfun,
                        heuristic=heuristic or getattr(hfun, "__name__", ""))
    return search(start, strategy)
