"""Entry point used by the CLIs: board/argument checks and algorithm dispatch.

The search functions themselves assume a well-formed board; everything that
comes from outside goes through ``run`` or ``solve`` here.
"""
from __future__ import annotations
from time import perf_counter
from typing import Callable, List, Optional, Sequence
import logging

from eightpuzzle.domains.puzzle8 import Board, Move, validate
from eightpuzzle.heuristics.hamming import hamming
from eightpuzzle.heuristics.manhattan import manhattan
from eightpuzzle.search.a_star import a_star
from eightpuzzle.search.best_first import best_first
from eightpuzzle.search.bfs import bfs

logger = logging.getLogger(__name__)

ALGORITHMS = ("bfs", "bestFirst", "aStar")
HEURISTICS = ("hamming", "manhattan")


class UnknownAlgorithmError(ValueError):
    pass


def choose_heuristic(name: Optional[str]) -> Callable[[Board], int]:
    """'hamming' selects the misplaced-tile count; anything else is Manhattan distance."""
    return hamming if name == "hamming" else manhattan


def run(board: Sequence, algorithm: str, heuristic: Optional[str] = None):
    """Validate, dispatch and return the full result dict of the chosen search."""
    if algorithm not in ALGORITHMS:
        raise UnknownAlgorithmError(
            f"Unknown algorithm: {algorithm}. Available: {', '.join(ALGORITHMS)}"
        )
    start = validate(board)

    logger.info("Solving puzzle using %s algorithm", algorithm)
    t0 = perf_counter()
    if algorithm == "bfs":
        res = bfs(start)
    else:
        hfun = choose_heuristic(heuristic)
        logger.info("Using %s heuristic", hfun.__name__)
        if algorithm == "bestFirst":
            res = best_first(start, hfun)
        else:
            res = a_star(start, hfun)
    ms = (perf_counter() - t0) * 1000

    if res["path"] is not None:
        logger.info("Solution found in %.2fms", ms)
        logger.info("Number of moves: %d", len(res["path"]))
    else:
        logger.info("No solution found after %.2fms", ms)
    return res


def solve(board: Sequence, algorithm: str, heuristic: Optional[str] = None) -> Optional[List[Move]]:
    """Return the blank moves from ``board`` to the goal, or None if the search is exhausted."""
    return run(board, algorithm, heuristic)["path"]
