from __future__ import annotations
from dataclasses import dataclass
from time import perf_counter
from typing import Callable, Optional, Set
import logging

from eightpuzzle.domains.puzzle8 import Board
from eightpuzzle.search.frontier import FifoFrontier, PriorityFrontier
from eightpuzzle.search.node import Node, reconstruct_path

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 1000


@dataclass(frozen=True)
class Strategy:
    """How one driver differs from the others.

    priority:        None for FIFO, else the node attribute ordering the frontier ("h" or "f").
    hfun:            heuristic used to score successors (informed searches only).
    mark_on_insert:  add successors to the explored set when they are enqueued
                     (BFS) instead of only when they are expanded.
    """
    algorithm: str
    priority: Optional[str] = None
    hfun: Optional[Callable[[Board], int]] = None
    heuristic: str = ""
    mark_on_insert: bool = False

    def new_frontier(self):
        if self.priority is None:
            return FifoFrontier()
        attr = self.priority
        return PriorityFrontier(lambda n: getattr(n, attr))

    def score(self, node: Node) -> None:
        if self.hfun is None:
            return
        node.h = self.hfun(node.board)
        node.f = node.g + node.h


def search(start: Board, strategy: Strategy):
    """
    Run the shared search loop from ``start`` until the goal is popped or the
    frontier is empty. Returns a dict with the move path (None when exhausted)
    and expansion counters.
    """
    t0 = perf_counter()
    name = strategy.algorithm
    logger.info("Starting %s%s", name, f" ({strategy.heuristic})" if strategy.heuristic else "")

    frontier = strategy.new_frontier()
    frontier.push(Node.root(start))
    explored: Set[Board] = set()

    iterations = 0
    generated = 0
    peak_open = 1

    def result(path, termination):
        return {
            "path": path,
            "g": len(path) if path is not None else None,
            "expanded": iterations,
            "generated": generated,
            "peak_open": peak_open,
            "peak_closed": len(explored),
            "time": perf_counter() - t0,
            "algorithm": name,
            "heuristic": strategy.heuristic,
            "termination": termination,
        }

    while len(frontier) > 0:
        iterations += 1
        if iterations % PROGRESS_EVERY == 0:
            logger.debug("%s: %d iterations, frontier size: %d", name, iterations, len(frontier))

        node = frontier.pop()
        if node.is_goal():
            logger.info("%s found solution in %d iterations", name, iterations)
            return result(reconstruct_path(node), "ok")

        explored.add(node.key)

        for child in node.expand():
            if child.key in explored:
                continue
            generated += 1
            strategy.score(child)
            frontier.push(child)
            if strategy.mark_on_insert:
                explored.add(child.key)
        peak_open = max(peak_open, len(frontier))

    logger.info("%s terminated after %d iterations without finding a solution", name, iterations)
    return result(None, "exhausted")
