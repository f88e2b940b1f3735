from eightpuzzle.domains.puzzle8 import Board
from eightpuzzle.search.engine import Strategy, search

BFS = Strategy(algorithm="BFS", mark_on_insert=True)

def bfs(start: Board):
    """Uninformed FIFO search; successors are marked explored as they are enqueued."""
    return search(start, BFS)
