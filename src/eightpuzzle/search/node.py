from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

from eightpuzzle.domains.puzzle8 import Board, Move, GOAL, successors


@dataclass(eq=False)
class Node:
    """One board plus the search-tree edge that produced it.

    Identity is the board alone (see ``key``); parent/move/g/h/f only
    describe how this copy of the board was reached.
    """
    board: Board
    parent: Optional["Node"] = None
    move: Optional[Move] = None
    g: int = 0
    h: int = 0
    f: int = 0

    @classmethod
    def root(cls, board: Board) -> "Node":
        return cls(board=tuple(board))

    @property
    def key(self) -> Board:
        return self.board

    def is_goal(self) -> bool:
        return self.board == GOAL

    def expand(self) -> Iterator["Node"]:
        """Children reachable by one blank slide, in MOVES order (h/f left at 0)."""
        for m, nxt in successors(self.board):
            yield Node(board=nxt, parent=self, move=m, g=self.g + 1)


def reconstruct_path(node: Node) -> List[Move]:
    path: List[Move] = []
    while node.parent is not None:
        path.append(node.move)  # type: ignore[arg-type]
        node = node.parent
    path.reverse()
    return path
