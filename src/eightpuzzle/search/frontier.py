from __future__ import annotations
from collections import deque
from typing import Callable, Deque, List, Tuple
import heapq
import itertools

from eightpuzzle.search.node import Node


class FifoFrontier:
    """Strict insertion order: push to the back, pop from the front."""

    def __init__(self) -> None:
        self._q: Deque[Node] = deque()

    def push(self, node: Node) -> None:
        self._q.append(node)

    def pop(self) -> Node:
        return self._q.popleft()

    def __len__(self) -> int:
        return len(self._q)


class PriorityFrontier:
    """Pops the node with the smallest key; equal keys pop in insertion order.

    Equivalent to keeping a list sorted by key and inserting each new node
    before the first element whose key is strictly greater: that list is
    always ordered by (key, insertion counter), which is the heap order here.
    """

    def __init__(self, key: Callable[[Node], int]) -> None:
        self._key = key
        self._heap: List[Tuple[int, int, Node]] = []
        self._counter = itertools.count()

    def push(self, node: Node) -> None:
        heapq.heappush(self._heap, (self._key(node), next(self._counter), node))

    def pop(self) -> Node:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)
