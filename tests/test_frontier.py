"""Frontier ordering and node bookkeeping."""

from __future__ import annotations

import random

from eightpuzzle.domains.puzzle8 import GOAL
from eightpuzzle.search.frontier import FifoFrontier, PriorityFrontier
from eightpuzzle.search.node import Node, reconstruct_path


# -- helpers ------------------------------------------------------------------


def _node(h: int, tag: int) -> Node:
    n = Node.root(GOAL)
    n.h = h
    n.g = tag  # reused as a label; ordering below only looks at h
    return n


class _LinearFrontier:
    """Sorted list with 'insert before the first strictly greater key'."""

    def __init__(self) -> None:
        self.items: list[Node] = []

    def push(self, node: Node) -> None:
        idx = next((i for i, s in enumerate(self.items) if s.h > node.h), len(self.items))
        self.items.insert(idx, node)

    def pop(self) -> Node:
        return self.items.pop(0)


# -- frontier -----------------------------------------------------------------


def test_fifo_order() -> None:
    f = FifoFrontier()
    nodes = [_node(0, i) for i in range(4)]
    for n in nodes:
        f.push(n)
    assert len(f) == 4
    assert [f.pop() for _ in range(4)] == nodes
    assert len(f) == 0


def test_priority_ties_keep_insertion_order() -> None:
    f = PriorityFrontier(lambda n: n.h)
    for tag, h in enumerate([3, 1, 3, 1, 2]):
        f.push(_node(h, tag))
    popped = [(n.h, n.g) for n in (f.pop() for _ in range(5))]
    assert popped == [(1, 1), (1, 3), (2, 4), (3, 0), (3, 2)]


def test_priority_matches_linear_stable_insertion() -> None:
    rng = random.Random(7)
    heap = PriorityFrontier(lambda n: n.h)
    linear = _LinearFrontier()
    tag = 0
    for _ in range(2000):
        if linear.items and rng.random() < 0.4:
            assert heap.pop() is linear.pop()
        else:
            n = _node(rng.randint(0, 6), tag)
            tag += 1
            heap.push(n)
            linear.push(n)
    while linear.items:
        assert heap.pop() is linear.pop()
    assert len(heap) == 0


# -- nodes --------------------------------------------------------------------


def test_root_defaults() -> None:
    r = Node.root([1, 2, 3, 4, 5, 0, 7, 8, 6])
    assert r.board == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert (r.parent, r.move, r.g, r.h, r.f) == (None, None, 0, 0, 0)
    assert not r.is_goal()


def test_children_link_to_parent() -> None:
    r = Node.root((1, 2, 3, 4, 5, 0, 7, 8, 6))
    kids = list(r.expand())
    assert [k.move for k in kids] == [(1, 0), (0, -1), (-1, 0)]
    assert all(k.parent is r and k.g == 1 and k.h == 0 and k.f == 0 for k in kids)
    assert kids[0].is_goal()


def test_identity_is_board_only() -> None:
    a = Node.root(GOAL)
    b = Node(board=GOAL, parent=a, move=(0, 1), g=5, h=2, f=7)
    assert a.key == b.key == GOAL


def test_reconstruct_path() -> None:
    r = Node.root(GOAL)
    assert reconstruct_path(r) == []

    n = r
    for _ in range(3):
        n = next(n.expand())
    assert n.g == 3
    assert reconstruct_path(n) == [(0, -1), (0, 1), (0, -1)]

    depth, p = 0, n
    while p.parent is not None:
        depth, p = depth + 1, p.parent
    assert depth == n.g
