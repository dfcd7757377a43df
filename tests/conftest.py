"""Shared graph fixtures.

Each fixture builds a fresh ``Graph`` and returns it together with the weak
references of its nodes, keyed by payload, so tests can address nodes
without relying on ``find``.
"""

from __future__ import annotations

from typing import Dict, Tuple

import pytest

from poolgraph import Graph, WeakNode

GraphFixture = Tuple[Graph, Dict[str, WeakNode]]


def _build(names, edges, undirected: bool = True) -> GraphFixture:
    g: Graph = Graph()
    refs = {name: g.insert(name).weak() for name in names}
    for src, dst, weight in edges:
        if undirected:
            g.connect_undirected_weighted(refs[src], refs[dst], weight)
        else:
            g.connect_weighted(refs[src], refs[dst], weight)
    return g, refs


@pytest.fixture
def triangle1() -> GraphFixture:
    # Weights (undirected):
    #        [1]       [1]
    #   A◄───────►B◄───────►C
    #   ▲                   ▲
    #   └─────────[3]───────┘
    return _build(
        "ABC",
        [("A", "C", 3), ("A", "B", 1), ("B", "C", 1)],
    )


@pytest.fixture
def line1() -> GraphFixture:
    # Weights (directed):
    #     [2]     [3]     [4]
    #  A──────►B──────►C──────►D
    return _build(
        "ABCD",
        [("A", "B", 2), ("B", "C", 3), ("C", "D", 4)],
        undirected=False,
    )


@pytest.fixture
def square1() -> GraphFixture:
    # Weights (directed):
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return _build(
        "ABCD",
        [("A", "B", 1), ("B", "C", 1), ("A", "D", 2), ("D", "C", 2)],
        undirected=False,
    )


@pytest.fixture
def tree1() -> GraphFixture:
    # Directed, unit weights:
    #
    #         A
    #       / | \
    #      B  C  D
    #     / \     \
    #    E   F     G
    return _build(
        "ABCDEFG",
        [
            ("A", "B", 1),
            ("A", "C", 1),
            ("A", "D", 1),
            ("B", "E", 1),
            ("B", "F", 1),
            ("D", "G", 1),
        ],
        undirected=False,
    )


@pytest.fixture
def islands1() -> GraphFixture:
    # Two components (undirected) plus an isolated node:
    #
    #   A◄──[5]──►B        C◄──[1]──►D        E
    return _build("ABCDE", [("A", "B", 5), ("C", "D", 1)])


@pytest.fixture
def cycle1() -> GraphFixture:
    # Directed ring with a self-loop on C:
    #
    #   A──[1]──►B──[1]──►C──[1]──►A,  C──[1]──►C
    return _build(
        "ABC",
        [("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("C", "C", 1)],
        undirected=False,
    )
