"""Lazy node iterators over a graph.

Each iterator is single-use: it advances by exactly one node per ``next()``
call and never materializes the reachable set up front. Obtain a fresh one
from a ``Node`` handle to traverse again.

Notes:
    Successors are always examined in ascending index order. ``DepthFirst``
    pushes them onto a stack in that order, so siblings come out in
    descending index order.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Generic, Iterator, List, Set

from poolgraph.graph.handles import Node
from poolgraph.logging import get_logger
from poolgraph.types.base import E, NodeIndex, T

if TYPE_CHECKING:
    from poolgraph.graph.pool import Graph

logger = get_logger(__name__)


class Neighbors(Generic[T, E]):
    """Iterator over the direct successors of one node, by ascending index."""

    def __init__(self, graph: Graph[T, E], index: NodeIndex, epoch: int) -> None:
        self._graph = graph
        self._epoch = epoch
        self._successors: Iterator[NodeIndex] = iter(graph._successors(index))

    def __iter__(self) -> Neighbors[T, E]:
        return self

    def __next__(self) -> Node[T, E]:
        self._graph._borrow.check_shared(self._epoch)
        return Node(self._graph, next(self._successors), self._epoch)


class DepthFirst(Generic[T, E]):
    """Iterator returning nodes in depth-first order from a start node."""

    def __init__(self, graph: Graph[T, E], start: NodeIndex, epoch: int) -> None:
        self._graph = graph
        self._epoch = epoch
        self._stack: List[NodeIndex] = [start]
        self._visited: Set[NodeIndex] = set()
        logger.debug("Depth-first traversal from node %d", start)

    def __iter__(self) -> DepthFirst[T, E]:
        return self

    def __next__(self) -> Node[T, E]:
        self._graph._borrow.check_shared(self._epoch)
        if not self._stack:
            raise StopIteration
        idx = self._stack.pop()
        self._visited.add(idx)
        for end in self._graph._successors(idx):
            if end in self._visited:
                continue
            self._stack.append(end)
            self._visited.add(end)
        return Node(self._graph, idx, self._epoch)


class BreadthFirst(Generic[T, E]):
    """Iterator returning nodes in breadth-first order from a start node."""

    def __init__(self, graph: Graph[T, E], start: NodeIndex, epoch: int) -> None:
        self._graph = graph
        self._epoch = epoch
        self._queue: Deque[NodeIndex] = deque([start])
        self._visited: Set[NodeIndex] = set()
        logger.debug("Breadth-first traversal from node %d", start)

    def __iter__(self) -> BreadthFirst[T, E]:
        return self

    def __next__(self) -> Node[T, E]:
        self._graph._borrow.check_shared(self._epoch)
        if not self._queue:
            raise StopIteration
        idx = self._queue.popleft()
        self._visited.add(idx)
        for end in self._graph._successors(idx):
            if end in self._visited:
                continue
            self._visited.add(end)
            self._queue.append(end)
        return Node(self._graph, idx, self._epoch)
