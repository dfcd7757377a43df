"""Route through a graph as an ordered sequence of pool indices.

A ``Path`` is produced by ``Graph.dijkstras`` and stays bound to the graph
borrow it came from. Consecutive entries normally correspond to existing
directed edges; ``push`` appends without checking that, so ``length`` can
fail afterwards if the caller appended a node with no connecting edge.
"""

from __future__ import annotations

from copy import copy
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

from poolgraph.graph.handles import Node, WeakNode
from poolgraph.types.base import E, NodeIndex, T

if TYPE_CHECKING:
    from poolgraph.graph.pool import Graph


class Path(Generic[T, E]):
    """A path through a graph.

    Attributes:
        graph: Graph the path runs through.
    """

    def __init__(
        self, graph: Graph[T, E], path: Iterable[NodeIndex], epoch: int
    ) -> None:
        self.graph = graph
        self._path: List[NodeIndex] = list(path)
        self._epoch = epoch

    @property
    def indices(self) -> Tuple[NodeIndex, ...]:
        """Pool indices of the path, first to last."""
        return tuple(self._path)

    def iter(self) -> PathIterator[T, E]:
        """Return an iterator over the nodes that make up this path."""
        self._check()
        return PathIterator(self.graph, tuple(self._path), self._epoch)

    def __iter__(self) -> PathIterator[T, E]:
        return self.iter()

    def __len__(self) -> int:
        """Return the number of nodes in the path (not its weight; see ``length``)."""
        return len(self._path)

    def __getitem__(self, idx: int) -> Node[T, E]:
        self._check()
        return Node(self.graph, self._path[idx], self._epoch)

    @property
    def src_node(self) -> Node[T, E]:
        """Return the first node in the path."""
        return self[0]

    @property
    def dst_node(self) -> Node[T, E]:
        """Return the last node in the path."""
        return self[-1]

    def push(self, node: WeakNode[T, E]) -> None:
        """Append ``node`` to the end of this path.

        No edge is required between the current last node and ``node``.

        Raises:
            IndexError: If ``node`` lies outside the graph's pool.
        """
        self._check()
        self.graph._check_index(node.index, "Cannot extend path")
        self._path.append(node.index)

    def length(self, zero: Optional[E] = None) -> E:
        """Sum the weights of consecutive edges along the path.

        Args:
            zero: Starting value; defaults to ``graph.config.zero_weight``.

        Returns:
            Total weight; ``zero`` for paths with fewer than two nodes.

        Raises:
            KeyError: If a consecutive pair has no edge between them.
        """
        self._check()
        # The config default is shared by every graph using it; never mutate it.
        total = copy(self.graph.config.zero_weight if zero is None else zero)
        for start, end in zip(self._path, self._path[1:]):
            try:
                total = total + self.graph._edge_weight(start, end)
            except KeyError:
                raise KeyError(
                    f"No edge from node {start} to node {end} along this path."
                ) from None
        return total

    def _check(self) -> None:
        self.graph._borrow.check_shared(self._epoch)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.graph is other.graph and self._path == other._path

    def __repr__(self) -> str:
        values = [self.graph._value(idx) for idx in self._path]
        return f"Path({values!r})"


class PathIterator(Generic[T, E]):
    """Iterator over the nodes of a ``Path``."""

    def __init__(
        self, graph: Graph[T, E], path: Tuple[NodeIndex, ...], epoch: int
    ) -> None:
        self._graph = graph
        self._iter: Iterator[NodeIndex] = iter(path)
        self._epoch = epoch

    def __iter__(self) -> PathIterator[T, E]:
        return self

    def __next__(self) -> Node[T, E]:
        self._graph._borrow.check_shared(self._epoch)
        return Node(self._graph, next(self._iter), self._epoch)
