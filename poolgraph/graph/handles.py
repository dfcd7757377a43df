"""Handles into a graph's node pool.

Three handle types point at nodes:

- ``WeakNode``: just the pool index. Immutable, hashable and safe to keep
  anywhere (e.g. in a caller's own lookup table). It is only meaningful for
  the graph that produced it; nothing checks that.
- ``Node``: a read-only view bound to one shared borrow of the graph. Gives
  access to the payload and spawns traversal iterators.
- ``NodeMut``: a view bound to an exclusive borrow. Additionally allows
  replacing the payload. Connectivity is changed only through ``Graph``.

Strong handles (``Node``/``NodeMut``) become stale as soon as the graph is
borrowed in a conflicting way; see ``poolgraph.graph.borrow``.
"""

from __future__ import annotations

from copy import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic

from poolgraph.types.base import E, NodeIndex, T

if TYPE_CHECKING:
    from poolgraph.algorithms.traversal import BreadthFirst, DepthFirst, Neighbors
    from poolgraph.graph.pool import Graph


@dataclass(frozen=True, order=True)
class WeakNode(Generic[T, E]):
    """Index-only reference to a node.

    Attributes:
        index: Position of the node in its graph's pool.
    """

    index: NodeIndex


class Node(Generic[T, E]):
    """Read-only handle to a single node within a graph."""

    __slots__ = ("_graph", "_index", "_epoch")

    def __init__(self, graph: Graph[T, E], index: NodeIndex, epoch: int) -> None:
        self._graph = graph
        self._index = index
        self._epoch = epoch

    @property
    def graph(self) -> Graph[T, E]:
        """Graph this handle belongs to."""
        return self._graph

    @property
    def index(self) -> NodeIndex:
        """Position of the node in the pool."""
        return self._index

    @property
    def value(self) -> T:
        """Payload stored in this node.

        Raises:
            RuntimeError: If the handle is stale.
        """
        self._check()
        return self._graph._value(self._index)

    def weak(self) -> WeakNode[T, E]:
        """Return the weak reference of this node."""
        return WeakNode(self._index)

    def clone_inner(self) -> T:
        """Return a shallow copy of the payload."""
        return copy(self.value)

    def neighbors(self) -> Neighbors[T, E]:
        """Return an iterator over the direct successors of this node."""
        from poolgraph.algorithms.traversal import Neighbors

        self._check()
        return Neighbors(self._graph, self._index, self._epoch)

    def depth_first(self) -> DepthFirst[T, E]:
        """Return a depth-first iterator through the graph starting at this node."""
        from poolgraph.algorithms.traversal import DepthFirst

        self._check()
        return DepthFirst(self._graph, self._index, self._epoch)

    def breadth_first(self) -> BreadthFirst[T, E]:
        """Return a breadth-first iterator through the graph starting at this node."""
        from poolgraph.algorithms.traversal import BreadthFirst

        self._check()
        return BreadthFirst(self._graph, self._index, self._epoch)

    def _check(self) -> None:
        self._graph._borrow.check_shared(self._epoch)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._graph is other._graph and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._graph), self._index))

    def __repr__(self) -> str:
        return f"Node(index={self._index}, value={self._graph._value(self._index)!r})"


class NodeMut(Generic[T, E]):
    """Exclusive handle to a single node; allows replacing its payload."""

    __slots__ = ("_graph", "_index", "_epoch")

    def __init__(self, graph: Graph[T, E], index: NodeIndex, epoch: int) -> None:
        self._graph = graph
        self._index = index
        self._epoch = epoch

    @property
    def index(self) -> NodeIndex:
        """Position of the node in the pool."""
        return self._index

    @property
    def value(self) -> T:
        """Payload stored in this node; assignable.

        Raises:
            RuntimeError: If exclusive access has ended.
        """
        self._check()
        return self._graph._value(self._index)

    @value.setter
    def value(self, new_value: T) -> None:
        self._check()
        self._graph._set_value(self._index, new_value)

    def weak(self) -> WeakNode[T, E]:
        """Convert to a weak reference so the graph can be used elsewhere."""
        return WeakNode(self._index)

    def neighbors(self) -> Neighbors[T, E]:
        """Return an iterator over the direct successors of this node."""
        from poolgraph.algorithms.traversal import Neighbors

        self._check()
        return Neighbors(self._graph, self._index, self._epoch)

    def _check(self) -> None:
        self._graph._borrow.check_exclusive(self._epoch)

    def __repr__(self) -> str:
        return (
            f"NodeMut(index={self._index}, value={self._graph._value(self._index)!r})"
        )
