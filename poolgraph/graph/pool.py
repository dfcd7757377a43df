"""Append-only graph container backed by a node pool.

`Graph` keeps every node in a single list. A node's identity is its position
in that list, and edges are stored per node as a mapping from destination
index to weight. Nothing is ever removed, so an index that was valid once
stays valid for the lifetime of the graph.

Nodes are addressed through handles (see ``poolgraph.graph.handles``):
``insert`` returns an exclusive ``NodeMut``, queries return read-only
``Node`` views, and ``WeakNode`` indices are what the connect operations take.
"""

from __future__ import annotations

from bisect import insort
from copy import copy, deepcopy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Generic, Iterator, List, Optional, Tuple

from poolgraph.config import GRAPH_CONFIG, GraphConfig
from poolgraph.graph.borrow import BorrowState
from poolgraph.graph.handles import Node, NodeMut, WeakNode
from poolgraph.logging import get_logger
from poolgraph.types.base import E, NodeIndex, T

if TYPE_CHECKING:
    from poolgraph.model.path import Path

logger = get_logger(__name__)


@dataclass
class _Adjacency(Generic[T, E]):
    """Payload of one node plus its outgoing edges.

    Attributes:
        value: Node payload.
        edges: Destination index -> edge weight. At most one edge per destination.
        order: Destination indices of ``edges`` kept in ascending order.
    """

    value: T
    edges: Dict[NodeIndex, E] = field(default_factory=dict)
    order: List[NodeIndex] = field(default_factory=list)

    def set_edge(self, end: NodeIndex, weight: E) -> None:
        if end not in self.edges:
            insort(self.order, end)
        self.edges[end] = weight


class Graph(Generic[T, E]):
    """Directed graph with optional edge weights over an append-only node pool.

    Example:
        >>> g = Graph()
        >>> a = g.insert("A").weak()
        >>> b = g.insert("B").weak()
        >>> g.connect_undirected_weighted(a, b, 4)
        >>> [n.value for n in g.weak_ref(a).neighbors()]
        ['B']
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        """Create an empty graph.

        Args:
            config: Per-graph defaults; the global ``GRAPH_CONFIG`` when omitted.
        """
        self.config: GraphConfig = config if config is not None else GRAPH_CONFIG
        self._nodes: List[_Adjacency[T, E]] = []
        self._borrow = BorrowState()

    def __len__(self) -> int:
        return len(self._nodes)

    def is_empty(self) -> bool:
        """Return True if no node has been inserted yet."""
        return not self._nodes

    def __repr__(self) -> str:
        edge_count = sum(len(adj.edges) for adj in self._nodes)
        return f"Graph(nodes={len(self._nodes)}, edges={edge_count})"

    #
    # Mutation
    #
    def insert(self, value: T) -> NodeMut[T, E]:
        """Append a node holding ``value`` and return an exclusive handle to it.

        Args:
            value: Payload of the new node.

        Returns:
            NodeMut: Handle to the new node. Its index is ``len(self) - 1``.
        """
        self._nodes.append(_Adjacency(value))
        idx = len(self._nodes) - 1
        logger.debug("Inserted node %d: %r", idx, value)
        return NodeMut(self, idx, self._borrow.acquire_exclusive())

    def connect_weighted(
        self, start: WeakNode[T, E], end: WeakNode[T, E], weight: E
    ) -> None:
        """Create or overwrite the directed edge ``start -> end``.

        Args:
            start: Source node.
            end: Destination node.
            weight: Edge weight; replaces any previous weight for this pair.

        Raises:
            IndexError: If either node lies outside this graph's pool.
        """
        self._check_index(start.index, "Cannot connect")
        self._check_index(end.index, "Cannot connect")
        self._borrow.release_all()
        self._nodes[start.index].set_edge(end.index, weight)
        logger.debug(
            "Connected %d -> %d (weight=%r)", start.index, end.index, weight
        )

    def connect_undirected_weighted(
        self, start: WeakNode[T, E], end: WeakNode[T, E], weight: E
    ) -> None:
        """Create or overwrite edges in both directions with the same weight.

        The forward edge stores a shallow copy of ``weight``.

        Raises:
            IndexError: If either node lies outside this graph's pool.
        """
        self.connect_weighted(start, end, copy(weight))
        self.connect_weighted(end, start, weight)

    def connect(self, start: WeakNode[T, E], end: WeakNode[T, E]) -> None:
        """Create a directed edge carrying the unit weight.

        Raises:
            IndexError: If either node lies outside this graph's pool.
        """
        self.connect_weighted(start, end, self.config.unit_weight)

    def connect_undirected(self, start: WeakNode[T, E], end: WeakNode[T, E]) -> None:
        """Create edges in both directions carrying the unit weight.

        Raises:
            IndexError: If either node lies outside this graph's pool.
        """
        self.connect_weighted(start, end, self.config.unit_weight)
        self.connect_weighted(end, start, self.config.unit_weight)

    def weak_mut(self, node: WeakNode[T, E]) -> NodeMut[T, E]:
        """Convert a weak reference into an exclusive handle.

        Passing a ``WeakNode`` from another graph is not detected and yields
        whichever node sits at that index here.

        Raises:
            IndexError: If the index lies outside this graph's pool.
        """
        self._check_index(node.index, "Weak reference points past end of graph")
        return NodeMut(self, node.index, self._borrow.acquire_exclusive())

    #
    # Queries
    #
    def find(self, item: T) -> Optional[Node[T, E]]:
        """Return the first node, in insertion order, whose payload equals ``item``.

        Returns:
            Optional[Node]: Matching node, or None if there is none.
        """
        epoch = self._borrow.acquire_shared()
        for idx, adj in enumerate(self._nodes):
            if adj.value == item:
                return Node(self, idx, epoch)
        return None

    def weak_ref(self, node: WeakNode[T, E]) -> Node[T, E]:
        """Convert a weak reference into a read-only handle.

        Passing a ``WeakNode`` from another graph is not detected and yields
        whichever node sits at that index here.

        Raises:
            IndexError: If the index lies outside this graph's pool.
        """
        self._check_index(node.index, "Weak reference points past end of graph")
        return Node(self, node.index, self._borrow.acquire_shared())

    def arbitrary_node(self) -> Node[T, E]:
        """Return a handle to the first node in the pool.

        Raises:
            IndexError: If the graph is empty.
        """
        self._check_index(0, "Graph is empty; no arbitrary node")
        return Node(self, 0, self._borrow.acquire_shared())

    def nodes(self) -> Iterator[Node[T, E]]:
        """Iterate over every node in pool order."""
        epoch = self._borrow.acquire_shared()
        return self._iter_nodes(epoch)

    def _iter_nodes(self, epoch: int) -> Iterator[Node[T, E]]:
        for idx in range(len(self._nodes)):
            self._borrow.check_shared(epoch)
            yield Node(self, idx, epoch)

    def dijkstras(
        self, start: Node[T, E], end: Node[T, E], zero: Optional[E] = None
    ) -> Optional[Path[T, E]]:
        """Return a minimum-weight path from ``start`` to ``end``.

        See ``poolgraph.algorithms.spf.dijkstras`` for details.

        Raises:
            ValueError: If either handle belongs to a different graph.
        """
        from poolgraph.algorithms.spf import dijkstras

        return dijkstras(self, start, end, zero=zero)

    def copy(self) -> Graph[T, E]:
        """Return an independent deep copy of this graph.

        Weak references remain usable on the copy since indices coincide;
        strong handles stay bound to this graph.
        """
        self._borrow.acquire_shared()
        clone: Graph[T, E] = Graph(self.config)
        clone._nodes = deepcopy(self._nodes)
        return clone

    #
    # Pool access used by handles, iterators and algorithms
    #
    def _check_index(self, idx: NodeIndex, action: str) -> None:
        if not 0 <= idx < len(self._nodes):
            raise IndexError(
                f"{action}: node index {idx} is not part of this graph "
                f"(pool size {len(self._nodes)})."
            )

    def _value(self, idx: NodeIndex) -> T:
        return self._nodes[idx].value

    def _set_value(self, idx: NodeIndex, value: T) -> None:
        self._nodes[idx].value = value

    def _successors(self, idx: NodeIndex) -> List[NodeIndex]:
        return self._nodes[idx].order

    def _out_edges(self, idx: NodeIndex) -> Iterator[Tuple[NodeIndex, E]]:
        adj = self._nodes[idx]
        return ((end, adj.edges[end]) for end in adj.order)

    def _edge_weight(self, start: NodeIndex, end: NodeIndex) -> E:
        return self._nodes[start].edges[end]
