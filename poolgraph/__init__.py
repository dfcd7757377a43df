"""poolgraph: append-only in-memory graph with handles, traversals and Dijkstra.

A graph stores arbitrary node payloads in a pool and identifies nodes by
their position in it. Edges are directed and optionally weighted.

Primary API:
    Graph - Node pool with connect/find/handle conversion and shortest paths
    WeakNode - Index-only handle, safe to store long term
    Node, NodeMut - Read-only and exclusive views bound to one borrow
    Path - Route returned by Graph.dijkstras()

Example:
    from poolgraph import Graph

    graph = Graph()
    a = graph.insert("A").weak()
    b = graph.insert("B").weak()
    c = graph.insert("C").weak()
    graph.connect_undirected_weighted(a, c, 3)
    graph.connect_undirected_weighted(a, b, 1)
    graph.connect_undirected_weighted(b, c, 1)

    path = graph.dijkstras(graph.find("A"), graph.find("C"))
    [node.value for node in path]  # ['A', 'B', 'C']
    path.length()                  # 2
"""

from __future__ import annotations

from poolgraph import logging
from poolgraph._version import __version__
from poolgraph.algorithms.spf import dijkstras
from poolgraph.algorithms.traversal import BreadthFirst, DepthFirst, Neighbors
from poolgraph.config import GRAPH_CONFIG, GraphConfig
from poolgraph.graph import Graph, Node, NodeMut, WeakNode
from poolgraph.model.path import Path, PathIterator

__all__ = [
    # Version
    "__version__",
    # Graph and handles
    "Graph",
    "Node",
    "NodeMut",
    "WeakNode",
    # Algorithms
    "Neighbors",
    "DepthFirst",
    "BreadthFirst",
    "dijkstras",
    # Model
    "Path",
    "PathIterator",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Utilities
    "logging",
]
