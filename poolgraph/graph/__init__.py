"""Graph container and handle types.

This package provides the append-only `Graph` (`pool`), the handle types
`WeakNode`, `Node` and `NodeMut` (`handles`), and the borrow bookkeeping that
keeps strong handles honest (`borrow`).
"""

from poolgraph.graph.handles import Node, NodeMut, WeakNode
from poolgraph.graph.pool import Graph

__all__ = ["Graph", "Node", "NodeMut", "WeakNode"]
