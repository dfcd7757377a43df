"""Base type aliases shared by the graph, traversal and path modules."""

from __future__ import annotations

from typing import Any, TypeVar

#: Position of a node in the graph's pool.
NodeIndex = int

#: Node payload type parameter.
T = TypeVar("T")

#: Edge weight type parameter. Weights used for shortest paths must support
#: ``+`` and ``<``; unweighted graphs store the unit weight (``None``).
E = TypeVar("E")

#: Loosely typed weight value, used where the generic parameter is not bound.
Weight = Any
