"""Shortest-path-first (SPF) search over a graph's node pool.

Implements array-based Dijkstra: every iteration scans the remaining pool
indices for the smallest tentative distance instead of using a heap. That
gives O(n^2) behavior, which is fine for the modest graphs this container is
meant for; a warning is logged above ``GraphConfig.dense_scan_warn_threshold``.

Notes:
    Weights only need ``+`` and ``<``. The additive identity is taken from the
    ``zero`` argument or ``GraphConfig.zero_weight``. Results are only
    meaningful for non-negative weights.

    The search terminates as soon as the destination is selected; its own
    out-edges are never relaxed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from poolgraph.logging import get_logger
from poolgraph.model.path import Path
from poolgraph.types.base import E, NodeIndex, T

if TYPE_CHECKING:
    from poolgraph.graph.handles import Node
    from poolgraph.graph.pool import Graph

logger = get_logger(__name__)


def _select_closest(
    remaining: List[NodeIndex], distance: List[Optional[E]]
) -> Optional[int]:
    """Return the position in ``remaining`` of the closest known node.

    Unknown distances rank after every known one. Ties go to the earliest
    position, i.e. the lowest pool index. Returns None when every remaining
    node is still unknown.
    """
    best_pos: Optional[int] = None
    best_dist: Optional[E] = None
    for pos, idx in enumerate(remaining):
        dist = distance[idx]
        if dist is None:
            continue
        if best_pos is None or dist < best_dist:  # type: ignore[operator]
            best_pos = pos
            best_dist = dist
    return best_pos


def dijkstras(
    graph: Graph[T, E],
    start: Node[T, E],
    end: Node[T, E],
    zero: Optional[E] = None,
) -> Optional[Path[T, E]]:
    """Return a minimum-weight path from ``start`` to ``end``.

    Args:
        graph: Graph to search; both handles must come from it.
        start: Source node.
        end: Destination node.
        zero: Additive identity for weights; defaults to
            ``graph.config.zero_weight``.

    Returns:
        Optional[Path]: Path listing ``start`` through ``end`` inclusive, or
        None when ``end`` is unreachable. When ``start`` equals ``end`` the
        result is the single-node path.

    Raises:
        ValueError: If either handle belongs to a different graph, or if the
            predecessor chain loops (negative weights).
        RuntimeError: If either handle is stale.
    """
    if start.graph is not graph or end.graph is not graph:
        raise ValueError("Attempt to generate path for node outside of graph.")
    start._check()
    end._check()
    epoch = graph._borrow.acquire_shared()

    if zero is None:
        zero = graph.config.zero_weight

    n = len(graph)
    if graph.config.is_dense_scan_expensive(n):
        logger.warning(
            "Dijkstra over %d nodes uses a quadratic scan and may be slow", n
        )
    logger.debug("Dijkstra from node %d to node %d", start.index, end.index)

    remaining: List[NodeIndex] = list(range(n))
    distance: List[Optional[E]] = [None] * n
    distance[start.index] = zero
    predecessors: List[Optional[NodeIndex]] = [None] * n

    while remaining:
        pos = _select_closest(remaining, distance)
        if pos is None:
            # Everything left is unreachable from start.
            break
        current = remaining.pop(pos)
        if current == end.index:
            break
        current_dist = distance[current]
        for step, weight in graph._out_edges(current):
            new_dist = current_dist + weight  # type: ignore[operator]
            old_dist = distance[step]
            if old_dist is not None and not new_dist < old_dist:
                continue
            distance[step] = new_dist
            predecessors[step] = current

    if start.index == end.index:
        return Path(graph, [start.index], epoch)

    path: List[NodeIndex] = []
    prev: Optional[NodeIndex] = end.index
    while prev != start.index:
        if prev is None:
            logger.debug("No path from node %d to node %d", start.index, end.index)
            return None
        if len(path) >= n:
            raise ValueError(
                "Predecessor chain does not terminate; "
                "edge weights must be non-negative."
            )
        path.append(prev)
        prev = predecessors[prev]
    path.append(start.index)
    path.reverse()

    logger.debug(
        "Dijkstra found %d-node path from %d to %d", len(path), start.index, end.index
    )
    return Path(graph, path, epoch)
