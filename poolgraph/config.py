"""Configuration classes for poolgraph components."""

from dataclasses import dataclass
from typing import Any


@dataclass
class GraphConfig:
    """Defaults applied by ``Graph`` and the shortest-path engine."""

    # Weight stored by the unweighted connect helpers
    unit_weight: Any = None

    # Additive identity used to seed path distances and path lengths
    zero_weight: Any = 0

    # Pool size above which the quadratic Dijkstra scan logs a warning
    dense_scan_warn_threshold: int = 10_000

    def is_dense_scan_expensive(self, pool_size: int) -> bool:
        """Return True when an O(n^2) scan over ``pool_size`` nodes merits a warning."""
        return pool_size > self.dense_scan_warn_threshold


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
