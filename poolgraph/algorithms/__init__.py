"""Traversal iterators and the shortest-path engine."""
