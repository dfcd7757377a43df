"""Shared type aliases for poolgraph."""
