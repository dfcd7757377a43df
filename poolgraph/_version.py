"""Version information for poolgraph."""

__version__ = "0.1.0"
