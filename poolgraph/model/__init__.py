"""Value types produced by graph algorithms."""
