"""Console to-do list with a persistent local task store."""

__version__ = "0.1.0"
