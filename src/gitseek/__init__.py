"""git-seek - query a Git repository as a graph."""

__version__ = "0.1.0"
