"""A terminal tile-based puzzle game: open every chest, then reach the exit."""

__version__ = "1.0.0"