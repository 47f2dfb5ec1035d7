"""Piece-level 5x5x5 puzzle cube model, move notation and net image rendering."""

__version__ = "0.1.0"