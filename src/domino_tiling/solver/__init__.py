"""Backtracking search and driver for domino tiling puzzles."""
