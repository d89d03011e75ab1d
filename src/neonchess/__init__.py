"""Neon Chess: click-to-move chess with a pure rules engine."""

__version__ = "0.1.0"
