"""Classic data structures and algorithms, and a terminal snake game."""

__version__ = "0.1.0"