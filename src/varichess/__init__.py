"""Varichess: chess-like games on boards of any size, with a minimax AI."""

__version__ = "0.1.0"
