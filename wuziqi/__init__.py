"""Gomoku for two players or against a scoring computer opponent, with a Tkinter board."""

__version__ = "0.1.0"
__all__ = ["model", "controller", "app"]