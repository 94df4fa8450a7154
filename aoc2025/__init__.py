"""Solvers for days 1 to 6 of the 2025 puzzle calendar and a command that runs them."""

__version__ = "0.1.0"
__all__ = ["__version__"]