"""Checkers in the terminal against a simple computer opponent."""

__version__ = "0.1.0"