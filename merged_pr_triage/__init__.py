"""Assign and label recently merged pull requests for verification."""

__version__ = "0.1.0"
