"""Duplicate and near-duplicate event detection by title similarity."""

__version__ = "0.1.0"
