"""Incremental, quota-aware translation of JSON locale files."""

__version__ = "0.1.0"
