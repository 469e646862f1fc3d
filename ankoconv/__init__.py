"""Loose conversions of values to string, bool, float and integer."""

__version__ = "0.1.0"
__all__ = ["convert"]