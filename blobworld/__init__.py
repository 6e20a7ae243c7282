"""Blob World: a squishy blob, drifting clouds and jump sparkles."""

__version__ = "0.1.0"
