"""Append-only, versioned audit journal for mutable domain entities."""

__version__ = "0.1.0"
