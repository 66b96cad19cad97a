"""Minimal JSON service reporting greeting, health and version info."""

__all__ = ["__version__"]

__version__ = "1.0.0"
