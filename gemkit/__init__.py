"""Monochrome PNG handling, Zernike moments, zone relations and core utilities for graph extraction."""

__version__ = "1.0.0"