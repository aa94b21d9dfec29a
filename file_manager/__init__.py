"""File Manager - file organization tools for Downloads and Documents."""

__version__ = "1.0.0"
