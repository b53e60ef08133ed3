"""Blank-line padding checks for code blocks."""

__version__ = "0.1.0"
