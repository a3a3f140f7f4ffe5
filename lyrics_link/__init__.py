"""Lyrics Link - find the Genius lyrics page for a music video."""

__version__ = "0.1.0"
