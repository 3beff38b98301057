"""Log search query language service."""

__version__ = "0.1.0"
