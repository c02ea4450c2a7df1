"""Small data-handling toolkit: containers, byte helpers, number layouts and file headers."""

__version__ = "0.1.0"