"""A terminal notepad built on a two-dimensional linked grid of characters."""

__version__ = "0.1.0"
__all__ = ["__version__"]