"""Side-by-side rendering of structural diff results."""

__version__ = "0.1.0"
