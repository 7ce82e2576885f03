"""Split a UI Bakery application export into per-page fragments and write them to disk."""

__version__ = "0.1.0"

__all__ = ["__version__"]