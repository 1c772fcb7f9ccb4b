"""Plain-text record keeping for a small cinema: expenses, reviews and services."""

__version__ = "0.1.0"
__all__ = ["__version__"]